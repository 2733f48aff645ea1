"""
Description:
   Adaptive Metropolis sampler (Haario) for a multivariate Gaussian target.
   The proposal covariance is the scaled sample covariance of the chain's
   own history once 2*dim samples are recorded, mixed with a small fixed
   isotropic step

Date:
    10/19/2026
"""

import logging

import numpy as np
from matplotlib import pyplot as plt
import matplotlib
matplotlib.rcParams['mathtext.fontset'] = 'stix'
matplotlib.rcParams['font.family'] = 'STIXGeneral'

from haario.errors import InvalidArgument
from haario.helpers import calculate_iact, get_opt_acc, get_subplot_dims
from haario.likelihoods import GaussianLikelihood
from haario.online_scm import SampleCovarianceMatrix
from haario.proposals import (make_rng, fixed_proposal_cov, adapted_proposal_cov,
                              try_cholesky, gaussian_proposal)

logger = logging.getLogger(__name__)

COV_METHODS = ('full', 'online')


class HaarioParams:
    def __init__(self, dim, adapt_prob=0.95, adapt_scale=2.38, fixed_scale=0.1,
            adapt_start=None, start_divisor=3, cov_method='full'):
        """
        dim - dimension of the target
        adapt_prob - probability of using the adapted covariance once adaptation is on
        adapt_scale - proposal is adapt_scale^2 / dim times the chain covariance (Haario 2001)
        fixed_scale - fixed proposal is fixed_scale^2 / dim times the identity
        adapt_start - first iteration allowed to adapt, defaults to 2*dim
        start_divisor - chain starts at mean / start_divisor
        cov_method - 'full' recomputes the chain covariance each iteration,
            'online' updates it recursively
        """
        self.dim = dim
        self.adapt_prob = adapt_prob
        self.adapt_scale = adapt_scale
        self.fixed_scale = fixed_scale
        if adapt_start is None:
            adapt_start = 2*dim
        self.adapt_start = adapt_start
        self.start_divisor = start_divisor
        self.cov_method = cov_method
        return

    def validate(self):
        if not _is_int(self.dim) or self.dim < 1:
            raise InvalidArgument('dim must be a positive integer, got {}'.format(self.dim))
        if not 0 <= self.adapt_prob <= 1:
            raise InvalidArgument('adapt_prob must be in [0, 1], got {}'.format(self.adapt_prob))
        if not (self.adapt_scale > 0 and self.fixed_scale > 0):
            raise InvalidArgument('proposal scales must be positive')
        # need two recorded samples for a sample covariance
        if not _is_int(self.adapt_start) or self.adapt_start < 2:
            raise InvalidArgument('adapt_start must be an integer >= 2, got {}'.format(self.adapt_start))
        if self.start_divisor == 0 or not np.isfinite(self.start_divisor):
            raise InvalidArgument('start_divisor must be finite and nonzero')
        if self.cov_method not in COV_METHODS:
            raise InvalidArgument('cov_method must be one of {}, got {}'.format(COV_METHODS, self.cov_method))
        return self

def _is_int(val):
    return isinstance(val, (int, np.integer)) and not isinstance(val, bool)


class AdaptiveHaarioSampler:
    """
    Random walk Metropolis on N(mean, covariance) with Haario adaptation
    """
    def __init__(self, mean, covariance, params=None, rng=None):
        """
        mean - (dim,) target mean
        covariance - (dim, dim) symmetric positive definite target covariance
        params - HaarioParams, defaults built from dim
        rng - random source with uniform() and standard_normal(n),
            a fresh numpy Generator if None
        Raises NumericalError if covariance cannot be factorized
        """
        self.likelihood = GaussianLikelihood(mean, covariance)
        self.mean = self.likelihood.mu
        self.dim = self.likelihood.dim
        if params is None:
            params = HaarioParams(self.dim)
        if params.dim != self.dim:
            raise InvalidArgument('params.dim = {} does not match target dimension {}'.format(params.dim, self.dim))
        self.params = params.validate()
        if rng is None:
            rng = make_rng()
        self.rng = rng
        self.f_log_p = self.likelihood.f_log_p
        self.fixed_cov = fixed_proposal_cov(self.dim, params.fixed_scale)
        self.samples = None
        self.log_probs = None
        self.acceptance_ratios = None
        self.adapted = None # which iterations used the chain covariance
        self.skipped = None # which iterations had a singular proposal covariance
        self.num_accepted = 0
        self.num_skipped = 0

    def _init_chain(self, N):
        """
        Initialize variables for a chain that will have N samples
        """
        dim = self.dim
        samples = np.zeros((dim, N))
        log_probs = np.zeros(N)
        acceptance_ratios = np.zeros(N)
        adapted = np.zeros(N, dtype=bool)
        skipped = np.zeros(N, dtype=bool)
        return samples, log_probs, acceptance_ratios, adapted, skipped

    def _chain_cov(self, i, samples, scm):
        """
        Proposal covariance built from recorded samples 0, ..., i-1
        """
        if scm is None:
            return adapted_proposal_cov(samples[:, :i], self.params.adapt_scale)
        return self.params.adapt_scale**2 * scm.unbiased() / self.dim

    def _select_proposal_cov(self, i, samples, scm=None):
        """
        Pick the proposal covariance for iteration i
        The uniform is only drawn once i >= adapt_start
        Returns the covariance and whether it was adapted
        """
        params = self.params
        if i >= params.adapt_start and self.rng.uniform() < params.adapt_prob:
            return self._chain_cov(i, samples, scm), True
        return self.fixed_cov, False

    def _accept(self, log_p_proposed, log_p_curr):
        """
        Metropolis test in log space, proposal is symmetric
        """
        u = self.rng.uniform()
        with np.errstate(divide='ignore'):
            log_u = np.log(u)
        return log_p_proposed - log_p_curr > log_u

    def gen_samples(self, N):
        """
        Run N iterations
        Column i of samples is the state after the decision in iteration i
        Returns samples (dim x N), log_probs, acceptance_ratios
        """
        if not _is_int(N) or N < 1:
            raise InvalidArgument('number of iterations must be a positive integer, got {}'.format(N))
        samples, log_probs, acceptance_ratios, adapted, skipped = self._init_chain(N)
        if self.params.cov_method == 'online':
            scm = SampleCovarianceMatrix(self.dim)
        else:
            scm = None

        xcurr = self.mean / self.params.start_divisor
        log_p_curr = self.f_log_p(xcurr)
        num_accepted = 0
        num_proposed = 0
        for i in range(N):
            prop_cov, adapted[i] = self._select_proposal_cov(i, samples, scm)
            chol = try_cholesky(prop_cov)
            if chol is None:
                skipped[i] = True
                logger.debug('iteration %d: proposal covariance not positive definite, keeping state', i)
            else:
                proposed_sample, _ = gaussian_proposal(xcurr, chol, self.rng)
                log_p_proposed = self.f_log_p(proposed_sample)
                num_proposed += 1
                if self._accept(log_p_proposed, log_p_curr):
                    xcurr = proposed_sample
                    log_p_curr = log_p_proposed
                    num_accepted += 1

            samples[:,i] = xcurr
            log_probs[i] = log_p_curr
            if num_proposed > 0:
                acceptance_ratios[i] = num_accepted / num_proposed
            if scm is not None:
                scm._update(xcurr)

        self.samples = samples
        self.log_probs = log_probs
        self.acceptance_ratios = acceptance_ratios
        self.adapted = adapted
        self.skipped = skipped
        self.num_accepted = num_accepted
        self.num_skipped = int(skipped.sum())
        logger.info('finished %d iterations in %d dims: acceptance %.3f, %d adapted, %d skipped',
                N, self.dim, acceptance_ratios[-1], int(adapted.sum()), self.num_skipped)
        return samples, log_probs, acceptance_ratios

    def _check_run(self):
        if self.samples is None:
            raise RuntimeError('run gen_samples first')

    def calculate_iact(self, f, N_burn_in, strict=False):
        self._check_run()
        M_list, tau_list = calculate_iact(self.samples, f, N_burn_in, strict=strict)
        return M_list, tau_list

    def summary(self, N_burn_in=0):
        """
        Acceptance statistics and moments of the chain after N_burn_in
        """
        self._check_run()
        if not _is_int(N_burn_in) or N_burn_in < 0:
            raise InvalidArgument('N_burn_in must be a non-negative integer, got {}'.format(N_burn_in))
        kept = self.samples[:, N_burn_in:]
        if kept.shape[1] < 2:
            raise InvalidArgument('N_burn_in leaves fewer than two samples')
        return {
            'iterations' : self.samples.shape[1],
            'acceptance_rate' : self.acceptance_ratios[-1],
            'optimal_acceptance' : get_opt_acc(self.dim),
            'num_adapted' : int(self.adapted.sum()),
            'num_skipped' : self.num_skipped,
            'mean' : kept.mean(axis=1),
            'cov' : np.atleast_2d(np.cov(kept)),
        }

    def diagnostic_plot(self, density=False):
        """
        After running gen_samples, plot the log density, acceptance ratio
        and a histogram of each dimension
        """
        self._check_run()
        dim = self.dim
        fig1, axes = plt.subplots(2,1)
        axes[0].plot(self.log_probs)
        axes[0].set_ylabel('log p')
        axes[1].plot(self.acceptance_ratios)
        axes[1].axhline(get_opt_acc(dim), color='k', linestyle='--')
        axes[1].set_ylabel('acceptance ratio')

        num_rows, num_cols = get_subplot_dims(dim)
        fig2, axes = plt.subplots(num_rows, num_cols, squeeze=False)
        for i in range(dim):
            ax = axes[i // num_cols, i % num_cols]
            ax.hist(self.samples[i,:], bins=50, density=density)
        return fig1, fig2


def adaptive_haario(mean, covariance, iterations, rng=None, params=None):
    """
    Run one adaptive chain
    Returns {'params': samples} with samples iterations x dim
    """
    sampler = AdaptiveHaarioSampler(mean, covariance, params=params, rng=rng)
    samples, _, _ = sampler.gen_samples(iterations)
    return {'params' : samples.T}

def run_independent_chains(mean, covariance, iterations, num_chains, seed=None, params=None):
    """
    Run num_chains chains, each with its own stream spawned from seed
    Returns an array num_chains x iterations x dim
    """
    if not _is_int(num_chains) or num_chains < 1:
        raise InvalidArgument('num_chains must be a positive integer, got {}'.format(num_chains))
    seeds = np.random.SeedSequence(seed).spawn(num_chains)
    chains = []
    for chain_seed in seeds:
        out = adaptive_haario(mean, covariance, iterations, rng=make_rng(chain_seed), params=params)
        chains.append(out['params'])
    return np.stack(chains)
