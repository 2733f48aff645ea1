"""
Description:
    Run the adaptive Haario sampler on a random correlated Gaussian
    and compare the marginal histograms to the true marginals

Date:
    10/19/2026
"""

import logging

import numpy as np
from matplotlib import pyplot as plt
from haario.likelihoods import GaussianLikelihood
from haario.mh import AdaptiveHaarioSampler, HaarioParams
from haario.proposals import make_rng


def adaptive_colored_gaussian_test(num_params=6, N=20000, N_burn_in=5000, cov_method='online', seed=1):
    """
    Sample a colored Gaussian and plot the chain diagnostics
    """
    likelihood = GaussianLikelihood.random(num_params, mu_std=10, sigma_std=3, colored=True, seed=seed)
    params = HaarioParams(num_params, cov_method=cov_method)
    sampler = AdaptiveHaarioSampler(likelihood.mu, likelihood.sigma, params=params, rng=make_rng(seed))
    samples, log_probs, acceptance_ratios = sampler.gen_samples(N)

    summary = sampler.summary(N_burn_in)
    print('acceptance rate {0:.3f} (optimal {1})'.format(summary['acceptance_rate'], summary['optimal_acceptance']))
    print('max abs mean error', np.max(np.abs(summary['mean'] - likelihood.mu)))
    M_list, tau_list = sampler.calculate_iact(lambda x: x, N_burn_in)
    print('tau', tau_list[-1])

    fig1, fig2 = sampler.diagnostic_plot(density=True)
    axes = fig2.axes
    for i in range(num_params):
        mui = likelihood.mu[i]
        sigmai = np.sqrt(likelihood.sigma[i,i])
        grid = np.linspace(mui - 3*sigmai, mui+3*sigmai, 100)
        vals = np.exp(-(grid-mui)**2/(2*sigmai**2)) / np.sqrt(2*np.pi*sigmai**2)
        axes[i].plot(grid, vals)

    plt.figure()
    plt.suptitle('chain covariance')
    plt.imshow(summary['cov'])
    plt.colorbar()
    plt.show()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    adaptive_colored_gaussian_test()
