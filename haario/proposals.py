"""
Description:
    Proposal covariances and the random source for the adaptive sampler

    A random source is any object with
        uniform() -> float in [0, 1)
        standard_normal(n) -> array of n iid N(0,1) draws
    numpy.random.Generator satisfies this, so make_rng just builds one.
    One source is shared by everything drawn within a run

Date:
    10/19/2026
"""

import numpy as np


def make_rng(seed=None):
    """
    Random source for a single run
    seed may be an int, a SeedSequence, or None for fresh entropy
    """
    return np.random.default_rng(seed)

def fixed_proposal_cov(dim, scale):
    """
    Small isotropic step scale^2 / dim * I
    """
    return scale**2 * np.eye(dim) / dim

def adapted_proposal_cov(history, scale):
    """
    scale^2 / dim times the (unbiased) sample covariance of the columns of history
    history is dim x i
    """
    dim = history.shape[0]
    emp_cov = np.atleast_2d(np.cov(history))
    return scale**2 * emp_cov / dim

def try_cholesky(cov):
    """
    Lower Cholesky factor of cov, or None if cov is not positive definite
    """
    try:
        return np.linalg.cholesky(cov)
    except np.linalg.LinAlgError:
        return None

def gaussian_proposal(x, chol, rng):
    """
    Random walk step with covariance chol chol^T
    symmetric, so the Hastings correction is 1
    """
    z = rng.standard_normal(x.size)
    x_new = x + chol @ z
    qxx = 1 # symmetric so ratio of densitys is 1
    return x_new, qxx
