"""
Description:
    Multivariate Gaussian log densities for the samplers

Date:
    10/19/2026
"""

import numpy as np
from scipy import linalg

from haario.errors import InvalidArgument, NumericalError

LOG_2PI = np.log(2*np.pi)


def log_density(x, mean, chol_lower):
    """
    Log density of N(mean, L L^T) evaluated at x
    chol_lower is L, the lower Cholesky factor of the covariance
    log |Sigma| is accumulated from the diagonal of L
    """
    dim = mean.size
    w = linalg.solve_triangular(chol_lower, x - mean, lower=True)
    log_det = 2*np.sum(np.log(np.diag(chol_lower)))
    return -.5*(dim*LOG_2PI + log_det + np.dot(w, w))

def target_cholesky(covariance):
    """
    Lower Cholesky factor of the target covariance
    Raises NumericalError if it is not positive definite
    """
    try:
        return np.linalg.cholesky(covariance)
    except np.linalg.LinAlgError as err:
        raise NumericalError('target covariance is not positive definite') from err

def check_target(mean, covariance):
    """
    Coerce mean and covariance to float arrays and check their shapes
    """
    mean = np.asarray(mean, dtype=float)
    covariance = np.asarray(covariance, dtype=float)
    if mean.ndim != 1 or mean.size == 0:
        raise InvalidArgument('mean must be a non-empty 1d array, got shape {}'.format(mean.shape))
    dim = mean.size
    if covariance.shape != (dim, dim):
        raise InvalidArgument('covariance must have shape {}, got {}'.format((dim, dim), covariance.shape))
    if not (np.all(np.isfinite(mean)) and np.all(np.isfinite(covariance))):
        raise InvalidArgument('mean and covariance must be finite')
    if not np.allclose(covariance, covariance.T):
        raise InvalidArgument('covariance must be symmetric')
    return mean, covariance

def get_multivariate_gaussian_params(num_params, mu_std, sigma_std, rng=None):
    """
    Draw random means and standard deviations to define a multivariate Gaussian
    """
    if rng is None:
        rng = np.random.default_rng()
    mu = rng.standard_normal(num_params) * mu_std
    sigma = abs(rng.standard_normal(num_params) * sigma_std)
    return mu, sigma

def get_random_colorization(num_params, rng=None):
    """
    Get eigenvectors defining correlations between parameters
    """
    if rng is None:
        rng = np.random.default_rng()
    L = rng.standard_normal((num_params, num_params)) # random eigenvectors
    P = L @ L.T
    s, U = np.linalg.eigh(P)
    return U

class GaussianLikelihood:
    """
    A multivariate Gaussian target, factorized once
    """
    def __init__(self, mean, covariance):
        self.mu, self.sigma = check_target(mean, covariance)
        self.dim = self.mu.size
        self.chol = target_cholesky(self.sigma)
        self.f_log_p = self._get_log_p()

    @classmethod
    def random(cls, dim, mu_std, sigma_std, colored=False, seed=None):
        """
        Random target with means ~ N(0, mu_std^2) and standard deviations
        |N(0, sigma_std^2)|, rotated by random eigenvectors if colored
        """
        rng = np.random.default_rng(seed)
        mu, sigma = get_multivariate_gaussian_params(dim, mu_std, sigma_std, rng=rng)
        if colored:
            U = get_random_colorization(dim, rng=rng)
        else:
            U = np.eye(dim)
        cov = U @ np.diag(np.square(sigma)) @ U.T
        cov = .5*(cov + cov.T)
        return cls(mu, cov)

    def _get_log_p(self):
        mu = self.mu
        chol = self.chol
        def log_p(x):
            return log_density(x, mu, chol)
        return log_p
