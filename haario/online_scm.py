"""
Description:
    Online calculation of sample covariance matrix

Date:
    10/19/2026
"""

import numpy as np
from numba import njit

@njit
def update_mean(mun, xn1, n):
    """
    mu_n = \\frac{1}{n} \\sum_{i=1}^{n} x_i
    xn1 = x_{n+1}
    return \\mu_{n+1} = \\mu_n + \\frac{1}{n+1} (x_{n+1} - \\mu_n)
    """
    mu_n1 = mun + (xn1 - mun)/(n+1)
    return mu_n1

@njit
def update_scm(Cn, mun, xn1, n):
    """
    Return recursive (Welford) update to the biased (normalized by N)
    sample covariance matrix
    when new observation xn1 comes online after n observations
    Cn is scm using first n observations, mun is sample mean
    of first n observations

    C_{n+1} = \\frac{n}{n+1} C_n + \\frac{n}{(n+1)^2} (x_{n+1} - \\mu_n)(x_{n+1} - \\mu_n)^T
    A repeated point gives delta = 0 exactly, so a constant history keeps C = 0
    """
    delta = xn1 - mun
    output = n/(n+1)*Cn + n/(n+1)**2*np.outer(delta, delta)
    return output

class SampleCovarianceMatrix:
    def __init__(self, dim):
        """
        Running mean and biased SCM of the samples seen so far
        """
        self.mu = np.zeros(dim)
        self.sigma = np.zeros((dim, dim))
        self.N_samp = 0

    def _update(self, x):
        """
        Recursively update the SCM
        to include the measurement x
        """
        # scm recursion needs the mean of the first N_samp samples
        self.sigma = update_scm(self.sigma, self.mu, x, self.N_samp)
        self.mu = update_mean(self.mu, x, self.N_samp)
        self.N_samp += 1
        return self.mu, self.sigma, self.N_samp

    def unbiased(self):
        """
        SCM normalized by N-1, matching np.cov
        """
        if self.N_samp < 2:
            raise ValueError('need at least two samples for an unbiased covariance')
        return self.sigma * self.N_samp / (self.N_samp - 1)
