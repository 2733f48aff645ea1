"""
Description:
    Chain diagnostics: autocorrelation, integrated autocorrelation time,
    reference acceptance rates and subplot layout

Date:
    10/19/2026
"""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def get_subplot_dims(dim):
    """
    For dim-dimensional parameter
    get the subplot num_rows, num_cols
    """
    if dim == 1:
        return 1,1
    if np.sqrt(dim) % 1 == 0: # square
        num_rows = int(np.sqrt(dim))
        num_cols = num_rows
    else:
        num_rows = int(np.sqrt(dim))
        num_cols = dim / num_rows
        if num_cols % 1 != 0: # if it does not divide it...
            num_cols = int(num_cols) + 1
        num_cols = int(num_cols)
    return num_rows, num_cols

def calculate_acf(vals):
    """
    Calculate a single acf for each row of vals
    Result will only be valid up to a lag << vals.shape[1]
    """
    N = vals.shape[1] # num samples of each dim
    mean_vals = np.mean(vals, axis=1)[:,np.newaxis]
    vals = vals - mean_vals
    fvals = np.fft.rfft(vals, n=2*N, axis=1)/np.sqrt(N) # zero pad so the acf is not circular
    power = fvals * np.conj(fvals)
    acorr = np.fft.irfft(power, axis=1)
    return acorr[:, :N]

def calculate_iact(samples, f, N_burn_in, strict=False):
    """
    Calculate integrated autocorrelation time of f(samples)
    samples is dim x N
    Doubles the window M until M > 10 tau (or M > N / 10)
    Returns the list of windows tried and the tau estimate for each
    """
    vals = samples[...,N_burn_in:] # get rid of burn in
    vals = np.atleast_2d(f(vals)) # apply f to the samples
    acorr = calculate_acf(vals)
    c0 = acorr[:,0][:,None]
    if np.any(c0 == 0):
        raise ValueError('chain is constant after burn in, autocorrelation is undefined')
    acorr = acorr / c0 # normalize

    N = acorr.shape[1]

    M = 10 # smallest window considered
    max_num_steps = int(np.log2(N/M)) # since I double each step
    if max_num_steps < 1:
        raise ValueError('Need more than {} samples after burn in to estimate tau, got {}'.format(2*M, N))
    M_list, tau_list = [], []
    for i in range(max_num_steps):
        rho = acorr[:,1:M]
        tau = 1 + 2 * np.sum(rho, axis=1)
        logger.debug("M : %d, tau : %s", M, tau)

        M_list.append(M)
        tau_list.append(tau)

        if M > 10*np.max(tau):
            break
        elif M > N / 10: # M << N not true...
            break
        else:
            M *= 2
    if M < 10*np.max(tau):
        if strict == True:
            raise Warning('M is not large enough to get a good estimate of tau')
        logger.warning('M = %d is not large enough to get a good estimate of tau', M)
    if M > N/10:
        if strict == True:
            raise Warning('M is too significant of a fraction of N for a good estimate')
        logger.warning('M = %d is too significant of a fraction of N = %d for a good estimate', M, N)
    return M_list, tau_list

def get_opt_acc(dim):
    """Based on table I in Gelman Roberts Gilks 1996 """
    if dim == 1:
        return 0.44
    elif dim == 2:
        return 0.352
    elif dim == 3:
        return 0.316
    elif dim == 4:
        return 0.279
    elif dim == 5:
        return 0.275
    else: # return asymptotic acceptance rate
        return 0.234
