"""
Description:
    Coarse stationarity check: N(0, I_2), 20000 iterations,
    compare moments of independent chains after burn in

Date:
    10/19/2026
"""

import logging

import numpy as np
from haario.mh import run_independent_chains


def stationarity_check(num_chains=4, N=20000, burn_frac=0.2, seed=0):
    dim = 2
    chains = run_independent_chains(np.zeros(dim), np.eye(dim), N, num_chains, seed=seed)
    kept = chains[:, int(burn_frac*N):, :]
    for k in range(num_chains):
        print('chain {0}: mean {1}, cov diag {2}'.format(k, kept[k].mean(axis=0), np.diag(np.cov(kept[k].T))))
    pooled = kept.reshape(-1, dim)
    print('pooled mean', pooled.mean(axis=0))
    print('pooled cov\n', np.cov(pooled.T))

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    stationarity_check()
