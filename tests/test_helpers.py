"""
Autocorrelation and IACT helpers
"""

import numpy as np
import pytest

from haario.helpers import calculate_acf, calculate_iact, get_opt_acc, get_subplot_dims


def ar1(phi, N, seed):
    rng = np.random.default_rng(seed)
    eps = rng.standard_normal(N)
    x = np.zeros(N)
    for t in range(1, N):
        x[t] = phi*x[t-1] + eps[t]
    return x[None, :]


@pytest.mark.parametrize("dim, expected", [
    (1, (1, 1)),
    (4, (2, 2)),
    (5, (2, 3)),
    (7, (2, 4)),
    (10, (3, 4)),
])
def test_subplot_dims(dim, expected):
    num_rows, num_cols = get_subplot_dims(dim)
    assert (num_rows, num_cols) == expected
    assert num_rows * num_cols >= dim


def test_opt_acc():
    assert get_opt_acc(1) == 0.44
    assert get_opt_acc(2) == 0.352
    assert get_opt_acc(50) == 0.234


def test_acf_of_white_noise():
    rng = np.random.default_rng(0)
    vals = 2 + 3*rng.standard_normal((1, 20000))
    acorr = calculate_acf(vals)
    assert acorr.shape == vals.shape
    assert acorr[0, 0] == pytest.approx(np.var(vals), rel=1e-10)
    assert abs(acorr[0, 1] / acorr[0, 0]) < 0.05


def test_iact_of_iid_samples():
    rng = np.random.default_rng(1)
    vals = rng.standard_normal((2, 20000))
    M_list, tau_list = calculate_iact(vals, lambda x: x, 0)
    assert len(M_list) == len(tau_list)
    assert np.all(np.abs(tau_list[-1] - 1) < 0.3)


def test_iact_of_ar1():
    phi = 0.9
    vals = ar1(phi, 200000, seed=7)
    M_list, tau_list = calculate_iact(vals, lambda x: x, 1000)
    assert M_list[-1] > 10 * tau_list[-1][0]
    assert tau_list[-1][0] == pytest.approx((1 + phi) / (1 - phi), abs=4)


def test_iact_too_short():
    vals = np.random.default_rng(2).standard_normal((1, 15))
    with pytest.raises(ValueError):
        calculate_iact(vals, lambda x: x, 0)


def test_iact_constant_chain():
    with pytest.raises(ValueError):
        calculate_iact(np.ones((1, 1000)), lambda x: x, 0)


def test_iact_strict_raises_for_small_window():
    vals = ar1(0.99, 2000, seed=3)
    with pytest.raises(Warning):
        calculate_iact(vals, lambda x: x, 0, strict=True)
