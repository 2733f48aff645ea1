"""
Proposal covariances, the Cholesky guard and the proposal draw
"""

import numpy as np

from haario.proposals import (adapted_proposal_cov, fixed_proposal_cov, gaussian_proposal,
                              make_rng, try_cholesky)

from .conftest import ScriptedSource


def test_fixed_proposal_cov():
    cov = fixed_proposal_cov(4, 0.1)
    assert np.allclose(cov, 0.01 / 4 * np.eye(4))


def test_adapted_proposal_cov_matches_np_cov():
    history = np.random.default_rng(0).standard_normal((3, 40))
    cov = adapted_proposal_cov(history, 2.38)
    assert np.allclose(cov, 2.38**2 / 3 * np.cov(history))


def test_adapted_proposal_cov_one_dimension_is_2d():
    history = np.array([[0.0, 1.0, 2.0]])
    cov = adapted_proposal_cov(history, 2.38)
    assert cov.shape == (1, 1)
    assert np.isclose(cov[0, 0], 2.38**2 * 1.0)


def test_repeated_points_are_not_factorizable():
    history = np.tile(np.array([[1.0], [2.0]]), (1, 10))
    assert try_cholesky(adapted_proposal_cov(history, 2.38)) is None


def test_try_cholesky_lower():
    cov = np.array([[4.0, 2.0], [2.0, 3.0]])
    chol = try_cholesky(cov)
    assert np.allclose(chol @ chol.T, cov)
    assert chol[0, 1] == 0


def test_gaussian_proposal_uses_chol():
    chol = np.array([[2.0, 0.0], [1.0, 1.0]])
    src = ScriptedSource(normals=[[1.0, -1.0]])
    x_new, qxx = gaussian_proposal(np.array([0.5, 0.5]), chol, src)
    assert np.allclose(x_new, [2.5, 0.5])
    assert qxx == 1
    assert src.num_normal == 1


def test_make_rng_is_seeded():
    a = make_rng(12)
    b = make_rng(12)
    assert a.uniform() == b.uniform()
    assert np.array_equal(a.standard_normal(3), b.standard_normal(3))
