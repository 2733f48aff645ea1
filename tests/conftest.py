"""
Shared fixtures for the sampler tests

Run with: pytest tests -v
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest


class ScriptedSource:
    """
    Random source that replays fixed draws

    uniforms / normals are consumed in order, then the defaults are
    returned forever. With no default, running out is a test failure.
    """

    def __init__(self, uniforms=(), normals=(), default_uniform=None, default_normal=None):
        self.uniforms = list(uniforms)
        self.normals = [np.asarray(z, dtype=float) for z in normals]
        self.default_uniform = default_uniform
        self.default_normal = default_normal
        self.num_uniform = 0
        self.num_normal = 0

    def uniform(self):
        self.num_uniform += 1
        if self.uniforms:
            return self.uniforms.pop(0)
        assert self.default_uniform is not None, "ran out of scripted uniforms"
        return self.default_uniform

    def standard_normal(self, n):
        self.num_normal += 1
        if self.normals:
            z = self.normals.pop(0)
        else:
            assert self.default_normal is not None, "ran out of scripted normals"
            z = np.full(n, self.default_normal, dtype=float)
        assert z.shape == (n,)
        return z


@pytest.fixture
def correlated_target():
    mean = np.array([1.0, -2.0, 0.5])
    cov = np.array([
        [2.0, 0.6, 0.1],
        [0.6, 1.0, -0.3],
        [0.1, -0.3, 0.5],
    ])
    return mean, cov
