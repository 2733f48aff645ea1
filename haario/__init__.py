from haario.errors import InvalidArgument, NumericalError
from haario.likelihoods import GaussianLikelihood, log_density
from haario.mh import HaarioParams, AdaptiveHaarioSampler, adaptive_haario, run_independent_chains

__all__ = [
    "InvalidArgument",
    "NumericalError",
    "GaussianLikelihood",
    "log_density",
    "HaarioParams",
    "AdaptiveHaarioSampler",
    "adaptive_haario",
    "run_independent_chains",
]
