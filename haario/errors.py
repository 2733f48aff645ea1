"""
Description:
    Exceptions raised by the samplers

Date:
    10/19/2026
"""


class InvalidArgument(ValueError):
    """
    Bad shapes, non-finite values or parameters outside their range.
    Raised before any sampling starts
    """


class NumericalError(ArithmeticError):
    """
    Target covariance could not be factorized, so no sampler can be built
    """
