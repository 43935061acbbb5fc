"""
===========================================================
exceptions.py
Author: seirahd contributors
Last Updated: 2026-10-19
===========================================================

Description:
    Parameter validation errors raised by the SEIR(+AHD)
    right-hand side before any derivative is computed.

Notes:
    - All errors derive from ValueError, so code that already
      catches ValueError around model construction keeps working.
-----------------------------------------------------------
License: MIT
===========================================================
"""


class ParameterError(ValueError):
    """Base class for malformed SEIR(+AHD) parameter vectors"""
    pass


class InvalidParameterCount(ParameterError):
    """Parameter vector does not hold exactly 8 values"""
    pass


class InvalidPopulationSize(ParameterError):
    """N0 is not a whole number of individuals"""
    pass


class NegativeParameter(ParameterError):
    """At least one parameter is negative"""
    pass


class FractionOutOfRange(ParameterError):
    """fE or kappaH is larger than 1"""
    pass
