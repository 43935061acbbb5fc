"""SEIR(+AHD) epidemic model"""

from .exceptions import (
    ParameterError,
    InvalidParameterCount,
    InvalidPopulationSize,
    NegativeParameter,
    FractionOutOfRange,
)
from .rhs import COMPARTMENTS, PARAMETERS, evaluate, seirahd_rhs, validate_parameters
from .parameters import SEIRAHDParams
from .model import SEIRAHDModel

__all__ = [
    'ParameterError',
    'InvalidParameterCount',
    'InvalidPopulationSize',
    'NegativeParameter',
    'FractionOutOfRange',
    'COMPARTMENTS',
    'PARAMETERS',
    'evaluate',
    'seirahd_rhs',
    'validate_parameters',
    'SEIRAHDParams',
    'SEIRAHDModel',
]
