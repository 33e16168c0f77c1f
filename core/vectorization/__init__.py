"""
Vectorization Package
"""
from .labeled_vector import Vector, VectorLike
from core.utilities.errors import (
    VectorError,
    InvalidLabel,
    InvalidCoefficients,
    NonFiniteCoefficient,
    EmptyOperand,
    DimensionMismatch
)

__all__ = [
    'Vector',
    'VectorLike',
    'VectorError',
    'InvalidLabel',
    'InvalidCoefficients',
    'NonFiniteCoefficient',
    'EmptyOperand',
    'DimensionMismatch'
]
