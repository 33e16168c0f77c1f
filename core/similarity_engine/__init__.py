"""
Similarity Engine Package
"""
from .vector_math import VectorOps

__all__ = [
    'VectorOps'
]
