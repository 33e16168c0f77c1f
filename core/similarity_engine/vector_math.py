# core/similarity_engine/vector_math.py
"""
Vector math operations for dot product and similarity calculations.
"""
import logging
import numpy as np
from typing import Sequence
from core.config import COEFFICIENT_DTYPE
from core.utilities.errors import DimensionMismatch

logger = logging.getLogger(__name__)

class VectorOps:
    """Mathematical operations on single vectors."""

    DTYPE = np.dtype(COEFFICIENT_DTYPE)

    SIMILARITY_FORMULAS = {
        'cosine': 'Cosine Similarity: dot / (|a| * |b|)',
        'reference': 'Reference Similarity: dot / |a| * |b|'
    }

    @staticmethod
    def to_numpy_array(vector: Sequence[float]) -> np.ndarray:
        """Convert a Python sequence to an owned 1-D NumPy array."""
        return np.array(vector, dtype=VectorOps.DTYPE).reshape(-1)

    @staticmethod
    def norm(vector: np.ndarray) -> float:
        """Euclidean magnitude, sqrt(sum of squares)."""
        return float(np.sqrt(np.dot(vector, vector)))

    @staticmethod
    def dot_product(a: np.ndarray, b: np.ndarray) -> float:
        """
        Sum of pairwise products, index i of a paired with index i of b.

        Raises:
            DimensionMismatch: If the vectors have different lengths
        """
        if a.shape != b.shape:
            raise DimensionMismatch(a.shape[0], b.shape[0])
        return float(np.dot(a, b))

    @staticmethod
    def cosine_similarity(dot: float, norm_a: float, norm_b: float,
                          formula: str = 'cosine') -> float:
        """
        Turn a dot product and two norms into a similarity score.

        Args:
            dot: Dot product of the two vectors
            norm_a: Norm of the calling vector
            norm_b: Norm of the other vector
            formula: Key of SIMILARITY_FORMULAS

        Returns:
            Similarity score; 0.0 when either norm is zero, for both formulas.
            'reference' does not reproduce the NaN that dot / |a| * |b| gives
            for a zero-norm calling vector.
        """
        if formula not in VectorOps.SIMILARITY_FORMULAS:
            raise ValueError(f"Invalid similarity formula: {formula}")

        # Avoid division by zero
        if norm_a == 0 or norm_b == 0:
            return 0.0

        if formula == 'reference':
            logger.warning("Using reference similarity formula; results are not bounded to [-1, 1]")
            return dot / norm_a * norm_b

        return dot / (norm_a * norm_b)
