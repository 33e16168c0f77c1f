"""
Tests for VectorOps helpers.
"""

import numpy as np
import pytest
from core.similarity_engine import VectorOps
from core.utilities.errors import DimensionMismatch


class TestVectorOps:
    """Norm, dot product and similarity formulas on raw arrays."""

    def test_to_numpy_array_copies(self):
        source = np.array([1, 2, 3])
        arr = VectorOps.to_numpy_array(source)
        source[0] = 9
        assert arr.dtype == np.float64
        assert arr.tolist() == [1.0, 2.0, 3.0]

    def test_norm(self):
        assert VectorOps.norm(np.array([3.0, 4.0])) == 5.0
        assert VectorOps.norm(np.array([0.0])) == 0.0

    def test_dot_product(self):
        a = VectorOps.to_numpy_array([1, 2, 3])
        b = VectorOps.to_numpy_array([4, 5, 6])
        assert VectorOps.dot_product(a, b) == 32.0

    def test_dot_product_mismatch(self):
        with pytest.raises(DimensionMismatch, match="3 != 2"):
            VectorOps.dot_product(np.ones(3), np.ones(2))

    def test_cosine_formula(self):
        assert VectorOps.cosine_similarity(24.0, 5.0, 5.0) == pytest.approx(0.96)

    def test_reference_formula(self):
        """Reference formula divides by one norm and multiplies by the other."""
        assert VectorOps.cosine_similarity(24.0, 5.0, 5.0, formula='reference') == pytest.approx(24.0)
        assert VectorOps.cosine_similarity(6.0, 2.0, 3.0, formula='reference') == pytest.approx(9.0)

    def test_zero_norm(self):
        assert VectorOps.cosine_similarity(0.0, 0.0, 5.0) == 0.0
        assert VectorOps.cosine_similarity(0.0, 5.0, 0.0, formula='reference') == 0.0
        assert VectorOps.cosine_similarity(0.0, 0.0, 5.0, formula='reference') == 0.0

    def test_invalid_formula(self):
        with pytest.raises(ValueError, match="Invalid similarity formula"):
            VectorOps.cosine_similarity(1.0, 1.0, 1.0, formula='euclidean')
