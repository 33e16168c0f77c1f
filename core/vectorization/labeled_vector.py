# core/vectorization/labeled_vector.py
"""
Labeled numeric vectors with a cached norm.
"""
import logging
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable
import numpy as np
from core.config import REPR_MAX_COEFFICIENTS
from core.similarity_engine.vector_math import VectorOps
from core.utilities.config_manager import ConfigManager
from core.utilities.errors import (
    EmptyOperand,
    InvalidCoefficients,
    InvalidLabel,
    NonFiniteCoefficient
)
from core.utilities.vector_validation import (
    find_non_finite,
    is_sequence,
    validate_coefficients,
    validate_label
)

logger = logging.getLogger(__name__)


@runtime_checkable
class VectorLike(Protocol):
    """Anything shaped like a Vector can be used as an operand."""

    @property
    def label(self) -> str: ...

    @property
    def coefficients(self) -> Sequence[float]: ...

    @property
    def norm(self) -> float: ...

    def get_norm(self) -> float: ...

    def get_coefficients(self) -> List[float]: ...

    def get_dot_product(self, other: "VectorLike") -> float: ...

    def get_cosine_similarity(self, other: "VectorLike") -> float: ...

    def set_label(self, label: str) -> None: ...

    def set_coefficients(self, coefficients: Sequence[float]) -> None: ...


def _check_label(label) -> str:
    ok, message = validate_label(label)
    if not ok:
        raise InvalidLabel(message)
    return label

def _prepare_coefficients(coefficients) -> Tuple[np.ndarray, float]:
    """Validate coefficients and return an owned array with its norm."""
    ok, message = validate_coefficients(coefficients, reject_non_finite=False)
    if not ok:
        raise InvalidCoefficients(message)

    if ConfigManager().get_reject_non_finite():
        index = find_non_finite(coefficients)
        if index is not None:
            raise NonFiniteCoefficient(index, coefficients[index])

    values = VectorOps.to_numpy_array(coefficients)
    return values, VectorOps.norm(values)


class Vector:
    """A label plus an ordered sequence of real coefficients."""

    def __init__(self, label: str, coefficients: Sequence[float]):
        """
        Create a vector.

        Args:
            label: Non-empty identifier
            coefficients: Non-empty list, tuple or 1-D array of real numbers

        Raises:
            InvalidLabel: If label is empty or not a string
            InvalidCoefficients: If coefficients are not a non-empty numeric sequence
        """
        self._label = _check_label(label)
        self._coefficients, self._norm = _prepare_coefficients(coefficients)

    @property
    def label(self) -> str:
        return self._label

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return tuple(self._coefficients.tolist())

    @property
    def norm(self) -> float:
        return self._norm

    @property
    def dimension(self) -> int:
        return self._coefficients.shape[0]

    def __len__(self):
        return self.dimension

    def __repr__(self):
        values = self._coefficients.tolist()
        shown = ", ".join(f"{v:g}" for v in values[:REPR_MAX_COEFFICIENTS])
        if len(values) > REPR_MAX_COEFFICIENTS:
            shown += ", ..."
        return f"Vector({self._label!r}, [{shown}], norm={self._norm:.6g})"

    def get_coefficients(self) -> List[float]:
        """Return a fresh copy of the coefficients."""
        return self._coefficients.tolist()

    def get_norm(self) -> float:
        return self._norm

    def get_dot_product(self, other: VectorLike) -> float:
        """
        Sum of pairwise products with another vector.

        Raises:
            EmptyOperand: If other has no coefficients
            InvalidCoefficients: If other's coefficients are not a 1-D numeric sequence
            DimensionMismatch: If other has a different dimension
        """
        values = getattr(other, 'coefficients', None)
        name = getattr(other, 'label', other)
        if values is None or (is_sequence(values) and len(values) == 0):
            raise EmptyOperand(f"Operand {name!r} has no coefficients")
        ok, message = validate_coefficients(values, reject_non_finite=False)
        if not ok:
            raise InvalidCoefficients(f"Operand {name!r}: {message}")
        return VectorOps.dot_product(self._coefficients, VectorOps.to_numpy_array(values))

    def get_cosine_similarity(self, other: VectorLike, formula: Optional[str] = None) -> float:
        """
        Similarity of direction between this vector and another.

        Args:
            other: Any VectorLike operand
            formula: 'cosine' or 'reference'; defaults to the configured formula

        Returns:
            dot / (|self| * |other|) for 'cosine', within [-1, 1]
        """
        if formula is None:
            formula = ConfigManager().get_similarity_formula()
        dot = self.get_dot_product(other)
        return VectorOps.cosine_similarity(dot, self._norm, other.get_norm(), formula)

    def set_coefficients(self, coefficients: Sequence[float]) -> None:
        """Replace the coefficients; the norm is recomputed in the same step."""
        values, norm = _prepare_coefficients(coefficients)
        self._coefficients, self._norm = values, norm
        logger.debug(f"Recomputed norm for {self._label!r}: {norm}")

    def set_label(self, label: str) -> None:
        self._label = _check_label(label)
        logger.debug(f"Relabeled vector to {label!r}")
