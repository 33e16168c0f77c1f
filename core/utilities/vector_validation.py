# core/utilities/vector_validation.py
import math
import numbers
from typing import Optional, Sequence, Tuple
import numpy as np

def validate_label(label) -> Tuple[bool, str]:
    """Check that a label is a non-empty string."""
    if not isinstance(label, str):
        return False, f"label = {label!r} (type: {type(label).__name__})"
    if not label:
        return False, "label is empty"
    return True, "Valid"

def is_sequence(values) -> bool:
    """Lists, tuples and 1-D arrays count as coefficient sequences."""
    if isinstance(values, np.ndarray):
        return values.ndim == 1
    return isinstance(values, (list, tuple))

def is_number(value) -> bool:
    # bool is an int subclass but never a coefficient
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)

def find_non_finite(values: Sequence[float]) -> Optional[int]:
    """Index of the first NaN/Inf value, or None."""
    for i, val in enumerate(values):
        if not math.isfinite(val):
            return i
    return None

def validate_coefficients(values, reject_non_finite: bool = True) -> Tuple[bool, str]:
    """Coefficient validation with type and finiteness checks."""
    if values is None:
        return False, "coefficients are missing"
    if not is_sequence(values):
        return False, f"coefficients must be a list, tuple or 1-D array (got {type(values).__name__})"
    if len(values) == 0:
        return False, "coefficients are empty"

    for i, val in enumerate(values):
        # Type check
        if not is_number(val):
            return False, f"coefficients[{i}] = {val!r} (type: {type(val).__name__})"

        # Large ints pass the type check but have no float64 value
        try:
            val = float(val)
        except OverflowError:
            return False, f"coefficients[{i}] (type: {type(val).__name__}) is out of float range"

        # NaN/Inf check
        if reject_non_finite and not math.isfinite(val):
            return False, f"coefficients[{i}] = {val} (NaN or Inf)"

    return True, "Valid"
