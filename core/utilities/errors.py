# core/utilities/errors.py

class VectorError(ValueError):
    """Base class for every vector validation or operand failure."""
    pass

class InvalidLabel(VectorError):
    """Raised when a label is missing, empty or not a string."""
    pass

class InvalidCoefficients(VectorError):
    """Raised when coefficients are not a non-empty sequence of numbers."""
    pass

class NonFiniteCoefficient(InvalidCoefficients):
    """Raised when a coefficient is NaN or infinite."""

    def __init__(self, index: int, value):
        self.index = index
        self.value = value
        super().__init__(f"coefficients[{index}] = {value} (NaN or Inf)")

class EmptyOperand(VectorError):
    """Raised when the other operand of a vector operation has no coefficients."""
    pass

class DimensionMismatch(VectorError):
    """Raised when two vectors with different dimensions are combined."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(f"Dimension mismatch: {left} != {right}")
