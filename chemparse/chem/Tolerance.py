from abc import ABC, abstractmethod
from typing import Union

class QuantityTolerance(ABC):
    """Base class for comparing element quantities within a tolerance."""
    unit: str = ""

    def __init__(self, tolerance: float):
        if tolerance < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance}")
        self.tolerance = tolerance

    @abstractmethod
    def error(self, observed: float, expected: float) -> float:
        """Compute the signed deviation of observed from expected."""
        pass

    def within(self, observed: float, expected: float) -> bool:
        """Check if observed value is within tolerance from expected."""
        return abs(self.error(observed, expected)) <= self.tolerance

    # --- Operator overloads ---
    def __add__(self, value: float) -> "QuantityTolerance":
        """Return new instance with increased tolerance."""
        return self.__class__(self.tolerance + value)

    def __sub__(self, value: float) -> "QuantityTolerance":
        """Return new instance with decreased tolerance."""
        return self.__class__(self.tolerance - value)

    def __mul__(self, value: float) -> "QuantityTolerance":
        """Return new instance with multiplied tolerance."""
        return self.__class__(self.tolerance * value)

    def __truediv__(self, value: float) -> "QuantityTolerance":
        """Return new instance with divided tolerance."""
        return self.__class__(self.tolerance / value)

    def __repr__(self):
        return f"{self.__class__.__name__}(tolerance={self.tolerance})"

class AbsoluteTolerance(QuantityTolerance):
    """Absolute difference between quantities."""
    unit = "abs"

    def error(self, observed: float, expected: float) -> float:
        return observed - expected


class RelativeTolerance(QuantityTolerance):
    """Difference relative to the expected quantity."""
    unit = "rel"

    def error(self, observed: float, expected: float) -> float:
        if expected == 0:
            return observed - expected
        return (observed - expected) / abs(expected)


def as_tolerance(tolerance: Union[float, QuantityTolerance]) -> QuantityTolerance:
    """
    Return ``tolerance`` as a QuantityTolerance, reading plain numbers as absolute.
    """
    if isinstance(tolerance, QuantityTolerance):
        return tolerance
    return AbsoluteTolerance(float(tolerance))
