"""
Body-mass index derived from height and weight.
"""
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from config import (
    BMI_CATEGORIES,
    BMI_TOP_CATEGORY,
    RECOMMENDED_BMI_MIN,
    RECOMMENDED_BMI_MAX,
)
from .values import Height, Weight


@dataclass(frozen=True)
class Bmi:
    """
    BMI value, or None when it is undefined (zero or out-of-range height).

    Example:
        >>> bmi = Bmi.from_measurements(Height(200), Weight(100))
        >>> str(bmi), bmi.category
        ('25.0', 'Overweight')
    """
    value: Optional[float]

    @classmethod
    def from_measurements(cls, height: Height, weight: Weight) -> 'Bmi':
        """Compute BMI as kg / m^2; undefined when that is not a finite number."""
        square = _square_metres(height)
        if not square:
            return cls(None)
        value = weight.value / square
        return cls(value if math.isfinite(value) else None)

    @property
    def category(self) -> str:
        """
        Banded classification of the BMI value.

        Returns:
            Category name, or "Unknown" if BMI is undefined
        """
        if self.value is None:
            return "Unknown"
        for upper, name in BMI_CATEGORIES:
            if self.value < upper:
                return name
        return BMI_TOP_CATEGORY

    def __str__(self) -> str:
        if self.value is None:
            return "N/A"
        return f"{self.value:.1f}"


def _square_metres(height: Height) -> Optional[float]:
    """Height in metres squared, or None if it overflows."""
    try:
        return height.metres ** 2
    except OverflowError:
        return None


def recommended_weight_range(height: Height) -> Optional[Tuple[Weight, Weight]]:
    """
    Weight band that keeps BMI within the recommended range.

    Args:
        height: Current height

    Returns:
        (lower, upper) weights for the given height, or None if the
        height is too large to compute a band
    """
    square = _square_metres(height)
    if square is None or not math.isfinite(RECOMMENDED_BMI_MAX * square):
        return None
    return Weight(RECOMMENDED_BMI_MIN * square), Weight(RECOMMENDED_BMI_MAX * square)
