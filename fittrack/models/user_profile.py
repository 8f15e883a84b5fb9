"""
User profile with derived BMI.
"""
from typing import Optional

from config import (
    DEFAULT_HEIGHT_CM,
    DEFAULT_WEIGHT_KG,
    DEFAULT_GENDER,
    DEFAULT_CALORIE_LIMIT,
)
from .bmi import Bmi
from .values import Height, Weight, Calories, Gender


class UserProfile:
    """
    Height, weight, gender and daily calorie limit of the user.

    BMI is recomputed whenever height or weight is assigned, so it always
    matches the current measurements.

    Example:
        >>> profile = UserProfile(Height(200), Weight(80), Calories(2000), Gender("M"))
        >>> str(profile.bmi)
        '20.0'
    """

    def __init__(self, height: Optional[Height] = None, weight: Optional[Weight] = None,
                 daily_calorie_limit: Optional[Calories] = None, gender: Optional[Gender] = None):
        self._height = height or Height(DEFAULT_HEIGHT_CM)
        self._weight = weight or Weight(DEFAULT_WEIGHT_KG)
        self.daily_calorie_limit = daily_calorie_limit or Calories(DEFAULT_CALORIE_LIMIT)
        self.gender = gender or Gender(DEFAULT_GENDER)
        self._update_bmi()

    @property
    def height(self) -> Height:
        return self._height

    @height.setter
    def height(self, height: Height) -> None:
        self._height = height
        self._update_bmi()

    @property
    def weight(self) -> Weight:
        return self._weight

    @weight.setter
    def weight(self, weight: Weight) -> None:
        self._weight = weight
        self._update_bmi()

    @property
    def bmi(self) -> Bmi:
        return self._bmi

    @property
    def bmi_category(self) -> str:
        return self._bmi.category

    def update_from(self, other: 'UserProfile') -> None:
        """
        Overwrite every field with the values of another profile.

        Args:
            other: Profile holding the new values
        """
        self.height = other.height
        self.weight = other.weight
        self.gender = other.gender
        self.daily_calorie_limit = other.daily_calorie_limit

    def _update_bmi(self) -> None:
        self._bmi = Bmi.from_measurements(self._height, self._weight)

    def __str__(self) -> str:
        return (
            f"Height: {self.height}\n"
            f"Weight: {self.weight}\n"
            f"Gender: {self.gender}\n"
            f"Daily calorie limit: {self.daily_calorie_limit}\n"
            f"BMI: {self.bmi}"
        )
