"""
Data models for the fitness tracker.
"""
from .values import Height, Weight, Calories, Gender, Date
from .bmi import Bmi, recommended_weight_range
from .entries import Entry, Meal, Workout
from .user_profile import UserProfile

__all__ = [
    # Value types
    'Height',
    'Weight',
    'Calories',
    'Gender',
    'Date',
    'Bmi',
    'recommended_weight_range',
    # Logged records
    'Entry',
    'Meal',
    'Workout',
    # Profile
    'UserProfile',
]
