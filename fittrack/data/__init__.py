"""
In-memory data holders for the tracking session.
"""
from .entry_list import EntryList, MealList, WorkoutList

__all__ = [
    'EntryList',
    'MealList',
    'WorkoutList',
]
