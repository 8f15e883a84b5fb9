"""
Meal commands: addmeal, deletemeal, viewmeal, findmeal, caloriesconsumed.
"""
from .base import SessionState, register_command
from .entry_commands import (
    AddEntryCommand,
    DeleteEntryCommand,
    ViewEntryCommand,
    FindEntryCommand,
    TotalCaloriesCommand,
)
from fittrack.data import MealList


class MealCommandMixin:
    """Points entry commands at the meal list."""

    kind = "meal"

    def entries(self, session: SessionState) -> MealList:
        return session.meals


@register_command
class AddMealCommand(MealCommandMixin, AddEntryCommand):
    name = "addmeal"
    help_text = "adds a meal you have eaten."
    usage = "addmeal <MEAL_NAME> c/<CALORIES> [d/<YYYY-MM-DD>]"

    def set_arguments(self, args, parser) -> None:
        self.entry = parser.parse_meal(args)


@register_command
class DeleteMealCommand(MealCommandMixin, DeleteEntryCommand):
    name = "deletemeal"
    help_text = "deletes a meal by its index in viewmeal."
    usage = "deletemeal <INDEX>"


@register_command
class ViewMealCommand(MealCommandMixin, ViewEntryCommand):
    name = "viewmeal"
    help_text = "lists all meals you have logged."
    usage = "viewmeal"


@register_command
class FindMealCommand(MealCommandMixin, FindEntryCommand):
    name = "findmeal"
    help_text = "finds meals whose name contains a keyword (case-insensitive)."
    usage = "findmeal <KEYWORD>"


@register_command
class CaloriesConsumedCommand(MealCommandMixin, TotalCaloriesCommand):
    name = "caloriesconsumed"
    help_text = "shows total calories consumed, optionally on one date."
    usage = "caloriesconsumed [YYYY-MM-DD]"
    verb = "consumed"
