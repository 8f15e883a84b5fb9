"""
Workout commands: addworkout, deleteworkout, viewworkout, findworkout, caloriesburnt.
"""
from .base import SessionState, register_command
from .entry_commands import (
    AddEntryCommand,
    DeleteEntryCommand,
    ViewEntryCommand,
    FindEntryCommand,
    TotalCaloriesCommand,
)
from fittrack.data import WorkoutList


class WorkoutCommandMixin:
    """Points entry commands at the workout list."""

    kind = "workout"

    def entries(self, session: SessionState) -> WorkoutList:
        return session.workouts


@register_command
class AddWorkoutCommand(WorkoutCommandMixin, AddEntryCommand):
    name = "addworkout"
    help_text = "adds a workout you have done."
    usage = "addworkout <WORKOUT_NAME> c/<CALORIES> [d/<YYYY-MM-DD>]"

    def set_arguments(self, args, parser) -> None:
        self.entry = parser.parse_workout(args)


@register_command
class DeleteWorkoutCommand(WorkoutCommandMixin, DeleteEntryCommand):
    name = "deleteworkout"
    help_text = "deletes a workout by its index in viewworkout."
    usage = "deleteworkout <INDEX>"


@register_command
class ViewWorkoutCommand(WorkoutCommandMixin, ViewEntryCommand):
    name = "viewworkout"
    help_text = "lists all workouts you have logged."
    usage = "viewworkout"


@register_command
class FindWorkoutCommand(WorkoutCommandMixin, FindEntryCommand):
    name = "findworkout"
    help_text = "finds workouts whose name contains a keyword (case-insensitive)."
    usage = "findworkout <KEYWORD>"


@register_command
class CaloriesBurntCommand(WorkoutCommandMixin, TotalCaloriesCommand):
    name = "caloriesburnt"
    help_text = "shows total calories burnt, optionally on one date."
    usage = "caloriesburnt [YYYY-MM-DD]"
    verb = "burnt"
