"""
Tests for the command parser and its argument sub-parsers.
"""
from datetime import date

import pytest
from fittrack.commands import InvalidCommand
from fittrack.commands.meal_commands import AddMealCommand, DeleteMealCommand
from fittrack.commands.workout_commands import AddWorkoutCommand
from fittrack.exceptions import (
    PatternMatchFailException,
    NumberFormatException,
    NegativeNumberException,
    WrongGenderException,
    IndexOutOfBoundsException,
)
from fittrack.models import Calories, Date, Gender, Meal, Workout
from fittrack.parsers import CommandParser, parse_number


@pytest.fixture
def parser():
    return CommandParser()


# Number parsing
def test_parse_number():
    """Test numeric tokens."""
    assert parse_number("72.5") == 72.5
    assert parse_number("180") == 180.0
    assert parse_number("1e3") == 1000.0


def test_parse_number_invalid():
    """Test non-numeric and non-finite tokens."""
    for token in ["abc", "12kg", "nan", "inf", "-inf", "1_0", "1e400", "１２", ""]:
        with pytest.raises(NumberFormatException):
            parse_number(token)


# Profile parsing
def test_parse_profile(parser):
    """Test all four fields are parsed."""
    profile = parser.parse_profile("h/180 w/75.5 g/F l/2000")
    assert profile.height.value == 180
    assert profile.weight.value == 75.5
    assert profile.gender == Gender("F")
    assert profile.daily_calorie_limit.value == 2000


def test_parse_profile_extra_whitespace(parser):
    """Test tokens may be separated by several spaces."""
    profile = parser.parse_profile("h/180   w/75 \tg/M  l/2000")
    assert profile.weight.value == 75
    assert profile.gender == Gender("M")


def test_parse_profile_gender_first_letter(parser):
    """Test only the first letter of the gender token is checked."""
    assert parser.parse_profile("h/180 w/75 g/Male l/2000").gender == Gender("M")
    assert parser.parse_profile("h/180 w/75 g/Fem l/2000").gender == Gender("F")


def test_parse_profile_pattern_fail(parser):
    """Test shape mismatches."""
    for args in [
        "",
        "h/180 w/75 l/2000",
        "w/75 h/180 g/M l/2000",
        "h/180 w/75 g/M l/2000 extra",
        "180 75 M 2000",
    ]:
        with pytest.raises(PatternMatchFailException):
            parser.parse_profile(args)


def test_parse_profile_number_format(parser):
    """Test non-numeric fields fail before gender is checked."""
    with pytest.raises(NumberFormatException):
        parser.parse_profile("h/abc w/75 g/M l/2000")
    with pytest.raises(NumberFormatException):
        parser.parse_profile("h/180 w/75 g/X l/lots")


def test_parse_profile_negative(parser):
    """Test negative fields fail before gender is checked."""
    with pytest.raises(NegativeNumberException):
        parser.parse_profile("h/-180 w/75 g/M l/2000")
    with pytest.raises(NegativeNumberException):
        parser.parse_profile("h/180 w/-1 g/X l/2000")
    with pytest.raises(NegativeNumberException):
        parser.parse_profile("h/180 w/75 g/X l/-1")


def test_parse_profile_number_before_negative(parser):
    """Test a bad number wins over a negative one."""
    with pytest.raises(NumberFormatException):
        parser.parse_profile("h/-180 w/75 g/M l/abc")


def test_parse_profile_wrong_gender(parser):
    """Test gender must start with M or F."""
    for gender in ["X", "m", "f", "1"]:
        with pytest.raises(WrongGenderException):
            parser.parse_profile(f"h/180 w/75 g/{gender} l/2000")


def test_parse_profile_zero_allowed(parser):
    """Test zero is not negative."""
    profile = parser.parse_profile("h/0 w/0 g/M l/0")
    assert profile.height.value == 0
    assert profile.bmi.value is None


@pytest.mark.parametrize("height", ["1e300", "1e-200"])
def test_parse_profile_extreme_height(parser, height):
    """Test heights whose square overflows or underflows leave BMI undefined."""
    profile = parser.parse_profile(f"h/{height} w/70 g/M l/2000")
    assert profile.bmi.value is None
    assert profile.bmi_category == "Unknown"


@pytest.mark.parametrize("height", ["1e300", "1e-200"])
def test_parse_command_extreme_height(parser, height):
    """Test extreme heights never raise out of the dispatcher."""
    command = parser.parse_command(f"editprofile h/{height} w/70 g/M l/2000")
    assert command.new_profile.bmi.value is None


# Meal / workout parsing
def test_parse_meal_default_date(parser):
    """Test missing date defaults to today."""
    meal = parser.parse_meal("Lunch c/500")
    assert meal == Meal("Lunch", Calories(500), Date.today())
    assert meal.date.value == date.today()


def test_parse_meal_with_date(parser):
    """Test explicit date."""
    meal = parser.parse_meal("Lunch c/500 d/2024-01-01")
    assert meal.name == "Lunch"
    assert meal.calories == Calories(500)
    assert meal.date == Date.parse("2024-01-01")


def test_parse_meal_name_with_spaces(parser):
    """Test names can contain spaces."""
    meal = parser.parse_meal("Chicken rice with egg c/650.5")
    assert meal.name == "Chicken rice with egg"
    assert meal.calories.value == 650.5


def test_parse_meal_name_up_to_last_marker(parser):
    """Test the name runs up to the last c/ marker."""
    meal = parser.parse_meal("Soup c/x c/300")
    assert meal.name == "Soup c/x"
    assert meal.calories.value == 300


def test_parse_meal_pattern_fail(parser):
    """Test shape mismatches."""
    for args in ["", "Lunch", "c/500", "Lunch 500", "Lunch c/"]:
        with pytest.raises(PatternMatchFailException):
            parser.parse_meal(args)


def test_parse_meal_bad_date(parser):
    """Test malformed dates fail as pattern mismatches."""
    for args in ["Lunch c/500 d/2024-13-01", "Lunch c/500 d/01-01-2024", "Lunch c/500 d/today"]:
        with pytest.raises(PatternMatchFailException):
            parser.parse_meal(args)


def test_parse_meal_blank_name(parser):
    """Test a name of only whitespace is a pattern mismatch."""
    with pytest.raises(PatternMatchFailException):
        parser.parse_meal("  \t c/5")
    with pytest.raises(PatternMatchFailException):
        parser.parse_workout("   c/5")


def test_parse_meal_bad_calories(parser):
    """Test non-numeric calories."""
    with pytest.raises(NumberFormatException):
        parser.parse_meal("Lunch c/abc")


def test_parse_meal_negative_calories(parser):
    """Test negative calories."""
    with pytest.raises(NegativeNumberException):
        parser.parse_meal("Lunch c/-5")


def test_parse_workout(parser):
    """Test workouts use the same format."""
    workout = parser.parse_workout("Morning run c/320 d/2024-02-29")
    assert isinstance(workout, Workout)
    assert workout.name == "Morning run"
    assert workout.date == Date.parse("2024-02-29")


# Index / date / keyword parsing
def test_parse_index(parser):
    """Test valid indices."""
    assert parser.parse_index("1") == 1
    assert parser.parse_index("  12 ") == 12


def test_parse_index_empty(parser):
    """Test empty index."""
    with pytest.raises(PatternMatchFailException):
        parser.parse_index("   ")


def test_parse_index_not_integer(parser):
    """Test non-integer index."""
    for args in ["abc", "1.5", "one", "1_0", "１", "0x1"]:
        with pytest.raises(NumberFormatException):
            parser.parse_index(args)


def test_parse_index_not_positive(parser):
    """Test zero and negative indices."""
    for args in ["0", "-1"]:
        with pytest.raises(IndexOutOfBoundsException):
            parser.parse_index(args)


def test_parse_date(parser):
    """Test date arguments."""
    assert parser.parse_date(" 2024-02-29 ") == Date.parse("2024-02-29")
    with pytest.raises(PatternMatchFailException):
        parser.parse_date("2023-02-29")
    with pytest.raises(PatternMatchFailException):
        parser.parse_date("")


def test_parse_keyword(parser):
    """Test keywords are stripped and kept verbatim."""
    assert parser.parse_keyword("  Chicken Rice ") == "Chicken Rice"
    with pytest.raises(PatternMatchFailException):
        parser.parse_keyword("  ")


def test_get_first_word(parser):
    """Test first-word extraction."""
    assert parser.get_first_word("addmeal Lunch c/500") == "addmeal"
    assert parser.get_first_word("  help\tme") == "help"
    assert parser.get_first_word("") == ""


# Dispatch
def test_command_words(parser):
    """Test every command word is registered in help order."""
    assert parser.command_words == (
        "help", "exit",
        "editprofile", "viewprofile", "bmi", "checkrecommendedweight",
        "addmeal", "deletemeal", "viewmeal", "findmeal", "caloriesconsumed",
        "addworkout", "deleteworkout", "viewworkout", "findworkout", "caloriesburnt",
    )


def test_parse_command_armed(parser):
    """Test a valid line yields the matching command with its payload."""
    command = parser.parse_command("  addmeal Lunch c/500 d/2024-01-01  ")
    assert isinstance(command, AddMealCommand)
    assert command.entry == Meal("Lunch", Calories(500), Date.parse("2024-01-01"))

    command = parser.parse_command("addworkout Run c/300")
    assert isinstance(command, AddWorkoutCommand)

    command = parser.parse_command("deletemeal 2")
    assert isinstance(command, DeleteMealCommand)
    assert command.index == 2


@pytest.mark.parametrize("line", ["", "   ", "\t\n"])
def test_parse_command_blank(parser, line):
    """Test blank lines give an invalid command."""
    command = parser.parse_command(line)
    assert isinstance(command, InvalidCommand)
    assert command.error is None


def test_parse_command_unknown_word(parser):
    """Test unknown words echo the original line without a cause."""
    command = parser.parse_command("foobar 1 2 3")
    assert isinstance(command, InvalidCommand)
    assert command.error is None
    assert "foobar 1 2 3" in command.execute().feedback


def test_parse_command_case_sensitive(parser):
    """Test command words match exactly."""
    assert isinstance(parser.parse_command("HELP"), InvalidCommand)
    assert isinstance(parser.parse_command("AddMeal Lunch c/500"), InvalidCommand)


@pytest.mark.parametrize("line, error_type", [
    ("deletemeal 0", IndexOutOfBoundsException),
    ("deletemeal -1", IndexOutOfBoundsException),
    ("deletemeal abc", NumberFormatException),
    ("deletemeal 1_0", NumberFormatException),
    ("addmeal Lunch c/1_0", NumberFormatException),
    ("addmeal   c/5", PatternMatchFailException),
    ("deleteworkout", PatternMatchFailException),
    ("addmeal Lunch", PatternMatchFailException),
    ("addmeal Lunch c/abc", NumberFormatException),
    ("editprofile h/180 w/75 g/X l/2000", WrongGenderException),
    ("editprofile h/-180 w/75 g/X l/2000", NegativeNumberException),
    ("findmeal", PatternMatchFailException),
    ("caloriesconsumed yesterday", PatternMatchFailException),
])
def test_parse_command_carries_error(parser, line, error_type):
    """Test parse failures become invalid commands carrying the cause."""
    command = parser.parse_command(line)
    assert isinstance(command, InvalidCommand)
    assert isinstance(command.error, error_type)


def test_invalid_command_shows_intended_help(parser):
    """Test the failed command's usage is included in the message."""
    feedback = parser.parse_command("editprofile h/180 w/75 g/X l/2000").execute().feedback
    assert "Invalid command: 'editprofile h/180 w/75 g/X l/2000'" in feedback
    assert "Gender must be M or F." in feedback
    assert "editprofile h/<HEIGHT> w/<WEIGHT> g/<GENDER> l/<CALORIE_LIMIT>" in feedback


def test_invalid_command_points_to_help(parser):
    """Test unknown words point the user to help."""
    feedback = parser.parse_command("foobar").execute().feedback
    assert "Type `help`" in feedback


def test_parse_command_creates_fresh_instances(parser):
    """Test each call builds a new command."""
    first = parser.parse_command("deletemeal 1")
    second = parser.parse_command("deletemeal 2")
    assert first is not second
    assert first.index == 1
    assert second.index == 2


def test_get_invalid_command_result(parser):
    """Test execution-time failures are reported like parse failures."""
    error = IndexOutOfBoundsException.index_out_of_range(2)
    result = parser.get_invalid_command_result("deletemeal 5", error)
    assert "between 1 and 2" in result.feedback
    assert "deletemeal <INDEX>" in result.feedback


def test_exception_default_message():
    """Test exceptions built without a message fall back to their default."""
    error = WrongGenderException()
    assert error.message == WrongGenderException.default_message
    assert str(error) == error.message
    assert PatternMatchFailException("custom").message == "custom"
