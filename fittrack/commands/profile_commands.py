"""
Profile commands: editprofile, viewprofile, bmi, checkrecommendedweight.
"""
from .base import Command, CommandResult, SessionState, register_command
from fittrack.models import recommended_weight_range


@register_command
class EditProfileCommand(Command):
    """Overwrite the profile."""

    name = "editprofile"
    help_text = "allows you to edit your profile."
    usage = "editprofile h/<HEIGHT> w/<WEIGHT> g/<GENDER> l/<CALORIE_LIMIT>"

    def __init__(self, command_line: str = ""):
        super().__init__(command_line)
        self.new_profile = None

    def set_arguments(self, args, parser) -> None:
        self.new_profile = parser.parse_profile(args)

    def execute(self, session: SessionState) -> CommandResult:
        session.profile.update_from(self.new_profile)
        return CommandResult(f"I've edited the following:\n{session.profile}")


@register_command
class ViewProfileCommand(Command):
    """Show the profile."""

    name = "viewprofile"
    help_text = "shows your profile."
    usage = "viewprofile"

    def execute(self, session: SessionState) -> CommandResult:
        return CommandResult(f"This is your profile:\n{session.profile}")


@register_command
class BmiCommand(Command):
    """Show BMI and its category."""

    name = "bmi"
    help_text = "shows your BMI and its category."
    usage = "bmi"

    def execute(self, session: SessionState) -> CommandResult:
        profile = session.profile
        return CommandResult(
            f"Your BMI is {profile.bmi}\nCategory: {profile.bmi_category}"
        )


@register_command
class CheckRecommendedWeightCommand(Command):
    """Show the weight band for a normal BMI at the current height."""

    name = "checkrecommendedweight"
    help_text = "shows the recommended weight range for your height."
    usage = "checkrecommendedweight"

    def execute(self, session: SessionState) -> CommandResult:
        profile = session.profile
        band = recommended_weight_range(profile.height)
        if band is None:
            return CommandResult(
                f"A recommended weight cannot be computed for a height of {profile.height}."
            )
        lower, upper = band
        return CommandResult(
            f"For a height of {profile.height}, the recommended weight is "
            f"between {lower.value:.1f}kg and {upper.value:.1f}kg.\n"
            f"Your current weight is {profile.weight}."
        )
