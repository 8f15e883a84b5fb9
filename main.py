"""
FitTrack - Main Entry Point

Command-line tracker for your profile, meals and workouts.
"""
import logging

from rich import box
from rich.console import Console
from rich.panel import Panel

from config import MODE, LOG_LEVEL, LOG_FORMAT, PROMPT
from fittrack.session import FitTrackSession

console = Console()
logger = logging.getLogger("fittrack.main")


def print_welcome():
    """Print welcome message."""
    console.print()
    console.print(Panel(
        "[bold cyan]FitTrack[/bold cyan]\n"
        "Type 'help' for commands, 'exit' to quit",
        box=box.DOUBLE,
    ))
    console.print()


def print_result(feedback: str):
    """Print a command's result message as plain text."""
    console.print(feedback, markup=False, highlight=False)
    console.print()


def repl():
    """
    Main Read-Eval-Print Loop.

    Reads one line at a time and hands it to the session.
    """
    print_welcome()

    session = FitTrackSession()

    while not session.exit_requested:
        try:
            user_input = console.input(PROMPT)

            # Skip empty input
            if not user_input.strip():
                continue

            try:
                result = session.run_command(user_input)
            except Exception as e:
                logger.exception("Command %r failed", user_input)
                console.print(f"[red]Error executing command: {e}[/red]")
                # In development mode, show full traceback
                if MODE == "DEVELOPMENT":
                    console.print_exception()
                continue

            print_result(result.feedback)

        except (KeyboardInterrupt, EOFError):
            # Ctrl+C or Ctrl+D
            console.print("\nGoodbye!")
            break


def main():
    """Main entry point."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING),
                        format=LOG_FORMAT)
    try:
        repl()
    except KeyboardInterrupt:
        console.print("\nInterrupted. Goodbye!")
    except Exception as e:
        console.print(f"[red]Fatal error: {e}[/red]")
        if MODE == "DEVELOPMENT":
            console.print_exception()
        return 1

    return 0


if __name__ == "__main__":
    exit(main())
