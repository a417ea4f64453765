"""Rich display helpers for CLI output."""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from diceroll.dice.types import RollResult


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def display_total(result: RollResult) -> None:
    """Display the canonical expression and its total, e.g. "4d4+4-H: 11"."""
    console.print(
        Text.assemble(
            (str(result.expression), "bold"),
            ": ",
            (str(result.total), "bold cyan"),
        )
    )


def format_rolls(result: RollResult) -> Text:
    """Format every roll as "Rolls: [a, b, c] = sum".

    The dropped die, if any, is shown in red; kept dice in green.

    Args:
        result: Roll result to format.

    Returns:
        Styled Rich Text.
    """
    text = Text("Rolls: [")
    for i, value in enumerate(result.rolls):
        if i:
            text.append(", ")
        style = "red" if i == result.dropped_index else "green"
        text.append(str(value), style=style)
    text.append(f"] = {result.raw_sum}")
    return text


def display_rolls(result: RollResult) -> None:
    """Display individual rolls followed by a blank line.

    Args:
        result: Roll result to display.
    """
    console.print(format_rolls(result))
    console.print()
