"""Command-line dice roller."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from diceroll.cli.display import display_error, display_rolls, display_total
from diceroll.config import get_settings
from diceroll.dice.die import new_source
from diceroll.dice.parser import DiceParseError, parse_dice
from diceroll.dice.roller import roll_dice

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="diceroll",
    help="A command-line dice roller",
    add_completion=False,
)


def _configure_logging(level: str) -> None:
    """Send diceroll logs to stderr through Rich."""
    package_logger = logging.getLogger("diceroll")
    for handler in list(package_logger.handlers):
        if isinstance(handler, RichHandler):
            package_logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


@app.command()
def main(
    expressions: List[str] = typer.Argument(
        ..., metavar="EXPR...", help="Dice expression(s) to roll, e.g. 4d6-L"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Display details of each roll"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random source for a reproducible run"
    ),
    debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
) -> None:
    """Roll one or more dice expressions.

    Invalid expressions are reported and skipped; the rest are still rolled.
    """
    settings = get_settings()
    verbose = verbose or settings.verbose
    debug = debug or settings.debug
    if seed is None:
        seed = settings.seed

    _configure_logging("DEBUG" if debug else settings.log_level)

    # One shared source when seeded so the whole run replays exactly
    source = new_source(seed) if seed is not None else None

    for notation in expressions:
        try:
            expression = parse_dice(notation)
        except DiceParseError as e:
            logger.debug(f"Skipping {notation!r}: {e!r}")
            display_error(str(e))
            continue

        result = roll_dice(expression, source)
        display_total(result)

        if verbose:
            display_rolls(result)


if __name__ == "__main__":
    app()
