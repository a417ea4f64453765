"""Dice notation parser.

Parses single-term dice notation like d20, 4d6, 2d8+3, 4d4-1, 4d6-L, 4d4+4-H.
"""

import logging
import re

from diceroll.dice.types import DiceExpression, DropRule

logger = logging.getLogger(__name__)


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class ExpressionError(DiceParseError):
    """Notation doesn't match the grammar or breaks a structural rule."""

    def __init__(self, expression: str) -> None:
        super().__init__(expression)
        self.expression = expression

    def __str__(self) -> str:
        return f'Invalid dice expression "{self.expression}"'


class IntegerParseError(DiceParseError):
    """A numeric field matched the grammar but doesn't fit its integer range."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    def __str__(self) -> str:
        return f"Integer parsing error: {self.cause}"


class DropError(DiceParseError):
    """Drop suffix uses a letter other than h or l."""

    def __init__(self, letter: str) -> None:
        super().__init__(letter)
        self.letter = letter

    def __str__(self) -> str:
        return f'Invalid drop modifier "{self.letter}"'


# Pattern: optional count, 'd', sides, optional signed modifier, optional -letter drop
# Examples: d20, 4d6, 2d8+3, 4d4-1, 4d6-L, 4d4+4-H
DICE_PATTERN = re.compile(r"(\d+)?d(\d+)([+-]\d+)?(?:-([A-Za-z]))?")

# Field ranges (16-bit)
MAX_COUNT = 65535
MAX_SIDES = 65535
MIN_MODIFIER = -32768
MAX_MODIFIER = 32767


def _to_int(text: str, low: int, high: int) -> int:
    value = int(text)
    if value > high:
        raise IntegerParseError(
            ValueError(f"number too large to fit in target type: {text!r}")
        )
    if value < low:
        raise IntegerParseError(
            ValueError(f"number too small to fit in target type: {text!r}")
        )
    return value


def _parse_drop(letter: str) -> DropRule:
    lowered = letter.lower()
    if lowered == "h":
        return DropRule.HIGH
    if lowered == "l":
        return DropRule.LOW
    raise DropError(lowered)


def parse_dice(notation: str) -> DiceExpression:
    """Parse dice notation into a DiceExpression.

    The whole string must match; no whitespace is allowed.

    Args:
        notation: Dice notation string (e.g., "4d4", "d20+5", "4d6-L").

    Returns:
        DiceExpression with parsed values and defaults filled in.

    Raises:
        ExpressionError: If notation doesn't match, a die count or side count
            is zero, the modifier would leave no positive maximum, or a drop
            rule is given for a single die.
        IntegerParseError: If a number doesn't fit its field.
        DropError: If the drop letter isn't h or l.

    Examples:
        >>> parse_dice("4d4")
        DiceExpression(count=4, sides=4, modifier=0, drop=<DropRule.NONE: 'none'>)
        >>> parse_dice("4d4+4-H").drop
        <DropRule.HIGH: 'high'>
    """
    match = DICE_PATTERN.fullmatch(notation)
    if not match:
        logger.debug(f"Rejected dice notation (no match): {notation!r}")
        raise ExpressionError(notation)

    count_str, sides_str, modifier_str, drop_str = match.groups()

    # Default to 1 die if not specified (e.g., "d20" means "1d20")
    count = _to_int(count_str, 0, MAX_COUNT) if count_str else 1

    if sides_str is None:
        raise ExpressionError(notation)
    sides = _to_int(sides_str, 0, MAX_SIDES)

    if count == 0 or sides == 0:
        logger.debug(f"Rejected dice notation (zero dice or sides): {notation!r}")
        raise ExpressionError(notation)

    modifier = 0
    if modifier_str:
        modifier = _to_int(modifier_str, MIN_MODIFIER, MAX_MODIFIER)
        # Modifier may not wipe out even the highest possible roll
        if not -modifier < count * sides:
            logger.debug(f"Rejected dice notation (modifier too negative): {notation!r}")
            raise ExpressionError(notation)

    drop = DropRule.NONE
    if drop_str:
        if count == 1:
            logger.debug(f"Rejected dice notation (drop on single die): {notation!r}")
            raise ExpressionError(notation)
        drop = _parse_drop(drop_str)

    return DiceExpression(count=count, sides=sides, modifier=modifier, drop=drop)
