"""Core dice rolling engine.

Rolls a parsed expression, applies its drop rule and modifier, and floors
the total at zero.
"""

import logging

from diceroll.dice.die import Die, RandomSource, new_source
from diceroll.dice.parser import parse_dice
from diceroll.dice.types import DiceExpression, DropRule, RollResult

logger = logging.getLogger(__name__)


def _dropped_index(rolls: list[int], drop: DropRule) -> int | None:
    """Index of the single die excluded by the drop rule.

    Ties resolve to the first occurrence in draw order.
    """
    if drop == DropRule.HIGH:
        return rolls.index(max(rolls))
    if drop == DropRule.LOW:
        return rolls.index(min(rolls))
    return None


def roll_dice(
    expression: DiceExpression,
    source: RandomSource | None = None,
) -> RollResult:
    """Roll dice according to the expression.

    Args:
        expression: The dice expression to roll.
        source: Random source to draw from. A fresh one is created per call
            when omitted.

    Returns:
        RollResult with every roll in draw order and the floored total.

    Examples:
        >>> from diceroll.dice.die import SequenceSource
        >>> expr = DiceExpression(count=3, sides=6, modifier=1, drop=DropRule.LOW)
        >>> roll_dice(expr, SequenceSource([2, 5, 2])).total
        8
    """
    if source is None:
        source = new_source()

    die = Die(expression.sides)
    rolls = [die.roll(source) for _ in range(expression.count)]

    dropped_index = _dropped_index(rolls, expression.drop)
    kept_sum = sum(rolls)
    if dropped_index is not None:
        kept_sum -= rolls[dropped_index]
        logger.debug(f"Dropped {expression.drop.value} die: {rolls[dropped_index]}")

    if -expression.modifier < kept_sum:
        total = kept_sum + expression.modifier
    else:
        logger.debug(
            f"Total for {expression} clamped to 0 (kept {kept_sum}, modifier {expression.modifier})"
        )
        total = 0

    logger.debug(f"Rolled {expression}: {rolls} -> {total}")

    return RollResult(
        expression=expression,
        rolls=tuple(rolls),
        total=total,
        dropped_index=dropped_index,
    )


def roll(notation: str, source: RandomSource | None = None) -> RollResult:
    """Parse dice notation and roll.

    Convenience function combining parse_dice and roll_dice.

    Args:
        notation: Dice notation string (e.g., "4d6-L").
        source: Optional random source.

    Returns:
        RollResult with individual rolls and total.

    Raises:
        DiceParseError: If notation is invalid.
    """
    expression = parse_dice(notation)
    return roll_dice(expression, source)
