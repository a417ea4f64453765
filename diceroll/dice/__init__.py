"""Dice notation parsing and rolling.

Usage:
    >>> from diceroll.dice import parse_dice, roll
    >>> expr = parse_dice("4d6-L")
    >>> total, rolls = expr.evaluate()
    >>> result = roll("2d8+3")
"""

# Types
from diceroll.dice.types import (
    DiceExpression,
    DropRule,
    RollResult,
)

# Die and random sources
from diceroll.dice.die import Die, RandomSource, SequenceSource, new_source

# Parser
from diceroll.dice.parser import (
    DiceParseError,
    DropError,
    ExpressionError,
    IntegerParseError,
    parse_dice,
)

# Roller
from diceroll.dice.roller import roll_dice, roll

__all__ = [
    # Types
    "DiceExpression",
    "DropRule",
    "RollResult",
    # Die
    "Die",
    "RandomSource",
    "SequenceSource",
    "new_source",
    # Parser
    "parse_dice",
    "DiceParseError",
    "ExpressionError",
    "IntegerParseError",
    "DropError",
    # Roller
    "roll_dice",
    "roll",
]
