"""Dice system type definitions.

Immutable dataclasses for dice expressions and roll results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from diceroll.dice.die import RandomSource


class DropRule(str, Enum):
    """Which single roll, if any, is excluded from the sum."""

    NONE = "none"
    HIGH = "high"
    LOW = "low"

    @property
    def suffix(self) -> str:
        """Notation suffix for this rule."""
        return _DROP_SUFFIXES[self]


_DROP_SUFFIXES = {
    DropRule.NONE: "",
    DropRule.HIGH: "-H",
    DropRule.LOW: "-L",
}


@dataclass(frozen=True)
class DiceExpression:
    """A single dice term like 4d4+4-H.

    Attributes:
        count: Number of dice to roll.
        sides: Number of sides on each die.
        modifier: Flat modifier added after dropping.
        drop: Drop-highest/drop-lowest rule.
    """

    count: int
    sides: int
    modifier: int = 0
    drop: DropRule = DropRule.NONE

    def to_text(self) -> str:
        """Render canonical notation.

        The count prefix is omitted for a single die, so "1d4" renders as "d4".

        Examples:
            >>> DiceExpression(count=4, sides=4, modifier=4, drop=DropRule.HIGH).to_text()
            '4d4+4-H'
            >>> DiceExpression(count=1, sides=6, modifier=-1).to_text()
            'd6-1'
        """
        prefix = "" if self.count == 1 else str(self.count)
        if self.modifier > 0:
            mod = f"+{self.modifier}"
        elif self.modifier < 0:
            mod = str(self.modifier)
        else:
            mod = ""
        return f"{prefix}d{self.sides}{mod}{self.drop.suffix}"

    def __str__(self) -> str:
        return self.to_text()

    def evaluate(self, source: RandomSource | None = None) -> tuple[int, list[int]]:
        """Roll this expression once.

        Args:
            source: Random source to draw from. A fresh one is created when omitted.

        Returns:
            Tuple of (total, individual rolls in draw order, dropped die included).
        """
        from diceroll.dice.roller import roll_dice

        result = roll_dice(self, source)
        return result.total, list(result.rolls)


@dataclass(frozen=True)
class RollResult:
    """Result of evaluating a dice expression.

    Attributes:
        expression: The expression that was rolled.
        rolls: Every die drawn, in draw order, including a dropped one.
        total: Kept sum plus modifier, floored at zero.
        dropped_index: Position in rolls of the excluded die, if any.
    """

    expression: DiceExpression
    rolls: tuple[int, ...]
    total: int
    dropped_index: int | None = None

    @property
    def dropped(self) -> int | None:
        """Value of the excluded die."""
        if self.dropped_index is None:
            return None
        return self.rolls[self.dropped_index]

    @property
    def kept_rolls(self) -> tuple[int, ...]:
        """Rolls that count toward the total."""
        return tuple(r for i, r in enumerate(self.rolls) if i != self.dropped_index)

    @property
    def raw_sum(self) -> int:
        """Sum of all rolls before dropping and modifying."""
        return sum(self.rolls)

    @property
    def kept_sum(self) -> int:
        """Sum of kept rolls, before the modifier."""
        return sum(self.kept_rolls)
