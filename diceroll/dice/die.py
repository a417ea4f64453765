"""Single die and the random sources it draws from."""

import random
from dataclasses import dataclass
from itertools import cycle
from typing import Iterable, Protocol


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from an inclusive range.

    random.Random satisfies this protocol.
    """

    def randint(self, a: int, b: int) -> int: ...


class SequenceSource:
    """Deterministic source replaying scripted values.

    Values are returned in order and the sequence repeats once exhausted.
    Useful in tests where exact rolls matter.

    Examples:
        >>> source = SequenceSource([3, 1])
        >>> [source.randint(1, 6) for _ in range(3)]
        [3, 1, 3]
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        if not values:
            raise ValueError("SequenceSource needs at least one value")
        self._values = cycle(values)

    def randint(self, a: int, b: int) -> int:
        value = next(self._values)
        if not a <= value <= b:
            raise ValueError(f"Scripted value {value} outside range [{a}, {b}]")
        return value


def new_source(seed: int | None = None) -> random.Random:
    """Create a fresh random source, seeded for reproducible runs if given."""
    return random.Random(seed)


@dataclass(frozen=True)
class Die:
    """A die with a fixed number of sides.

    Attributes:
        sides: Number of faces; results range over [1, sides].
    """

    sides: int

    def roll(self, source: RandomSource) -> int:
        """Draw one result from the die."""
        return source.randint(1, self.sides)
