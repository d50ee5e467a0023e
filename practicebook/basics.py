"""Assorted small exercises: comparisons, students, character sets, pyramids, shared values."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

T = TypeVar("T")


def get_min(x: T, y: T) -> T:
    """The smaller of two values; ``y`` when they compare equal."""
    return x if x < y else y  # type: ignore[operator]


def get_greater(num1: T, num2: T) -> T:
    """The greater of two values; ``num2`` when they compare equal."""
    return num1 if num1 > num2 else num2  # type: ignore[operator]


def multiply(num1: Any, num2: Any) -> Any:
    """The product of two values."""
    return num1 * num2


class MaturityStage(Enum):
    """Whether a person is a child or an adult."""

    CHILD = "child"
    ADULT = "adult"


def maturity_stage(age: int) -> MaturityStage:
    """CHILD for ages 0 to 17, ADULT otherwise."""
    return MaturityStage.CHILD if 0 <= age <= 17 else MaturityStage.ADULT


@dataclass(frozen=True)
class Student:
    """A student with a name, age and roll number."""

    name: str
    age: int
    roll_number: str

    def seniority(self) -> str:
        """'senior' for students older than 17, otherwise 'junior'."""
        return "senior" if self.age > 17 else "junior"

    def __str__(self) -> str:
        return (
            f"Roll number {self.roll_number} has name {self.name} "
            f"with age {self.age} and is a {self.seniority()}"
        )


@dataclass(frozen=True)
class CharSet:
    """An ordered collection of characters supporting set difference with ``-``."""

    chars: tuple[str, ...]

    def __init__(self, chars: Iterable[str]) -> None:
        object.__setattr__(self, "chars", tuple(chars))

    def __sub__(self, other: CharSet) -> CharSet:
        if not isinstance(other, CharSet):
            return NotImplemented
        excluded = set(other.chars)
        kept = dict.fromkeys(c for c in self.chars if c not in excluded)
        return CharSet(kept)


def pyramid_pattern(columns: int) -> str:
    """A number pyramid of ``columns`` rows, each line ending in a newline."""
    width = 2 * columns - 1
    mid_point = width // 2
    lines = []
    for level in range(columns):
        count = 0
        cells = []
        for position in range(width):
            if abs(mid_point - position) > level:
                cells.append("   ")
                continue
            if count < level + 1 and position <= mid_point:
                count += 1
            else:
                count -= 1
            cells.append(f" {count} ")
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def pyramid_main(argv: list[str] | None = None) -> int:
    """Read the number of rows from standard input and print the pyramid."""
    line = sys.stdin.readline()
    try:
        columns = int(line.strip())
    except ValueError:
        print(f"invalid number: {line.strip()!r}", file=sys.stderr)
        return 1
    sys.stdout.write(pyramid_pattern(columns))
    return 0


class SharedValue:
    """A value that may be read and replaced safely from several threads."""

    def __init__(self, value: int) -> None:
        self._lock = threading.Lock()
        self._value = value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def mutate(self, new_value: int) -> None:
        """Replace the held value."""
        with self._lock:
            self._value = new_value