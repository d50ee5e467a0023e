"""Points on the plane with their quadrant, and a row-major iterable matrix."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class Quadrant(Enum):
    """Where a point lies relative to the axes."""

    FIRST = auto()
    SECOND = auto()
    THIRD = auto()
    FOURTH = auto()
    ORIGIN = auto()
    AXIS = auto()


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Point:
    """A point with integer coordinates."""

    x: int
    y: int

    def check_quadrant(self) -> Quadrant:
        """The quadrant the point lies in, or ORIGIN / AXIS."""
        match (_sign(self.x), _sign(self.y)):
            case (1, 1):
                return Quadrant.FIRST
            case (-1, 1):
                return Quadrant.SECOND
            case (-1, -1):
                return Quadrant.THIRD
            case (1, -1):
                return Quadrant.FOURTH
            case (0, 0):
                return Quadrant.ORIGIN
            case _:
                return Quadrant.AXIS


class Matrix:
    """A grid of values that iterates over its cells row by row."""

    def __init__(self, rows: int, columns: int, initial_value: int = 0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("rows and columns must not be negative")
        self.rows = rows
        self.columns = columns
        self.data = [[initial_value] * columns for _ in range(rows)]

    def __iter__(self) -> Iterator[int]:
        for row in self.data:
            yield from row

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, columns={self.columns}, data={self.data})"