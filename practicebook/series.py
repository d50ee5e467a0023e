"""Infinite numeric series (geometric and Fibonacci) and sums over their prefixes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


def geometric_series(first_number: Any, ratio: Any) -> Iterator[Any]:
    """Yield first_number, first_number*ratio, first_number*ratio**2, ... without end."""
    current = first_number
    while True:
        yield current
        current = current * ratio


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers 0, 1, 1, 2, 3, 5, ... without end."""
    previous, current = 0, 1
    while True:
        yield previous
        previous, current = current, previous + current


def fibonacci_with_totals() -> Iterator[tuple[int, int]]:
    """Yield (term, running total) pairs for the Fibonacci terms starting at 1, 2, 3, ..."""
    current, following = 0, 1
    total = 0
    while True:
        term = current + following
        current, following = following, term
        total += term
        yield term, total


def sum_through(iterable: Iterable[Any], index: int) -> Any:
    """Sum of the items of ``iterable`` from the first up to and including position ``index``."""
    if index < 0:
        raise ValueError("index must not be negative")
    return sum(islice(iterable, index + 1))


def _sum_first(iterable: Iterable[Any], count: int) -> Any:
    if count < 0:
        raise ValueError("count must not be negative")
    return sum(islice(iterable, count))


@dataclass(frozen=True)
class GeometricSeries:
    """A geometric series that can be iterated afresh any number of times."""

    start: int
    ratio: int

    def __iter__(self) -> Iterator[int]:
        return geometric_series(self.start, self.ratio)

    def sum(self, count: int) -> int:
        """Sum of the first ``count`` terms."""
        return _sum_first(self, count)


@dataclass(frozen=True)
class FibonacciSeries:
    """The Fibonacci series 0, 1, 1, 2, ..., iterable afresh any number of times."""

    def __iter__(self) -> Iterator[int]:
        return fibonacci()

    def sum(self, count: int) -> int:
        """Sum of the first ``count`` terms."""
        return _sum_first(self, count)