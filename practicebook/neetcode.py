"""Array and string puzzles: duplicates, anagrams, pair sums, letter values."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from enum import IntEnum


class LetterPosition(IntEnum):
    """Position of each letter in the English alphabet."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9  # noqa: E741
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15  # noqa: E741
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26


def has_duplicate(nums: Iterable[Hashable]) -> bool:
    """True if any value occurs more than once."""
    seen: set[Hashable] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_anagram(s: str, t: str) -> bool:
    """True if ``t`` is a rearrangement of the characters of ``s``."""
    if len(s) != len(t):
        return False
    return Counter(s) == Counter(t)


def two_integer_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices of two entries adding up to ``target``, or None if there are none."""
    positions: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in positions and 2 * value == target:
            return positions[value], index
        positions[value] = index

    for value in nums:
        complement = target - value
        if complement in positions and value != complement:
            return positions[value], positions[complement]
    return None