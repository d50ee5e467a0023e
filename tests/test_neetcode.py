import pytest

from practicebook.neetcode import LetterPosition, has_duplicate, is_anagram, two_integer_sum


def test_letter_positions_span_alphabet():
    assert LetterPosition(1) is LetterPosition.A
    assert LetterPosition(26) is LetterPosition.Z
    assert [LetterPosition(i).name for i in range(1, 27)] == [
        chr(c) for c in range(ord("A"), ord("Z") + 1)
    ]
    with pytest.raises(ValueError):
        LetterPosition(27)


def test_no_duplicate():
    assert has_duplicate([1, 2, 3, 4, 5]) is False


def test_duplicate_found():
    assert has_duplicate([1, 2, 3, 1]) is True


def test_duplicate_empty():
    assert has_duplicate([]) is False


def test_duplicate_from_generator():
    assert has_duplicate(x % 3 for x in range(10)) is True


@pytest.mark.parametrize(
    "s,t,expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("carrace", "racecar", True),
        ("ab", "abc", False),
        ("", "", True),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


def test_is_anagram_symmetric():
    assert is_anagram("listen", "silent") == is_anagram("silent", "listen")


def test_two_integer_sum_source_example():
    assert two_integer_sum([3, 4, 5, 6], 8) == (0, 2)


def test_two_integer_sum_equal_halves():
    nums = [4, 4]
    i, j = two_integer_sum(nums, 8)
    assert (i, j) == (0, 1)


@pytest.mark.parametrize("nums,target", [([1, 2, 7, 11], 9), ([5, -2, 10, 3], 8), ([0, 1, 5, 2], 7)])
def test_two_integer_sum_indices_add_up(nums, target):
    i, j = two_integer_sum(nums, target)
    assert i != j
    assert nums[i] + nums[j] == target


def test_two_integer_sum_none():
    assert two_integer_sum([1, 2], 10) is None


def test_two_integer_sum_ignores_single_half():
    assert two_integer_sum([4, 1], 8) is None