import itertools
import random

import pytest

from puzzlekit.strings import longest_diverse_string, longest_prefix


def test_diverse_worked_example():
    assert longest_diverse_string(1, 1, 7) == "ccaccbcc"


def test_diverse_second_example():
    assert longest_diverse_string(7, 1, 0) == "aabaa"


@pytest.mark.parametrize("a, b, c", list(itertools.product(range(6), repeat=3)))
def test_diverse_invariants(a, b, c):
    result = longest_diverse_string(a, b, c)
    for letter, limit in zip("abc", (a, b, c)):
        assert result.count(letter) <= limit
        assert letter * 3 not in result
    assert set(result) <= set("abc")
    if a + b + c:
        assert result


@pytest.mark.parametrize("letter", ["a", "b", "c"])
@pytest.mark.parametrize("amount", [1, 2, 5])
def test_diverse_single_letter(letter, amount):
    counts = {"a": 0, "b": 0, "c": 0}
    counts[letter] = amount
    assert longest_diverse_string(**counts) == letter * min(amount, 2)


def test_diverse_all_zero():
    assert longest_diverse_string(0, 0, 0) == ""


def test_diverse_negative_rejected():
    with pytest.raises(ValueError):
        longest_diverse_string(-1, 2, 2)


def test_prefix_worked_example():
    assert longest_prefix("ababab") == "abab"


@pytest.mark.parametrize("text", ["", "a"])
def test_prefix_of_tiny_strings_is_empty(text):
    assert longest_prefix(text) == ""


@pytest.mark.parametrize("size", [2, 3, 10])
def test_prefix_of_repeated_letter(size):
    assert longest_prefix("a" * size) == "a" * (size - 1)


def test_prefix_without_border_is_empty():
    assert longest_prefix("abcdef") == ""


@pytest.mark.parametrize("seed", range(10))
def test_prefix_is_proper_border(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 30)))
    border = longest_prefix(text)
    assert len(border) < len(text)
    assert text.startswith(border)
    assert text.endswith(border)


@pytest.mark.parametrize("unit, times", [("abc", 2), ("xy", 5), ("level", 3)])
def test_prefix_of_repetition_spans_all_but_one_unit(unit, times):
    result = longest_prefix(unit * times)
    assert len(result) >= len(unit) * (times - 1)
    assert result.startswith(unit * (times - 1))