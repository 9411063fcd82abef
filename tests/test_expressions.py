import math

import pytest

from puzzlekit.expressions import diff_ways_to_compute


def test_worked_example():
    assert sorted(diff_ways_to_compute("2-1-1")) == [0, 2]


def test_second_worked_example():
    assert sorted(diff_ways_to_compute("2*3-4*5")) == [-34, -14, -10, -10, 10]


@pytest.mark.parametrize("number", ["0", "7", "42", "123456"])
def test_plain_number(number):
    assert diff_ways_to_compute(number) == [int(number)]


@pytest.mark.parametrize("operators", [1, 2, 3, 4, 5])
def test_result_count_is_catalan(operators):
    expression = "+".join(["1"] * (operators + 1))
    results = diff_ways_to_compute(expression)
    assert len(results) == math.comb(2 * operators, operators) // (operators + 1)
    assert set(results) == {operators + 1}


def test_products_of_ones_are_all_one():
    results = diff_ways_to_compute("1*1*1*1")
    assert results and all(value == 1 for value in results)


def test_unknown_operator_yields_zero():
    assert diff_ways_to_compute("2/3") == [0]


@pytest.mark.parametrize("expression", ["", "1+", "*2", "3--4"])
def test_missing_operand_raises(expression):
    with pytest.raises(ValueError):
        diff_ways_to_compute(expression)