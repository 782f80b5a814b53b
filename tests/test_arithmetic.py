import math

import pytest

from algodrills.arithmetic import (
    digital_root,
    factorial,
    factorial_recursive,
    fibonacci,
    fibonacci_sequence,
    is_strong_number,
    parity,
    power,
    strong_numbers,
)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_recursive_agrees(n):
    assert factorial_recursive(n) == factorial(n)


def test_factorial_of_negative_is_one():
    assert factorial(-4) == 1


def test_factorial_recursive_rejects_negative():
    with pytest.raises(ValueError):
        factorial_recursive(-1)


def test_fibonacci_sequence_source_example():
    assert fibonacci_sequence(10) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_fibonacci_sequence_minimum_two_terms():
    assert fibonacci_sequence(0) == [0, 1]
    assert fibonacci_sequence(2) == [0, 1]


@pytest.mark.parametrize("n", range(0, 20))
def test_fibonacci_matches_sequence(n):
    assert fibonacci(n) == fibonacci_sequence(max(n + 1, 2))[n]


def test_fibonacci_recurrence():
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_returned_unchanged():
    assert fibonacci(-3) == -3


def test_digital_root_source_example():
    assert digital_root(9876) == 3


@pytest.mark.parametrize("num", [1, 19, 999, 123456789, 10**12 + 7])
def test_digital_root_properties(num):
    root = digital_root(num)
    assert 1 <= root <= 9
    assert root % 9 == num % 9


def test_digital_root_single_digit_unchanged():
    assert digital_root(7) == 7


def test_power_source_example():
    assert power(2, 5) == 32


@pytest.mark.parametrize("base, exponent", [(3, 4), (-2, 7), (10, 0), (0, 3)])
def test_power_recurrence(base, exponent):
    assert power(base, exponent + 1) == base * power(base, exponent)


def test_power_zero_exponent():
    assert power(0, 0) == 1


def test_power_rejects_negative_exponent():
    with pytest.raises(ValueError):
        power(2, -1)


def test_parity_source_examples():
    assert parity(5) == "Odd"
    assert parity(6) == "Even"


def test_parity_alternates():
    for n in range(-10, 10):
        assert parity(n) != parity(n + 1)


def test_strong_numbers_source_example():
    assert strong_numbers(1, 500) == [1, 2, 145]


def test_is_strong_number():
    assert is_strong_number(145) is True
    assert is_strong_number(146) is False
    assert is_strong_number(-1) is False


def test_strong_numbers_empty_range():
    assert strong_numbers(10, 5) == []