"""Integer arithmetic drills: factorials, Fibonacci, powers and digit sums."""

from __future__ import annotations

import math


def factorial(n: int) -> int:
    """Return n! computed iteratively; values below 1 give 1."""
    result = 1
    for i in range(1, n + 1):
        result *= i
    return result


def factorial_recursive(n: int) -> int:
    """Return n! computed recursively. Raises ValueError for negative n."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return 1 if n in (0, 1) else n * factorial_recursive(n - 1)


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, always at least ``[0, 1]``."""
    sequence = [0, 1]
    a, b = 0, 1
    for _ in range(2, n):
        a, b = b, a + b
        sequence.append(b)
    return sequence


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; values of n up to 1 are returned as is."""
    if n <= 1:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def digital_root(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    while num >= 10:
        num = sum(int(digit) for digit in str(num))
    return num


def power(base: int, exponent: int) -> int:
    """Return base raised to a non-negative integer exponent."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def parity(num: int) -> str:
    """Return "Odd" or "Even" based on the lowest bit of ``num``."""
    return ("Even", "Odd")[num & 1]


def is_strong_number(num: int) -> bool:
    """Return True if ``num`` equals the sum of the factorials of its digits."""
    total = 0
    remaining = num
    while remaining > 0:
        remaining, digit = divmod(remaining, 10)
        total += math.factorial(digit)
    return total == num


def strong_numbers(start: int, end: int) -> list[int]:
    """Return the strong numbers in the inclusive range [start, end]."""
    return [n for n in range(start, end + 1) if is_strong_number(n)]