"""String puzzles: anagrams, palindromes, character counting and permutations."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator


def _without_spaces(text: str) -> str:
    return text.replace(" ", "")


def are_anagrams(first: str, second: str) -> bool:
    """Return True if the strings, ignoring spaces, hold the same characters.

    Case is significant.
    """
    first = _without_spaces(first)
    second = _without_spaces(second)
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def are_anagrams_counting(first: str, second: str) -> bool:
    """Return True if both strings have exactly the same character counts."""
    if len(first) != len(second):
        return False
    return Counter(first) == Counter(second)


def are_anagrams_ignoring_case(first: str, second: str) -> bool:
    """Return True if the strings are anagrams, ignoring case and spaces."""
    return Counter(_without_spaces(first.lower())) == Counter(
        _without_spaces(second.lower())
    )


def can_form(source: str, target: str) -> bool:
    """Return True if ``target`` can be built from the characters of ``source``.

    Each character of ``source`` may be used at most once.
    """
    available = Counter(source)
    for char in target:
        if available[char] == 0:
            return False
        available[char] -= 1
    return True


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == text[::-1]


def first_non_repeating_char(text: str) -> str | None:
    """Return the first character occurring exactly once, or None."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), None)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap-and-backtrack order.

    An empty string yields nothing.
    """
    chars = list(text)
    if not chars:
        return
    yield from _permute(chars, 0)


def _permute(chars: list[str], left: int) -> Iterator[str]:
    if left == len(chars) - 1:
        yield "".join(chars)
        return
    for i in range(left, len(chars)):
        chars[left], chars[i] = chars[i], chars[left]
        yield from _permute(chars, left + 1)
        chars[left], chars[i] = chars[i], chars[left]