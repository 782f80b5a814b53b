"""Classic algorithm exercises: strings, expressions, arithmetic, arrays, linked lists, trees and containers."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "containers",
    "expressions",
    "linked_list",
    "strings",
    "trees",
]