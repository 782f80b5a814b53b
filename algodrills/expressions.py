"""Bracket matching and infix-to-postfix conversion."""

from __future__ import annotations

_OPENERS = "({["
_PAIRS = {")": "(", "}": "{", "]": "["}


def is_balanced(expr: str) -> bool:
    """Return True if ``expr`` is a well-nested sequence of brackets.

    Every character that is not an opening bracket is treated as a closing
    one, so any other character makes the expression unbalanced.
    """
    stack: list[str] = []
    for char in expr:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _PAIRS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def precedence(op: str) -> int:
    """Return the binding strength of an operator; 0 for anything unknown."""
    if op in ("+", "-"):
        return 1
    if op in ("*", "/"):
        return 2
    return 0


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Raises ValueError when a closing parenthesis has no matching opening one.
    """
    stack: list[str] = []
    output: list[str] = []
    for char in infix:
        if char.isascii() and char.isalnum():
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unmatched ')' in expression")
            stack.pop()
        else:
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)