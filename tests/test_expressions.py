import pytest

from algodrills.expressions import infix_to_postfix, is_balanced, precedence


def test_is_balanced_source_examples():
    assert is_balanced("{[()]}") is True
    assert is_balanced("{[(])}") is False


def test_is_balanced_empty():
    assert is_balanced("") is True


def test_is_balanced_unclosed_and_unopened():
    assert is_balanced("((") is False
    assert is_balanced("())") is False


def test_is_balanced_rejects_other_characters():
    assert is_balanced("(a)") is False


@pytest.mark.parametrize(
    "op, expected", [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 0), ("(", 0)]
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_infix_to_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_infix_to_postfix_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_infix_to_postfix_left_associative():
    assert infix_to_postfix("a-b-c") == "ab-c-"


def test_infix_to_postfix_preserves_operand_order():
    infix = "x*y+z/w-v"
    result = infix_to_postfix(infix)
    assert [c for c in result if c.isalnum()] == [c for c in infix if c.isalnum()]
    assert sorted(result) == sorted(infix)


def test_infix_to_postfix_drops_parentheses():
    result = infix_to_postfix("(a+(b*c))")
    assert "(" not in result and ")" not in result
    assert len(result) == 5


def test_infix_to_postfix_single_operand():
    assert infix_to_postfix("a") == "a"


def test_infix_to_postfix_unmatched_closing():
    with pytest.raises(ValueError):
        infix_to_postfix("a)")