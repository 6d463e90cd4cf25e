"""Tests for term splitting, term classification and tree building."""

import pytest

from tally.errors import ExpressionError
from tally.models import Add, Literal, Sign, Subtract, Term, Variable
from tally.parser import parse
from tally.tokenizer import classify, split_terms


# --- split_terms ---

def test_split_keeps_signs_and_positions():
    assert split_terms("10-2+x") == [
        Term(Sign.PLUS, "10", 0),
        Term(Sign.MINUS, "2", 3),
        Term(Sign.PLUS, "x", 5),
    ]


def test_split_single_term():
    assert split_terms("abc") == [Term(Sign.PLUS, "abc", 0)]


def test_split_does_not_validate_terms():
    """Invalid operands are classify()'s job, not split_terms()'s."""
    assert [t.text for t in split_terms("1*2-a b")] == ["1*2", "a b"]


def test_split_empty():
    with pytest.raises(ExpressionError, match="empty expression"):
        split_terms("")


@pytest.mark.parametrize("expression, position", [
    ("+1", 0),
    ("-1", 0),
    ("1+", 2),
    ("1+-2", 2),
    ("12--3", 3),
])
def test_split_missing_operand(expression, position):
    with pytest.raises(ExpressionError) as exc_info:
        split_terms(expression)
    assert exc_info.value.reason == "missing operand"
    assert exc_info.value.position == position
    assert exc_info.value.expression == expression


# --- classify ---

def test_classify_literal():
    assert classify(Term(Sign.PLUS, "0042", 0)) == Literal(42)


def test_classify_variable():
    assert classify(Term(Sign.MINUS, "Q", 3)) == Variable("Q")


def test_classify_multi_letter():
    with pytest.raises(ExpressionError, match="longer than one letter"):
        classify(Term(Sign.PLUS, "xy", 4), "1+2+xy")


@pytest.mark.parametrize("text", ["1a", "a1", "1.0", " ", "x_", "*"])
def test_classify_invalid(text):
    with pytest.raises(ExpressionError, match="invalid term"):
        classify(Term(Sign.PLUS, text, 0))


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        classify(Term(Sign.PLUS, "??", 0))


# --- parse ---

def test_parse_single_leaf():
    assert parse("7") == Literal(7)
    assert parse("k") == Variable("k")


def test_parse_folds_left():
    assert parse("a-b+c") == Add(Subtract(Variable("a"), Variable("b")), Variable("c"))


def test_parse_mixed_terms():
    assert parse("10-2-x") == Subtract(Subtract(Literal(10), Literal(2)), Variable("x"))


def test_parse_reports_offending_term():
    with pytest.raises(ExpressionError) as exc_info:
        parse("1+2+xy")
    assert exc_info.value.position == 4
    assert "'xy'" in str(exc_info.value)


def test_classify_literal_too_large():
    with pytest.raises(ExpressionError, match="literal too large") as exc_info:
        classify(Term(Sign.PLUS, "7" * 5000, 2), "1+" + "7" * 5000)
    assert exc_info.value.position == 2
