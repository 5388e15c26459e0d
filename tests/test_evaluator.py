"""
Test suite for the dacomp evaluator.

Tests cover:
- Precedence, associativity and parentheses
- 32-bit wraparound and truncating division
- Evaluation faults and the diagnostics gate
"""

import unittest
import sys
import os
import random

import pytest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from dacomp import parse, evaluate
from dacomp.lexer.tokens import SyntaxKind, SyntaxToken, INT32_MIN, INT32_MAX
from dacomp.parser.parser import MAX_NESTING_DEPTH
from dacomp.evaluator.evaluator import Evaluator, wrap_int32, divide_int32
from dacomp.evaluator.errors import (
    EvaluationError, DivisionByZeroError, InternalEvaluationError,
)


ARITHMETIC_CASES = [
    ("7", 7),
    ("2 + 3 * 4", 14),
    ("(2 + 3) * 4", 20),
    ("10 - 3 - 2", 5),
    ("100 / 10 / 5", 2),
    ("2 * 3 + 4 * 5", 26),
    ("((((1))))", 1),
    ("(1 + 2) * (3 + 4)", 21),
    ("1 - (2 - 3)", 2),
    ("7 / 2", 3),
    ("1 - 8 / 3", -1),
    ("0 - 7 / 2", -3),
    ("(0 - 7) / 2", -3),
    ("7 / (0 - 2)", -3),
    ("(0 - 7) / (0 - 2)", 3),
    ("2147483647 + 1", -2147483648),
    ("0 - 2147483647 - 2", 2147483647),
    ("65536 * 65536", 0),
    ("(0 - 2147483647 - 1) / (0 - 1)", -2147483648),
]


@pytest.mark.parametrize("text, expected", ARITHMETIC_CASES)
def test_evaluate(text, expected):
    tree = parse(text)
    assert tree.diagnostics == [], f"Unexpected diagnostics for {text!r}: {tree.diagnostics}"
    assert evaluate(tree) == expected


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (2 ** 31 - 1, 2 ** 31 - 1),
    (2 ** 31, -(2 ** 31)),
    (-(2 ** 31) - 1, 2 ** 31 - 1),
    (2 ** 32 + 5, 5),
])
def test_wrap_int32(value, expected):
    assert wrap_int32(value) == expected


def _generate_expression(rng: random.Random, depth: int) -> str:
    """Random well-formed expression text, nested at most ``depth`` levels."""
    choice = rng.random()
    if depth <= 0 or choice < 0.3:
        return str(rng.randint(0, INT32_MAX))
    if choice < 0.5:
        return "(" + _generate_expression(rng, depth - 1) + ")"
    space = rng.choice(["", " ", "  ", "\t"])
    operator = rng.choice("+-*/")
    return (_generate_expression(rng, depth - 1) + space + operator + space
            + _generate_expression(rng, depth - 1))


@pytest.mark.parametrize("seed", range(25))
def test_generated_expressions(seed):
    """Generated well-formed text parses cleanly and evaluates to an int32."""
    text = _generate_expression(random.Random(seed), 6)
    tree = parse(text)
    assert tree.diagnostics == [], f"Unexpected diagnostics for {text!r}: {tree.diagnostics}"
    try:
        value = evaluate(tree)
    except DivisionByZeroError:
        return
    assert isinstance(value, int)
    assert INT32_MIN <= value <= INT32_MAX
    assert evaluate(parse(text)) == value


class TestEvaluator(unittest.TestCase):
    """Test cases for the evaluator."""

    def test_deterministic(self):
        """Evaluating the same text twice gives the same answer."""
        text = "(17 * 3 - 4) / 5 + 2"
        self.assertEqual(evaluate(parse(text)), evaluate(parse(text)))

    def test_tree_not_modified(self):
        tree = parse("1 + 2 * 3")
        evaluator = Evaluator(tree.root)
        self.assertEqual(evaluator.evaluate(), 7)
        self.assertEqual(evaluator.evaluate(), 7)
        self.assertEqual(tree, parse("1 + 2 * 3"))

    def test_division_by_zero(self):
        tree = parse("1 / (2 - 2)")
        with self.assertRaises(DivisionByZeroError) as context:
            evaluate(tree)
        self.assertEqual(str(context.exception), "Division by zero")
        self.assertEqual(context.exception.position, 2)
        self.assertIsInstance(context.exception, EvaluationError)

    def test_diagnostics_block_evaluation(self):
        """A tree with any diagnostic is never evaluated."""
        for text in ["2 + @", "(1 + 2", "99999999999", ""]:
            tree = parse(text)
            with self.assertRaises(EvaluationError):
                evaluate(tree)

    def test_evaluator_runs_without_gate(self):
        """Evaluator itself will walk a recovered tree; overflow reads as 0."""
        tree = parse("99999999999 + 5")
        self.assertTrue(tree.has_errors())
        self.assertEqual(Evaluator(tree.root).evaluate(), 5)

    def test_unknown_node(self):
        token = SyntaxToken(SyntaxKind.NUMBER_TOKEN, 0, "1", 1)
        with self.assertRaises(InternalEvaluationError):
            Evaluator(token).evaluate()

    def test_internal_error_is_not_an_evaluation_error(self):
        self.assertFalse(issubclass(InternalEvaluationError, EvaluationError))

    def test_divide_truncates_toward_zero(self):
        self.assertEqual(divide_int32(-7, 2), -3)
        self.assertEqual(divide_int32(7, -2), -3)
        self.assertEqual(divide_int32(-7, -2), 3)
        self.assertEqual(divide_int32(6, 3), 2)

    def test_placeholder_number_is_internal_error(self):
        """A recovered tree's empty number token has no value to read."""
        tree = parse("1 +")
        with self.assertRaises(InternalEvaluationError):
            Evaluator(tree.root).evaluate()

    def test_long_chain(self):
        self.assertEqual(evaluate(parse("+".join(["1"] * 2000))), 2000)
        self.assertEqual(evaluate(parse("*".join(["2"] * 40))), 0)
        self.assertEqual(evaluate(parse("-".join(["1"] * 1001))), -999)

    def test_nesting_at_limit(self):
        text = "(" * MAX_NESTING_DEPTH + "6 / 2" + ")" * MAX_NESTING_DEPTH
        self.assertEqual(evaluate(parse(text)), 3)

    def test_nesting_past_limit_not_evaluated(self):
        with self.assertRaises(EvaluationError):
            evaluate(parse("(" * 300 + "1" + ")" * 300))


if __name__ == '__main__':
    unittest.main()
