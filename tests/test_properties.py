"""Whole-pipeline properties: round trips, simplification equivalence and nesting limits."""

import numpy as np
import pytest

from function_drawer import parse_expression, DrawerConfig
from function_drawer.config import DEFAULT_MAX_DEPTH
from function_drawer.errors import DivisionByZeroError, ExpressionDepthError
from function_drawer.expression_tree import BinaryOpNode, ConstantNode, VariableNode
from function_drawer.parsing import to_postfix, build_tree

# No poles on the sample grid, so simplification identities like 0*a hold numerically
FORMULAS = [
    "X",
    "X+0",
    "0+X*1",
    "X^1+0*sin(X)",
    "(2+3)*X-0",
    "0-X",
    "X/(2*1)",
    "abs(X)^(1+1)",
    "abs(X)^0.5",
    "tan(X/4)+cos(0*X)",
    "X + 4 ^ 2 * 2 / (5 - 1)",
    "(X-1)^2*(1^X)",
    "sin(X)^0+X",
    "abs(sin(X))",
    "((((X+1))))*2",
    "cos(X)*cos(X)+sin(X)*sin(X)",
    "0-sin(X)*2",
    "2^3^2/(X*X+1)",
    "X-3",
    "12.5*X-0.25/(1+abs(X))",
]


def assert_same_values(a, b):
    np.testing.assert_allclose(a, b, rtol=1e-12, atol=1e-12, equal_nan=True)


@pytest.mark.parametrize("formula", FORMULAS)
def test_printed_form_rebuilds_to_same_function(formula, sample_xs):
    expr = parse_expression(formula)
    rebuilt = parse_expression(expr.to_string())
    assert rebuilt.to_string() == expr.to_string()
    assert_same_values(rebuilt.evaluate(sample_xs), expr.evaluate(sample_xs))


@pytest.mark.parametrize("formula", FORMULAS)
def test_simplify_preserves_values(formula, sample_xs):
    expr = parse_expression(formula)
    assert_same_values(expr.simplify().evaluate(sample_xs), expr.evaluate(sample_xs))


@pytest.mark.parametrize("formula", FORMULAS)
def test_simplify_is_idempotent_in_value(formula, sample_xs):
    once = parse_expression(formula).simplify()
    twice = once.simplify()
    assert_same_values(twice.evaluate(sample_xs), once.evaluate(sample_xs))
    assert twice.size() <= once.size()


@pytest.mark.parametrize("formula", FORMULAS)
def test_scalar_and_vector_evaluation_agree(formula, sample_xs):
    expr = parse_expression(formula, simplify=True)
    vector = expr.evaluate(sample_xs)
    scalars = [expr.evaluate(float(x)) for x in sample_xs]
    assert_same_values(vector, scalars)


def test_scenario_a_add_zero():
    expr = parse_expression("X+0", simplify=True)
    assert isinstance(expr.root, VariableNode)
    assert expr.evaluate(5) == 5


def test_scenario_b_constant_sum():
    root = build_tree(to_postfix("2+3"))
    assert isinstance(root, BinaryOpNode) and root.operator == "+"
    assert (root.left.value, root.right.value) == (2.0, 3.0)
    folded = root.simplify()
    assert isinstance(folded, ConstantNode)
    assert folded.value == 5.0


def test_scenario_c_power_of_one():
    expr = parse_expression("X^1", simplify=True)
    assert isinstance(expr.root, VariableNode)
    assert expr.evaluate(7) == 7


def test_scenario_d_literal_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        parse_expression("5/0", simplify=True)


def test_scenario_e_sine():
    assert parse_expression("sin(X)").evaluate(0) == 0


def test_evaluation_does_not_change_the_tree(sample_xs):
    expr = parse_expression("sin(X)*X+1")
    before = expr.to_string()
    first = expr.evaluate(sample_xs)
    second = expr.evaluate(sample_xs)
    assert expr.root.to_string() == before
    assert_same_values(first, second)


def test_deeply_nested_parentheses_add_no_depth():
    formula = "(" * 60 + "X" + ")" * 60
    expr = parse_expression(formula, simplify=True)
    assert expr.depth() == 1
    assert expr.evaluate(2.0) == 2.0


def test_fifty_nested_sums():
    formula = "(1+" * 50 + "X" + ")" * 50
    expr = parse_expression(formula)
    assert expr.depth() == 51
    simplified = expr.simplify()
    assert simplified.to_string() == expr.to_string()
    assert simplified.evaluate(0.0) == 50.0


def test_nested_function_calls_up_to_the_limit():
    levels = DEFAULT_MAX_DEPTH - 1
    formula = "sin(" * levels + "X" + ")" * levels
    expr = parse_expression(formula, simplify=True)
    assert expr.depth() == DEFAULT_MAX_DEPTH
    assert expr.evaluate(0.0) == 0.0
    assert expr.to_string().count("sin") == levels


def test_nesting_beyond_the_limit_is_rejected():
    levels = DEFAULT_MAX_DEPTH
    formula = "abs(" * levels + "X" + ")" * levels
    with pytest.raises(ExpressionDepthError):
        parse_expression(formula)


def test_depth_limit_is_configurable():
    config = DrawerConfig(max_depth=5)
    assert parse_expression("sin(sin(sin(sin(X))))", config=config).depth() == 5
    with pytest.raises(ExpressionDepthError):
        parse_expression("sin(sin(sin(sin(sin(X)))))", config=config)
