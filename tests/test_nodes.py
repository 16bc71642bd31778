import numpy as np
import pytest
import sympy as sp

from symbolic_differentiation import (
    ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode,
    NodeType, OpType, ZERO, ONE, MINUS_ONE, add, sub, mul, div, sin, cos
)
from symbolic_differentiation.expression_tree import BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS


def test_constant_coerces_to_float():
    node = ConstantNode(3)
    assert isinstance(node.value, float)
    assert node.value == 3.0
    assert node.node_type == NodeType.CONSTANT


def test_operator_symbols_resolve_to_op_types(x):
    assert BinaryOpNode('+', x, ONE).op_type == OpType.ADD
    assert BinaryOpNode('-', x, ONE).op_type == OpType.SUB
    assert BinaryOpNode('*', x, ONE).op_type == OpType.MUL
    assert BinaryOpNode('/', x, ONE).op_type == OpType.DIV
    assert UnaryOpNode('sin', x).op_type == OpType.SIN
    assert UnaryOpNode('cos', x).op_type == OpType.COS
    assert BinaryOpNode(OpType.MUL, x, ONE) == mul(x, ONE)


def test_op_maps_round_trip_through_symbols():
    for symbol, op_type in {**BINARY_OP_MAP, **UNARY_OP_MAP}.items():
        assert OP_SYMBOLS[op_type] == symbol


@pytest.mark.parametrize("operator", ['^', 'pow', OpType.SIN, None])
def test_unknown_binary_operator_is_rejected(x, operator):
    with pytest.raises(ValueError):
        BinaryOpNode(operator, x, x)


@pytest.mark.parametrize("operator", ['tan', 'exp', OpType.ADD])
def test_unknown_unary_function_is_rejected(x, operator):
    with pytest.raises(ValueError):
        UnaryOpNode(operator, x)


def test_children_must_be_nodes(x):
    with pytest.raises(TypeError):
        add(x, 1.0)
    with pytest.raises(TypeError):
        sin("x")


def test_variable_name_must_be_non_empty():
    with pytest.raises(ValueError):
        VariableNode('')


def test_nodes_are_immutable(x):
    node = mul(ConstantNode(2), x)
    with pytest.raises(AttributeError):
        node.left = ONE
    with pytest.raises(AttributeError):
        ZERO.value = 5.0
    with pytest.raises(AttributeError):
        x.name = 'y'
    with pytest.raises(AttributeError):
        del node.right
    assert node.left == ConstantNode(2)


def test_structural_equality_and_hash(x):
    first = add(sin(mul(ConstantNode(2), x)), cos(x))
    second = add(sin(mul(ConstantNode(2), VariableNode('x'))), cos(VariableNode('x')))
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1

    assert sub(x, ONE) != add(x, ONE)
    assert sin(x) != cos(x)
    assert VariableNode('x') != VariableNode('y')
    assert ConstantNode(1) != VariableNode('x')
    assert ConstantNode(1) != 1.0


def test_size_counts_nodes(x):
    assert x.size() == 1
    assert add(x, ONE).size() == 3
    assert sin(mul(ConstantNode(2), x)).size() == 4


def test_to_string(x):
    assert mul(ConstantNode(2), x).to_string() == "(2 * x)"
    assert cos(div(x, ConstantNode(0.5))).to_string() == "cos((x / 0.5))"
    assert MINUS_ONE.to_string() == "-1"


def test_to_sympy(x):
    sym = sp.Symbol('x', real=True)
    tree = sub(div(sin(x), x), mul(ConstantNode(3), cos(x)))
    assert sp.simplify(tree.to_sympy() - (sp.sin(sym) / sym - 3 * sp.cos(sym))) == 0
    assert ConstantNode(0.25).to_sympy() == sp.Float(0.25)
    assert ConstantNode(4).to_sympy() == sp.Integer(4)


def test_evaluate_matches_numpy(x):
    X = np.linspace(0.5, 3.0, 7)
    tree = add(mul(ConstantNode(2), sin(x)), div(cos(x), x))
    expected = 2 * np.sin(X) + np.cos(X) / X
    assert np.allclose(tree.evaluate(X), expected)


def test_division_by_zero_is_not_clipped(x):
    result = div(ONE, x).evaluate(np.array([0.0]))
    assert np.isinf(result[0])


def test_evaluation_kernels_stay_internal():
    import symbolic_differentiation.expression_tree as expression_tree
    from symbolic_differentiation.expression_tree import core

    for name in ("evaluate_variable", "evaluate_constant", "evaluate_binary_op", "evaluate_unary_op"):
        assert name not in expression_tree.__all__
        assert name not in core.__all__
        assert not hasattr(expression_tree, name)
