import pytest

from symbolic_differentiation import (
    ConstantNode, VariableNode, ONE, add, sub, mul, div, sin, cos,
    ExpressionValidator, differentiate, UnsupportedConstructError
)
from symbolic_differentiation.expression_tree.utils import (
    get_all_nodes, calculate_tree_depth, calculate_subtree_sizes,
    find_nodes_by_type, find_nodes_by_operator, get_constants,
    get_variables, get_variable_names, contains_variable
)


@pytest.fixture
def tree(x):
    # (2 * x) + sin(x / 3)
    return add(mul(ConstantNode(2), x), sin(div(x, ConstantNode(3))))


def test_breadth_first_order(tree, x):
    nodes = get_all_nodes(tree)
    assert [n.to_string() for n in nodes[:3]] == [tree.to_string(), "(2 * x)", "sin((x / 3))"]
    assert len(nodes) == tree.size() == 8


def test_depth_first_order(tree):
    nodes = get_all_nodes(tree, traversal_order='depth_first')
    assert [n.to_string() for n in nodes] == [
        tree.to_string(), "(2 * x)", "2", "x", "sin((x / 3))", "(x / 3)", "x", "3"
    ]


def test_invalid_traversal_order(tree):
    with pytest.raises(ValueError):
        get_all_nodes(tree, traversal_order='sideways')


def test_tree_depth(tree, x):
    assert calculate_tree_depth(x) == 1
    assert calculate_tree_depth(tree) == 4


def test_tree_depth_beyond_recursion_limit(x):
    node = x
    for _ in range(5000):
        node = sin(node)
    assert calculate_tree_depth(node) == 5001


def test_subtree_sizes(tree, x):
    sizes = calculate_subtree_sizes(tree)
    assert sizes[tree] == 8
    assert sizes[x] == 1
    assert sizes[mul(ConstantNode(2), x)] == 3


def test_node_queries(tree, x):
    assert len(find_nodes_by_type(tree, ConstantNode)) == 2
    assert [c.value for c in get_constants(tree)] == [2.0, 3.0]
    assert len(get_variables(tree)) == 2
    assert get_variable_names(tree) == {'x'}
    assert find_nodes_by_operator(tree, 'sin') == [sin(div(x, ConstantNode(3)))]
    assert find_nodes_by_operator(tree, '-') == []
    assert contains_variable(tree, x)
    assert not contains_variable(tree, VariableNode('y'))


SUPPORTED = [
    lambda x: ConstantNode(4),
    lambda x: x,
    lambda x: sub(mul(x, x), div(ConstantNode(1), x)),
    lambda x: sin(add(x, ONE)),
    lambda x: cos(x),
    lambda x: mul(ConstantNode(2), cos(mul(x, sin(x)))),
]

UNSUPPORTED = [
    lambda x: sin(sin(x)),
    lambda x: cos(ConstantNode(1)),
    lambda x: add(x, VariableNode('y')),
    lambda x: mul(ConstantNode(2), VariableNode('y')),
    lambda x: div(sin(x), cos(cos(x))),
]


@pytest.mark.parametrize("build", SUPPORTED)
def test_validator_accepts_supported_trees(x, build):
    node = build(x)
    assert ExpressionValidator.is_supported(node, x)
    assert ExpressionValidator.find_unsupported(node, x) is None
    differentiate(node, x)


@pytest.mark.parametrize("build", UNSUPPORTED)
def test_validator_finds_the_node_the_engine_rejects(x, build):
    node = build(x)
    assert not ExpressionValidator.is_supported(node, x)
    with pytest.raises(UnsupportedConstructError) as excinfo:
        differentiate(node, x)
    assert ExpressionValidator.find_unsupported(node, x) == excinfo.value.node


def test_validator_rejects_non_nodes(x):
    assert ExpressionValidator.find_unsupported(1.5, x) == 1.5
