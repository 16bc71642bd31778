"""
Tree Utility Functions

Traversal and query helpers for expression trees. Everything here walks the
tree with an explicit stack or queue, so it works on trees deeper than the
interpreter's recursion limit and can be used to vet input before recursive
processing.
"""

from collections import deque
from typing import List, Dict, Set, cast

from ..core.node import Node, BinaryOpNode, UnaryOpNode, ConstantNode, VariableNode


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Pre-order, left subtree before right"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    max_depth = 0
    stack = [(node, 1)]

    while stack:
        current_node, depth = stack.pop()
        if depth > max_depth:
            max_depth = depth
        for child in current_node.children():
            stack.append((child, depth + 1))

    return max_depth


def calculate_subtree_sizes(node: Node) -> Dict[Node, int]:
    """
    Calculate the size (node count) of each subtree.

    Structurally equal subtrees share one entry.
    """
    return {n: n.size() for n in reversed(_depth_first_traversal(node))}


def find_nodes_by_type(node: Node, node_type: type) -> List[Node]:
    """
    Find all nodes of a specific type in the tree.

    Args:
        node: Root node of the tree
        node_type: Type of nodes to find (e.g., ConstantNode, VariableNode)

    Returns:
        List of nodes matching the specified type
    """
    all_nodes = get_all_nodes(node)
    return [n for n in all_nodes if isinstance(n, node_type)]


def find_nodes_by_operator(node: Node, operator: str) -> List[Node]:
    """
    Find all operator nodes with a specific operator symbol ('+', 'sin', ...).
    """
    all_nodes = get_all_nodes(node)
    matching_nodes = []

    for n in all_nodes:
        if isinstance(n, (BinaryOpNode, UnaryOpNode)) and n.operator == operator:
            matching_nodes.append(n)

    return matching_nodes


def get_constants(node: Node) -> List[ConstantNode]:
    """Get all constant nodes in the tree."""
    return cast(List[ConstantNode], find_nodes_by_type(node, ConstantNode))


def get_variables(node: Node) -> List[VariableNode]:
    """Get all variable nodes in the tree."""
    return cast(List[VariableNode], find_nodes_by_type(node, VariableNode))


def get_variable_names(node: Node) -> Set[str]:
    return {var.name for var in get_variables(node)}


def contains_variable(node: Node, variable: VariableNode) -> bool:
    """True when `variable` occurs anywhere in the tree."""
    return any(n == variable for n in get_variables(node))
