"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    ZERO, ONE, MINUS_ONE, add, sub, mul, div, sin, cos
)
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP, OP_SYMBOLS
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'ZERO', 'ONE', 'MINUS_ONE', 'add', 'sub', 'mul', 'div', 'sin', 'cos',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP', 'OP_SYMBOLS'
]
