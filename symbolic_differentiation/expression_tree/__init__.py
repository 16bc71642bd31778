"""Expression Tree Module

Immutable expression trees over one real variable.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    ZERO, ONE, MINUS_ONE,
    add, sub, mul, div, sin, cos
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    OP_SYMBOLS
)
from .utils import SymPyConverter, ExpressionValidator

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "ZERO", "ONE", "MINUS_ONE",
    "add", "sub", "mul", "div", "sin", "cos",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP", "OP_SYMBOLS",
    "SymPyConverter", "ExpressionValidator"
]
