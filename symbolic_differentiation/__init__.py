# Python

"""Symbolic Differentiation Package

Rule-based derivatives of single-variable expression trees built from
+, -, *, /, sin, cos, constants and one variable.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode,
  BinaryOpNode, UnaryOpNode, NodeType, OpType,
  ZERO, ONE, MINUS_ONE, add, sub, mul, div, sin, cos,
  SymPyConverter, ExpressionValidator
)
from .differentiation import (
  differentiate, differentiate_expression,
  DifferentiationError, UnsupportedConstructError, ExpressionTooDeepError
)
from .config import DifferentiationConfig, QuotientRuleMode, DEFAULT_CONFIG
from .logging_system import (
  LogLevel, DifferentiationLogger, get_logger, set_log_level, configure_logging
)

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode",
  "BinaryOpNode", "UnaryOpNode", "NodeType", "OpType",
  "ZERO", "ONE", "MINUS_ONE", "add", "sub", "mul", "div", "sin", "cos",
  "SymPyConverter", "ExpressionValidator",
  "differentiate", "differentiate_expression",
  "DifferentiationError", "UnsupportedConstructError", "ExpressionTooDeepError",
  "DifferentiationConfig", "QuotientRuleMode", "DEFAULT_CONFIG",
  "LogLevel", "DifferentiationLogger", "get_logger", "set_log_level", "configure_logging"
]
