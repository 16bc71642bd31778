"""Rule-based symbolic differentiation of expression trees.

Each node shape maps to the shape of its derivative. The general sum,
product, quotient and chain rules are always correct; the constant/variable
tiers for products and quotients only keep trivial derivatives compact.
"""

from typing import Optional

from .config import DifferentiationConfig, DEFAULT_CONFIG, QuotientRuleMode
from .expression_tree.core.node import (
  Node, ConstantNode, VariableNode, BinaryOpNode, UnaryOpNode,
  ZERO, ONE, MINUS_ONE, add, sub, mul, div, sin, cos
)
from .expression_tree.core.operators import OpType
from .expression_tree.expression import Expression
from .expression_tree.utils.tree_utils import calculate_tree_depth
from .logging_system import get_logger, LogLevel


class DifferentiationError(Exception):
  pass


class UnsupportedConstructError(DifferentiationError):
  """The tree contains a shape the rule table does not cover."""

  def __init__(self, node, reason: Optional[str] = None):
    self.node = node
    self.reason = reason
    shape = node.to_string() if isinstance(node, Node) else f"{type(node).__name__} object {node!r}"
    message = f"The operation {shape} is not supported"
    if reason:
      message += f": {reason}"
    super().__init__(message)


class ExpressionTooDeepError(DifferentiationError):

  def __init__(self, depth: int, max_depth: int):
    self.depth = depth
    self.max_depth = max_depth
    super().__init__(f"Expression depth {depth} exceeds max_depth={max_depth}")


def differentiate(function_body: Node, variable: VariableNode,
                  config: Optional[DifferentiationConfig] = None) -> Node:
  """
  Derivative of `function_body` with respect to `variable`.

  Builds a new tree; the input is never modified. Raises
  UnsupportedConstructError if any subtree is outside the rule table, in
  which case no partial result is produced.
  """
  config = config or DEFAULT_CONFIG

  if not isinstance(variable, VariableNode):
    raise TypeError(f"variable must be a VariableNode, got {type(variable).__name__}")
  if not isinstance(function_body, Node):
    raise UnsupportedConstructError(function_body, "not an expression node")

  if config.max_depth is not None:
    depth = calculate_tree_depth(function_body)
    if depth > config.max_depth:
      raise ExpressionTooDeepError(depth, config.max_depth)

  # config.log_level gates this call only
  logger = get_logger()
  if logger.is_enabled(LogLevel.VERBOSE, config.log_level):
    logger.debug(f"d/d{variable.name} {function_body.to_string()}", config.log_level)

  result = _Differentiator(variable, config.quotient_rule_mode, config.log_level).derive(function_body)

  logger.derivative_summary({
    'variable': variable.name,
    'input_size': function_body.size(),
    'output_size': result.size(),
  }, config.log_level)
  return result


def differentiate_expression(expression: Expression,
                             config: Optional[DifferentiationConfig] = None) -> Expression:
  """Differentiate a whole function, keeping its parameter."""
  derivative = differentiate(expression.root, expression.variable, config)
  return Expression(derivative, expression.variable)


class _Differentiator:
  """One differentiation call: the variable and mode, nothing mutable."""

  __slots__ = ('variable', 'quotient_rule_mode', 'log_level')

  def __init__(self, variable: VariableNode, quotient_rule_mode: QuotientRuleMode,
               log_level: Optional[LogLevel] = None):
    self.variable = variable
    self.quotient_rule_mode = quotient_rule_mode
    self.log_level = log_level

  def is_variable(self, node: Node) -> bool:
    return isinstance(node, VariableNode) and node == self.variable

  def derive(self, node: Node) -> Node:
    if isinstance(node, ConstantNode):
      return ZERO
    elif isinstance(node, VariableNode):
      if self.is_variable(node):
        return ONE
      raise UnsupportedConstructError(node, f"only d/d{self.variable.name} is supported")
    elif isinstance(node, BinaryOpNode):
      return self._derive_binary(node)
    elif isinstance(node, UnaryOpNode):
      return self._derive_unary(node)
    get_logger().debug(f"rejecting {type(node).__name__}", self.log_level)
    raise UnsupportedConstructError(node)

  def _derive_binary(self, node: BinaryOpNode) -> Node:
    left, right = node.left, node.right

    if node.op_type == OpType.ADD:
      return add(self.derive(left), self.derive(right))

    elif node.op_type == OpType.SUB:
      return sub(self.derive(left), self.derive(right))

    elif node.op_type == OpType.MUL:
      if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
        return ZERO
      if isinstance(left, ConstantNode) and self.is_variable(right):
        return left
      if self.is_variable(left) and isinstance(right, ConstantNode):
        return right
      # (f*g)' = f'*g + f*g'
      return add(mul(self.derive(left), right), mul(left, self.derive(right)))

    elif node.op_type == OpType.DIV:
      if isinstance(left, ConstantNode) and isinstance(right, ConstantNode):
        return ZERO
      if (isinstance(left, ConstantNode) and self.is_variable(right)
          and self.quotient_rule_mode == QuotientRuleMode.REFERENCE):
        # c / (x*x), sign not flipped
        return div(left, mul(right, right))
      if self.is_variable(left) and isinstance(right, ConstantNode):
        return div(ONE, right)
      # (f/g)' = (f'*g - f*g') / (g*g)
      return div(sub(mul(self.derive(left), right), mul(left, self.derive(right))),
                 mul(right, right))

    raise UnsupportedConstructError(node, f"unknown binary operator {node.op_type!r}")

  def _derive_unary(self, node: UnaryOpNode) -> Node:
    argument = node.operand

    if node.op_type == OpType.SIN:
      if self.is_variable(argument):
        return cos(argument)
      if isinstance(argument, BinaryOpNode):
        return mul(self.derive(argument), cos(argument))
      raise UnsupportedConstructError(node, "sin argument must be the variable or a binary operation")

    elif node.op_type == OpType.COS:
      if self.is_variable(argument):
        return mul(MINUS_ONE, sin(argument))
      if isinstance(argument, BinaryOpNode):
        return mul(self.derive(argument), mul(MINUS_ONE, sin(argument)))
      raise UnsupportedConstructError(node, "cos argument must be the variable or a binary operation")

    raise UnsupportedConstructError(node, f"unknown function {node.op_type!r}")
