from typing import Optional
from ..core.node import Node, ConstantNode, BinaryOpNode, UnaryOpNode, VariableNode
from ..core.operators import BINARY_OP_MAP, UNARY_OP_MAP


class ExpressionValidator:
  """Checks whether a tree lies inside the differentiable grammar.

  Mirrors the rule table of the differentiation engine without building a
  derivative, so callers can vet input up front instead of catching errors.
  """

  @staticmethod
  def is_supported(node: Node, variable: VariableNode) -> bool:
    return ExpressionValidator.find_unsupported(node, variable) is None

  @staticmethod
  def find_unsupported(node, variable: VariableNode) -> Optional[object]:
    """Return the first node the engine would reject, or None.

    Walks pre-order with an explicit stack so the result matches the node the
    recursive engine reaches first.
    """
    stack = [node]
    while stack:
      current = stack.pop()
      offending = ExpressionValidator._check_node(current, variable)
      if offending is not None:
        return offending
      stack.extend(reversed(ExpressionValidator._differentiated_children(current)))
    return None

  @staticmethod
  def _check_node(node, variable: VariableNode) -> Optional[object]:
    if isinstance(node, ConstantNode):
      return None

    elif isinstance(node, VariableNode):
      return None if node == variable else node

    elif isinstance(node, BinaryOpNode):
      return None if node.op_type in BINARY_OP_MAP.values() else node

    elif isinstance(node, UnaryOpNode):
      if node.op_type not in UNARY_OP_MAP.values():
        return node
      operand = node.operand
      if operand == variable or isinstance(operand, BinaryOpNode):
        return None
      return node

    return node

  @staticmethod
  def _differentiated_children(node):
    """Children the engine recurses into."""
    if isinstance(node, BinaryOpNode):
      return (node.left, node.right)

    elif isinstance(node, UnaryOpNode):
      # sin/cos only recurse into a binary argument; the variable is a leaf
      if isinstance(node.operand, BinaryOpNode):
        return (node.operand,)

    return ()
