import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Tuple
from .operators import (
  NodeType, OpType, OP_SYMBOLS, resolve_binary_op, resolve_unary_op,
  evaluate_variable, evaluate_constant, evaluate_binary_op, evaluate_unary_op
)


class Node(ABC):
  """Immutable expression tree node with lazily cached hash and size.

  Nodes are never edited after construction; every transformation builds new
  nodes, so subtrees can be shared freely between trees and threads.
  """

  __slots__ = ('_hash_cache', '_size_cache')

  node_type: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot set '{name}'")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} is immutable; cannot delete '{name}'")

  @abstractmethod
  def evaluate(self, X: np.ndarray) -> np.ndarray:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      size = 1
      for child in self.children():
        size += child.size()
      object.__setattr__(self, '_size_cache', size)
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', self._compute_hash())
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _same_fields(self, other: 'Node') -> bool:
    pass

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if type(self) is not type(other):
      return NotImplemented if not isinstance(other, Node) else False
    if hash(self) != hash(other):
      return False
    return self._same_fields(other)

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"

  def __str__(self) -> str:
    return self.to_string()


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, 'value', float(value))

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_constant(X.shape[0], self.value)

  def to_string(self) -> str:
    return f"{self.value:g}"

  def to_sympy(self) -> sp.Expr:
    if self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.CONSTANT, self.value))

  def _same_fields(self, other: 'ConstantNode') -> bool:
    return self.value == other.value


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str = 'x'):
    super().__init__()
    if not isinstance(name, str) or not name:
      raise ValueError(f"Variable name must be a non-empty string, got {name!r}")
    object.__setattr__(self, 'name', name)

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    return evaluate_variable(X)

  def to_string(self) -> str:
    return self.name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name, real=True)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def _same_fields(self, other: 'VariableNode') -> bool:
    return self.name == other.name


def _check_child(child, role: str) -> Node:
  if not isinstance(child, Node):
    raise TypeError(f"{role} must be a Node, got {type(child).__name__}")
  return child


class BinaryOpNode(Node):
  __slots__ = ('op_type', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator, left: Node, right: Node):
    super().__init__()
    object.__setattr__(self, 'op_type', resolve_binary_op(operator))
    object.__setattr__(self, 'left', _check_child(left, 'left operand'))
    object.__setattr__(self, 'right', _check_child(right, 'right operand'))

  @property
  def operator(self) -> str:
    return OP_SYMBOLS[self.op_type]

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    left_val = self.left.evaluate(X)
    right_val = self.right.evaluate(X)
    return evaluate_binary_op(left_val, right_val, self.operator)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.op_type == OpType.ADD:
      return sp.Add(left, right)
    elif self.op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif self.op_type == OpType.MUL:
      return sp.Mul(left, right)
    else:
      return sp.Mul(left, sp.Pow(right, -1))

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))

  def _same_fields(self, other: 'BinaryOpNode') -> bool:
    return self.op_type == other.op_type and self.left == other.left and self.right == other.right


class UnaryOpNode(Node):
  __slots__ = ('op_type', 'operand')

  node_type = NodeType.UNARY_OP

  def __init__(self, operator, operand: Node):
    super().__init__()
    object.__setattr__(self, 'op_type', resolve_unary_op(operator))
    object.__setattr__(self, 'operand', _check_child(operand, 'argument'))

  @property
  def operator(self) -> str:
    return OP_SYMBOLS[self.op_type]

  def evaluate(self, X: np.ndarray) -> np.ndarray:
    operand_val = self.operand.evaluate(X)
    return evaluate_unary_op(operand_val, self.operator)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    operand_sympy = self.operand.to_sympy()
    if self.op_type == OpType.SIN:
      return sp.sin(operand_sympy)
    return sp.cos(operand_sympy)

  def children(self) -> Tuple[Node, ...]:
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.UNARY_OP, self.op_type, hash(self.operand)))

  def _same_fields(self, other: 'UnaryOpNode') -> bool:
    return self.op_type == other.op_type and self.operand == other.operand


# Shared leaves; immutability makes them safe to reuse across trees.
ZERO = ConstantNode(0.0)
ONE = ConstantNode(1.0)
MINUS_ONE = ConstantNode(-1.0)


# Builders used by the rule table and by callers assembling trees by hand.
def add(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.ADD, left, right)

def sub(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.SUB, left, right)

def mul(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.MUL, left, right)

def div(left: Node, right: Node) -> BinaryOpNode:
  return BinaryOpNode(OpType.DIV, left, right)

def sin(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.SIN, operand)

def cos(operand: Node) -> UnaryOpNode:
  return UnaryOpNode(OpType.COS, operand)
