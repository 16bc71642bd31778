import numpy as np
from typing import Optional, Callable, Union
from .core.node import Node, VariableNode
from .utils.tree_utils import calculate_tree_depth
import sympy as sp


class Expression:
  """A single-parameter function: a tree body plus the variable it ranges over"""

  __slots__ = ('root', 'variable', '_string_cache')

  def __init__(self, root: Node, variable: Optional[VariableNode] = None):
    if not isinstance(root, Node):
      raise TypeError(f"root must be a Node, got {type(root).__name__}")
    if variable is None:
      variable = VariableNode()
    elif not isinstance(variable, VariableNode):
      raise TypeError(f"variable must be a VariableNode, got {type(variable).__name__}")
    self.root = root
    self.variable = variable
    self._string_cache: Optional[str] = None

  def evaluate(self, values: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Evaluate at one point (returns a float) or at an array of points"""
    X = np.asarray(values, dtype=np.float64)
    if X.ndim == 0:
      return float(self.root.evaluate(X.reshape(1))[0])
    return self.root.evaluate(X.ravel()).reshape(X.shape)

  def to_callable(self) -> Callable:
    return self.evaluate

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = f"{self.variable.name} -> {self.root.to_string()}"
    return self._string_cache

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def vector_lambdify(self) -> Callable:
    """numpy function of the parameter generated by sympy"""
    return sp.lambdify(self.variable.to_sympy(), self.to_sympy(), modules='numpy')

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def derivative(self, config=None) -> 'Expression':
    # Import here to avoid circular imports
    from ..differentiation import differentiate_expression
    return differentiate_expression(self, config)

  def __hash__(self) -> int:
    return hash((self.root, self.variable))

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.variable == other.variable and self.root == other.root

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"
