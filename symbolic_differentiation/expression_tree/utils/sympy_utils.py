import sympy as sp
from typing import Dict, Any
from ..core.node import Node, VariableNode


class SymPyConverter:
  """SymPy bridge for expression trees: conversion and reference derivatives"""

  def to_sympy(self, node: Node) -> sp.Expr:
    return node.to_sympy()

  def reference_derivative(self, node: Node, variable: VariableNode) -> sp.Expr:
    """SymPy's own derivative of the tree, used as ground truth"""
    return sp.diff(node.to_sympy(), variable.to_sympy())

  def is_equivalent(self, first, second) -> bool:
    """
    Algebraic equivalence of two trees (or sympy expressions)

    Tries the cheap structural check first, then falls back to simplify.
    """
    first_expr = first.to_sympy() if isinstance(first, Node) else sp.sympify(first)
    second_expr = second.to_sympy() if isinstance(second, Node) else sp.sympify(second)

    difference = sp.expand(first_expr - second_expr)
    if difference == 0:
      return True
    return sp.simplify(difference) == 0

  def compare_with_reference(self, node: Node, derivative: Node,
                             variable: VariableNode) -> Dict[str, Any]:
    """
    Check a computed derivative against SymPy

    Returns:
        Dict with both expressions and whether they agree
    """
    expected = self.reference_derivative(node, variable)
    actual = derivative.to_sympy()
    return {
      'expected': expected,
      'actual': actual,
      'matches': self.is_equivalent(actual, expected),
    }

  def latex_representation(self, node: Node) -> str:
    """Get LaTeX representation of the tree"""
    return sp.latex(node.to_sympy())
