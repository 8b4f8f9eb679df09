"""
Adapter: InfixPrinter
Implementuje port ExpressionPrinter.

  (X AND Y)          — operacja binarna
  (NOT X)            — operacja unarna
  (1 AND Y)          — z przypisaniem {X: 1}; brak Y → nazwa

Zmienna bez klucza lub z wartością None → nazwa; Zero renderuje się jako "0".
zero_as_unbound=True odtwarza stare zachowanie (Zero traktowane jak brak).
"""
from __future__ import annotations

from typing import Optional

from contracts import (
    BinaryOperation,
    LogicalExpression,
    UnaryOperation,
    Variable,
    Variables,
)


def expression_to_string(
    expression: LogicalExpression,
    variables: Optional[Variables] = None,
    *,
    zero_as_unbound: bool = False,
) -> str:
    if isinstance(expression, BinaryOperation):
        left = expression_to_string(expression.left, variables, zero_as_unbound=zero_as_unbound)
        right = expression_to_string(expression.right, variables, zero_as_unbound=zero_as_unbound)
        return f"({left} {expression.operator.value} {right})"
    if isinstance(expression, UnaryOperation):
        operand = expression_to_string(expression.operand, variables, zero_as_unbound=zero_as_unbound)
        return f"({expression.operator.value} {operand})"
    if isinstance(expression, Variable):
        value = variables.get(expression.name) if variables is not None else None
        if value is None:
            return expression.name
        if zero_as_unbound and not value:
            return expression.name
        return str(int(value))
    raise TypeError(f"Nieznany typ węzła wyrażenia: {type(expression)}")


class InfixPrinter:
    def __init__(self, zero_as_unbound: bool = False) -> None:
        self.zero_as_unbound = zero_as_unbound

    def render(
        self,
        expression: LogicalExpression,
        variables: Optional[Variables] = None,
    ) -> str:
        return expression_to_string(expression, variables, zero_as_unbound=self.zero_as_unbound)
