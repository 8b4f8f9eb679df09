"""
Port: ExpressionPrinter
Odpowiedzialność: tekstowa reprezentacja drzewa wyrażenia logicznego.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import LogicalExpression, Variables


@runtime_checkable
class ExpressionPrinter(Protocol):
    def render(
        self,
        expression: LogicalExpression,
        variables: Optional[Variables] = None,
    ) -> str:
        """
        Renders the tree in parenthesized notation, one pair of parentheses
        per operation node. Bound variables are replaced with "0"/"1".
        """
        ...
