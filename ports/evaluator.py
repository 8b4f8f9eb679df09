"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń logicznych ze śladem obliczeń.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, LogicalExpression, Variables


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(
        self,
        expression: LogicalExpression,
        variables: Variables,
    ) -> EvalResult:
        """
        Evaluates a logical expression tree under a variable assignment.
        Every call is isolated: trace and errors never leak between calls.
        Returns EvalResult with:
          - value: Bit, or None if any variable was unresolved
          - calc_processes: post-order trace of binary/unary computations
          - errors: one "Variable <name> not found" per missing lookup
          - steps: human-readable rendering of calc_processes
        Does not raise for missing variables.
        """
        ...
