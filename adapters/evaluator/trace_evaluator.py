"""
Adapter: TraceEvaluator
Implementuje port Evaluator — każde eval_expr() dostaje świeży Calculator,
więc ślad i błędy nie przenoszą się między wywołaniami.
"""
from __future__ import annotations

import logging

from adapters.evaluator._printer import print_trace
from adapters.evaluator.trace_calculator import Calculator
from contracts import CalcProcess, EvalResult, LogicalExpression, Variables, count_operations

logger = logging.getLogger("logic_trace.evaluator")


class TraceEvaluator:
    """Ewaluator wyrażeń logicznych zwracający wynik wraz ze śladem."""

    def __init__(
        self,
        legacy_ref_index: bool = False,
        verbose: bool = False,
        zero_as_unbound: bool = False,
    ) -> None:
        self.legacy_ref_index = legacy_ref_index
        self.verbose = verbose
        self.zero_as_unbound = zero_as_unbound

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(
        self,
        expression: LogicalExpression,
        variables: Variables,
    ) -> EvalResult:
        calculator = Calculator(variables, legacy_ref_index=self.legacy_ref_index)
        value = calculator.calculate(expression)

        result = EvalResult(
            value=value,
            calc_processes=list(calculator.calc_processes),
            errors=list(calculator.errors),
            steps=[describe_step(p) for p in calculator.calc_processes],
        )
        if result.errors:
            logger.info(
                "Evaluation incomplete: %d unresolved variable(s), %d of %d operation(s) recorded.",
                len(result.errors),
                len(result.calc_processes),
                count_operations(expression),
            )
        if self.verbose:
            print_trace(expression, result, variables, zero_as_unbound=self.zero_as_unbound)
        return result


def describe_step(process: CalcProcess) -> str:
    """'1 OR 1 = 1' / 'NOT 0 = 1'."""
    right = int(process.right.value)
    if process.left is None:
        return f"{process.operator} {right} = {int(process.result)}"
    return f"{int(process.left.value)} {process.operator} {right} = {int(process.result)}"
