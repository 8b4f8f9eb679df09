"""
_printer.py — wyświetlanie śladu obliczeń na stdout (tryb verbose).
"""
from __future__ import annotations

from typing import Optional

from adapters.expression_printer.infix_printer import expression_to_string
from contracts import EvalResult, LogicalExpression, Variables

_BAR = "─" * 64


def _ref(ref_index) -> str:
    if isinstance(ref_index, int):
        return f"#{ref_index}"
    return str(ref_index)


def print_trace(
    expression: LogicalExpression,
    result: EvalResult,
    variables: Optional[Variables] = None,
    *,
    zero_as_unbound: bool = False,
) -> None:
    """Drukuje wyrażenie, kolejne kroki i wynik."""
    print(_BAR)
    print(f"EXPR » {expression_to_string(expression)}")
    if variables is not None:
        print(f"     » {expression_to_string(expression, variables, zero_as_unbound=zero_as_unbound)}")
    if not result.calc_processes:
        print("  (brak kroków)")
    for process, step in zip(result.calc_processes, result.steps):
        refs = [_ref(process.right.ref_index)]
        if process.left is not None:
            refs.insert(0, _ref(process.left.ref_index))
        print(f"  [{process.index}] {step}  <- {', '.join(refs)}")
    for error in result.errors:
        print(f"  ! {error}")
    value = "—" if result.value is None else str(int(result.value))
    print(f"RESULT » {value}")
    print(_BAR)
