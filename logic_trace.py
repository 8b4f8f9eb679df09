"""
logic_trace.py — punkt składania adapterów.

Tworzy Evaluator i ExpressionPrinter na podstawie Settings
(zmienne środowiskowe LOGIC_TRACE_* lub plik .env) i konfiguruje logging.

Użycie:
    from logic_trace import create_evaluator
    from contracts import BinaryOperation, Bit, UnaryOperation, Variable

    expr = BinaryOperation(
        operator="OR",
        left=Variable(name="X"),
        right=UnaryOperation(operator="NOT", operand=Variable(name="Y")),
    )
    result = create_evaluator().eval_expr(expr, {"X": Bit.One, "Y": Bit.Zero})
    result.steps   # ['NOT 0 = 1', '1 OR 1 = 1']
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.evaluator.trace_evaluator import TraceEvaluator
from adapters.expression_printer.infix_printer import InfixPrinter
from config import Settings

logger = logging.getLogger("logic_trace")


def create_evaluator(settings: Optional[Settings] = None) -> TraceEvaluator:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
    if settings.legacy_ref_index:
        logger.info("Legacy ref_index mode enabled.")
    return TraceEvaluator(
        legacy_ref_index=settings.legacy_ref_index,
        verbose=settings.verbose,
        zero_as_unbound=settings.zero_as_unbound,
    )


def create_printer(settings: Optional[Settings] = None) -> InfixPrinter:
    settings = settings or Settings()
    return InfixPrinter(zero_as_unbound=settings.zero_as_unbound)
