"""
Adapter: Calculator
Rekurencyjny (post-order) kalkulator wyrażeń logicznych z dziennikiem kroków.

Stan sesji (calc_processes, calc_processes_index, errors) należy do instancji
i NIE jest czyszczony między wywołaniami calculate() — dla izolacji trzeba
utworzyć nowy Calculator (robi to TraceEvaluator).

ref_index operandu:
  domyślnie     — indeks rekordu, który wyprodukował wartość, albo nazwa zmiennej-liścia
  legacy=True   — zgodność ze starym formatem: lewy = licznik-2, prawy = licznik-1,
                  przy wartości ujemnej nazwa LEWEGO potomka (także dla prawego operandu)

Przykład:
  X=1, Y=0, X OR (NOT Y)
  => [0] NOT 0 = 1
  => [1] 1 OR 1 = 1
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from contracts import (
    BinaryLogicalOperator,
    BinaryOperation,
    Bit,
    CalcProcess,
    LogicalExpression,
    OperandRef,
    UnaryLogicalOperator,
    UnaryOperation,
    Variable,
    Variables,
)

logger = logging.getLogger("logic_trace.calculator")

Ref = Union[int, str, None]


def calculate_and(left: Bit, right: Bit) -> Bit:
    if left is Bit.One and right is Bit.One:
        return Bit.One
    return Bit.Zero


def calculate_or(left: Bit, right: Bit) -> Bit:
    if left is Bit.One or right is Bit.One:
        return Bit.One
    return Bit.Zero


def calculate_xor(left: Bit, right: Bit) -> Bit:
    if left is right:
        return Bit.Zero
    return Bit.One


def calculate_not(operand: Bit) -> Bit:
    if operand is Bit.Zero:
        return Bit.One
    return Bit.Zero


_BINARY_FUNCS = {
    BinaryLogicalOperator.AND: calculate_and,
    BinaryLogicalOperator.OR: calculate_or,
    BinaryLogicalOperator.XOR: calculate_xor,
}

_UNARY_FUNCS = {
    UnaryLogicalOperator.NOT: calculate_not,
}


class Calculator:
    """Kalkulator jednej sesji: jedno przypisanie zmiennych, ślad narastający."""

    def __init__(self, variables: Variables, *, legacy_ref_index: bool = False) -> None:
        self.variables = variables
        self.legacy_ref_index = legacy_ref_index
        self.calc_processes: list[CalcProcess] = []
        self.calc_processes_index = 0
        self.errors: list[str] = []

    def calculate(self, expression: LogicalExpression) -> Optional[Bit]:
        """Zwraca Bit albo None, jeśli w poddrzewie brakuje zmiennej."""
        value, _ = self._calculate(expression)
        return value

    # -- Prywatne ----------------------------------------------------------

    def _calculate(self, expression: LogicalExpression) -> tuple[Optional[Bit], Ref]:
        """Zwraca (wartość, referencja do źródła wartości)."""
        if isinstance(expression, BinaryOperation):
            return self._calculate_binary_operation(expression)
        if isinstance(expression, UnaryOperation):
            return self._calculate_unary_operation(expression)
        if isinstance(expression, Variable):
            return self._calculate_variable(expression), expression.name
        raise TypeError(f"Nieznany typ węzła wyrażenia: {type(expression)}")

    def _calculate_binary_operation(self, expression: BinaryOperation) -> tuple[Optional[Bit], Ref]:
        # obie strony liczone zawsze, lewa przed prawą (bez short-circuit)
        left, left_ref = self._calculate(expression.left)
        right, right_ref = self._calculate(expression.right)

        if left is None or right is None:
            return None, None

        fn = _BINARY_FUNCS.get(expression.operator)
        if fn is None:
            raise ValueError(f"Nieznany operator: {expression.operator!r}")
        result = fn(left, right)

        if self.legacy_ref_index:
            fallback = getattr(expression.left, "name", None)
            left_ref = self._legacy_ref(self.calc_processes_index - 2, fallback)
            right_ref = self._legacy_ref(self.calc_processes_index - 1, fallback)

        process = self._append(
            operator=expression.operator.value,
            left=OperandRef(value=left, ref_index=left_ref),
            right=OperandRef(value=right, ref_index=right_ref),
            result=result,
        )
        return result, process.index

    def _calculate_unary_operation(self, expression: UnaryOperation) -> tuple[Optional[Bit], Ref]:
        operand, operand_ref = self._calculate(expression.operand)
        if operand is None:
            return None, None

        fn = _UNARY_FUNCS.get(expression.operator)
        if fn is None:
            raise ValueError(f"Nieznany operator: {expression.operator!r}")
        result = fn(operand)

        if self.legacy_ref_index:
            operand_ref = self._legacy_ref(
                self.calc_processes_index - 1,
                getattr(expression.operand, "name", None),
            )

        process = self._append(
            operator=expression.operator.value,
            left=None,
            right=OperandRef(value=operand, ref_index=operand_ref),
            result=result,
        )
        return result, process.index

    def _calculate_variable(self, expression: Variable) -> Optional[Bit]:
        value = self.variables.get(expression.name)
        if value is None:
            self.errors.append(f"Variable {expression.name} not found")
            logger.warning("Variable %r not found in assignment", expression.name)
            return None
        return Bit(value)

    def _append(
        self,
        operator: str,
        left: Optional[OperandRef],
        right: OperandRef,
        result: Bit,
    ) -> CalcProcess:
        process = CalcProcess(
            operator=operator,
            left=left,
            right=right,
            result=result,
            index=self.calc_processes_index,
        )
        self.calc_processes_index += 1
        self.calc_processes.append(process)
        logger.debug("calc[%d] %s -> %d", process.index, operator, int(result))
        return process

    @staticmethod
    def _legacy_ref(index: int, fallback: Optional[str]) -> Ref:
        return index if index >= 0 else fallback
