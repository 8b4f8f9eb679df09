"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w logic-trace.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Bit ─────────────────────────────────────────

class Bit(IntEnum):
    Zero = 0
    One = 1


# ─────────────────────────── Operatory ───────────────────────────────────

class BinaryLogicalOperator(str, Enum):
    AND = "AND"
    OR = "OR"
    XOR = "XOR"


class UnaryLogicalOperator(str, Enum):
    NOT = "NOT"


# ─────────────────────────── Drzewo wyrażenia ────────────────────────────
# Węzły są niemutowalne: `kind` ustala które pola są ważne.

class BinaryOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["binary"] = "binary"
    operator: BinaryLogicalOperator
    left: "LogicalExpression"
    right: "LogicalExpression"


class UnaryOperation(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unary"] = "unary"
    operator: UnaryLogicalOperator = UnaryLogicalOperator.NOT
    operand: "LogicalExpression"


class Variable(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["variable"] = "variable"
    name: str


LogicalExpression = Annotated[
    Union[BinaryOperation, UnaryOperation, Variable],
    Field(discriminator="kind"),
]
BinaryOperation.model_rebuild()
UnaryOperation.model_rebuild()

Variables = dict[str, Bit]

_EXPRESSION_ADAPTER: TypeAdapter = TypeAdapter(LogicalExpression)


def parse_expression(data: Any) -> BinaryOperation | UnaryOperation | Variable:
    """
    Waliduje gotowe drzewo (np. zagnieżdżone dicty z JSON) do modeli.
    To nie jest parser tekstowych formuł — wejście ma już postać drzewa.
    Rzuca pydantic.ValidationError dla niepoprawnej struktury.
    """
    return _EXPRESSION_ADAPTER.validate_python(data)


def count_operations(expression: BinaryOperation | UnaryOperation | Variable) -> int:
    """Liczba węzłów nie-liściowych (= oczekiwana długość śladu)."""
    if isinstance(expression, BinaryOperation):
        return 1 + count_operations(expression.left) + count_operations(expression.right)
    if isinstance(expression, UnaryOperation):
        return 1 + count_operations(expression.operand)
    return 0


# ─────────────────────────── Ślad obliczeń ───────────────────────────────

class OperandRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: Bit
    # int = indeks rekordu, który wyprodukował wartość; str = nazwa zmiennej.
    # None tylko w trybie legacy, gdy lewy potomek nie jest zmienną.
    ref_index: Union[int, str, None]


class CalcProcess(BaseModel):
    model_config = ConfigDict(frozen=True)

    operator: str
    left: Optional[OperandRef] = None   # tylko dla operacji binarnych
    right: OperandRef
    result: Bit
    index: int


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: Optional[Bit]                 # None = brakująca zmienna gdzieś w drzewie
    calc_processes: list[CalcProcess] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)  # czytelne kroki

    @property
    def ok(self) -> bool:
        return self.value is not None
