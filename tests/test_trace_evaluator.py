from __future__ import annotations

import logging

from adapters.evaluator.trace_evaluator import TraceEvaluator, describe_step
from contracts import BinaryOperation, Bit, CalcProcess, OperandRef, UnaryOperation, Variable
from ports.evaluator import Evaluator


def _scenario_tree():
    return BinaryOperation(
        operator="OR",
        left=Variable(name="X"),
        right=UnaryOperation(operator="NOT", operand=Variable(name="Y")),
    )


def test_trace_evaluator_implements_port():
    assert isinstance(TraceEvaluator(), Evaluator)


def test_eval_expr_returns_value_trace_and_steps():
    result = TraceEvaluator().eval_expr(_scenario_tree(), {"X": Bit.One, "Y": Bit.Zero})

    assert result.ok
    assert result.value == Bit.One
    assert result.errors == []
    assert [p.operator for p in result.calc_processes] == ["NOT", "OR"]
    assert result.steps == ["NOT 0 = 1", "1 OR 1 = 1"]


def test_eval_expr_calls_are_isolated():
    evaluator = TraceEvaluator()
    tree = _scenario_tree()

    first = evaluator.eval_expr(tree, {"X": Bit.One})
    second = evaluator.eval_expr(tree, {"X": Bit.Zero, "Y": Bit.One})

    assert first.value is None
    assert first.errors == ["Variable Y not found"]
    assert second.value == Bit.Zero
    assert second.errors == []
    assert [p.index for p in second.calc_processes] == [0, 1]


def test_describe_step_for_binary_and_unary_records():
    unary = CalcProcess(
        operator="NOT",
        right=OperandRef(value=Bit.One, ref_index="A"),
        result=Bit.Zero,
        index=0,
    )
    binary = CalcProcess(
        operator="XOR",
        left=OperandRef(value=Bit.One, ref_index="B"),
        right=OperandRef(value=Bit.Zero, ref_index=0),
        result=Bit.One,
        index=1,
    )

    assert describe_step(unary) == "NOT 1 = 0"
    assert describe_step(binary) == "1 XOR 0 = 1"


def test_verbose_mode_prints_trace(capsys):
    TraceEvaluator(verbose=True).eval_expr(_scenario_tree(), {"X": Bit.One, "Y": Bit.Zero})

    out = capsys.readouterr().out
    assert "EXPR » (X OR (NOT Y))" in out
    assert "[0] NOT 0 = 1  <- Y" in out
    assert "[1] 1 OR 1 = 1  <- X, #0" in out
    assert "RESULT » 1" in out


def test_verbose_mode_prints_errors(capsys):
    TraceEvaluator(verbose=True).eval_expr(_scenario_tree(), {})

    out = capsys.readouterr().out
    assert "(brak kroków)" in out
    assert "! Variable X not found" in out
    assert "RESULT » —" in out


def test_verbose_mode_honours_zero_as_unbound(capsys):
    evaluator = TraceEvaluator(verbose=True, zero_as_unbound=True)

    evaluator.eval_expr(_scenario_tree(), {"X": Bit.One, "Y": Bit.Zero})

    assert "     » (1 OR (NOT Y))" in capsys.readouterr().out


def test_incomplete_evaluation_logs_recorded_operation_count(caplog):
    tree = BinaryOperation(
        operator="AND",
        left=UnaryOperation(operator="NOT", operand=Variable(name="X")),
        right=Variable(name="Z"),
    )

    with caplog.at_level(logging.INFO, logger="logic_trace.evaluator"):
        TraceEvaluator().eval_expr(tree, {"X": Bit.One})

    assert "1 of 2 operation(s) recorded" in caplog.text
