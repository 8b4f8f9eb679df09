from __future__ import annotations

from adapters.evaluator.trace_evaluator import TraceEvaluator
from adapters.expression_printer.infix_printer import InfixPrinter
from config import Settings
from contracts import Bit, Variable
from logic_trace import create_evaluator, create_printer


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.legacy_ref_index is False
    assert settings.zero_as_unbound is False
    assert settings.verbose is False


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("LOGIC_TRACE_LEGACY_REF_INDEX", "true")
    monkeypatch.setenv("LOGIC_TRACE_LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)

    assert settings.legacy_ref_index is True
    assert settings.log_level == "debug"


def test_create_evaluator_applies_settings():
    evaluator = create_evaluator(Settings(_env_file=None, legacy_ref_index=True))

    assert isinstance(evaluator, TraceEvaluator)
    assert evaluator.legacy_ref_index is True
    assert evaluator.verbose is False


def test_create_printer_applies_settings():
    printer = create_printer(Settings(_env_file=None, zero_as_unbound=True))

    assert isinstance(printer, InfixPrinter)
    assert printer.render(Variable(name="X"), {"X": Bit.Zero}) == "X"


def test_create_evaluator_passes_zero_as_unbound():
    evaluator = create_evaluator(Settings(_env_file=None, zero_as_unbound=True))

    assert evaluator.zero_as_unbound is True
