import logging

import pytest

from tinylisp.errors import (
    IndexOutOfRange,
    LexError,
    StackOverflow,
    TypeMismatch,
    UndefinedProcedure,
)
from tinylisp.interpreter import Interpreter
from tinylisp.modules.loader import MemoryLoader
from tinylisp.output import BufferWriter
from tinylisp.types.cell import (
    FALSE,
    NULL,
    TRUE,
    CellType,
    float_cell,
    int_cell,
    list_cell,
    string_cell,
    symbol_cell,
)
from tinylisp.types.environment import Environment


# -----------------------------------------------------
# Self-evaluation and lookup
# -----------------------------------------------------

@pytest.mark.parametrize(
    "cell", [int_cell(1), float_cell(3.14), string_cell("hello"), TRUE, FALSE, NULL]
)
def test_self_evaluating_literals(interp, cell):
    assert interp.evaluate(cell) is cell


def test_symbol_lookup(interp):
    interp.eval_program("(set x 42)")
    assert interp.evaluate(symbol_cell("x")) == int_cell(42)


def test_constants_are_bound(interp):
    assert interp.eval_program("true") == TRUE
    assert interp.eval_program("false") == FALSE
    assert interp.eval_program("null") == NULL


def test_local_binding_shadows_global(interp):
    interp.eval_program("(setg x 1)")
    local = Environment({"x": int_cell(2)})
    assert interp.evaluate(symbol_cell("x"), local) == int_cell(2)
    assert interp.evaluate(symbol_cell("x")) == int_cell(1)


def test_local_lookup_falls_back_to_global(interp):
    interp.eval_program("(setg g 7)")
    assert interp.evaluate(symbol_cell("g"), Environment()) == int_cell(7)


def test_unbound_symbol_is_null_without_diagnostic(interp, caplog):
    # Known surprising contract: an unset variable silently reads as Null
    with caplog.at_level(logging.WARNING):
        assert interp.eval_program("foo") == NULL
    assert interp.diagnostics == []
    assert caplog.records == []


def test_empty_list_evaluates_to_null(interp):
    assert interp.eval_program("()") == NULL


def test_empty_program_is_null(interp):
    assert interp.eval_program("") == NULL
    assert interp.eval_program("; nothing here\n") == NULL


def test_program_returns_last_form(interp):
    assert interp.eval_program("1 2.5 \"three\"") == string_cell("three")


# -----------------------------------------------------
# Undefined procedures
# -----------------------------------------------------

def test_undefined_procedure_is_a_diagnostic(interp, caplog):
    with caplog.at_level(logging.WARNING, logger="tinylisp"):
        assert interp.eval_program("(foo 1 2)") == NULL
    assert len(interp.diagnostics) == 1
    diagnostic = interp.diagnostics[0]
    assert isinstance(diagnostic, UndefinedProcedure)
    assert diagnostic.name == "foo"
    assert "symbol foo undefined" in caplog.text


def test_undefined_procedure_does_not_stop_the_program(interp):
    assert interp.eval_program("(nope) (+ 1 1)") == int_cell(2)
    assert [d.name for d in interp.diagnostics] == ["nope"]


def test_undefined_procedure_arguments_are_not_evaluated(interp, output):
    interp.eval_program('(missing (println "side effect"))')
    assert output.getvalue() == ""


def test_non_procedure_head(interp):
    assert interp.eval_program("(1 2 3)") == NULL
    assert interp.eval_program('(set s "str") (s)') == NULL
    assert [d.name for d in interp.diagnostics] == ["1", "s"]


def test_computed_head(interp):
    interp.eval_program("(defun pick () +)")
    assert interp.eval_program("((pick) 1 2)") == int_cell(3)


# -----------------------------------------------------
# Error propagation
# -----------------------------------------------------

def test_type_mismatch_is_fatal(interp):
    with pytest.raises(TypeMismatch):
        interp.eval_program("(setg before 1) (if 1 2 3) (setg after 1)")
    assert interp.eval_program("before") == int_cell(1)
    assert interp.eval_program("after") == NULL


def test_keep_going_records_errors_and_continues(interp):
    result = interp.eval_program("(get (list 1) 5) (setg x 1) x", keep_going=True)
    assert result == int_cell(1)
    assert len(interp.diagnostics) == 1
    assert isinstance(interp.diagnostics[0], IndexOutOfRange)


def test_keep_going_failed_last_form_is_null(interp):
    assert interp.eval_program("1 (/ 1 0)", keep_going=True) == NULL


def test_sessions_do_not_share_state():
    a = Interpreter(BufferWriter(), MemoryLoader())
    b = Interpreter(BufferWriter(), MemoryLoader())
    a.eval_program("(set x 1) (undefined-call)")
    assert b.eval_program("x") == NULL
    assert b.diagnostics == []
    assert a.global_env is not b.global_env


def test_read_does_not_evaluate(interp, output):
    forms = interp.read('(println "hi") (+ 1 2)')
    assert [f.type for f in forms] == [CellType.LIST, CellType.LIST]
    assert output.getvalue() == ""


def test_evaluate_already_read_form(interp):
    form = list_cell([symbol_cell("+"), int_cell(1), int_cell(2)])
    assert interp.evaluate(form) == int_cell(3)


# -----------------------------------------------------
# Recursion depth
# -----------------------------------------------------

COUNTDOWN = "(defun down (n) (if (< n 1) 0 (down (- n 1))))"


def test_depth_limit_raises_stack_overflow(output, loader):
    interp = Interpreter(output, loader, max_depth=50)
    interp.eval_program(COUNTDOWN)
    with pytest.raises(StackOverflow):
        interp.eval_program("(down 1000)")
    assert interp.depth == 0
    # the session stays usable
    assert interp.eval_program("(down 3)") == int_cell(0)


def test_python_recursion_limit_becomes_stack_overflow(interp):
    interp.eval_program(COUNTDOWN)
    with pytest.raises(StackOverflow):
        interp.eval_program("(down 100000)")
    assert interp.depth == 0
    assert interp.eval_program("(down 10)") == int_cell(0)


def test_deeply_nested_program_text_is_stack_overflow(interp):
    nested = "(" * 5000 + ")" * 5000
    (form,) = interp.read(nested)
    assert form.type is CellType.LIST
    with pytest.raises(StackOverflow):
        interp.eval_program(nested)
    assert interp.depth == 0
    assert interp.eval_program("(+ 1 2)") == int_cell(3)


def test_lex_error_stops_program_before_any_form_runs(interp, output):
    with pytest.raises(LexError):
        interp.eval_program('(print "ran") "oops')
    assert output.getvalue() == ""


def test_lex_error_is_not_deferred_by_keep_going(interp, output):
    with pytest.raises(LexError):
        interp.eval_program('(setg x 1) (print "ran") "oops', keep_going=True)
    assert output.getvalue() == ""
    assert interp.eval_program("x") == NULL
