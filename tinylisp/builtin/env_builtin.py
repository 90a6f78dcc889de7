"""Built-in procedures for the tinylisp global environment.

This module defines arithmetic, comparison, list processing, string building
and output procedures, plus the registration routine that installs them and
the constants true, false and null.

Every builtin takes the list of already-evaluated argument Cells and returns
a Cell. Numeric builtins compute in Float as soon as one argument is a Float,
and in (64-bit wrapping) Int otherwise.
"""
from __future__ import annotations

import math
import operator
from functools import partial
from typing import Callable

from tinylisp.errors import ArityError, DivisionByZero, IndexOutOfRange
from tinylisp.output import Writer
from tinylisp.printer import to_string
from tinylisp.types.cell import (
    FALSE,
    NULL,
    TRUE,
    Cell,
    CellType,
    bool_cell,
    float_cell,
    int_cell,
    list_cell,
    proc_cell,
    string_cell,
    wrap_int64,
)
from tinylisp.types.environment import Environment
from tinylisp.builtin.format_builtin import MAX_FORMAT_ARGS, format_cells


# -------------------------------
# Numeric helpers
# -------------------------------
def _numbers(args: list[Cell], op: str) -> tuple[list[int | float], bool]:
    """Payloads of numeric arguments, and whether Float arithmetic applies."""
    values = [a.as_number(f"argument to {op}") for a in args]
    return values, any(a.type is CellType.FLOAT for a in args)


def _number_cell(value: int | float, is_float: bool) -> Cell:
    return float_cell(value) if is_float else int_cell(value)


def _int_div(n: int, d: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(n) // abs(d)
    return q if (n >= 0) == (d >= 0) else -q


def _float_div(n: float, d: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN instead of raising."""
    if d == 0.0:
        if n == 0.0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)
    return n / d


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Cell]) -> Cell:
    """Sum of all arguments; (+) is 0."""
    values, is_float = _numbers(args, "+")
    return _number_cell(sum(values, 0.0 if is_float else 0), is_float)


def sub(args: list[Cell]) -> Cell:
    """Subtract all subsequent numbers from the first."""
    if not args:
        raise ArityError("- requires at least 1 argument")
    values, is_float = _numbers(args, "-")
    result = float(values[0]) if is_float else values[0]
    for x in values[1:]:
        result -= x
    return _number_cell(result, is_float)


def mul(args: list[Cell]) -> Cell:
    """Product of all arguments; (*) is 1."""
    values, is_float = _numbers(args, "*")
    result = 1.0 if is_float else 1
    for x in values:
        result *= x
    return _number_cell(result, is_float)


def div(args: list[Cell]) -> Cell:
    """Divide the first argument by each of the rest, left to right."""
    if not args:
        raise ArityError("/ requires at least 1 argument")
    values, is_float = _numbers(args, "/")
    if is_float:
        result = float(values[0])
        for x in values[1:]:
            result = _float_div(result, float(x))
        return float_cell(result)
    result = values[0]
    for x in values[1:]:
        if x == 0:
            raise DivisionByZero("Division by zero")
        result = wrap_int64(_int_div(result, x))
    return int_cell(result)


def mod(args: list[Cell]) -> Cell:
    """(% n d): remainder with the sign of n. Exactly 2 arguments."""
    if len(args) != 2:
        raise ArityError("% requires exactly 2 arguments")
    (n, d), is_float = _numbers(args, "%")
    if is_float:
        try:
            return float_cell(math.fmod(n, d))
        except ValueError:
            # fmod(x, 0) and fmod(inf, y)
            return float_cell(math.nan)
    if d == 0:
        raise DivisionByZero("Modulo by zero")
    return int_cell(n - d * _int_div(n, d))


# -------------------------------
# Comparison
# -------------------------------
def _comparison(op: str, pred: Callable[[int | float, int | float], bool]) -> Callable[[list[Cell]], Cell]:
    def compare(args: list[Cell]) -> Cell:
        # Every later argument is compared with the first, not with its neighbour
        if len(args) < 2:
            raise ArityError(f"{op} requires at least 2 arguments")
        (first, *rest), _ = _numbers(args, op)
        return bool_cell(all(pred(first, x) for x in rest))

    compare.__name__ = f"compare_{pred.__name__}"
    compare.__doc__ = f"({op} a b c ...) is (a {op} b) and (a {op} c) and ..."
    return compare


lt = _comparison("<", operator.lt)
gt = _comparison(">", operator.gt)
lte = _comparison("<=", operator.le)
gte = _comparison(">=", operator.ge)


def equals(args: list[Cell]) -> Cell:
    """True if every argument is structurally equal to the first."""
    if not args:
        raise ArityError("= requires at least 1 argument")
    first = args[0]
    return bool_cell(all(first == other for other in args[1:]))


# -------------------------------
# Lists
# -------------------------------
def list_builtin(args: list[Cell]) -> Cell:
    return list_cell(args)


def append(args: list[Cell]) -> Cell:
    """(append xs a b ...): a new list with a, b, ... after the items of xs.

    Null as the first argument counts as the empty list.
    """
    if not args:
        raise ArityError("append requires at least 1 argument")
    head, *rest = args
    items = [] if head.is_null else list(head.as_list("first argument to append"))
    items.extend(rest)
    return list_cell(items)


def get(args: list[Cell]) -> Cell:
    """(get xs i): element i of list xs, counting from 0."""
    if len(args) != 2:
        raise ArityError("get requires exactly 2 arguments")
    items = args[0].as_list("first argument to get")
    index = args[1].as_int("second argument to get")
    if not 0 <= index < len(items):
        raise IndexOutOfRange(f"index {index} out of range for list of length {len(items)}")
    return items[index]


def length(args: list[Cell]) -> Cell:
    if len(args) != 1:
        raise ArityError("length requires exactly 1 argument")
    return int_cell(len(args[0].as_list("argument to length")))


def return_builtin(args: list[Cell]) -> Cell:
    """Identity on the first argument."""
    if not args:
        raise ArityError("return requires an argument")
    return args[0]


# -------------------------------
# Strings and output
# -------------------------------
def strcat(args: list[Cell]) -> Cell:
    """Concatenation of the rendered arguments."""
    return string_cell("".join(to_string(a) for a in args))


def print_builtin(output: Writer, args: list[Cell]) -> Cell:
    for a in args:
        output.write(to_string(a))
    return NULL


def println_builtin(output: Writer, args: list[Cell]) -> Cell:
    """Write each rendered argument on its own line."""
    for a in args:
        output.write(to_string(a) + "\n")
    return NULL


def format_builtin(output: Writer, args: list[Cell]) -> Cell:
    """(format fmt args...): printf-style substitution, written out and returned."""
    if not args:
        raise ArityError("format requires a format string")
    if len(args) > MAX_FORMAT_ARGS:
        raise ArityError(f"format takes at most {MAX_FORMAT_ARGS} arguments, got {len(args)}")
    text = format_cells(args[0].as_str("format string"), args[1:])
    output.write(text)
    return string_cell(text)


BUILTINS: dict[str, Callable[[list[Cell]], Cell]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "%": mod,
    "<": lt,
    ">": gt,
    "<=": lte,
    ">=": gte,
    "=": equals,
    "list": list_builtin,
    "append": append,
    "get": get,
    "length": length,
    "return": return_builtin,
    "strcat": strcat,
}

OUTPUT_BUILTINS: dict[str, Callable[[Writer, list[Cell]], Cell]] = {
    "print": print_builtin,
    "println": println_builtin,
    "format": format_builtin,
}


def register(env: Environment, output: Writer) -> None:
    """Register all builtin procedures and constants into the given environment."""
    env.update({name: proc_cell(fn, name) for name, fn in BUILTINS.items()})
    env.update(
        {name: proc_cell(partial(fn, output), name) for name, fn in OUTPUT_BUILTINS.items()}
    )
    env.define("true", TRUE)
    env.define("false", FALSE)
    env.define("null", NULL)
