"""printf-style formatting for the `format` builtin.

Conversions take their arguments left to right:

    %s          canonical rendering of any cell
    %d %i %x %X Int
    %f %e %g    Int or Float

Flags (-+ #0), width and precision are passed through to Python's %-operator.
`%%` is a literal percent sign; any other '%' is copied unchanged.
"""

from __future__ import annotations

import re

from tinylisp.errors import ArityError
from tinylisp.printer import to_string
from tinylisp.types.cell import Cell

# Format string plus at most 18 values
MAX_FORMAT_ARGS = 19

FORMAT_RE = re.compile(
    r"%%"
    r"|%(?P<flags>[-+ #0]*)(?P<width>[0-9]+)?(?:\.(?P<precision>[0-9]+))?"
    r"(?P<conv>[sdixXfeEgG])"
)


def format_cells(fmt: str, args: list[Cell]) -> str:
    remaining = iter(args)

    def substitute(m: re.Match) -> str:
        spec = m.group(0)
        if spec == "%%":
            return "%"
        try:
            arg = next(remaining)
        except StopIteration:
            raise ArityError(f"format: no argument left for {spec!r}") from None
        conv = m.group("conv")
        if conv == "s":
            return spec % to_string(arg)
        if conv in "dixX":
            return spec % arg.as_int(f"format {spec} argument")
        return spec % arg.as_number(f"format {spec} argument")

    return FORMAT_RE.sub(substitute, fmt)
