"""Render values as the text shown in the echo area.

Strings are wrapped in quotes but their contents are not re-escaped, so a
string holding a `"` does not read back as the same string.
"""

from __future__ import annotations

import math

from emlisp.types.value import (
    Symbol, Number, String, LispList, Bool, NilType, Function, Primitive, Value,
)


def format_number(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x.is_integer() and abs(x) < 1e21:
        return str(int(x))
    text = repr(x)
    mantissa, sep, exponent = text.partition("e")
    if sep:
        # 1.5e-07 -> 1.5e-7
        sign, digits = exponent[0], exponent[1:].lstrip("0")
        text = f"{mantissa}e{sign}{digits}"
    return text


def print_lisp(value: Value) -> str:
    match value:
        case NilType():
            return "nil"
        case Bool(value=b):
            return "t" if b else "nil"
        case Number(value=x):
            return format_number(x)
        case String(value=s):
            return f'"{s}"'
        case Symbol():
            return value.name
        case LispList(items=items):
            return "(" + " ".join(print_lisp(v) for v in items) + ")"
        case Function():
            return "<function>"
        case Primitive():
            return "<subr>"
    return "?"
