"""Built-in functions for the emlisp runtime environment.

This module defines arithmetic, comparison, list processing and the editor
bridge exposed to Lisp code. Every primitive has the signature
fn(args, env) -> Value; editor primitives reach the editor only through
`env.host`, the Host capability interface.
"""
from __future__ import annotations

import math
from typing import Callable

from emlisp import LispValue
from emlisp.errors import LispTypeError, LispArityError
from emlisp.host import Host
from emlisp.printer import print_lisp, format_number
from emlisp.types.environment import Environment
from emlisp.types.value import (
    Symbol, Number, String, LispList, Bool, Nil, Primitive,
)

PrimitiveFn = Callable[[list[LispValue], Environment], LispValue]


def _number(name: str, value: LispValue) -> float:
    if not isinstance(value, Number):
        raise LispTypeError(f"Wrong type argument to {name}: number expected, got {print_lisp(value)}")
    return value.value


def _require(name: str, args: list[LispValue], count: int) -> None:
    if len(args) < count:
        raise LispArityError(f"{name} requires at least {count} argument(s), got {len(args)}")


def _text(value: LispValue) -> str:
    """Payload text of a value: strings unquoted, everything else printed."""
    if isinstance(value, String):
        return value.value
    if isinstance(value, Number):
        return format_number(value.value)
    return print_lisp(value)


def _buffer_name(name: str, value: LispValue) -> str:
    if isinstance(value, String):
        return value.value
    if isinstance(value, Symbol):
        return value.name
    raise LispTypeError(f"Wrong type argument to {name}: buffer name expected, got {print_lisp(value)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue], env: Environment) -> LispValue:
    """Sum of all arguments; 0 with none."""
    return Number(sum((_number("+", a) for a in args), 0.0))


def sub(args: list[LispValue], env: Environment) -> LispValue:
    """First argument minus the sum of the rest."""
    _require("-", args, 1)
    first = _number("-", args[0])
    return Number(first - sum(_number("-", a) for a in args[1:]))


def mul(args: list[LispValue], env: Environment) -> LispValue:
    """Product of all arguments; 1 with none."""
    result = 1.0
    for a in args:
        result *= _number("*", a)
    return Number(result)


def div(args: list[LispValue], env: Environment) -> LispValue:
    """First argument divided by the second, with IEEE-754 results for zero."""
    _require("/", args, 2)
    a, b = _number("/", args[0]), _number("/", args[1])
    if b == 0:
        if a == 0 or math.isnan(a):
            return Number(math.nan)
        return Number(math.copysign(math.inf, a) * math.copysign(1.0, b))
    return Number(a / b)


# -------------------------------
# Comparison
# -------------------------------
def equals(args: list[LispValue], env: Environment) -> LispValue:
    """t if the first two arguments are the same kind of value with equal payloads."""
    _require("=", args, 2)
    return Bool(is_equal(args[0], args[1]))


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Compare numbers by float value (so NaN is never equal) and lists element-wise."""
    if isinstance(a, Number) and isinstance(b, Number):
        return a.value == b.value
    if isinstance(a, LispList) and isinstance(b, LispList):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def lt(args: list[LispValue], env: Environment) -> LispValue:
    _require("<", args, 2)
    return Bool(_number("<", args[0]) < _number("<", args[1]))


def gt(args: list[LispValue], env: Environment) -> LispValue:
    _require(">", args, 2)
    return Bool(_number(">", args[0]) > _number(">", args[1]))


# -------------------------------
# List operations
# -------------------------------
def list_builtin(args: list[LispValue], env: Environment) -> LispValue:
    return LispList(args)


def cons(args: list[LispValue], env: Environment) -> LispValue:
    """Prepend the first argument to the elements of the second.

    A non-list second argument contributes no elements.
    """
    _require("cons", args, 1)
    head = args[0]
    tail = args[1] if len(args) > 1 else Nil
    rest = tail.items if isinstance(tail, LispList) else ()
    return LispList((head, *rest))


def car(args: list[LispValue], env: Environment) -> LispValue:
    _require("car", args, 1)
    xs = args[0]
    if not isinstance(xs, LispList) or not xs.items:
        return Nil
    return xs[0]


def cdr(args: list[LispValue], env: Environment) -> LispValue:
    _require("cdr", args, 1)
    xs = args[0]
    if not isinstance(xs, LispList) or not xs.items:
        return Nil
    return LispList(xs.items[1:])


# -------------------------------
# Editor bridge
# -------------------------------
def message(args: list[LispValue], env: Environment) -> LispValue:
    """Echo the arguments joined by spaces; returns the echoed string."""
    text = " ".join(a.value if isinstance(a, String) else print_lisp(a) for a in args)
    env.host.message(text)
    return String(text)


def insert(args: list[LispValue], env: Environment) -> LispValue:
    """Insert the concatenated arguments at point."""
    env.host.insert("".join(_text(a) for a in args))
    return Nil


def buffer_name(args: list[LispValue], env: Environment) -> LispValue:
    return String(env.host.current_buffer_name())


def switch_to_buffer(args: list[LispValue], env: Environment) -> LispValue:
    _require("switch-to-buffer", args, 1)
    name = _buffer_name("switch-to-buffer", args[0])
    env.host.switch_buffer(name)
    return String(name)


def kill_buffer(args: list[LispValue], env: Environment) -> LispValue:
    _require("kill-buffer", args, 1)
    env.host.kill_buffer(_buffer_name("kill-buffer", args[0]))
    return Nil


def point(args: list[LispValue], env: Environment) -> LispValue:
    return Number(env.host.get_cursor())


def point_min(args: list[LispValue], env: Environment) -> LispValue:
    return Number(0)


def point_max(args: list[LispValue], env: Environment) -> LispValue:
    return Number(len(env.host.get_buffer_content()))


def goto_char(args: list[LispValue], env: Environment) -> LispValue:
    """Move point; the host clamps. Returns the requested position."""
    _require("goto-char", args, 1)
    pos = _number("goto-char", args[0])
    if not math.isfinite(pos):
        raise LispTypeError(f"Wrong type argument to goto-char: {print_lisp(args[0])}")
    env.host.set_cursor(int(pos))
    return args[0]


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, PrimitiveFn] = {
    '+': add,
    '-': sub,
    '*': mul,
    '/': div,
    '=': equals,
    '<': lt,
    '>': gt,
    'list': list_builtin,
    'cons': cons,
    'car': car,
    'cdr': cdr,
    'message': message,
    'insert': insert,
    'buffer-name': buffer_name,
    'current-buffer': buffer_name,
    'switch-to-buffer': switch_to_buffer,
    'kill-buffer': kill_buffer,
    'point': point,
    'point-min': point_min,
    'point-max': point_max,
    'goto-char': goto_char,
}


def register(env: Environment) -> None:
    env.update({name: Primitive(fn, name) for name, fn in PRIMITIVES.items()})


def create_global_env(host: Host) -> Environment:
    """A fresh global environment holding every primitive, bound to `host`."""
    env = Environment(host)
    register(env)
    return env
