"""Application engine for emlisp.

Centralizes how an evaluated head is applied to already-evaluated arguments:
- Primitives are invoked directly with the argument list and caller env.
- Functions get a fresh activation frame chained to the *calling*
  environment, not the one active at definition time. A function defined
  inside a `let` therefore cannot see that `let`'s bindings once the `let`
  has returned; it sees whatever its caller has in scope instead.
"""

from __future__ import annotations

from emlisp import LispValue, EvaluatorFn, SExpression
from emlisp.errors import InvalidCall
from emlisp.printer import print_lisp
from emlisp.types.environment import Environment
from emlisp.types.value import Function, Primitive, Nil


def apply_function(
    fn: Function,
    args: list[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Bind params positionally; missing ones are Nil, surplus args dropped."""
    frame = caller_env.child()
    for i, param in enumerate(fn.params):
        frame.define(param, args[i] if i < len(args) else Nil)
    return evaluate_fn(fn.body, frame)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    source: SExpression = None,
) -> LispValue:
    """Apply a Primitive or Function; anything else is an InvalidCall.

    `source` is the unevaluated head, used only for the error message.
    """
    if isinstance(head, Primitive):
        return head(args, env)
    if isinstance(head, Function):
        return apply_function(head, args, env, evaluate_fn)
    shown = source if source is not None else head
    raise InvalidCall(f"Invalid function call: {print_lisp(shown)}")
