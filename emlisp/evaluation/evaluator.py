"""Core evaluator for the emlisp interpreter.

A plain recursive tree walker: special forms are dispatched through the
SPECIAL_FORMS table, everything else is applied after evaluating the head
and then each argument left to right. Evaluation is synchronous; there is no
step limit, so unbounded recursion surfaces as Python's RecursionError.
"""

from __future__ import annotations

from emlisp import SExpression, LispValue
from emlisp.evaluation.apply import apply
from emlisp.evaluation.special_forms import SPECIAL_FORMS
from emlisp.types.environment import Environment
from emlisp.types.value import Symbol, LispList, Nil


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr.name)

        case LispList(items=()):
            return Nil

        case LispList(items=[head, *tail_args]):
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate, head)

    # --- Atoms return as-is ---
    return expr
