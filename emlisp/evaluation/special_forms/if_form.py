from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.errors import MalformedSpecialForm
from emlisp.types.value import Nil, is_true
from emlisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) < 2:
        raise MalformedSpecialForm("if requires a condition and a then-expression")

    cond = evaluate_fn(tail[0], env)
    if is_true(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
