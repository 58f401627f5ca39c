from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.types.value import Nil
from emlisp.types.environment import Environment


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
