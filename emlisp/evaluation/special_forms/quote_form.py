from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.errors import MalformedSpecialForm
from emlisp.types.environment import Environment


def quote_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise MalformedSpecialForm("quote requires an argument")
    return tail[0]
