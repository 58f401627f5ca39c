from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.types.value import Nil
from emlisp.types.environment import Environment


def interactive_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(interactive ...) marks a command; evaluating it does nothing."""
    return Nil
