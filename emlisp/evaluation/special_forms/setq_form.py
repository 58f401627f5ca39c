from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.errors import MalformedSpecialForm
from emlisp.printer import print_lisp
from emlisp.types.value import Symbol, Nil
from emlisp.types.environment import Environment


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (setq sym1 val1 sym2 val2 ...)
    Each value is evaluated and bound in the current frame before the next
    pair is processed, so earlier assignments persist if a later one fails.
    """
    result: LispValue = Nil
    for i in range(0, len(tail), 2):
        var_sym = tail[i]
        if not isinstance(var_sym, Symbol):
            raise MalformedSpecialForm(f"setq expects symbols, got {print_lisp(var_sym)}")
        if i + 1 >= len(tail):
            raise MalformedSpecialForm(f"setq: no value for {var_sym}")
        result = evaluate_fn(tail[i + 1], env)
        env.set(var_sym.name, result)
    return result
