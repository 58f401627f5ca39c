from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.errors import MalformedSpecialForm
from emlisp.printer import print_lisp
from emlisp.types.value import Symbol, LispList, Nil
from emlisp.types.environment import Environment


def _binding(b: SExpression, env: Environment, evaluate_fn: EvaluatorFn) -> tuple[str, LispValue]:
    if isinstance(b, Symbol):
        return b.name, Nil
    if isinstance(b, LispList) and len(b) >= 1 and isinstance(b[0], Symbol):
        value = evaluate_fn(b[1], env) if len(b) > 1 else Nil
        return b[0].name, value
    raise MalformedSpecialForm(f"let: malformed binding {print_lisp(b)}")


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((v1 e1) (v2 e2) v3 ...) body...)
    Bindings are parallel: every ei is evaluated in the enclosing env before
    the child frame exists. A bare symbol is bound to nil.
    """
    if not tail:
        raise MalformedSpecialForm("let requires a binding list")
    bindings = tail[0]
    if bindings is Nil:
        bindings = LispList()
    if not isinstance(bindings, LispList):
        raise MalformedSpecialForm(f"let bindings must be a list, got {print_lisp(bindings)}")

    values = [_binding(b, env, evaluate_fn) for b in bindings]
    frame = env.child()
    for name, value in values:
        frame.define(name, value)

    result: LispValue = Nil
    for e in tail[1:]:
        result = evaluate_fn(e, frame)
    return result
