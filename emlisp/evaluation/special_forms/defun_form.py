from emlisp import EvaluatorFn
from emlisp import SExpression, LispValue
from emlisp.errors import MalformedSpecialForm
from emlisp.printer import print_lisp
from emlisp.types.value import Symbol, LispList, Nil, Function
from emlisp.types.environment import Environment

PROGN = Symbol("progn")


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (p1 p2 ...) body...)
    The body is wrapped in an implicit progn. Returns the name symbol.
    """
    if len(tail) < 2:
        raise MalformedSpecialForm("defun requires a name and a parameter list")

    name, params = tail[0], tail[1]
    if not isinstance(name, Symbol):
        raise MalformedSpecialForm(f"defun name must be a symbol, got {print_lisp(name)}")
    if params is Nil:
        params = LispList()
    if not isinstance(params, LispList):
        raise MalformedSpecialForm(f"defun parameter list must be a list, got {print_lisp(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MalformedSpecialForm(f"defun parameter must be a symbol, got {print_lisp(p)}")

    fn = Function(
        params=tuple(p.name for p in params),
        body=LispList((PROGN, *tail[2:])),
    )
    env.define(name.name, fn)
    return name
