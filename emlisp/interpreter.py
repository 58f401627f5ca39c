from __future__ import annotations

import logging

from emlisp import SExpression, LispValue
from emlisp.builtin.env_builtin import create_global_env
from emlisp.errors import EmLispError
from emlisp.evaluation.evaluator import evaluate
from emlisp.host import Host
from emlisp.printer import print_lisp
from emlisp.reader.parser import parse
from emlisp.reader.scanner import find_last_expression
from emlisp.types.environment import Environment

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Lisp Error: "
NO_SEXP_MESSAGE = "End of file or no sexp found"


class Interpreter:
    """
    One interpreter session: a global environment bound to a host.

    Sessions are independent objects; nothing is shared between two
    Interpreters except what their hosts share.
    """

    def __init__(self, host: Host, prelude: str | None = None):
        self.host = host
        self.env: Environment = create_global_env(host)
        if prelude:
            self.eval(prelude)

    def read(self, code: str) -> SExpression:
        return parse(code)

    def eval_expr(self, expr: SExpression) -> LispValue:
        return evaluate(expr, self.env)

    def eval(self, code: str) -> LispValue:
        """Read the first expression in `code` and evaluate it globally."""
        return self.eval_expr(self.read(code))

    def eval_to_string(self, code: str) -> str:
        """Evaluate and print; Lisp errors become "Lisp Error: <message>"."""
        logger.debug("eval: %r", code)
        try:
            result = self.eval(code)
        except EmLispError as e:
            logger.info("Lisp error evaluating %r: %s", code, e)
            return f"{ERROR_PREFIX}{e}"
        return print_lisp(result)

    def eval_and_echo(self, code: str) -> str:
        """The Eval prompt: evaluate `code` and echo the outcome via the host."""
        text = self.eval_to_string(code)
        self.host.message(text)
        return text

    def eval_last_sexp(self, text: str, cursor: int) -> str:
        """Evaluate the expression ending before `cursor` in `text` and echo it."""
        sexp = find_last_expression(text, cursor)
        if not sexp:
            self.host.message(NO_SEXP_MESSAGE)
            return NO_SEXP_MESSAGE
        return self.eval_and_echo(sexp)
