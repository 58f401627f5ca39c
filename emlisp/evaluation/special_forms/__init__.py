"""Registry of special forms for the emlisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application.
Every handler has the signature (tail, env, evaluate_fn) -> value, where
`tail` is the list of unevaluated forms after the head symbol.
"""

from emlisp.types.value import Symbol
from emlisp.evaluation.special_forms.quote_form import quote_form
from emlisp.evaluation.special_forms.setq_form import setq_form
from emlisp.evaluation.special_forms.if_form import if_form
from emlisp.evaluation.special_forms.defun_form import defun_form
from emlisp.evaluation.special_forms.progn_form import progn_form
from emlisp.evaluation.special_forms.let_form import let_form
from emlisp.evaluation.special_forms.interactive_form import interactive_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("setq"): setq_form,
    Symbol("if"): if_form,
    Symbol("defun"): defun_form,
    Symbol("progn"): progn_form,
    Symbol("let"): let_form,
    Symbol("interactive"): interactive_form,
}
