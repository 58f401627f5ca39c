# Core type aliases for the emlisp data model.
# Unlike plain-Python Lisps, every runtime value is one case of the Value sum
# type in emlisp.types.value; the aliases below name the two roles a Value
# plays in this codebase.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms and values share one representation
SExpression = LispValue

# Evaluator function type: the evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
