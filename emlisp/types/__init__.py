from emlisp.types.value import (
    Symbol, Number, String, LispList, Bool, Nil, NilType, Function, Primitive,
    Value, T, FALSE, is_true,
)
from emlisp.types.environment import Environment

__all__ = [
    "Symbol", "Number", "String", "LispList", "Bool", "Nil", "NilType",
    "Function", "Primitive", "Value", "T", "FALSE", "is_true", "Environment",
]
