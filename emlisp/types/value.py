"""The Value sum type.

Every datum the reader produces and the evaluator returns is exactly one of
the cases below. Values are immutable: "mutation" in the dialect is always
rebinding a name in an Environment.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from emlisp.types.environment import Environment


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class NilType:
    """The empty value. A single instance, `Nil`, exists."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


@dataclass(frozen=True, slots=True)
class Number:
    """Double-precision number; integers and decimals share representation."""
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Bool:
    value: bool


T = Bool(True)
FALSE = Bool(False)


@dataclass(frozen=True, slots=True)
class LispList:
    """Ordered sequence of values; order is semantic."""
    items: tuple = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: Value) -> LispList:
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Function:
    """A user function built by `defun`.

    No defining environment is captured; calls chain to the caller's scope.
    """
    params: tuple[str, ...]
    body: Value

    def __post_init__(self):
        object.__setattr__(self, "params", tuple(self.params))


@dataclass(frozen=True, slots=True)
class Primitive:
    """A builtin implemented in Python as fn(args, env)."""
    fn: Callable[[list, "Environment"], Value]
    name: str = field(default="", compare=False)

    def __call__(self, args: list, env: Environment) -> Value:
        return self.fn(args, env)


Value = Union[Symbol, Number, String, LispList, Bool, NilType, Function, Primitive]


def is_true(value: Value) -> bool:
    """False iff the value is Nil or Bool(false); 0 and () are true."""
    return not (value is Nil or value == FALSE)
