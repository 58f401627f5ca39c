import math

import pytest
from hypothesis import given, strategies as st

from emlisp.printer import print_lisp
from emlisp.reader.parser import parse
from emlisp.types.value import (
    Symbol, Number, String, LispList, Nil, T, FALSE, Function, Primitive,
)


@pytest.mark.parametrize(
    "value, text",
    [
        (Nil, "nil"),
        (T, "t"),
        (FALSE, "nil"),
        (Number(4), "4"),
        (Number(-3), "-3"),
        (Number(2.5), "2.5"),
        (Number(0.1 + 0.2), "0.30000000000000004"),
        (Number(math.inf), "Infinity"),
        (Number(-math.inf), "-Infinity"),
        (Number(math.nan), "NaN"),
        (Number(1.5e-07), "1.5e-7"),
        (Number(-2.5e-10), "-2.5e-10"),
        (Number(1e21), "1e+21"),
        (String("hi there"), '"hi there"'),
        (Symbol("foo-bar"), "foo-bar"),
        (LispList(), "()"),
        (LispList.of(Number(1), LispList.of(String("a"), Nil), Symbol("x")), '(1 ("a" nil) x)'),
        (Function(("a",), LispList.of(Symbol("progn"))), "<function>"),
        (Primitive(lambda args, env: Nil, "noop"), "<subr>"),
    ]
)
def test_print_lisp(value, text):
    assert print_lisp(value) == text


def test_embedded_quote_does_not_round_trip():
    # The printer does not re-escape, so the reader stops at the inner quote.
    original = String('say "hi"')
    printed = print_lisp(original)
    assert printed == '"say "hi""'
    assert parse(printed) != original
    assert parse(printed) == String("say ")


def test_false_prints_as_nil_and_reads_back_as_nil():
    assert parse(print_lisp(FALSE)) is Nil


# -------------------------------
# Strategies
# -------------------------------
number_strat = st.one_of(
    st.integers(min_value=-10**9, max_value=10**9).map(Number),
    st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
    .filter(lambda x: "e" not in repr(x))
    .map(Number),
)

safe_string_strat = st.text(
    st.characters(blacklist_characters='"\\', blacklist_categories=("Cs",)),
    max_size=20,
).map(String)

atom_strat = st.one_of(number_strat, safe_string_strat, st.just(T), st.just(Nil))

value_strat = st.recursive(
    atom_strat,
    lambda children: st.lists(children, max_size=5).map(LispList),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(value_strat)
def test_print_then_parse_round_trip(value):
    assert parse(print_lisp(value)) == value
