import math

import pytest

from emlisp.builtin.env_builtin import PRIMITIVES, create_global_env
from emlisp.errors import LispTypeError, LispArityError
from emlisp.evaluation.evaluator import evaluate
from emlisp.reader.parser import parse
from emlisp.types.value import Symbol, Number, String, LispList, Nil, T, FALSE, Primitive


def run(source, env):
    return evaluate(parse(source), env)


def test_global_env_holds_every_primitive(env):
    for name in PRIMITIVES:
        assert isinstance(env.lookup(name), Primitive)
    assert env.outer is None


# -------------------------------
# Arithmetic
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(+)", 0),
        ("(+ 1 2 3)", 6),
        ("(+ 0.5 0.25)", 0.75),
        ("(- 10)", 10),
        ("(- 10 1 2)", 7),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(/ 7 2)", 3.5),
        ("(/ 8 2 2)", 4),
        ("(+ -1 1)", 0),
    ]
)
def test_arithmetic(source, expected, env):
    assert run(source, env) == Number(expected)


def test_division_by_zero_follows_ieee(env):
    assert run("(/ 1 0)", env) == Number(math.inf)
    assert run("(/ -1 0)", env) == Number(-math.inf)
    assert math.isnan(run("(/ 0 0)", env).value)


@pytest.mark.parametrize("source", ['(+ 1 "a")', "(* 'x 2)", "(- nil)", "(< 1 t)", '(/ "4" 2)'])
def test_arithmetic_on_non_numbers(source, env):
    with pytest.raises(LispTypeError):
        run(source, env)


@pytest.mark.parametrize("source", ["(-)", "(/ 1)", "(= 1)", "(< 1)", "(car)"])
def test_too_few_arguments(source, env):
    with pytest.raises(LispArityError):
        run(source, env)


# -------------------------------
# Comparison
# -------------------------------
@pytest.mark.parametrize(
    "source, expected",
    [
        ("(= 1 1)", T),
        ("(= 1 1.0)", T),
        ("(= 1 2)", FALSE),
        ('(= "a" "a")', T),
        ('(= "a" "b")', FALSE),
        ("(= t t)", T),
        ("(= 1 t)", FALSE),
        ("(= 'a 'a)", T),
        ("(= '(1 2) '(1 2))", T),
        ("(< 1 2)", T),
        ("(< 2 1)", FALSE),
        ("(> 2 1)", T),
        ("(> 1 1)", FALSE),
    ]
)
def test_comparison(source, expected, env):
    assert run(source, env) == expected


# -------------------------------
# Lists
# -------------------------------
def test_list(env):
    assert run("(list 1 \"a\" 'b)", env) == LispList.of(Number(1), String("a"), Symbol("b"))
    assert run("(list)", env) == LispList()


def test_cons(env):
    assert run("(cons 1 '(2 3))", env) == LispList.of(Number(1), Number(2), Number(3))
    assert run("(cons 1 nil)", env) == LispList.of(Number(1))
    # a non-list tail contributes nothing
    assert run("(cons 1 2)", env) == LispList.of(Number(1))


def test_car_cdr(env):
    assert run("(car '(1 2 3))", env) == Number(1)
    assert run("(cdr '(1 2 3))", env) == LispList.of(Number(2), Number(3))
    assert run("(cdr '(1))", env) == LispList()


@pytest.mark.parametrize("source", ["(car '())", "(cdr '())", "(car 5)", "(cdr \"abc\")", "(car nil)"])
def test_car_cdr_of_non_lists(source, env):
    assert run(source, env) is Nil


# -------------------------------
# Editor bridge
# -------------------------------
def test_message_joins_with_spaces(env, host):
    assert run('(message "count:" 3 (list 1 2))', env) == String("count: 3 (1 2)")
    assert host.messages == ["count: 3 (1 2)"]


def test_insert_concatenates_payloads(env, host):
    assert run('(insert "a" 1 "b")', env) is Nil
    assert host.content == "a1b"
    assert host.cursor == 3


def test_progn_inserts_observe_each_other(env, host):
    run('(progn (insert "A") (insert "B") (insert "C"))', env)
    assert host.content == "ABC"
    assert host.cursor == 3


def test_buffer_name(env, host):
    host.name = "notes"
    assert run("(buffer-name)", env) == String("notes")
    assert run("(current-buffer)", env) == String("notes")


def test_switch_and_kill_forward_to_host(env, host):
    assert run('(switch-to-buffer "other")', env) == String("other")
    assert run("(kill-buffer 'other)", env) is Nil
    assert host.calls == [("switch_buffer", "other"), ("kill_buffer", "other")]


def test_buffer_name_must_be_text(env):
    with pytest.raises(LispTypeError):
        run("(switch-to-buffer 3)", env)


def test_point_functions(host):
    host.content, host.cursor = "hello", 2
    env = create_global_env(host)
    assert run("(point)", env) == Number(2)
    assert run("(point-min)", env) == Number(0)
    assert run("(point-max)", env) == Number(5)


def test_goto_char_returns_request_and_host_clamps(host):
    host.content = "hello"
    env = create_global_env(host)
    assert run("(goto-char 99)", env) == Number(99)
    assert host.cursor == 5
    assert run("(goto-char 2)", env) == Number(2)
    assert run("(point)", env) == Number(2)


def test_goto_char_rejects_non_numbers(env):
    with pytest.raises(LispTypeError):
        run('(goto-char "x")', env)


def test_primitives_can_be_rebound(env):
    run("(defun + (a b) (* a b))", env)
    assert run("(+ 3 4)", env) == Number(12)


def test_nan_is_never_equal(env):
    assert run("(= (/ 0 0) (/ 0 0))", env) == FALSE
    assert run("(= (list (/ 0 0)) (list (/ 0 0)))", env) == FALSE
    run("(setq n (/ 0 0))", env)
    assert run("(= n n)", env) == FALSE


def test_equal_lists_of_numbers(env):
    assert run("(= (list 1 (list 2.0)) '(1.0 (2)))", env) == T
    assert run("(= '(1 2) '(1))", env) == FALSE
