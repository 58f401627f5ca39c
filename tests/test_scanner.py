import pytest

from emlisp.reader.scanner import find_last_expression


def test_whole_list_at_end():
    text = "(foo (bar 1))"
    assert find_last_expression(text, len(text)) == text


def test_trailing_atom():
    assert find_last_expression("foo bar", 7) == "bar"


@pytest.mark.parametrize(
    "text, cursor, expected",
    [
        ("(+ 2 2)\n", 8, "(+ 2 2)"),
        ("(+ 2 2)   ", 10, "(+ 2 2)"),
        ("x (a (b) c)", 11, "(a (b) c)"),
        ("(a) (b)", 3, "(a)"),
        ('(message "hi")', 14, '(message "hi")'),
        ('x "hello world"', 15, '"hello world"'),
        ('"a \\" b"', 8, '"a \\" b"'),
        ("(foo bar)", 8, "bar"),
        ("(foo bar)", 4, "foo"),
        ("42", 2, "42"),
        ("'sym", 4, "'sym"),
        ("(progn\n  (insert \"A\"))", 22, "(progn\n  (insert \"A\"))"),
    ]
)
def test_find_last_expression(text, cursor, expected):
    assert find_last_expression(text, cursor) == expected


@pytest.mark.parametrize("text, cursor", [("", 0), ("   ", 3), ("abc", 0), ("\n\n", 2)])
def test_nothing_before_cursor(text, cursor):
    assert find_last_expression(text, cursor) is None


def test_unbalanced_close_paren_finds_nothing():
    assert find_last_expression("foo))", 5) is None


def test_unterminated_string_finds_nothing():
    assert find_last_expression('abc"', 4) is None


def test_cursor_in_middle_of_text():
    text = "(+ 1 2) (* 3 4)"
    assert find_last_expression(text, 7) == "(+ 1 2)"
