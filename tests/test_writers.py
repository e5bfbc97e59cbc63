import pytest
from hypothesis import given, strategies as st

from texted.errors import TextedWriteError
from texted.reader import parse
from texted.types import List, Number, String, Symbol, make_list, program_equal
from texted.writer import JsonWriter, SexpWriter, ShellWriter, get_writer, write

from strategies import json_forms, shell_forms, values

FORM = make_list(Symbol("goto-char"), Number(7))


@pytest.mark.parametrize(
    "syntax,program,expected",
    [
        ("shell", [FORM], "goto-char 7"),
        ("shell", [make_list(Symbol("insert"), String("a;b\n"))], 'insert "a;b\\n"'),
        ("shell", [FORM, make_list(Symbol("point"))], "goto-char 7\npoint"),
        ("shell", [make_list(Symbol("forward-char"), Number(2.5))], "forward-char 2.5"),
        ("shell", [List()], "()"),
        ("sexp", [FORM], "(goto-char 7)"),
        ("sexp", [make_list(Symbol("f"), make_list(Symbol("g"), String('q"')))], '(f (g "q\\""))'),
        ("sexp", [Number(3)], "3"),
        ("json", [FORM], '[["goto-char", 7]]'),
        ("json", [make_list(Symbol("f"), make_list(Symbol("g"), Number(0.5)))], '[["f", ["g", 0.5]]]'),
        ("json", [], "[]"),
    ],
)
def test_write_program(syntax, program, expected):
    assert write(syntax, program) == expected


def test_write_single_value():
    assert write("shell", FORM) == "goto-char 7"
    assert write("sexp", String("x")) == '"x"'
    assert write("json", FORM) == '["goto-char", 7]'


def test_shell_writer_rejects_nested_lists():
    with pytest.raises(TextedWriteError):
        ShellWriter().write_value(make_list(Symbol("f"), make_list(Symbol("g"))))


def test_shell_writer_rejects_atoms():
    with pytest.raises(TextedWriteError):
        ShellWriter().write_value(Symbol("point"))


def test_json_writer_rejects_infinity():
    with pytest.raises(TextedWriteError):
        JsonWriter().write_value(make_list(Symbol("f"), Number(float("inf"))))


def test_unknown_writer():
    with pytest.raises(TextedWriteError):
        get_writer("xml")


def test_get_writer_returns_syntax_writer():
    assert isinstance(get_writer("sexp"), SexpWriter)
    assert get_writer("json").syntax == "json"


@given(st.lists(values, max_size=5))
def test_sexp_round_trip(program):
    assert program_equal(parse("sexp", write("sexp", program)), program)


@given(st.lists(shell_forms, max_size=5))
def test_shell_round_trip(program):
    assert program_equal(parse("shell", write("shell", program)), program)


@given(st.lists(json_forms, max_size=5))
def test_json_round_trip(program):
    assert program_equal(parse("json", write("json", program)), program)
