import pytest

from texted import (
    Buffer,
    Environment,
    TextedEvaluationError,
    TextedExecutionError,
    TextedSearchFailed,
    TextedUndefinedFunction,
    evaluate,
    parse,
    run_script,
)
from texted.config import MAX_NESTING
from texted.evaluation import evaluate_form
from texted.types import EMPTY, List, Number, String, Symbol, make_list


def test_shell_scenario():
    assert run_script("Hello world", "goto-char 7; delete-char 5").text == "Hello "


def test_sexp_scenario():
    result = run_script("Hello world", '(mark-whole-buffer)(replace-region "X")', "sexp")
    assert result.text == "X"
    assert result.point == 2


def test_json_scenario():
    result = run_script("Hello world", '[["search-forward","world"],["replace-match","earth"]]', "json")
    assert result.text == "Hello earth"


@pytest.mark.parametrize(
    "script,expected",
    [
        ('string-match "[0-9]+" "ab12cd"', Number(2)),
        ('string-match "zz" "ab12cd"', Symbol("nil")),
    ],
)
def test_string_match_scenarios(script, expected):
    assert run_script("", script).value == expected


def test_buffer_substring_sentinel():
    assert run_script("abcdef", "buffer-substring 1 -1").value == String("abcdef")


@pytest.mark.parametrize("syntax", ["shell", "sexp", "json"])
def test_same_program_in_every_syntax(syntax):
    scripts = {
        "shell": 'goto-char 7; insert "big "; buffer-substring 1 -1',
        "sexp": '(goto-char 7) (insert "big ") (buffer-substring 1 -1)',
        "json": '[["goto-char", 7], ["insert", "big "], ["buffer-substring", 1, -1]]',
    }
    result = run_script("Hello world", scripts[syntax], syntax)
    assert result.value == String("Hello big world")


def test_empty_program_returns_empty_string():
    assert evaluate([], buffer=Buffer("abc")) == EMPTY


def test_last_value_is_result():
    assert run_script("abc", "point; buffer-size").value == Number(3)


def test_nested_calls_evaluate_arguments_first():
    script = "goto-char 7; set-mark; end-of-buffer; buffer-substring (region-beginning) (region-end)"
    assert run_script("Hello world", script).value == String("world")


def test_self_evaluating_atoms():
    env = Environment.default()
    buf = Buffer("x")
    assert evaluate_form(Number(4), env, buf) == Number(4)
    assert evaluate_form(String("s"), env, buf) == String("s")
    assert evaluate_form(Symbol("t"), env, buf) == Symbol("t")


def test_empty_list_is_an_error():
    with pytest.raises(TextedExecutionError) as exc:
        evaluate([List()], buffer=Buffer())
    assert isinstance(exc.value.original, TextedEvaluationError)


def test_non_symbol_head_is_an_error():
    with pytest.raises(TextedExecutionError) as exc:
        evaluate([make_list(String("insert"), String("x"))], buffer=Buffer())
    assert isinstance(exc.value.original, TextedEvaluationError)


def test_undefined_function_keeps_earlier_changes():
    buf = Buffer("abc")
    program = parse("shell", 'insert "X"; no-such-function 1; insert "Y"')
    with pytest.raises(TextedExecutionError) as exc:
        evaluate(program, buffer=buf)
    err = exc.value
    assert isinstance(err.original, TextedUndefinedFunction)
    assert err.original.name == "no-such-function"
    assert err.instruction_index == 1
    assert err.instruction == program[1]
    assert buf.text == "Xabc"
    assert err.snapshot.text == "Xabc"
    assert err.snapshot.point == 2
    assert isinstance(err.__cause__, TextedUndefinedFunction)


def test_undefined_function_inside_argument():
    with pytest.raises(TextedExecutionError) as exc:
        run_script("abc", "goto-char (nowhere)")
    assert isinstance(exc.value.original, TextedUndefinedFunction)


def test_evaluation_stops_at_first_error():
    buf = Buffer("abc")
    program = parse("shell", 'search-forward "zz"; insert "never"')
    with pytest.raises(TextedExecutionError) as exc:
        evaluate(program, buffer=buf)
    assert isinstance(exc.value.original, TextedSearchFailed)
    assert buf.text == "abc"


def test_execution_error_message_names_instruction():
    with pytest.raises(TextedExecutionError) as exc:
        run_script("abc", "forward-char; frob")
    message = str(exc.value)
    assert "undefined-function 'frob'" in message
    assert "at instruction 1: (frob)" in message
    assert "point=2" in message


def test_trace_sees_every_form():
    steps = []
    buf = Buffer("Hello")
    program = parse("shell", "end-of-buffer; insert \"!\"; point")
    result = evaluate(program, buffer=buf, trace=steps.append)
    assert result == Number(7)
    assert [s.index for s in steps] == [0, 1, 2]
    assert [s.point for s in steps] == [6, 7, 7]
    assert steps[1].text == "Hello!"
    assert steps[2].result == Number(7)
    assert steps[0].instruction == program[0]
    assert len(steps[0].environment) == 50


def test_trace_does_not_change_result():
    program = parse("shell", 'insert "abc"; backward-char 2; delete-char; buffer-substring 1 -1')
    plain = evaluate(program, buffer=Buffer(""))
    traced = evaluate(program, buffer=Buffer(""), trace=lambda step: None)
    assert plain == traced == String("ac")


def test_trace_not_called_for_failed_form():
    steps = []
    with pytest.raises(TextedExecutionError):
        evaluate(parse("shell", "point; frob"), buffer=Buffer(""), trace=steps.append)
    assert len(steps) == 1


def test_custom_environment():
    def shout(args, buffer):
        buffer.insert("!")
        return String("shouted")

    env = Environment.default().extend({"shout": shout})
    result = run_script("hi", "end-of-buffer; shout", env=env)
    assert result.text == "hi!"
    assert result.value == String("shouted")


def test_restricted_environment():
    env = Environment.default().without("insert")
    with pytest.raises(TextedExecutionError) as exc:
        run_script("", 'insert "x"', env=env)
    assert isinstance(exc.value.original, TextedUndefinedFunction)


def test_evaluate_defaults():
    assert evaluate(parse("shell", "point-max")) == Number(1)


def _nested(depth):
    form = make_list(Symbol("point"))
    for _ in range(depth - 1):
        form = make_list(Symbol("concat"), form)
    return form


def test_nesting_limit():
    with pytest.raises(TextedExecutionError) as exc:
        evaluate([_nested(MAX_NESTING + 1)], buffer=Buffer("abc"))
    assert isinstance(exc.value.original, TextedEvaluationError)
    assert "nesting too deep" in str(exc.value.original)


def test_nesting_limit_with_unprintable_form():
    with pytest.raises(TextedExecutionError) as exc:
        evaluate([_nested(5000)], buffer=Buffer("abc"))
    assert isinstance(exc.value.original, TextedEvaluationError)
    assert "<deeply nested form>" in str(exc.value)


def test_bare_symbol_is_not_a_top_level_form():
    with pytest.raises(TextedExecutionError) as exc:
        run_script("abc", "(goto-char 3) point", "sexp")
    assert isinstance(exc.value.original, TextedEvaluationError)
    assert exc.value.instruction_index == 1
    assert exc.value.snapshot.point == 3


def test_symbol_arguments_evaluate_to_themselves():
    def first(args, buffer):
        return args[0]

    env = Environment.default().extend({"first": first})
    assert run_script("", "first nil", env=env).value == Symbol("nil")
