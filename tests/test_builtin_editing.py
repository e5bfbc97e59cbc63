import pytest
from hypothesis import given, strategies as st

from texted import Buffer, TextedTypeError, evaluate, parse, run_script
from texted.types.value import quote_string

WHOLE = "buffer-substring 1 -1"


@pytest.mark.parametrize(
    "text,script,expected_text,expected_point",
    [
        ("world", 'insert "Hello "', "Hello world", 7),
        ("Hi", 'end-of-buffer; insert "!"', "Hi!", 4),
        ("", 'insert "héllo"', "héllo", 6),
        ("abc", 'goto-char 2; insert ""', "abc", 2),
        ("Hello world", "goto-char 7; delete-char 5", "Hello ", 7),
        ("Hello world", "delete-char", "ello world", 1),
        ("abc", "end-of-buffer; delete-char", "abc", 4),
        ("abc", "delete-char 0", "abc", 1),
        ("abc", "delete-char -2", "abc", 1),
        ("abc", "goto-char 2; delete-char 10", "a", 2),
        ("Hello world", "end-of-buffer; delete-backward-char 6", "Hello", 6),
        ("abc", "delete-backward-char", "abc", 1),
        ("abc", "end-of-buffer; delete-backward-char 10", "", 1),
        ("abc", "end-of-buffer; delete-backward-char 0", "abc", 4),
        ("Hello world", "goto-char 6; set-mark; end-of-buffer; delete-region", "Hello", 6),
        ("Hello world", "goto-char 7; set-mark; goto-char 1; delete-region", "world", 1),
        ("abc", "goto-char 2; set-mark; delete-region", "abc", 2),
        ("Hello world", 'mark-whole-buffer; replace-region "X"', "X", 2),
        ("Hello world", 'goto-char 7; set-mark; end-of-buffer; replace-region "there"', "Hello there", 12),
        ("abc", 'replace-region "X"', "abc", 1),
        ("one\ntwo\nthree", "goto-line 2; delete-line", "one\nthree", 5),
        ("one\ntwo\nthree", "goto-char 2; delete-line 2", "three", 1),
        ("one\ntwo", "goto-line 2; goto-char 6; delete-line", "one\n", 5),
        ("one\ntwo", "delete-line 0", "one\ntwo", 1),
        ("Hello world\nnext", "goto-char 6; kill-line", "Hello\nnext", 6),
        ("Hello world\nnext", "goto-char 12; kill-line", "Hello worldnext", 12),
        ("abc", "goto-char 2; kill-line", "a", 2),
        ("abc", "end-of-buffer; kill-line", "abc", 4),
        ("a\nb\nc", "kill-line 2", "c", 1),
        ("a\nb\nc", "kill-line 0", "a\nb\nc", 1),
        ("a\nb", "delete-line 1e12", "", 1),
        ("a\nb\nc", "goto-line 2; kill-line 1e12", "a\n", 3),
        ("abc", "delete-char 1e999", "", 1),
        ("abc", "end-of-buffer; delete-backward-char 1e999", "", 1),
        ("Hello world test", "kill-word", " world test", 1),
        ("foo, bar", "kill-word", ", bar", 1),
        ("Hello world test", "goto-char 6; kill-word 2", "Hello", 6),
        ("Hello world test", "kill-word 0", "Hello world test", 1),
        ("Hello world test", "end-of-buffer; backward-kill-word", "Hello world ", 13),
        ("foo bar", "end-of-buffer; backward-kill-word", "foo ", 5),
        ("Hello world test", "goto-char 12; backward-kill-word 2", " test", 1),
        ("foo bar", "backward-kill-word", "foo bar", 1),
    ],
)
def test_editing(text, script, expected_text, expected_point):
    result = run_script(text, script)
    assert result.text == expected_text
    assert result.point == expected_point


def test_commands_return_empty_string():
    assert str(run_script("abc", 'insert "x"').value) == '""'


def test_type_error_leaves_buffer_untouched(fails):
    err = fails("abc", "goto-char 2; insert 5")
    assert isinstance(err.original, TextedTypeError)
    assert err.snapshot.text == "abc"
    assert err.snapshot.point == 2


def test_kill_word_matches_forward_word():
    text = "alpha, beta; gamma"
    for start in range(1, len(text) + 2):
        moved = run_script(text, f"goto-char {start}; forward-word; point").value.as_int()
        killed = run_script(text, f"goto-char {start}; kill-word").text
        assert killed == text[:start - 1] + text[moved - 1:]


@given(st.text(max_size=20))
def test_insert_empty_string_is_a_no_op(text):
    buf = Buffer(text)
    buf.point = len(text) // 2 + 1
    before = (buf.text, buf.point, buf.mark)
    evaluate(parse("shell", 'insert ""'), buffer=buf)
    assert (buf.text, buf.point, buf.mark) == before


@given(st.text(max_size=20), st.integers(-3, 25), st.integers(-3, 25))
def test_delete_region_ignores_point_mark_order(text, a, b):
    one = run_script(text, f"set-mark-command {a}; goto-char {b}; delete-region")
    two = run_script(text, f"set-mark-command {b}; goto-char {a}; delete-region")
    assert one.text == two.text
    assert one.point == two.point


@given(st.text(max_size=20), st.integers(-3, 25), st.integers(-3, 25), st.text(max_size=5))
def test_replace_region_ignores_point_mark_order(text, a, b, replacement):
    script = "set-mark-command {}; goto-char {}; replace-region {}"
    one = run_script(text, script.format(a, b, quote_string(replacement)))
    two = run_script(text, script.format(b, a, quote_string(replacement)))
    assert one.text == two.text


COMMANDS = [
    "forward-char 3",
    "backward-char 2",
    "forward-word",
    "backward-word",
    "end-of-line",
    "beginning-of-line",
    "goto-line 2",
    'insert "xy\\n"',
    "delete-char 2",
    "delete-backward-char 2",
    "kill-line",
    "kill-word",
    "backward-kill-word",
    "delete-line",
    "mark-word",
    "mark-line",
    "set-mark",
    "exchange-point-and-mark",
    "delete-region",
    'replace-region "Q"',
]


@given(st.text(alphabet="ab \n.", max_size=25), st.lists(st.sampled_from(COMMANDS), max_size=12))
def test_point_and_mark_stay_in_range(text, commands):
    def check(step):
        size = len(step.text)
        assert 1 <= step.point <= size + 1
        assert 1 <= step.mark <= size + 1

    run_script(text, "; ".join(commands), trace=check)
