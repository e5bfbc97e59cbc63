from texted.builtin import BUILTINS
from texted_lsp.indexer import (
    CallSite,
    build_index,
    completion_entries,
    diagnostics,
    hover_text,
    word_at,
)


def _diagnostics(text, syntax="shell"):
    return diagnostics(build_index(text, syntax), BUILTINS)


def test_shell_calls_are_located():
    idx = build_index('goto-char 3\ninsert "a;b"; point', "shell")
    assert idx.error is None
    assert idx.forms == 3
    assert idx.calls == [CallSite("goto-char", 0, 0), CallSite("insert", 1, 0), CallSite("point", 1, 14)]


def test_shell_nested_call():
    idx = build_index("buffer-substring (point) -1")
    assert [c.name for c in idx.calls] == ["buffer-substring", "point"]
    assert idx.calls[1].col == 18


def test_unknown_function_in_shell():
    [diag] = _diagnostics("goto-char 3\nfrobnicate 2; point")
    assert diag.severity == "warning"
    assert diag.message == "Unknown function 'frobnicate'"
    assert (diag.line, diag.col, diag.end_col) == (1, 0, 10)


def test_unknown_function_in_sexp():
    [diag] = _diagnostics("(goto-char 3)\n  (frob (point))", "sexp")
    assert (diag.line, diag.col, diag.end_col) == (1, 3, 7)


def test_sexp_comments_are_skipped():
    idx = build_index("; (frob)\n(point)", "sexp")
    assert idx.calls == [CallSite("point", 1, 1)]


def test_json_calls_are_located():
    idx = build_index('[["point"], ["frob", 1]]', "json")
    assert idx.calls == [CallSite("point", 0, 3), CallSite("frob", 0, 14)]
    [diag] = diagnostics(idx, BUILTINS)
    assert diag.message == "Unknown function 'frob'"


def test_known_functions_produce_no_diagnostics():
    assert _diagnostics("mark-whole-buffer; delete-region") == []


def test_syntax_error_is_reported():
    idx = build_index('insert "abc')
    assert idx.error is not None
    [diag] = diagnostics(idx, BUILTINS)
    assert diag.severity == "error"
    assert diag.message == "unterminated string literal"
    assert (diag.line, diag.col, diag.end_col) == (0, 7, 8)


def test_word_at():
    text = "goto-char 3\n(insert \"x\")"
    assert word_at(text, 0, 3) == "goto-char"
    assert word_at(text, 0, 9) == "goto-char"
    assert word_at(text, 1, 3) == "insert"
    assert word_at(text, 0, 10) == "3"
    assert word_at(text, 5, 0) is None
    assert word_at("a  b", 0, 2) is None


def test_hover_text():
    assert hover_text("insert").startswith("# insert")
    assert hover_text("frobnicate") is None


def test_completion_entries():
    entries = completion_entries()
    assert len(entries) == 50
    signatures = {name: sig for name, sig, _ in entries}
    assert signatures["goto-char"] == "goto-char position"
    assert signatures["forward-char"] == "forward-char [count]"
