from __future__ import annotations

"""
Static analysis of texted scripts for the language server.

Nothing here evaluates a script. A document is parsed with the reader for its
syntax; on success we record where every function call names its function so
that unknown names can be reported and hovered. All positions are 0-based
(line, character) pairs, the way LSP counts them.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from texted.documentation import all_documentation, format_documentation, get_documentation
from texted.errors import TextedSyntaxError
from texted.reader import parse
from texted.reader.shell import split_statements
from texted.reader.tokenizer import lex

JSON_HEAD_RE = re.compile(r'\[\s*"((?:\\.|[^"\\])*)"')
WORD_BREAKS = ' \t()"\';[],\n\r'


@dataclass
class CallSite:
    name: str
    line: int
    col: int

    @property
    def end_col(self) -> int:
        return self.col + len(self.name)


@dataclass
class IndexDiagnostic:
    message: str
    line: int
    col: int
    end_col: int
    severity: str  # "error" | "warning"


@dataclass
class DocumentIndex:
    syntax: str
    forms: int = 0
    calls: List[CallSite] = field(default_factory=list)
    error: Optional[TextedSyntaxError] = None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _sexp_calls(text: str) -> Iterable[CallSite]:
    tokens = list(lex(text, comments=True))
    for tok, nxt in zip(tokens, tokens[1:]):
        if tok.kind == "lparen" and nxt.kind == "atom":
            line, col = _position_from_offset(text, nxt.offset)
            yield CallSite(nxt.text, line, col)


def _shell_calls(text: str) -> Iterable[CallSite]:
    for line_no, line in enumerate(text.split("\n")):
        for segment, offset in split_statements(line):
            tokens = list(lex(line, start=offset, end=offset + len(segment)))
            if tokens and tokens[0].kind == "atom":
                yield CallSite(tokens[0].text, line_no, tokens[0].offset)
            for tok, nxt in zip(tokens, tokens[1:]):
                if tok.kind == "lparen" and nxt.kind == "atom":
                    yield CallSite(nxt.text, line_no, nxt.offset)


def _json_calls(text: str) -> Iterable[CallSite]:
    for m in JSON_HEAD_RE.finditer(text):
        name = json.loads(f'"{m.group(1)}"')
        line, col = _position_from_offset(text, m.start(1))
        yield CallSite(name, line, col)


_CALL_SCANNERS = {
    "shell": _shell_calls,
    "sexp": _sexp_calls,
    "json": _json_calls,
}


def build_index(text: str, syntax: str = "shell") -> DocumentIndex:
    idx = DocumentIndex(syntax=syntax)
    try:
        program = parse(syntax, text)
    except TextedSyntaxError as err:
        idx.error = err
        return idx
    idx.forms = len(program)
    idx.calls = list(_CALL_SCANNERS[syntax](text))
    return idx


def diagnostics(idx: DocumentIndex, known: Iterable[str]) -> List[IndexDiagnostic]:
    """Syntax error (if any) plus a warning for every call to an unknown function."""
    if idx.error is not None:
        line = (idx.error.line or 1) - 1
        col = max((idx.error.column or 1) - 1, 0)
        return [IndexDiagnostic(idx.error.reason, line, col, col + 1, "error")]
    names = set(known)
    return [
        IndexDiagnostic(f"Unknown function '{call.name}'", call.line, call.col, call.end_col, "warning")
        for call in idx.calls
        if call.name not in names
    ]


def word_at(text: str, line: int, character: int) -> Optional[str]:
    lines = text.split("\n")
    if line >= len(lines):
        return None
    row = lines[line]
    start = min(character, len(row))
    while start > 0 and row[start - 1] not in WORD_BREAKS:
        start -= 1
    end = character
    while end < len(row) and row[end] not in WORD_BREAKS:
        end += 1
    word = row[start:end]
    return word or None


def hover_text(name: str) -> Optional[str]:
    doc = get_documentation(name)
    if doc is None:
        return None
    return format_documentation(doc)


def completion_entries() -> List[Tuple[str, str, str]]:
    """(name, signature, summary) for every documented function."""
    return [(doc.name, doc.signature, doc.summary) for doc in all_documentation()]
