from __future__ import annotations

"""
A pygls-based Language Server for texted scripts.

Features:
- Text synchronization and document store
- Diagnostics: syntax errors, calls to unknown functions
- Hover: documentation of the function under the cursor
- Completion: every builtin with its signature and summary

The syntax of a document (shell, sexp or json) follows its file suffix, see
texted.config.syntax_for_path. Scripts are never evaluated.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional
from urllib.parse import unquote, urlparse

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
)
from pygls.server import LanguageServer

from texted.builtin import BUILTINS
from texted.config import syntax_for_path
from texted_lsp.indexer import DocumentIndex, build_index, completion_entries, diagnostics, hover_text, word_at

logger = logging.getLogger(__name__)

SOURCE = "texted-ls"
_SEVERITY = {"error": DiagnosticSeverity.Error, "warning": DiagnosticSeverity.Warning}


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class TextedLanguageServer(LanguageServer):
    CMD_NAME = "texted-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1")
        self.documents: Dict[str, DocumentState] = {}


ls = TextedLanguageServer()


def syntax_for_uri(uri: str) -> str:
    return syntax_for_path(unquote(urlparse(uri).path))


def _update(uri: str, text: str) -> DocumentState:
    state = DocumentState(text=text, index=build_index(text, syntax_for_uri(uri)))
    ls.documents[uri] = state
    _publish_diagnostics(uri, state.index)
    return state


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    _update(params.text_document.uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        state = ls.documents.get(uri)
        text = state.text if state else ""
    _update(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def to_lsp_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=Range(
                start=Position(line=d.line, character=d.col),
                end=Position(line=d.line, character=d.end_col),
            ),
            message=d.message,
            severity=_SEVERITY[d.severity],
            source=SOURCE,
        )
        for d in diagnostics(idx, BUILTINS)
    ]


def _publish_diagnostics(uri: str, idx: DocumentIndex):
    diags = to_lsp_diagnostics(idx)
    logger.debug("%s: %d diagnostic(s)", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    word = word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None
    contents = hover_text(word)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=contents))


# --- Completion ---
@ls.feature("textDocument/completion")
def on_completion(params: CompletionParams) -> CompletionList:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=signature, documentation=summary)
        for name, signature, summary in completion_entries()
    ]
    return CompletionList(is_incomplete=False, items=items)


def main():
    ls.start_io()


if __name__ == "__main__":
    # Run the language server over stdio
    main()
