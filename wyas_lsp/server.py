from __future__ import annotations

"""
A minimal pygls-based Language Server for Wyas.

Features:
- Text synchronization (documents live in the pygls workspace)
- Diagnostics: reader errors (ranged at the failing column) and evaluation
  errors, one expression per line
- Hover: primitive signatures
- Completion: primitive names

Each non-empty line is read and evaluated on its own; evaluation has no side
effects, so it is safe to run on every change.
"""

import logging
import re
from typing import Dict, List, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from wyas.errors import ParseFailure, render_error
from wyas.evaluation.evaluator import evaluate
from wyas.evaluation.primitives import SIGNATURES
from wyas.reader.parser import parse

logger = logging.getLogger(__name__)

SOURCE = "wyas-ls"

# A word runs up to whitespace, parentheses or quotes.
WORD_START = re.compile(r"[^\s()'\"]*$")
WORD_END = re.compile(r"^[^\s()'\"]*")


class WyasLanguageServer(LanguageServer):
    CMD_NAME = "wyas-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.4.0")
        self.diagnostics: Dict[str, List[types.Diagnostic]] = {}


ls = WyasLanguageServer()


# --- Diagnostics ---
def _mk_range(document: TextDocument, line: int, start: int, end: int) -> types.Range:
    # columns are code points; the client counts in its negotiated encoding
    return document.range_to_client_units(
        types.Range(
            start=types.Position(line=line, character=start),
            end=types.Position(line=line, character=end),
        )
    )


def build_diagnostics(document: TextDocument) -> List[types.Diagnostic]:
    diags: List[types.Diagnostic] = []
    for line_no, line in enumerate(document.source.splitlines()):
        if not line.strip():
            continue
        result = parse(line)
        if result.is_err():
            error = result.error
            col = error.offset if isinstance(error, ParseFailure) and error.offset is not None else 0
            diags.append(
                types.Diagnostic(
                    range=_mk_range(document, line_no, col, min(col + 1, len(line))),
                    message=render_error(error),
                    severity=types.DiagnosticSeverity.Error,
                    source=SOURCE,
                )
            )
            continue
        evaluated = evaluate(result.value)
        if evaluated.is_err():
            diags.append(
                types.Diagnostic(
                    range=_mk_range(document, line_no, 0, len(line)),
                    message=render_error(evaluated.error),
                    severity=types.DiagnosticSeverity.Warning,
                    source=SOURCE,
                )
            )
    return diags


def _refresh(uri: str) -> None:
    # pygls has already applied the open/change notification to its workspace
    document = ls.workspace.get_text_document(uri)
    diags = build_diagnostics(document)
    ls.diagnostics[uri] = diags
    logger.debug("%s: %d diagnostic(s)", uri, len(diags))
    ls.text_document_publish_diagnostics(
        types.PublishDiagnosticsParams(uri=uri, diagnostics=diags)
    )


# --- Text sync ---
@ls.feature(types.TEXT_DOCUMENT_DID_OPEN)
def did_open(params: types.DidOpenTextDocumentParams):
    _refresh(params.text_document.uri)


@ls.feature(types.TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: types.DidChangeTextDocumentParams):
    _refresh(params.text_document.uri)


@ls.feature(types.TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: types.DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.diagnostics.pop(uri, None)
    ls.text_document_publish_diagnostics(types.PublishDiagnosticsParams(uri=uri, diagnostics=[]))


# --- Hover ---
def hover_text(document: TextDocument, pos: types.Position) -> Optional[str]:
    # word_at_position converts the client's position encoding (UTF-16 by default)
    word = document.word_at_position(pos, WORD_START, WORD_END)
    if not word:
        return None
    return SIGNATURES.get(word)


@ls.feature(types.TEXT_DOCUMENT_HOVER)
def on_hover(params: types.HoverParams) -> Optional[types.Hover]:
    if params.text_document.uri not in ls.diagnostics:
        return None
    document = ls.workspace.get_text_document(params.text_document.uri)
    contents = hover_text(document, params.position)
    if contents is None:
        return None
    return types.Hover(contents=types.MarkupContent(kind=types.MarkupKind.PlainText, value=contents))


# --- Completion ---
def completion_items() -> List[types.CompletionItem]:
    return [
        types.CompletionItem(label=name, kind=types.CompletionItemKind.Function, detail=sig)
        for name, sig in SIGNATURES.items()
    ]


@ls.feature(
    types.TEXT_DOCUMENT_COMPLETION,
    types.CompletionOptions(trigger_characters=["("]),
)
def on_completion(params: types.CompletionParams) -> types.CompletionList:
    return types.CompletionList(is_incomplete=False, items=completion_items())


def main():
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
