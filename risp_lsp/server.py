from __future__ import annotations

"""
A minimal pygls-based Language Server for risp.

Features:
- Full text synchronization and document store
- Diagnostics: unmatched delimiters and other parse errors, evaluation errors
- Hover: the value the shell would print for the hovered line
"""

import logging
from typing import Dict, Optional
from dataclasses import dataclass

from pygls.server import LanguageServer
from lsprotocol.types import (
    TextDocumentSyncKind,
    DidOpenTextDocumentParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
)

from risp.config import get_log_level
from risp.interpreter import Interpreter
from risp_lsp.diagnostics import DocumentAnalysis, analyze

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    analysis: DocumentAnalysis


class RispLanguageServer(LanguageServer):
    CMD_NAME = "risp-ls"

    def __init__(self):
        super().__init__(self.CMD_NAME, "v0.1", text_document_sync_kind=TextDocumentSyncKind.Full)
        self.documents: Dict[str, DocumentState] = {}
        # symbols interned while analysing buffers are shared across documents
        self.interp = Interpreter()


ls = RispLanguageServer()


# --- Text sync ---
def _update(uri: str, text: str) -> None:
    ls.documents[uri] = DocumentState(text=text, analysis=analyze(text, ls.interp))
    diags = ls.documents[uri].analysis.diagnostics
    logger.debug("%s: %d diagnostics", uri, len(diags))
    ls.publish_diagnostics(uri, diags)


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
    if uri in ls.documents:
        del ls.documents[uri]
    ls.publish_diagnostics(uri, [])


# --- Hover ---
@ls.feature("textDocument/hover")
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    contents = state.analysis.hover_text(params.position.line)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def main() -> None:
    logging.basicConfig(level=get_log_level())
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
