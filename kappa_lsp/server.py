from __future__ import annotations

"""
A minimal pygls-based Language Server for Kappa Lisp.

Features:
- Text synchronization (full documents) and a document store
- Diagnostics: the first lex/parse error, at its exact position
- Hover: builtin and special-form signatures, defun locations
- Completion: builtins, special forms, defuns in the document
- Document Symbols: top-level defuns

Note: We never evaluate the buffer. We build a static index per document.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygls.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DOCUMENT_SYMBOL,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentSymbol,
    DocumentSymbolParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    SymbolKind,
    TextDocumentSyncKind,
)

from kappa import __version__
from kappa.config import get_log_level
from kappa_lsp.indexer import (
    BUILTIN_SIGNATURES,
    SPECIAL_FORM_SIGNATURES,
    DocumentIndex,
    build_index,
    describe,
    word_at,
)

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class KappaLanguageServer(LanguageServer):
    CMD_NAME = "kappa-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME,
            __version__,
            text_document_sync_kind=TextDocumentSyncKind.Full,
        )
        self.documents: Dict[str, DocumentState] = {}


ls = KappaLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _update_document(uri, params.text_document.text or "")


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    _update_document(uri, text)


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


def _update_document(uri: str, text: str) -> None:
    idx = build_index(text)
    ls.documents[uri] = DocumentState(text=text, index=idx)
    logger.debug("indexed %s: %d definition(s)", uri, len(idx.symbols))
    _publish_diagnostics(uri, idx)


# --- Diagnostics ---
def _mk_range(line: int, col: int, length: int = 1) -> Range:
    return Range(start=Position(line=line, character=col), end=Position(line=line, character=col + length))


def _publish_diagnostics(uri: str, idx: DocumentIndex):
    diags: List[Diagnostic] = []
    if idx.problem is not None:
        diags.append(
            Diagnostic(
                range=_mk_range(idx.problem.line, idx.problem.col),
                message=idx.problem.message,
                severity=DiagnosticSeverity.Error,
                source=KappaLanguageServer.CMD_NAME,
            )
        )
    ls.publish_diagnostics(uri, diags)


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = word_at(state.text, params.position.line, params.position.character)
    if not word:
        return None
    contents = describe(word, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    items: List[CompletionItem] = []
    for name, sig in BUILTIN_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig))
    for name, sig in SPECIAL_FORM_SIGNATURES.items():
        items.append(CompletionItem(label=name, kind=CompletionItemKind.Keyword, detail=sig))

    state = ls.documents.get(params.text_document.uri)
    if state:
        for name in state.index.symbols:
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Function))
    return CompletionList(is_incomplete=False, items=items)


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for name, sdef in state.index.symbols.items():
        rng = _mk_range(sdef.line, sdef.col, len(name))
        symbols.append(
            DocumentSymbol(name=name, kind=SymbolKind.Function, range=rng, selection_range=rng)
        )
    return symbols


def main() -> None:
    # stdout carries the protocol, so logs must go to stderr
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    logger.info("starting %s %s", KappaLanguageServer.CMD_NAME, __version__)
    ls.start_io()


if __name__ == "__main__":
    # Run the language server over stdio
    main()
