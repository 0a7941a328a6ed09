from __future__ import annotations

"""
A minimal pygls-based Language Server for Mola.

Features:
- Text synchronization and document store
- Diagnostics: reader errors at the offending token, unmatched parens
- Hover: built-in operator signatures and top-level list heads
- Completion: built-in operators and heads seen in the document
- Document Symbols: head symbol of each top-level list

Note: We never evaluate the buffer. We build a static index per document.
"""

import logging
from typing import Dict, Optional, List
from dataclasses import dataclass

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

from mola import __version__
from mola.builtin.env_builtin import BUILTIN_SIGNATURES
from mola_lsp.indexer import build_index, DocumentIndex

logger = logging.getLogger(__name__)

SOURCE = "mola-ls"


@dataclass
class DocumentState:
    text: str
    index: DocumentIndex


class MolaLanguageServer(LanguageServer):
    CMD_NAME = "mola-ls"

    def __init__(self):
        super().__init__(
            self.CMD_NAME, __version__, text_document_sync_kind=TextDocumentSyncKind.Full
        )
        self.documents: Dict[str, DocumentState] = {}

    def update_document(self, uri: str, text: str) -> DocumentState:
        state = DocumentState(text=text, index=build_index(text))
        logger.debug("indexed %s: %d forms, %d problems", uri, state.index.form_count, len(state.index.problems))
        self.documents[uri] = state
        return state


ls = MolaLanguageServer()


# --- Text sync ---
@ls.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    state = ls.update_document(uri, params.text_document.text or "")
    ls.publish_diagnostics(uri, collect_diagnostics(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # full sync: the last change carries the whole text
    if params.content_changes:
        text = params.content_changes[-1].text
    else:
        text = ls.documents[uri].text if uri in ls.documents else ""
    state = ls.update_document(uri, text)
    ls.publish_diagnostics(uri, collect_diagnostics(state.index))


@ls.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.documents.pop(uri, None)
    ls.publish_diagnostics(uri, [])


# --- Diagnostics ---
def collect_diagnostics(idx: DocumentIndex) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for problem in idx.problems:
        diags.append(
            Diagnostic(
                range=Range(
                    start=Position(line=problem.line, character=problem.col),
                    end=Position(line=problem.line, character=problem.col + problem.length),
                ),
                message=problem.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        )

    if idx.paren_balance != 0:
        diags.append(
            Diagnostic(
                range=Range(start=Position(line=0, character=0), end=Position(line=0, character=1)),
                message="Unmatched parentheses detected",
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    return diags


# --- Hover ---
@ls.feature(TEXT_DOCUMENT_HOVER)
def on_hover(params: HoverParams) -> Optional[Hover]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None

    word = extract_word_at(state.text, params.position)
    if not word:
        return None
    contents = hover_text(word, state.index)
    if contents is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=contents))


def hover_text(word: str, idx: DocumentIndex) -> Optional[str]:
    if word in BUILTIN_SIGNATURES:
        return BUILTIN_SIGNATURES[word]
    for head in idx.heads:
        if head.name == word:
            return f"{word} (first applied at {head.line + 1}:{head.col + 1})"
    return None


# --- Completion ---
@ls.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(params: CompletionParams) -> CompletionList:
    state = ls.documents.get(params.text_document.uri)
    return CompletionList(is_incomplete=False, items=completion_items(state.index if state else None))


def completion_items(idx: Optional[DocumentIndex]) -> List[CompletionItem]:
    items = [
        CompletionItem(label=name, kind=CompletionItemKind.Function, detail=sig)
        for name, sig in BUILTIN_SIGNATURES.items()
    ]
    if idx is not None:
        for name in sorted(idx.head_names() - BUILTIN_SIGNATURES.keys()):
            items.append(CompletionItem(label=name, kind=CompletionItemKind.Variable))
    return items


# --- Document Symbols ---
@ls.feature(TEXT_DOCUMENT_DOCUMENT_SYMBOL)
def on_document_symbols(params: DocumentSymbolParams) -> Optional[List[DocumentSymbol]]:
    state = ls.documents.get(params.text_document.uri)
    if not state:
        return None
    symbols: List[DocumentSymbol] = []
    for head in state.index.heads:
        rng = Range(
            start=Position(line=head.line, character=head.col),
            end=Position(line=head.line, character=head.col + len(head.name)),
        )
        symbols.append(
            DocumentSymbol(
                name=head.name,
                kind=SymbolKind.Operator if head.name in BUILTIN_SIGNATURES else SymbolKind.Function,
                range=rng,
                selection_range=rng,
            )
        )
    return symbols


# --- Helpers ---
def extract_word_at(text: str, pos: Position) -> Optional[str]:
    lines = text.splitlines(True)
    if pos.line >= len(lines):
        return None
    line = lines[pos.line]
    # expand to word boundaries
    start = end = min(pos.character, len(line))
    while start > 0 and line[start - 1] not in " \t()\n\r":
        start -= 1
    while end < len(line) and line[end] not in " \t()\n\r":
        end += 1
    word = line[start:end]
    return word or None


def main():
    # Run the language server over stdio
    logging.basicConfig(level=logging.WARNING)
    ls.start_io()


if __name__ == "__main__":
    main()
