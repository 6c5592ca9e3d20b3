"""Minimal LSP server for utrim: trailing whitespace diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from utrim import __version__
from utrim.lines import split_lines
from utrim.report import region_message
from utrim.trim import rtrim_index

server = LanguageServer("utrim-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _character(line: bytes, offset: int) -> int:
    """Convert a byte offset within line to an LSP character (UTF-16 code unit)."""
    prefix = line[:offset].decode("utf-8", errors="replace")
    return len(prefix.encode("utf-16-le")) // 2


def _validate(ls: LanguageServer, uri: str) -> None:
    """Publish one warning per line that ends in whitespace."""
    doc = ls.workspace.get_text_document(uri)
    data = doc.source.encode("utf-8")
    diagnostics: list[Diagnostic] = []

    for line_idx, (content, _) in enumerate(split_lines(data)):
        end = rtrim_index(content)
        if end == len(content):
            continue
        diagnostics.append(
            Diagnostic(
                range=Range(
                    start=Position(line=line_idx, character=_character(content, end)),
                    end=Position(line=line_idx, character=_character(content, len(content))),
                ),
                message=region_message("trailing", content[end:]),
                severity=DiagnosticSeverity.Warning,
                source="utrim",
            )
        )

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
