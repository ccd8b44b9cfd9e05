"""Diagnostic computation for classhole documents.

Runs the compiler pipeline (lexer -> parser -> checker) on source text and
converts the first error into an LSP Diagnostic.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlparse, unquote

from lsprotocol import types as lsp

from ..ast_nodes import Program
from ..errors import CompileError
from ..lexer import Lexer
from ..parser import Parser
from ..tokens import Token
from ..typechecker import CheckedProgram, TypeChecker

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Result of analyzing one version of a document."""

    uri: str
    source: str
    diagnostics: list[lsp.Diagnostic] = field(default_factory=list)
    tokens: Optional[list[Token]] = None
    ast: Optional[Program] = None
    checked: Optional[CheckedProgram] = None


def uri_to_path(uri: str) -> str:
    """Convert file:// URI to filesystem path."""
    return unquote(urlparse(uri).path)


def _make_diagnostic(
    line: int,
    col: int,
    message: str,
    code: Optional[str] = None,
    severity: lsp.DiagnosticSeverity = lsp.DiagnosticSeverity.Error,
) -> lsp.Diagnostic:
    """Create an LSP Diagnostic.

    classhole uses 1-based line/col; LSP uses 0-based.
    """
    line_0 = max(0, line - 1)
    col_0 = max(0, col - 1)
    return lsp.Diagnostic(
        range=lsp.Range(
            start=lsp.Position(line=line_0, character=col_0),
            end=lsp.Position(line=line_0, character=col_0 + 1),
        ),
        message=message,
        severity=severity,
        code=code,
        source="classhole",
    )


def compute_diagnostics(uri: str, source: str) -> AnalysisResult:
    """Run the compiler pipeline and return at most one diagnostic."""
    result = AnalysisResult(uri=uri, source=source)
    filename = uri_to_path(uri).rsplit("/", 1)[-1] or "<stdin>"

    try:
        result.tokens = Lexer(source, filename).tokenize()
        result.ast = Parser(result.tokens).parse()
        result.checked = TypeChecker().check(result.ast)
    except CompileError as e:
        logger.debug("%s: %s error: %s", uri, e.kind, e)
        result.diagnostics.append(_make_diagnostic(e.line, e.col, e.message, code=e.kind))

    return result
