"""Document symbol provider: classes with their fields, constructor and methods."""

from lsprotocol import types as lsp

from ..ast_nodes import ClassDef
from .diagnostics import AnalysisResult


def _pos(line: int, col: int) -> lsp.Position:
    """Convert 1-based classhole position to 0-based LSP position."""
    return lsp.Position(line=max(0, line - 1), character=max(0, col - 1))


def _node_range(node, name: str) -> lsp.Range:
    start = _pos(node.line, node.col)
    end = lsp.Position(line=start.line, character=start.character + max(len(name), 1))
    return lsp.Range(start=start, end=end)


def _symbol(node, name, kind, detail=None, children=None) -> lsp.DocumentSymbol:
    rng = _node_range(node, name)
    return lsp.DocumentSymbol(name=name, kind=kind, range=rng, selection_range=rng,
                              detail=detail, children=children)


def _class_symbol(decl: ClassDef) -> lsp.DocumentSymbol:
    children = [_symbol(f, f.name, lsp.SymbolKind.Field, detail=f.type) for f in decl.fields]
    ctor = decl.constructor
    params = ", ".join(f"{p.type} {p.name}" for p in ctor.params)
    children.append(_symbol(ctor, "init", lsp.SymbolKind.Constructor, detail=f"init({params})"))
    for method in decl.methods:
        params = ", ".join(f"{p.type} {p.name}" for p in method.params)
        children.append(_symbol(method, method.name, lsp.SymbolKind.Method,
                                detail=f"({params}) {method.return_type}"))
    detail = f"extends {decl.superclass}" if decl.superclass else None
    return _symbol(decl, decl.name, lsp.SymbolKind.Class, detail=detail, children=children)


def get_document_symbols(result: AnalysisResult) -> list[lsp.DocumentSymbol]:
    """Outline for the last parsed AST; empty when the document did not parse."""
    if result.ast is None:
        return []
    return [_class_symbol(decl) for decl in result.ast.classes]
