"""AST node definitions for the classhole language.

Every node records the 1-based line/col of its first token. Expression and
statement variants are gathered into the ``Expr`` and ``Stmt`` unions at the
bottom of the module; consumers dispatch over them with isinstance chains
that raise on an unknown variant.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Program:
    classes: list[ClassDef] = field(default_factory=list)
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class ClassDef:
    name: str = ""
    superclass: Optional[str] = None
    fields: list[VarDecStmt] = field(default_factory=list)
    constructor: ConstructorDef = None
    methods: list[MethodDef] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class ConstructorDef:
    params: list[VarDecStmt] = field(default_factory=list)
    super_args: Optional[list[Expr]] = None
    body: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class MethodDef:
    name: str = ""
    params: list[VarDecStmt] = field(default_factory=list)
    return_type: str = ""
    body: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


# --- Statements ---

@dataclass
class VarDecStmt:
    type: str = ""
    name: str = ""
    line: int = 0
    col: int = 0


@dataclass
class AssignStmt:
    name: str = ""
    value: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class BlockStmt:
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class IfStmt:
    condition: Expr = None
    then_stmt: Stmt = None
    else_stmt: Optional[Stmt] = None
    line: int = 0
    col: int = 0


@dataclass
class WhileStmt:
    condition: Expr = None
    body: Stmt = None
    line: int = 0
    col: int = 0


@dataclass
class ReturnStmt:
    value: Optional[Expr] = None
    line: int = 0
    col: int = 0


@dataclass
class BreakStmt:
    line: int = 0
    col: int = 0


@dataclass
class ExprStmt:
    expr: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class SuperStmt:
    args: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


# --- Expressions ---

@dataclass
class IntLiteral:
    value: int = 0
    line: int = 0
    col: int = 0


@dataclass
class BoolLiteral:
    value: bool = False
    line: int = 0
    col: int = 0


@dataclass
class StringLiteral:
    value: str = ""
    line: int = 0
    col: int = 0


@dataclass
class VarExpr:
    name: str = ""
    line: int = 0
    col: int = 0


@dataclass
class ThisExpr:
    line: int = 0
    col: int = 0


@dataclass
class ParenExpr:
    expr: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class BinaryExpr:
    left: Expr = None
    op: str = ""
    right: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class NewExpr:
    class_name: str = ""
    args: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class CallLink:
    method_name: str = ""
    args: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class MethodCallExpr:
    """``receiver.a(...).b(...)``; links apply left to right."""
    receiver: Expr = None
    chain: list[CallLink] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class PrintlnExpr:
    expr: Expr = None
    line: int = 0
    col: int = 0


# --- Union type aliases for sum types ---

Stmt = Union[VarDecStmt, AssignStmt, BlockStmt, IfStmt, WhileStmt, ReturnStmt,
             BreakStmt, ExprStmt, SuperStmt]
Expr = Union[IntLiteral, BoolLiteral, StringLiteral, VarExpr, ThisExpr, ParenExpr,
             BinaryExpr, NewExpr, MethodCallExpr, PrintlnExpr]
