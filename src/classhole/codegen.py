"""JavaScript code generator for the classhole language.

Transforms a checked program into prototype-based JavaScript. Classes become
constructor functions, methods are installed on the prototype and the entry
statements follow at top level.
"""

from __future__ import annotations
from .ast_nodes import (
    AssignStmt,
    BinaryExpr,
    BlockStmt,
    BoolLiteral,
    BreakStmt,
    ClassDef,
    ExprStmt,
    IfStmt,
    IntLiteral,
    MethodCallExpr,
    MethodDef,
    NewExpr,
    ParenExpr,
    PrintlnExpr,
    ReturnStmt,
    StringLiteral,
    SuperStmt,
    ThisExpr,
    VarDecStmt,
    VarExpr,
    WhileStmt,
)
from .typechecker import CheckedProgram

FIELD_DEFAULTS = {"Int": "0", "Boolean": "false", "String": '""'}

# JavaScript reserved words, plus the globals the generated code relies on.
# Bindings with these names get a '$' suffix, which classhole identifiers
# can never contain.
JS_RESERVED = {
    "arguments", "await", "case", "catch", "const", "continue", "debugger",
    "default", "delete", "do", "enum", "eval", "export", "finally", "for",
    "function", "implements", "import", "in", "instanceof", "interface",
    "let", "null", "package", "private", "protected", "public", "static",
    "switch", "throw", "try", "typeof", "undefined", "var", "void", "with",
    "yield", "NaN", "Infinity", "Object", "console",
}

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_name(name: str) -> str:
    """A classhole identifier as a JavaScript binding name."""
    if name in JS_RESERVED:
        return name + "$"
    return name


def js_string(value: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(ch, ch) for ch in value) + '"'


class CodeGen:
    def __init__(self, checked: CheckedProgram):
        self.checked = checked
        self.program = checked.program
        self.output: list[str] = []
        self.indent_level = 0

    def generate(self) -> str:
        for decl in self._ordered_classes():
            self._emit_class(decl)
            self._emit()
        for stmt in self.program.statements:
            self._emit_stmt(stmt)
        return "\n".join(self.output) + "\n"

    # ---- Output helpers ----

    def _emit(self, line: str = ""):
        if line:
            self.output.append("  " * self.indent_level + line)
        else:
            self.output.append("")

    def _ordered_classes(self) -> list[ClassDef]:
        """Superclasses before subclasses, otherwise in source order."""
        by_name = {decl.name: decl for decl in self.program.classes}
        ordered: list[ClassDef] = []
        placed: set[str] = set()

        def place(decl):
            if decl.name in placed:
                return
            placed.add(decl.name)
            parent = by_name.get(decl.superclass) if decl.superclass else None
            if parent is not None:
                place(parent)
            ordered.append(decl)

        for decl in self.program.classes:
            place(decl)
        return ordered

    # ---- Classes ----

    def _emit_class(self, decl: ClassDef):
        ctor = decl.constructor
        param_names = [p.name for p in ctor.params]
        name = js_name(decl.name)
        self._emit(f"function {name}({', '.join(js_name(p) for p in param_names)}) {{")
        self.indent_level += 1
        for fld in decl.fields:
            if fld.name in param_names:
                self._emit(f"this.{fld.name} = {js_name(fld.name)};")
            else:
                self._emit(f"this.{fld.name} = {FIELD_DEFAULTS.get(fld.type, 'null')};")
        if ctor.super_args is not None:
            args = "".join(f", {self._expr(a)}" for a in ctor.super_args)
            self._emit(f"{js_name(decl.superclass)}.call(this{args});")
        for stmt in ctor.body:
            self._emit_stmt(stmt)
        self.indent_level -= 1
        self._emit("}")

        if decl.superclass:
            parent = js_name(decl.superclass)
            self._emit(f"{name}.prototype = Object.create({parent}.prototype);")
            self._emit(f"{name}.prototype.constructor = {name};")

        for method in decl.methods:
            self._emit_method(name, method)

    def _emit_method(self, class_name: str, method: MethodDef):
        params = ", ".join(js_name(p.name) for p in method.params)
        self._emit(f"{class_name}.prototype.{method.name} = function({params}) {{")
        self.indent_level += 1
        for stmt in method.body:
            self._emit_stmt(stmt)
        self.indent_level -= 1
        self._emit("};")

    # ---- Statements ----

    def _emit_stmt(self, stmt):
        if isinstance(stmt, VarDecStmt):
            self._emit(f"let {js_name(stmt.name)};")
        elif isinstance(stmt, AssignStmt):
            self._emit(f"{js_name(stmt.name)} = {self._expr(stmt.value)};")
        elif isinstance(stmt, BlockStmt):
            self._emit("{")
            self._emit_body(stmt.statements)
            self._emit("}")
        elif isinstance(stmt, IfStmt):
            self._emit(f"if ({self._expr(stmt.condition)}) {{")
            self._emit_body(self._unwrap(stmt.then_stmt))
            if stmt.else_stmt is not None:
                self._emit("} else {")
                self._emit_body(self._unwrap(stmt.else_stmt))
            self._emit("}")
        elif isinstance(stmt, WhileStmt):
            self._emit(f"while ({self._expr(stmt.condition)}) {{")
            self._emit_body(self._unwrap(stmt.body))
            self._emit("}")
        elif isinstance(stmt, ReturnStmt):
            if stmt.value is None:
                self._emit("return;")
            else:
                self._emit(f"return {self._expr(stmt.value)};")
        elif isinstance(stmt, BreakStmt):
            self._emit("break;")
        elif isinstance(stmt, ExprStmt):
            self._emit(f"{self._expr(stmt.expr)};")
        elif isinstance(stmt, SuperStmt):
            raise ValueError("super(...) outside of a constructor header cannot be generated")
        else:
            raise ValueError(f"Unknown statement type: {type(stmt).__name__}")

    def _emit_body(self, stmts):
        self.indent_level += 1
        for s in stmts:
            self._emit_stmt(s)
        self.indent_level -= 1

    @staticmethod
    def _unwrap(stmt) -> list:
        """Statements to place inside a braced branch or loop body."""
        if isinstance(stmt, BlockStmt):
            return stmt.statements
        return [stmt]

    # ---- Expressions ----

    def _expr(self, expr) -> str:
        if isinstance(expr, IntLiteral):
            return str(expr.value)
        if isinstance(expr, BoolLiteral):
            return "true" if expr.value else "false"
        if isinstance(expr, StringLiteral):
            return js_string(expr.value)
        if isinstance(expr, VarExpr):
            return js_name(expr.name)
        if isinstance(expr, ThisExpr):
            return "this"
        if isinstance(expr, ParenExpr):
            return f"({self._expr(expr.expr)})"
        if isinstance(expr, BinaryExpr):
            return f"({self._expr(expr.left)} {expr.op} {self._expr(expr.right)})"
        if isinstance(expr, NewExpr):
            args = ", ".join(self._expr(a) for a in expr.args)
            return f"new {js_name(expr.class_name)}({args})"
        if isinstance(expr, MethodCallExpr):
            code = self._expr(expr.receiver)
            for link in expr.chain:
                args = ", ".join(self._expr(a) for a in link.args)
                code += f".{link.method_name}({args})"
            return code
        if isinstance(expr, PrintlnExpr):
            return f"console.log({self._expr(expr.expr)})"
        raise ValueError(f"Unknown expression type: {type(expr).__name__}")
