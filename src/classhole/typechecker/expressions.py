"""Expression typing."""

from ..ast_nodes import (
    BinaryExpr, BoolLiteral, IntLiteral, MethodCallExpr, NewExpr, ParenExpr,
    PrintlnExpr, StringLiteral, ThisExpr, VarExpr,
)
from ..errors import InitializationError, NameCheckError, TypeCheckError, TypeMismatchError
from .types import BOOLEAN, INT, STRING, VOID, ClassType, Type, resolve_type

ARITHMETIC_OPS = {"+", "-", "*", "/"}
RELATIONAL_OPS = {"<", ">", "<=", ">="}
EQUALITY_OPS = {"==", "!="}


class ExpressionsMixin:

    def _check_expr(self, expr, env) -> Type:
        if isinstance(expr, IntLiteral):
            return INT
        if isinstance(expr, BoolLiteral):
            return BOOLEAN
        if isinstance(expr, StringLiteral):
            return STRING
        if isinstance(expr, VarExpr):
            return self._check_var(expr, env)
        if isinstance(expr, ThisExpr):
            if self.current_class is None:
                raise NameCheckError("'this' used outside of a class", expr.line, expr.col)
            return ClassType(self.current_class.name)
        if isinstance(expr, ParenExpr):
            return self._check_expr(expr.expr, env)
        if isinstance(expr, BinaryExpr):
            return self._check_binary(expr, env)
        if isinstance(expr, NewExpr):
            # Constructor arity and argument types are not checked here.
            for arg in expr.args:
                self._check_expr(arg, env)
            return ClassType(expr.class_name)
        if isinstance(expr, MethodCallExpr):
            return self._check_method_call(expr, env)
        if isinstance(expr, PrintlnExpr):
            self._check_expr(expr.expr, env)
            return VOID
        raise TypeCheckError(f"Unhandled expression type: {type(expr).__name__}")

    def _check_var(self, expr: VarExpr, env) -> Type:
        info = env.lookup(expr.name)
        if info is None:
            raise NameCheckError(f"Undeclared variable '{expr.name}'", expr.line, expr.col)
        if not info.initialized:
            raise InitializationError(
                f"Variable '{expr.name}' used before initialization", expr.line, expr.col)
        return info.type

    def _check_binary(self, expr: BinaryExpr, env) -> Type:
        left = self._check_expr(expr.left, env)
        right = self._check_expr(expr.right, env)
        op = expr.op
        if op in ARITHMETIC_OPS or op in RELATIONAL_OPS:
            if left != INT or right != INT:
                raise TypeMismatchError(
                    f"Operator '{op}' requires Int operands, got '{left}' and '{right}'",
                    expr.line, expr.col)
            return INT if op in ARITHMETIC_OPS else BOOLEAN
        if op in EQUALITY_OPS:
            return BOOLEAN
        raise TypeCheckError(f"Unknown binary operator '{op}'", expr.line, expr.col)

    def _check_method_call(self, expr: MethodCallExpr, env) -> Type:
        current = self._check_expr(expr.receiver, env)
        for link in expr.chain:
            current = self._check_call_link(current, link, env)
        return current

    def _check_call_link(self, receiver: Type, link, env) -> Type:
        if not isinstance(receiver, ClassType):
            raise TypeMismatchError(
                f"Cannot call method '{link.method_name}' on non-class type '{receiver}'",
                link.line, link.col)
        method = self.class_table.get_method(receiver.name, link.method_name)
        if method is None:
            raise NameCheckError(
                f"Method '{link.method_name}' not found in class '{receiver.name}'",
                link.line, link.col)
        if len(link.args) != len(method.params):
            raise TypeMismatchError(
                f"Method '{link.method_name}' expects {len(method.params)} argument(s) "
                f"but got {len(link.args)}", link.line, link.col)
        for i, (arg, param) in enumerate(zip(link.args, method.params)):
            actual = self._check_expr(arg, env)
            expected = resolve_type(param.type)
            if not self.subtypes.is_subtype(actual.name, expected.name):
                raise TypeMismatchError(
                    f"Argument {i + 1} of '{link.method_name}' has type '{actual}', "
                    f"expected '{expected}'", arg.line, arg.col)
        return resolve_type(method.return_type)
