"""Statement checking and branch-sensitive definite assignment."""

from ..ast_nodes import (
    AssignStmt, BlockStmt, BreakStmt, ExprStmt, IfStmt, ReturnStmt,
    SuperStmt, VarDecStmt, WhileStmt,
)
from ..errors import NameCheckError, StructuralError, TypeCheckError, TypeMismatchError
from .types import BOOLEAN, VOID, resolve_type


class StatementsMixin:

    def _check_stmt(self, stmt, env):
        if isinstance(stmt, VarDecStmt):
            env.declare(stmt.name, resolve_type(stmt.type), stmt.line, stmt.col)
        elif isinstance(stmt, AssignStmt):
            self._check_assign(stmt, env)
        elif isinstance(stmt, BlockStmt):
            block_env = env.child()
            for s in stmt.statements:
                self._check_stmt(s, block_env)
        elif isinstance(stmt, IfStmt):
            self._check_condition(stmt.condition, env, "if")
            branches = [stmt.then_stmt]
            if stmt.else_stmt is not None:
                branches.append(stmt.else_stmt)
            self._check_branches(branches, env, falls_through=stmt.else_stmt is None)
        elif isinstance(stmt, WhileStmt):
            self._check_condition(stmt.condition, env, "while")
            self.loop_depth += 1
            # The body may run zero times: nothing it assigns survives the loop.
            self._check_branches([stmt.body], env, falls_through=True)
            self.loop_depth -= 1
        elif isinstance(stmt, ReturnStmt):
            self._check_return(stmt, env)
        elif isinstance(stmt, BreakStmt):
            if self.loop_depth == 0:
                raise StructuralError("'break' statement outside of loop",
                                      stmt.line, stmt.col)
        elif isinstance(stmt, ExprStmt):
            self._check_expr(stmt.expr, env)
        elif isinstance(stmt, SuperStmt):
            raise StructuralError(
                "super(...) is only allowed as the first statement of a constructor",
                stmt.line, stmt.col)
        else:
            raise TypeCheckError(f"Unhandled statement type: {type(stmt).__name__}")

    def _check_assign(self, stmt, env):
        info = env.lookup(stmt.name)
        if info is None:
            raise NameCheckError(f"Undeclared variable '{stmt.name}'", stmt.line, stmt.col)
        actual = self._check_expr(stmt.value, env)
        if not self.subtypes.is_subtype(actual.name, info.type.name):
            raise TypeMismatchError(
                f"Cannot assign '{actual}' to variable '{stmt.name}' of type '{info.type}'",
                stmt.line, stmt.col)
        info.initialized = True

    def _check_condition(self, condition, env, keyword):
        cond_type = self._check_expr(condition, env)
        if cond_type != BOOLEAN:
            raise TypeMismatchError(
                f"'{keyword}' condition must be Boolean, got '{cond_type}'",
                condition.line, condition.col)

    def _check_return(self, stmt, env):
        if self.current_return_type is None:
            raise StructuralError("'return' outside of a method", stmt.line, stmt.col)
        expected = self.current_return_type
        if stmt.value is not None:
            actual = self._check_expr(stmt.value, env)
            if not self.subtypes.is_subtype(actual.name, expected.name):
                raise TypeMismatchError(
                    f"Return type mismatch in {self.current_member}: expected "
                    f"'{expected}' but got '{actual}'", stmt.line, stmt.col)
        elif expected != VOID:
            raise TypeMismatchError(
                f"{self.current_member} must return a value of type '{expected}'",
                stmt.line, stmt.col)

    def _check_branches(self, branches, env, falls_through):
        """Check alternative paths, keeping only assignments made on all of them.

        Each branch gets its own child scope. A branch that always exits
        (return/break) never reaches the join point, so it does not limit
        the merge; ``falls_through`` adds an implicit empty path.
        """
        pending = env.uninitialized()
        survivors = None
        for branch in branches:
            self._check_stmt(branch, env.child())
            assigned = {id(info) for info in pending if info.initialized}
            for info in pending:
                info.initialized = False
            if self._always_exits(branch):
                continue
            survivors = assigned if survivors is None else survivors & assigned
        if falls_through or survivors is None:
            return
        for info in pending:
            if id(info) in survivors:
                info.initialized = True
