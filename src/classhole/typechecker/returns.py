"""Conservative control-flow queries over statement trees."""

from ..ast_nodes import BlockStmt, BreakStmt, IfStmt, ReturnStmt


class ReturnsMixin:

    def _must_return(self, stmt) -> bool:
        """True if every path through ``stmt`` ends in a return.

        Loops never count: the checker does not reason about their conditions.
        """
        if isinstance(stmt, ReturnStmt):
            return True
        if isinstance(stmt, BlockStmt):
            return self._must_return_all(stmt.statements)
        if isinstance(stmt, IfStmt):
            return (stmt.else_stmt is not None
                    and self._must_return(stmt.then_stmt)
                    and self._must_return(stmt.else_stmt))
        return False

    def _must_return_all(self, stmts) -> bool:
        return any(self._must_return(s) for s in stmts)

    def _always_exits(self, stmt) -> bool:
        """Like _must_return, but a 'break' also leaves the current path."""
        if isinstance(stmt, (ReturnStmt, BreakStmt)):
            return True
        if isinstance(stmt, BlockStmt):
            return any(self._always_exits(s) for s in stmt.statements)
        if isinstance(stmt, IfStmt):
            return (stmt.else_stmt is not None
                    and self._always_exits(stmt.then_stmt)
                    and self._always_exits(stmt.else_stmt))
        return False
