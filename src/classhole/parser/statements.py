"""Statement dispatch, variable declaration detection and parsing."""

from ..ast_nodes import (
    AssignStmt,
    BlockStmt,
    BreakStmt,
    ExprStmt,
    IfStmt,
    ReturnStmt,
    SuperStmt,
    VarDecStmt,
    WhileStmt,
)
from ..tokens import TokenType, TYPE_START


class StatementsMixin:

    def _parse_block(self) -> BlockStmt:
        tok = self._expect(TokenType.LBRACE, "'{'")
        stmts = self._parse_statements_until_rbrace()
        self._expect(TokenType.RBRACE, "'}'")
        return BlockStmt(statements=stmts, line=tok.line, col=tok.col)

    def _parse_statements_until_rbrace(self) -> list:
        stmts = []
        while not self._check(TokenType.RBRACE) and not self._at_end():
            stmts.append(self._parse_statement())
        return stmts

    def _parse_statement(self):
        tok = self._peek()

        if tok.type == TokenType.LBRACE:
            return self._parse_block()
        if tok.type == TokenType.WHILE:
            return self._parse_while_stmt()
        if tok.type == TokenType.IF:
            return self._parse_if_stmt()
        if tok.type == TokenType.RETURN:
            return self._parse_return_stmt()
        if tok.type == TokenType.BREAK:
            self._advance()
            self._expect(TokenType.SEMICOLON, "';' after 'break'")
            return BreakStmt(line=tok.line, col=tok.col)

        if self._is_var_decl_start():
            return self._parse_var_decl_stmt()
        if tok.type == TokenType.IDENT and self._peek(1).type == TokenType.EQ:
            return self._parse_assign_stmt()
        if tok.type == TokenType.SUPER:
            return self._parse_super_stmt()

        return self._parse_expr_stmt()

    # ---- Variable declaration ----

    def _is_var_decl_start(self) -> bool:
        """Type-like token, then identifier, then ';'."""
        return (self._peek().type in TYPE_START
                and self._peek(1).type == TokenType.IDENT
                and self._peek(2).type == TokenType.SEMICOLON)

    def _parse_type(self) -> str:
        tok = self._peek()
        if tok.type not in TYPE_START:
            raise self._unexpected("type")
        self._advance()
        return tok.value

    def _parse_var_dec(self) -> VarDecStmt:
        tok = self._peek()
        type_name = self._parse_type()
        name = self._expect(TokenType.IDENT, "variable name").value
        return VarDecStmt(type=type_name, name=name, line=tok.line, col=tok.col)

    def _parse_var_decl_stmt(self) -> VarDecStmt:
        decl = self._parse_var_dec()
        self._expect(TokenType.SEMICOLON, "';' after variable declaration")
        return decl

    def _parse_params(self) -> list[VarDecStmt]:
        """comma_vardec ::= [vardec (',' vardec)*], stopping before ')'."""
        params = []
        if self._check(TokenType.RPAREN):
            return params
        params.append(self._parse_var_dec())
        while self._match(TokenType.COMMA):
            params.append(self._parse_var_dec())
        return params

    # ---- Simple statements ----

    def _parse_assign_stmt(self) -> AssignStmt:
        tok = self._advance()
        self._expect(TokenType.EQ, "'='")
        value = self._parse_expr()
        self._expect(TokenType.SEMICOLON, "';' after assignment")
        return AssignStmt(name=tok.value, value=value, line=tok.line, col=tok.col)

    def _parse_super_stmt(self) -> SuperStmt:
        tok = self._expect(TokenType.SUPER, "'super'")
        self._expect(TokenType.LPAREN, "'(' after 'super'")
        args = self._parse_args()
        self._expect(TokenType.RPAREN, "')' after super arguments")
        self._expect(TokenType.SEMICOLON, "';' after super(...)")
        return SuperStmt(args=args, line=tok.line, col=tok.col)

    def _parse_return_stmt(self) -> ReturnStmt:
        tok = self._expect(TokenType.RETURN)
        value = None
        if not self._check(TokenType.SEMICOLON):
            value = self._parse_expr()
        self._expect(TokenType.SEMICOLON, "';' after return")
        return ReturnStmt(value=value, line=tok.line, col=tok.col)

    def _parse_expr_stmt(self) -> ExprStmt:
        tok = self._peek()
        expr = self._parse_expr()
        self._expect(TokenType.SEMICOLON, "';' after expression")
        return ExprStmt(expr=expr, line=tok.line, col=tok.col)

    # ---- Control flow ----

    def _parse_while_stmt(self) -> WhileStmt:
        tok = self._expect(TokenType.WHILE)
        self._expect(TokenType.LPAREN, "'(' after 'while'")
        condition = self._parse_expr()
        self._expect(TokenType.RPAREN, "')' after while condition")
        body = self._parse_statement()
        return WhileStmt(condition=condition, body=body, line=tok.line, col=tok.col)

    def _parse_if_stmt(self) -> IfStmt:
        tok = self._expect(TokenType.IF)
        self._expect(TokenType.LPAREN, "'(' after 'if'")
        condition = self._parse_expr()
        self._expect(TokenType.RPAREN, "')' after if condition")
        then_stmt = self._parse_statement()
        else_stmt = None
        if self._match(TokenType.ELSE):
            else_stmt = self._parse_statement()
        return IfStmt(condition=condition, then_stmt=then_stmt,
                      else_stmt=else_stmt, line=tok.line, col=tok.col)
