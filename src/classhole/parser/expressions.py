"""Expression parsing: precedence climbing from relational down to primary."""

from ..ast_nodes import (
    BinaryExpr,
    BoolLiteral,
    CallLink,
    IntLiteral,
    MethodCallExpr,
    NewExpr,
    ParenExpr,
    PrintlnExpr,
    StringLiteral,
    ThisExpr,
    VarExpr,
)
from ..tokens import TokenType

RELATIONAL_OPS = (
    TokenType.EQ_EQ, TokenType.BANG_EQ, TokenType.LT_EQ,
    TokenType.GT_EQ, TokenType.LT, TokenType.GT,
)


class ExpressionsMixin:

    def _parse_expr(self):
        return self._parse_relational()

    def _parse_relational(self):
        left = self._parse_additive()
        while self._check(*RELATIONAL_OPS):
            op = self._advance().value
            right = self._parse_additive()
            left = BinaryExpr(left=left, op=op, right=right,
                              line=left.line, col=left.col)
        return left

    def _parse_additive(self):
        left = self._parse_multiplicative()
        while self._check(TokenType.PLUS, TokenType.MINUS):
            op = self._advance().value
            right = self._parse_multiplicative()
            left = BinaryExpr(left=left, op=op, right=right,
                              line=left.line, col=left.col)
        return left

    def _parse_multiplicative(self):
        left = self._parse_call()
        while self._check(TokenType.STAR, TokenType.SLASH):
            op = self._advance().value
            right = self._parse_call()
            left = BinaryExpr(left=left, op=op, right=right,
                              line=left.line, col=left.col)
        return left

    def _parse_call(self):
        receiver = self._parse_primary()
        chain = []
        while self._check(TokenType.DOT):
            dot = self._advance()
            name = self._expect(TokenType.IDENT, "method name after '.'").value
            self._expect(TokenType.LPAREN, "'(' after method name")
            args = self._parse_args()
            self._expect(TokenType.RPAREN, "')' after arguments")
            chain.append(CallLink(method_name=name, args=args,
                                  line=dot.line, col=dot.col))
        if not chain:
            return receiver
        return MethodCallExpr(receiver=receiver, chain=chain,
                              line=receiver.line, col=receiver.col)

    def _parse_primary(self):
        tok = self._peek()

        if tok.type == TokenType.IDENT:
            self._advance()
            return VarExpr(name=tok.value, line=tok.line, col=tok.col)
        if tok.type == TokenType.INT_LIT:
            self._advance()
            return IntLiteral(value=int(tok.value), line=tok.line, col=tok.col)
        if tok.type == TokenType.STRING_LIT:
            self._advance()
            return StringLiteral(value=tok.value, line=tok.line, col=tok.col)
        if tok.type in (TokenType.TRUE, TokenType.FALSE):
            self._advance()
            return BoolLiteral(value=tok.type == TokenType.TRUE,
                               line=tok.line, col=tok.col)
        if tok.type == TokenType.THIS:
            self._advance()
            return ThisExpr(line=tok.line, col=tok.col)
        if tok.type == TokenType.PRINTLN:
            self._advance()
            self._expect(TokenType.LPAREN, "'(' after 'println'")
            inner = self._parse_expr()
            self._expect(TokenType.RPAREN, "')' after println argument")
            return PrintlnExpr(expr=inner, line=tok.line, col=tok.col)
        if tok.type == TokenType.NEW:
            self._advance()
            class_name = self._expect(TokenType.IDENT, "class name after 'new'").value
            self._expect(TokenType.LPAREN, "'(' after class name")
            args = self._parse_args()
            self._expect(TokenType.RPAREN, "')' after constructor arguments")
            return NewExpr(class_name=class_name, args=args,
                           line=tok.line, col=tok.col)
        if tok.type == TokenType.LPAREN:
            self._advance()
            inner = self._parse_expr()
            self._expect(TokenType.RPAREN, "')'")
            return ParenExpr(expr=inner, line=tok.line, col=tok.col)

        raise self._unexpected("expression")

    def _parse_args(self) -> list:
        """comma_exp ::= [expr (',' expr)*], stopping before ')'."""
        args = []
        if self._check(TokenType.RPAREN):
            return args
        args.append(self._parse_expr())
        while self._match(TokenType.COMMA):
            args.append(self._parse_expr())
        return args
