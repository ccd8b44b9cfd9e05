"""Parser core: token cursor, error handling, and parse() entry point."""

from ..ast_nodes import Program
from ..errors import ParseError
from ..tokens import Token, TokenType


class ParserBase:
    def __init__(self, tokens: list[Token]):
        # Copy so the caller's sequence is never mutated; a list without a
        # trailing EOF gets a synthetic one just past its last token.
        self.tokens = list(tokens)
        if not self.tokens or self.tokens[-1].type != TokenType.EOF:
            if self.tokens:
                last = self.tokens[-1]
                eof = Token(TokenType.EOF, "", last.line, last.col + len(last.value))
            else:
                eof = Token(TokenType.EOF, "", 1, 1)
            self.tokens.append(eof)
        self.pos = 0

    def parse(self) -> Program:
        """Parse contiguous class definitions followed by entry statements.

        Once any class has been defined at least one entry statement must
        follow; a completely empty token stream is an empty program.
        """
        classes = []
        while self._check(TokenType.CLASS):
            classes.append(self._parse_class_def())

        if classes and self._at_end():
            raise self._unexpected("at least one statement after class definitions")

        statements = []
        while not self._at_end():
            if self._check(TokenType.CLASS):
                raise self._error("Class definitions must precede all statements")
            statements.append(self._parse_statement())
        return Program(classes=classes, statements=statements)

    # ---- Token helpers ----

    def _peek(self, offset: int = 0) -> Token:
        pos = self.pos + offset
        if pos < len(self.tokens):
            return self.tokens[pos]
        return self.tokens[-1]  # EOF

    def _advance(self) -> Token:
        tok = self._peek()
        if tok.type != TokenType.EOF:
            self.pos += 1
        return tok

    def _at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        return self._peek().type in types

    def _match(self, *types: TokenType) -> Token | None:
        if self._peek().type in types:
            return self._advance()
        return None

    def _expect(self, token_type: TokenType, msg: str = "") -> Token:
        tok = self._peek()
        if tok.type == token_type:
            return self._advance()
        raise self._unexpected(msg or token_type.name)

    def _unexpected(self, expected: str) -> ParseError:
        tok = self._peek()
        if tok.type == TokenType.EOF:
            return ParseError(f"Ran out of tokens: expected {expected}", tok.line, tok.col)
        return ParseError(
            f"Expected {expected}, got {tok.type.name} '{tok.value}'",
            tok.line, tok.col
        )

    def _error(self, msg: str) -> ParseError:
        tok = self._peek()
        return ParseError(msg, tok.line, tok.col)
