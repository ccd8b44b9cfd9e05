"""Lexer for the classhole language.

Turns source text into a flat list of tokens, each carrying a 1-based
line/column, terminated by an explicit EOF token.
"""

from .errors import LexerError
from .tokens import KEYWORDS, OPERATORS, Token, TokenType

INT_MAX = 2**31 - 1


class Lexer:
    def __init__(self, source: str, filename: str = "<stdin>"):
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.col = 1
        self.tokens: list[Token] = []

        # Operator trie for longest-match tokenization
        self._op_trie = _build_trie(OPERATORS)

    def tokenize(self) -> list[Token]:
        while self.pos < len(self.source):
            self._skip_whitespace_and_comments()
            if self.pos >= len(self.source):
                break

            ch = self.source[self.pos]

            if ch == '"':
                self._read_string()
            elif _is_digit(ch):
                self._read_number()
            elif _is_ident_start(ch):
                self._read_identifier()
            else:
                self._read_operator()

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.col))
        return self.tokens

    # --- Character helpers ---

    def _peek(self, offset: int = 0) -> str:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return '\0'

    def _advance(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return ch

    def _emit(self, token_type: TokenType, value: str, line: int, col: int):
        self.tokens.append(Token(token_type, value, line, col))

    # --- Whitespace and comments ---

    def _skip_whitespace_and_comments(self):
        while self.pos < len(self.source):
            ch = self._peek()
            if ch.isspace():
                self._advance()
            elif ch == '/' and self._peek(1) == '/':
                self._skip_line_comment()
            elif ch == '/' and self._peek(1) == '*':
                self._skip_block_comment()
            else:
                break

    def _skip_line_comment(self):
        while self.pos < len(self.source) and self._peek() != '\n':
            self._advance()

    def _skip_block_comment(self):
        start_line = self.line
        start_col = self.col
        self._advance()  # /
        self._advance()  # *
        while self.pos < len(self.source):
            if self._peek() == '*' and self._peek(1) == '/':
                self._advance()
                self._advance()
                return
            self._advance()
        raise LexerError("Unterminated block comment", start_line, start_col)

    # --- Literals ---

    def _read_string(self):
        line, col = self.line, self.col
        self._advance()  # opening quote
        start = self.pos
        while self.pos < len(self.source) and self._peek() != '"':
            self._advance()
        if self.pos >= len(self.source):
            raise LexerError("Unterminated string literal", line, col)
        value = self.source[start:self.pos]
        self._advance()  # closing quote
        self._emit(TokenType.STRING_LIT, value, line, col)

    def _read_number(self):
        line, col = self.line, self.col
        start = self.pos
        while self.pos < len(self.source) and _is_digit(self._peek()):
            self._advance()
        value = self.source[start:self.pos]
        if int(value) > INT_MAX:
            raise LexerError(f"Integer literal too large: {value}", line, col)
        self._emit(TokenType.INT_LIT, value, line, col)

    # --- Identifier / keyword ---

    def _read_identifier(self):
        line, col = self.line, self.col
        start = self.pos
        while self.pos < len(self.source) and _is_ident_char(self._peek()):
            self._advance()
        value = self.source[start:self.pos]
        token_type = KEYWORDS.get(value, TokenType.IDENT)
        self._emit(token_type, value, line, col)

    # --- Operators and punctuation (trie-based longest match) ---

    def _read_operator(self):
        line, col = self.line, self.col

        node = self._op_trie
        best_match = None
        best_len = 0
        i = 0
        while self.pos + i < len(self.source):
            ch = self.source[self.pos + i]
            if ch not in node:
                break
            node = node[ch]
            i += 1
            if '' in node:  # terminal marker
                best_match = node['']
                best_len = i

        if best_match is not None:
            value = self.source[self.pos:self.pos + best_len]
            for _ in range(best_len):
                self._advance()
            self._emit(best_match, value, line, col)
            return

        ch = self._peek()
        raise LexerError(f"Unexpected character '{ch}'", line, col)


def _build_trie(operators: dict[str, TokenType]) -> dict:
    """Build a trie from operator strings for longest-match tokenization.

    Each node is a dict mapping character -> child node.
    Terminal nodes have '' -> TokenType entry.
    """
    root: dict = {}
    for op, token_type in operators.items():
        node = root
        for ch in op:
            if ch not in node:
                node[ch] = {}
            node = node[ch]
        node[''] = token_type
    return root


# Source text is ASCII-only outside string literals and comments.

def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _is_ident_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == '_')


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == '_')
