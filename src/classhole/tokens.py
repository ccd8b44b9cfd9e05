"""Token type definitions for the classhole language."""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # Literals
    INT_LIT = auto()
    STRING_LIT = auto()
    TRUE = auto()
    FALSE = auto()
    IDENT = auto()

    # Keywords
    CLASS = auto()
    EXTENDS = auto()
    METHOD = auto()
    INIT = auto()
    RETURN = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    BREAK = auto()
    NEW = auto()
    SUPER = auto()
    THIS = auto()
    PRINTLN = auto()

    # Primitive type keywords
    INT = auto()
    BOOLEAN = auto()
    VOID = auto()

    # Operators
    PLUS = auto()          # +
    MINUS = auto()         # -
    STAR = auto()          # *
    SLASH = auto()         # /
    EQ = auto()            # =
    EQ_EQ = auto()         # ==
    BANG_EQ = auto()       # !=
    LT = auto()            # <
    GT = auto()            # >
    LT_EQ = auto()         # <=
    GT_EQ = auto()         # >=

    # Delimiters
    LPAREN = auto()        # (
    RPAREN = auto()        # )
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    SEMICOLON = auto()     # ;
    COMMA = auto()         # ,
    DOT = auto()           # .

    EOF = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    line: int
    col: int

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.col})"


KEYWORDS: dict[str, TokenType] = {
    "class": TokenType.CLASS,
    "extends": TokenType.EXTENDS,
    "method": TokenType.METHOD,
    "init": TokenType.INIT,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "break": TokenType.BREAK,
    "new": TokenType.NEW,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "println": TokenType.PRINTLN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "Int": TokenType.INT,
    "Boolean": TokenType.BOOLEAN,
    "Void": TokenType.VOID,
}

# Two-character operators are listed first so they win the longest match.
OPERATORS: dict[str, TokenType] = {
    "==": TokenType.EQ_EQ,
    "!=": TokenType.BANG_EQ,
    "<=": TokenType.LT_EQ,
    ">=": TokenType.GT_EQ,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "=": TokenType.EQ,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

# Token types that can start a type in a declaration (used by the parser
# for var-decl lookahead and field/parameter parsing).
TYPE_KEYWORDS: set[TokenType] = {
    TokenType.INT, TokenType.BOOLEAN, TokenType.VOID,
}

TYPE_START: set[TokenType] = TYPE_KEYWORDS | {TokenType.IDENT}
