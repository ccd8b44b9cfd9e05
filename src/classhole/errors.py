"""Error hierarchy shared by every compiler stage.

Each stage raises on the first violation; nothing is accumulated. The
``kind`` attribute names the taxonomy bucket so that callers (CLI,
diagnostics, tests) can report or assert on it without string matching.
"""


class CompileError(Exception):
    kind = "error"

    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.message = message
        self.line = line
        self.col = col
        if line:
            super().__init__(f"{message} at {line}:{col}")
        else:
            super().__init__(message)


class LexerError(CompileError):
    kind = "lexical"


class ParseError(CompileError):
    kind = "syntax"


class TypeCheckError(CompileError):
    kind = "type"


class NameCheckError(TypeCheckError):
    """Undeclared or duplicate name, or an unresolved method."""
    kind = "name"


class InitializationError(TypeCheckError):
    """A declared variable was read before it was assigned."""
    kind = "initialization"


class TypeMismatchError(TypeCheckError):
    kind = "type-mismatch"


class StructuralError(TypeCheckError):
    """Inheritance, constructor, override or control-flow shape violation."""
    kind = "structural"
