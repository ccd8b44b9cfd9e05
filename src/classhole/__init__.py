"""classhole compiler package."""

from .errors import CompileError as CompileError, LexerError as LexerError
from .errors import ParseError as ParseError, TypeCheckError as TypeCheckError
from .lexer import Lexer as Lexer
from .parser import Parser as Parser
from .typechecker import TypeChecker as TypeChecker
from .codegen import CodeGen as CodeGen
