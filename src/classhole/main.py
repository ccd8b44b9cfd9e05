"""classhole: a small class-based language that compiles to JavaScript.

Usage: classhole <input.ch> [-o output.js] [--emit-tokens] [--emit-ast] [--check-only]
"""

import argparse
import logging
import os
import pprint
import sys

from .codegen import CodeGen
from .errors import CompileError
from .lexer import Lexer
from .parser import Parser
from .typechecker import TypeChecker

logger = logging.getLogger(__name__)


def _format_error(source: str, filename: str, message: str,
                  line: int, col: int) -> str:
    """Format an error with source context and caret."""
    lines = source.split('\n')
    if line < 1 or line > len(lines):
        return f"error: {message}\n --> {filename}:{line}:{col}"
    source_line = lines[line - 1]
    width = len(str(line))
    pad = " " * width
    caret = " " * max(col - 1, 0) + "^"
    return (
        f"error: {message}\n"
        f" {pad}--> {filename}:{line}:{col}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )


def compile_source(source: str, filename: str = "<stdin>") -> str:
    """Lex, parse, check and generate; raises CompileError on the first violation."""
    tokens = Lexer(source, filename).tokenize()
    program = Parser(tokens).parse()
    checked = TypeChecker().check(program)
    return CodeGen(checked).generate()


def main(argv=None):
    argparser = argparse.ArgumentParser(description="classhole compiler")
    argparser.add_argument("input", help="Input .ch file")
    argparser.add_argument("-o", "--output", help="Output .js file (default: <input>.js)")
    argparser.add_argument("--emit-tokens", action="store_true", help="Print token stream")
    argparser.add_argument("--emit-ast", action="store_true", help="Print AST")
    argparser.add_argument("--check-only", action="store_true",
                           help="Stop after type checking; write no output")
    argparser.add_argument("--verbose", action="store_true", help="Log compiler phases")

    args = argparser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        stream=sys.stderr)

    try:
        with open(args.input, "r") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found", file=sys.stderr)
        sys.exit(1)

    filename = os.path.basename(args.input)

    try:
        tokens = Lexer(source, filename).tokenize()
        logger.debug("lexed %d token(s)", len(tokens))
        if args.emit_tokens:
            for tok in tokens:
                print(tok)
            return

        program = Parser(tokens).parse()
        logger.debug("parsed %d class(es), %d entry statement(s)",
                     len(program.classes), len(program.statements))
        if args.emit_ast:
            pprint.pprint(program)
            return

        checked = TypeChecker().check(program)
    except CompileError as e:
        print(_format_error(source, filename, e.message, e.line, e.col), file=sys.stderr)
        sys.exit(1)

    if args.check_only:
        print(f"{args.input}: ok")
        return

    js_source = CodeGen(checked).generate()

    if args.output:
        out_path = args.output
    else:
        out_path = os.path.splitext(args.input)[0] + ".js"

    with open(out_path, "w") as f:
        f.write(js_source)

    print(f"Compiled {args.input} → {out_path}")


if __name__ == "__main__":
    main()
