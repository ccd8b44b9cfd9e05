"""Recursive-descent parser for classhole."""

from .parser import Parser as Parser, ParseError as ParseError
