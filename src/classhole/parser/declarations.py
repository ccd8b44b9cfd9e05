"""Class, constructor and method definition parsing."""

from ..ast_nodes import ClassDef, ConstructorDef, MethodDef
from ..tokens import TokenType


class DeclarationsMixin:

    # ---- Class definition ----

    def _parse_class_def(self) -> ClassDef:
        tok = self._expect(TokenType.CLASS, "'class'")
        name = self._expect(TokenType.IDENT, "class name after 'class'").value

        superclass = None
        if self._match(TokenType.EXTENDS):
            superclass = self._expect(TokenType.IDENT, "superclass name after 'extends'").value

        self._expect(TokenType.LBRACE, "'{' at start of class body")

        fields = []
        while self._is_var_decl_start():
            fields.append(self._parse_var_decl_stmt())

        constructor = self._parse_constructor()

        methods = []
        while self._check(TokenType.METHOD):
            methods.append(self._parse_method_def())

        self._expect(TokenType.RBRACE, "'}' at end of class")
        return ClassDef(name=name, superclass=superclass, fields=fields,
                        constructor=constructor, methods=methods,
                        line=tok.line, col=tok.col)

    # ---- Constructor ----

    def _parse_constructor(self) -> ConstructorDef:
        tok = self._expect(TokenType.INIT, "constructor 'init'")
        self._expect(TokenType.LPAREN, "'(' after 'init'")
        params = self._parse_params()
        self._expect(TokenType.RPAREN, "')' after constructor parameters")
        self._expect(TokenType.LBRACE, "'{' at start of constructor body")

        super_args = None
        if self._check(TokenType.SUPER):
            super_args = self._parse_super_stmt().args

        body = self._parse_statements_until_rbrace()
        self._expect(TokenType.RBRACE, "'}' to close constructor")
        return ConstructorDef(params=params, super_args=super_args, body=body,
                              line=tok.line, col=tok.col)

    # ---- Method ----

    def _parse_method_def(self) -> MethodDef:
        tok = self._expect(TokenType.METHOD, "'method'")
        name = self._expect(TokenType.IDENT, "method name").value
        self._expect(TokenType.LPAREN, "'(' after method name")
        params = self._parse_params()
        self._expect(TokenType.RPAREN, "')' after parameters")
        return_type = self._parse_type()
        self._expect(TokenType.LBRACE, "'{' to start method body")
        body = self._parse_statements_until_rbrace()
        self._expect(TokenType.RBRACE, "'}' to close method")
        return MethodDef(name=name, params=params, return_type=return_type,
                         body=body, line=tok.line, col=tok.col)
