"""Entry-point, method and constructor body checking."""

from ..ast_nodes import MethodDef
from ..errors import StructuralError
from .environment import TypeEnvironment
from .types import VOID, ClassType, resolve_type


class FunctionsMixin:

    def _check_entry_point(self, statements):
        self.current_class = None
        self.current_member = None
        self.current_return_type = None
        self._check_body(statements, TypeEnvironment())

    def _check_class_members(self, decl):
        prev_class = self.current_class
        self.current_class = self.class_table.get_class(decl.name)
        for method in decl.methods:
            self._check_method(method)
        self._check_constructor(decl.constructor)
        self.current_class = prev_class

    def _member_env(self, params) -> TypeEnvironment:
        """Fresh environment holding an initialized 'this' and every parameter."""
        env = TypeEnvironment()
        env.declare("this", ClassType(self.current_class.name))
        env.initialize("this")
        for param in params:
            env.declare(param.name, resolve_type(param.type), param.line, param.col)
            env.initialize(param.name)
        return env

    def _check_method(self, method: MethodDef):
        class_name = self.current_class.name
        self.current_member = f"method '{class_name}.{method.name}'"
        self.current_return_type = resolve_type(method.return_type)

        self._check_body(method.body, self._member_env(method.params))

        if self.current_return_type != VOID and not self._must_return_all(method.body):
            raise StructuralError(
                f"Method '{class_name}.{method.name}' may not return on all code paths "
                f"(declared return type: {method.return_type})",
                method.line, method.col)

        self.current_member = None
        self.current_return_type = None

    def _check_constructor(self, ctor):
        self.current_member = f"constructor of '{self.current_class.name}'"
        self.current_return_type = VOID
        self._check_body(ctor.body, self._member_env(ctor.params))
        self.current_member = None
        self.current_return_type = None

    def _check_body(self, statements, env: TypeEnvironment):
        prev_depth = self.loop_depth
        self.loop_depth = 0
        for stmt in statements:
            self._check_stmt(stmt, env)
        self.loop_depth = prev_depth
