"""Class registration and inheritance validation passes."""

from ..errors import NameCheckError, StructuralError, TypeMismatchError
from .environment import TypeEnvironment
from .types import resolve_type


class RegistrationMixin:

    def _register_classes(self, program):
        for decl in program.classes:
            self.class_table.add_class(decl)
            if decl.superclass:
                self.subtypes.add_subtype(decl.name, decl.superclass)

    def _validate_inheritance(self, program):
        """Check for missing superclasses and circular inheritance."""
        for decl in program.classes:
            if decl.superclass and decl.superclass not in self.class_table:
                raise NameCheckError(
                    f"Superclass '{decl.superclass}' of class '{decl.name}' is not defined",
                    decl.line, decl.col)
        for decl in program.classes:
            if not decl.superclass:
                continue
            seen = {decl.name}
            cur = decl.superclass
            while cur is not None:
                if cur in seen:
                    raise StructuralError(
                        f"Cyclic inheritance detected involving class '{cur}'",
                        decl.line, decl.col)
                seen.add(cur)
                cur = self.class_table.get_class(cur).superclass

    def _check_super_call(self, decl):
        """Validate the constructor's super(...) against the superclass constructor."""
        ctor = decl.constructor
        if ctor.super_args is None:
            return
        if not decl.superclass:
            raise StructuralError(
                f"Class '{decl.name}' cannot call super(); it has no superclass",
                ctor.line, ctor.col)

        super_info = self.class_table.get_class(decl.superclass)
        params = super_info.constructor.params
        args = ctor.super_args
        if len(args) != len(params):
            raise StructuralError(
                f"Constructor super(...) call in class '{decl.name}' expects "
                f"{len(params)} argument(s) but got {len(args)}",
                ctor.line, ctor.col)

        prev_class = self.current_class
        self.current_class = self.class_table.get_class(decl.name)
        try:
            for i, (arg, param) in enumerate(zip(args, params)):
                actual = self._check_expr(arg, TypeEnvironment())
                expected = resolve_type(param.type)
                if not self.subtypes.is_subtype(actual.name, expected.name):
                    raise TypeMismatchError(
                        f"super() argument {i + 1} in class '{decl.name}' has type "
                        f"'{actual}', expected '{expected}'",
                        arg.line, arg.col)
        finally:
            self.current_class = prev_class

    def _validate_overrides(self, program):
        """Covariant returns, invariant parameters against the direct superclass."""
        for decl in program.classes:
            if not decl.superclass:
                continue
            parent = self.class_table.get_class(decl.superclass)
            for method in decl.methods:
                base = parent.methods.get(method.name)
                if base is None:
                    continue
                self._check_override(decl.name, decl.superclass, method, base)

    def _check_override(self, class_name, parent_name, method, base):
        name = method.name
        sub_ret = resolve_type(method.return_type)
        base_ret = resolve_type(base.return_type)
        if not self.subtypes.is_subtype(sub_ret.name, base_ret.name):
            raise StructuralError(
                f"Override '{name}' in '{class_name}' has incompatible return type "
                f"'{sub_ret}' (expected '{base_ret}' from '{parent_name}')",
                method.line, method.col)
        if len(method.params) != len(base.params):
            raise StructuralError(
                f"Override '{name}' in '{class_name}' has {len(method.params)} "
                f"parameter(s) (expected {len(base.params)} from '{parent_name}')",
                method.line, method.col)
        for i, (sub_param, base_param) in enumerate(zip(method.params, base.params)):
            if sub_param.type != base_param.type:
                raise StructuralError(
                    f"Override '{name}' param {i + 1} in '{class_name}' has type "
                    f"'{sub_param.type}' (expected '{base_param.type}' from '{parent_name}')",
                    sub_param.line, sub_param.col)
