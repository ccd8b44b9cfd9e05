"""Lexical scopes mapping variable names to type and initialization state."""

from __future__ import annotations
from dataclasses import dataclass

from ..errors import NameCheckError
from .types import Type


@dataclass
class VarInfo:
    name: str
    type: Type
    initialized: bool = False


class TypeEnvironment:
    """One scope in a parent chain.

    A child holds a reference to its parent but the parent's lifetime is
    owned by whoever created it; children never outlive one body check.
    """

    def __init__(self, parent: TypeEnvironment | None = None):
        self.parent = parent
        self.vars: dict[str, VarInfo] = {}

    def child(self) -> TypeEnvironment:
        return TypeEnvironment(parent=self)

    def declare(self, name: str, type: Type, line: int = 0, col: int = 0) -> VarInfo:
        if name in self.vars:
            raise NameCheckError(f"Variable '{name}' already declared in this scope",
                                 line, col)
        info = VarInfo(name=name, type=type)
        self.vars[name] = info
        return info

    def lookup(self, name: str) -> VarInfo | None:
        if name in self.vars:
            return self.vars[name]
        if self.parent:
            return self.parent.lookup(name)
        return None

    def initialize(self, name: str, line: int = 0, col: int = 0):
        info = self.lookup(name)
        if info is None:
            raise NameCheckError(f"Variable '{name}' not declared", line, col)
        info.initialized = True

    def is_initialized(self, name: str, line: int = 0, col: int = 0) -> bool:
        info = self.lookup(name)
        if info is None:
            raise NameCheckError(f"Variable '{name}' not declared", line, col)
        return info.initialized

    def uninitialized(self) -> list[VarInfo]:
        """Declared-but-unassigned variables visible from this scope, shadowed ones included."""
        pending = [info for info in self.vars.values() if not info.initialized]
        if self.parent:
            pending.extend(self.parent.uninitialized())
        return pending
