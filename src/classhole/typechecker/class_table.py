"""Class registry: name -> ClassInfo, with inherited method lookup."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..ast_nodes import ClassDef, ConstructorDef, MethodDef
from ..errors import NameCheckError


@dataclass
class ClassInfo:
    name: str
    superclass: Optional[str] = None
    fields: dict[str, str] = field(default_factory=dict)
    methods: dict[str, MethodDef] = field(default_factory=dict)
    constructor: ConstructorDef = None

    @classmethod
    def from_def(cls, decl: ClassDef) -> ClassInfo:
        info = cls(name=decl.name, superclass=decl.superclass,
                   constructor=decl.constructor)
        for fld in decl.fields:
            if fld.name in info.fields:
                raise NameCheckError(
                    f"Duplicate field '{fld.name}' in class '{decl.name}'",
                    fld.line, fld.col)
            info.fields[fld.name] = fld.type
        for method in decl.methods:
            if method.name in info.methods:
                raise NameCheckError(
                    f"Duplicate method '{method.name}' in class '{decl.name}'",
                    method.line, method.col)
            info.methods[method.name] = method
        return info


class ClassTable:
    def __init__(self):
        self._classes: dict[str, ClassInfo] = {}

    def add_class(self, decl: ClassDef) -> ClassInfo:
        if decl.name in self._classes:
            raise NameCheckError(f"Duplicate class name '{decl.name}'",
                                 decl.line, decl.col)
        info = ClassInfo.from_def(decl)
        self._classes[decl.name] = info
        return info

    def get_class(self, name: str) -> ClassInfo | None:
        return self._classes.get(name)

    def get_method(self, class_name: str, method_name: str) -> MethodDef | None:
        """Resolve a method by walking up from class_name through superclasses."""
        seen: set[str] = set()
        current = self._classes.get(class_name)
        while current is not None and current.name not in seen:
            if method_name in current.methods:
                return current.methods[method_name]
            seen.add(current.name)
            if current.superclass is None:
                break
            current = self._classes.get(current.superclass)
        return None

    def __contains__(self, name: str) -> bool:
        return name in self._classes

    def __iter__(self) -> Iterator[ClassInfo]:
        return iter(self._classes.values())

    def __len__(self) -> int:
        return len(self._classes)
