"""Static types: primitives, built-ins and user class types.

Types compare by name only; there is no structural relation between them.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PrimitiveType:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class BuiltInType:
    name: str

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class ClassType:
    name: str

    def __str__(self):
        return self.name


Type = PrimitiveType | BuiltInType | ClassType

INT = PrimitiveType("Int")
BOOLEAN = PrimitiveType("Boolean")
VOID = PrimitiveType("Void")
STRING = BuiltInType("String")
OBJECT = BuiltInType("Object")

_NAMED = {t.name: t for t in (INT, BOOLEAN, VOID, STRING, OBJECT)}


def resolve_type(name: str) -> Type:
    """Map a declared type name to its Type; unknown names are class types."""
    return _NAMED.get(name) or ClassType(name)
