from .checker import TypeChecker as TypeChecker
from .class_table import ClassInfo as ClassInfo, ClassTable as ClassTable
from .core import CheckedProgram as CheckedProgram
from .environment import TypeEnvironment as TypeEnvironment, VarInfo as VarInfo
from .subtyping import SubtypeRelation as SubtypeRelation
from .types import (
    BOOLEAN as BOOLEAN, INT as INT, OBJECT as OBJECT, STRING as STRING, VOID as VOID,
    BuiltInType as BuiltInType, ClassType as ClassType, PrimitiveType as PrimitiveType,
    Type as Type, resolve_type as resolve_type,
)
