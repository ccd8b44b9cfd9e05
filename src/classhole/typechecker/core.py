"""Type checker core: checker state and phase orchestration."""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ..ast_nodes import Program
from .class_table import ClassInfo, ClassTable
from .subtyping import SubtypeRelation
from .types import Type

logger = logging.getLogger(__name__)


@dataclass
class CheckedProgram:
    """A program that passed every check, with the registries built for it."""
    program: Program
    class_table: ClassTable
    subtypes: SubtypeRelation


class CheckerBase:
    def __init__(self):
        self.class_table = ClassTable()
        self.subtypes = SubtypeRelation()
        self.current_class: ClassInfo | None = None
        self.current_member: str | None = None
        self.current_return_type: Type | None = None
        self.loop_depth: int = 0

    def check(self, program: Program) -> CheckedProgram:
        """Validate a whole program, raising on the first violation.

        Each TypeChecker owns its registries; use a fresh instance per
        program.
        """
        self._register_classes(program)
        self._validate_inheritance(program)
        logger.debug("registered %d class(es)", len(self.class_table))

        self._check_entry_point(program.statements)
        logger.debug("checked %d entry statement(s)", len(program.statements))

        for decl in program.classes:
            self._check_class_members(decl)
            self._check_super_call(decl)
        self._validate_overrides(program)
        logger.debug("program is well-typed")

        return CheckedProgram(program=program, class_table=self.class_table,
                              subtypes=self.subtypes)
