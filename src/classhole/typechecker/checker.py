"""TypeChecker assembled from the per-concern mixins."""

from .core import CheckerBase
from .expressions import ExpressionsMixin
from .functions import FunctionsMixin
from .registration import RegistrationMixin
from .returns import ReturnsMixin
from .statements import StatementsMixin


class TypeChecker(
    ExpressionsMixin,
    StatementsMixin,
    ReturnsMixin,
    FunctionsMixin,
    RegistrationMixin,
    CheckerBase,
):
    """Static type checker for the classhole language."""
    pass


__all__ = ["TypeChecker"]
