from tabula.types.errors import (
    ImmutabilityViolation,
    OrderingFailure,
    TabulaError,
    TypeMismatch,
    ValidationError,
)
from tabula.types.missing import MISSING, Missing, is_missing, not_missing

__all__ = (
    "MISSING",
    "ImmutabilityViolation",
    "Missing",
    "OrderingFailure",
    "TabulaError",
    "TypeMismatch",
    "ValidationError",
    "is_missing",
    "not_missing",
)
