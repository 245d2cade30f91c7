from tabula import mappings, sequences
from tabula.array import Array, is_array
from tabula.frozen import FrozenArray, FrozenMap, freeze, is_frozen
from tabula.mappings import deep_merge, deepclone, matches, merge
from tabula.types import (
    MISSING,
    ImmutabilityViolation,
    Missing,
    OrderingFailure,
    TabulaError,
    TypeMismatch,
    ValidationError,
    is_missing,
    not_missing,
)
from tabula.utils import RandomSource, setup_logging, shared_random

__all__ = (
    "MISSING",
    "Array",
    "FrozenArray",
    "FrozenMap",
    "ImmutabilityViolation",
    "Missing",
    "OrderingFailure",
    "RandomSource",
    "TabulaError",
    "TypeMismatch",
    "ValidationError",
    "deep_merge",
    "deepclone",
    "freeze",
    "is_array",
    "is_frozen",
    "is_missing",
    "mappings",
    "matches",
    "merge",
    "not_missing",
    "sequences",
    "setup_logging",
    "shared_random",
)
