__all__ = (
    "ImmutabilityViolation",
    "OrderingFailure",
    "TabulaError",
    "TypeMismatch",
    "ValidationError",
)


class TabulaError(Exception):
    """Base class for all failures raised by tabula collections."""


class ValidationError(TabulaError, ValueError):
    """Raised when an argument has an invalid shape or value.

    Examples are a non-positive chunk size, a value which can't be turned into
    an Array or a positional write which would leave a gap in an Array.
    """


class ImmutabilityViolation(TabulaError, AttributeError):
    """Raised on any write attempt against a frozen collection.

    The frozen collection is left untouched.

    Attributes:
        container: Qualified name of the frozen type.
        operation: Name of the rejected operation.
    """

    __slots__ = (
        "container",
        "operation",
    )

    def __init__(
        self,
        *,
        container: str,
        operation: str,
    ) -> None:
        super().__init__(f"Can't modify immutable {container}, {operation} is not supported")
        self.container: str = container
        self.operation: str = operation


class TypeMismatch(TabulaError, TypeError):
    """Raised when a non-integer key is used as an Array position."""

    __slots__ = ("key",)

    def __init__(
        self,
        *,
        key: object,
    ) -> None:
        super().__init__(f"Cannot insert non-integer index '{key}' into an Array")
        self.key: object = key


class OrderingFailure(TabulaError, TypeError):
    """Raised when sorting elements which have no mutual ordering."""
