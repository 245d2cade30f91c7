"""Read-only views over mappings and Arrays."""

from collections.abc import Callable, Mapping
from copy import deepcopy
from logging import getLogger
from typing import Any, NoReturn, Self, final, overload

from typing_extensions import TypeIs

from tabula.array import Array
from tabula.types import ImmutabilityViolation, ValidationError

__all__ = (
    "FrozenArray",
    "FrozenMap",
    "freeze",
    "is_frozen",
)


@final
class FrozenMap[Key, Value](dict[Key, Value]):
    """
    Read-only ``dict`` holding a shallow snapshot of a mapping.

    Every mutating method raises ImmutabilityViolation. Values are not
    copied, nested containers keep their own mutability and changes made
    to them stay visible through the FrozenMap.
    """

    __slots__ = ()

    def _reject(
        self,
        operation: str,
    ) -> NoReturn:
        raise ImmutabilityViolation(
            container=self.__class__.__qualname__,
            operation=operation,
        )

    def __setattr__(
        self,
        name: str,
        value: object,
    ) -> None:
        self._reject(f"setting attribute '{name}'")

    def __delattr__(
        self,
        name: str,
    ) -> None:
        self._reject(f"deleting attribute '{name}'")

    def __setitem__(
        self,
        key: Key,
        value: Value,
    ) -> None:
        self._reject(f"setting item '{key}'")

    def __delitem__(
        self,
        key: Key,
    ) -> None:
        self._reject(f"deleting item '{key}'")

    def clear(self) -> None:
        self._reject("clear")

    def pop(
        self,
        key: Key,
        default: Any | None = None,
        /,
    ) -> Value:
        self._reject("pop")

    def popitem(self) -> tuple[Key, Value]:
        self._reject("popitem")

    def setdefault(
        self,
        key: Key,
        default: Value | None = None,
        /,
    ) -> Value:
        self._reject("setdefault")

    def update(
        self,
        *updates: object,
        **kwargs: Value,
    ) -> None:
        self._reject("update")

    def __or__(
        self,
        other: Any,
    ) -> Any:
        if not isinstance(other, Mapping):
            return NotImplemented

        return self.__class__({**self, **other})  # pyright: ignore[reportUnknownArgumentType]

    def __ror__(
        self,
        other: Any,
    ) -> Any:
        if not isinstance(other, Mapping):
            return NotImplemented

        return self.__class__({**other, **self})  # pyright: ignore[reportUnknownArgumentType]

    def __ior__(
        self,
        other: object,
    ) -> Self:
        self._reject("|=")

    def copy(self) -> Self:
        return self  # immutable, sharing is safe

    def __copy__(self) -> Self:
        return self  # immutable, sharing is safe

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self.__class__(
            {key: deepcopy(value, memo) for key, value in self.items()}  # pyright: ignore[reportUnknownArgumentType]
        )


@final
class FrozenArray[Element](Array[Element]):
    """
    Read-only Array holding a shallow snapshot of a sequence.

    All reading and copy-returning Array operations are available, copies are
    regular mutable Arrays. Every in-place operation raises
    ImmutabilityViolation.
    """

    __slots__ = ()

    def __init__(
        self,
        *elements: Element,
    ) -> None:
        object.__setattr__(
            self,
            "_elements",
            list(elements),
        )

    def _reject(
        self,
        operation: str,
    ) -> NoReturn:
        raise ImmutabilityViolation(
            container=self.__class__.__qualname__,
            operation=operation,
        )

    def __setattr__(
        self,
        name: str,
        value: object,
    ) -> NoReturn:
        self._reject(f"setting attribute '{name}'")

    def __delattr__(
        self,
        name: str,
    ) -> NoReturn:
        self._reject(f"deleting attribute '{name}'")

    def __setitem__(
        self,
        index: int,
        element: Element,
    ) -> NoReturn:
        self._reject(f"setting position {index}")

    def __delitem__(
        self,
        index: int,
    ) -> NoReturn:
        self._reject(f"deleting position {index}")

    def push(
        self,
        *elements: Element,
    ) -> NoReturn:
        self._reject("push")

    def pop(self) -> NoReturn:
        self._reject("pop")

    def shift(self) -> NoReturn:
        self._reject("shift")

    def unshift(
        self,
        *elements: Element,
    ) -> NoReturn:
        self._reject("unshift")

    def fill(
        self,
        element: Element,
        start: int = 1,
        end: int | None = None,
    ) -> NoReturn:
        self._reject("fill")

    def reverse(self) -> NoReturn:
        self._reject("reverse")

    def sort(
        self,
        compare: Callable[[Element, Element], bool] | None = None,
        *,
        key: Callable[[Element], Any] | None = None,
    ) -> NoReturn:
        self._reject("sort")

    def splice(
        self,
        start: int,
        delete_count: int | None = None,
        *elements: Element,
    ) -> NoReturn:
        self._reject("splice")

    def __copy__(self) -> Self:
        return self  # immutable, sharing is safe

    def __deepcopy__(
        self,
        memo: dict[int, Any] | None,
    ) -> Self:
        return self.__class__(*(deepcopy(element, memo) for element in self._elements))


@overload
def freeze[Key, Value](
    value: Mapping[Key, Value],
    /,
) -> FrozenMap[Key, Value]: ...


@overload
def freeze[Element](
    value: Array[Element] | list[Element] | tuple[Element, ...],
    /,
) -> FrozenArray[Element]: ...


def freeze(
    value: Any,
    /,
) -> FrozenMap[Any, Any] | FrozenArray[Any]:
    """
    Make a read-only view of a mapping or a sequence.

    The view holds a shallow snapshot taken at the time of freezing. Any write
    attempt through the view raises ImmutabilityViolation, later changes of
    the source container are not visible through it. Nested containers are
    shared with the source, they keep their mutability and changes made to
    them are visible through the view. Freezing a frozen view returns it
    unchanged.

    Parameters
    ----------
    value : Any
        Mapping, Array, list or tuple to freeze

    Returns
    -------
    FrozenMap[Any, Any] | FrozenArray[Any]
        FrozenMap for mappings, FrozenArray for sequences

    Raises
    ------
    ValidationError
        When the value is neither a mapping nor a sequence
    """
    frozen: FrozenMap[Any, Any] | FrozenArray[Any]
    match value:
        case FrozenMap() | FrozenArray():
            return value  # pyright: ignore[reportUnknownVariableType]

        case Array() | list() | tuple():
            frozen = FrozenArray(*value)  # pyright: ignore[reportUnknownArgumentType]

        case Mapping():
            frozen = FrozenMap(value)  # pyright: ignore[reportUnknownArgumentType]

        case other:
            raise ValidationError(f"Can't freeze value of type {type(other).__qualname__}")

    getLogger(__name__).debug(
        "Froze %s with %d entries",
        type(value).__qualname__,
        len(frozen),
    )
    return frozen


def is_frozen(
    value: Any,
    /,
) -> TypeIs[FrozenMap[Any, Any] | FrozenArray[Any]]:
    """Check if a value is a read-only view made by ``freeze``."""
    return isinstance(value, FrozenMap | FrozenArray)
