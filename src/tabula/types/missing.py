from typing import Any, Final, final

from typing_extensions import TypeIs

__all__ = (
    "MISSING",
    "Missing",
    "is_missing",
    "not_missing",
)


class MissingType(type):
    """
    Metaclass for the Missing type implementing the singleton pattern.

    Only one instance of Missing ever exists so it can be compared with the
    'is' operator.
    """

    _instance: Any = None

    def __call__(cls) -> Any:
        if cls._instance is None:
            cls._instance = super().__call__()

        return cls._instance


@final
class Missing(metaclass=MissingType):
    """
    Marker for an argument that was not provided at all.

    Collections may legitimately hold None, so operations with optional seeds
    (like ``Array.reduce``) use MISSING to tell "no initial value" apart from
    an explicit None. Compare using the 'is' operator.
    """

    __slots__ = ()
    __match_args__ = ()

    def __bool__(self) -> bool:
        return False

    def __hash__(self) -> int:
        return hash(self.__class__)

    def __eq__(
        self,
        value: object,
    ) -> bool:
        return value is MISSING

    def __str__(self) -> str:
        return "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __setattr__(
        self,
        __name: str,
        __value: Any,
    ) -> None:
        raise AttributeError("Missing can't be modified")

    def __delattr__(
        self,
        __name: str,
    ) -> None:
        raise AttributeError("Missing can't be modified")


MISSING: Final[Missing] = Missing()


def is_missing(
    check: Any | Missing,
    /,
) -> TypeIs[Missing]:
    """
    Check if a value is the MISSING sentinel.

    Parameters
    ----------
    check : Any | Missing
        The value to check

    Returns
    -------
    TypeIs[Missing]
        True if the value is MISSING, False otherwise
    """
    return check is MISSING


def not_missing[Value](
    check: Value | Missing,
    /,
) -> TypeIs[Value]:
    """
    Check if a value is anything other than the MISSING sentinel.

    Parameters
    ----------
    check : Value | Missing
        The value to check

    Returns
    -------
    TypeIs[Value]
        True if the value was provided, False if it is MISSING
    """
    return check is not MISSING
