from collections.abc import Callable
from os import getenv as os_getenv
from typing import Literal, overload

__all__ = (
    "getenv",
    "getenv_bool",
    "getenv_int",
    "getenv_str",
)


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
) -> Value | None: ...


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    default: Value,
) -> Value: ...


@overload
def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    required: Literal[True],
) -> Value: ...


def getenv[Value](
    key: str,
    /,
    mapping: Callable[[str], Value],
    *,
    default: Value | None = None,
    required: bool = False,
) -> Value | None:
    """
    Read an environment variable converted with the given mapping.

    Parameters
    ----------
    key : str
        The environment variable name
    mapping : Callable[[str], Value]
        Conversion of the raw value
    default : Value | None, optional
        Value used when the variable is not set
    required : bool, default=False
        Fail when the variable is not set and there is no default

    Returns
    -------
    Value | None
        The converted value or the default

    Raises
    ------
    ValueError
        When the conversion fails or a required value is missing
    """
    if value := os_getenv(key):
        try:
            return mapping(value)

        except Exception as exc:
            raise ValueError(f"Failed to convert environment value `{key}`: {value}") from exc

    elif required and default is None:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return default


@overload
def getenv_bool(
    key: str,
    /,
) -> bool | None: ...


@overload
def getenv_bool(
    key: str,
    /,
    default: bool,
) -> bool: ...


def getenv_bool(
    key: str,
    /,
    default: bool | None = None,
) -> bool | None:
    """
    Read a boolean flag from the environment.

    'true', '1' and 't' (case-insensitive) mean True, any other non-empty
    value means False. Unset or empty variables resolve to the default.

    Parameters
    ----------
    key : str
        The environment variable name
    default : bool | None, optional
        Value used when the variable is not set

    Returns
    -------
    bool | None
        The flag value or the default
    """
    if value := os_getenv(key):
        return value.lower() in ("true", "1", "t")

    else:
        return default


@overload
def getenv_int(
    key: str,
    /,
) -> int | None: ...


@overload
def getenv_int(
    key: str,
    /,
    default: int,
) -> int: ...


@overload
def getenv_int(
    key: str,
    /,
    *,
    required: Literal[True],
) -> int: ...


def getenv_int(
    key: str,
    /,
    default: int | None = None,
    *,
    required: bool = False,
) -> int | None:
    """
    Read an integer from the environment.

    Parameters
    ----------
    key : str
        The environment variable name
    default : int | None, optional
        Value used when the variable is not set
    required : bool, default=False
        Fail when the variable is not set and there is no default

    Returns
    -------
    int | None
        The parsed value or the default

    Raises
    ------
    ValueError
        When the value is not a valid integer or a required value is missing
    """
    if value := os_getenv(key):
        try:
            return int(value)

        except ValueError as exc:
            raise ValueError(f"Environment value `{key}` is not a valid int!") from exc

    elif required and default is None:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return default


@overload
def getenv_str(
    key: str,
    /,
) -> str | None: ...


@overload
def getenv_str(
    key: str,
    /,
    default: str,
) -> str: ...


@overload
def getenv_str(
    key: str,
    /,
    *,
    required: Literal[True],
) -> str: ...


def getenv_str(
    key: str,
    /,
    default: str | None = None,
    *,
    required: bool = False,
) -> str | None:
    """Read a string from the environment, empty values resolve to the default."""
    if value := os_getenv(key):
        return value

    elif required and default is None:
        raise ValueError(f"Required environment value `{key}` is missing!")

    else:
        return default
