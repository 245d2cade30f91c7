"""
Helpers for key/value mappings.

Functions accept any ``Mapping`` and treat None as an empty one. Callbacks
receive ``(value, key)``. Iteration order of a mapping is not part of any
contract here, so ``reduce`` and ``find`` are only predictable for order
independent callbacks.
"""

from collections.abc import Callable, Iterable, Mapping, MutableMapping, Sequence
from collections.abc import Set as AbstractSet
from typing import Any, cast

from tabula.array import Array, is_array
from tabula.types import MISSING

__all__ = (
    "contains",
    "deep_merge",
    "deepclone",
    "entries",
    "every",
    "filter",
    "find",
    "for_each",
    "from_entries",
    "group_by",
    "invert",
    "is_empty",
    "keys",
    "map",
    "matches",
    "merge",
    "omit",
    "pick",
    "reduce",
    "size",
    "some",
    "values",
)


def size(
    tbl: Mapping[Any, Any] | None,
    /,
) -> int:
    """Number of entries, 0 for None."""
    if tbl is None:
        return 0

    return len(tbl)


def is_empty(
    tbl: Mapping[Any, Any] | None,
    /,
) -> bool:
    return tbl is None or len(tbl) == 0


def keys[Key](
    tbl: Mapping[Key, Any] | None,
    /,
) -> list[Key]:
    if tbl is None:
        return []

    return list(tbl.keys())


def values[Value](
    tbl: Mapping[Any, Value] | None,
    /,
) -> list[Value]:
    if tbl is None:
        return []

    return list(tbl.values())


def entries[Key, Value](
    tbl: Mapping[Key, Value] | None,
    /,
) -> list[tuple[Key, Value]]:
    """List of ``(key, value)`` pairs."""
    if tbl is None:
        return []

    return list(tbl.items())


def from_entries(
    pairs: Iterable[Any] | None,
    /,
) -> dict[Any, Any]:
    """
    Build a dict from ``(key, value)`` pairs.

    Each pair can be a tuple, a list or an Array. Entries which are not
    sequences, strings and sequences shorter than two elements are skipped.
    """
    result: dict[Any, Any] = {}
    if pairs is None:
        return result

    for entry in pairs:
        match entry:
            case Array() if len(entry) >= 2:  # pyright: ignore[reportUnknownArgumentType]
                result[entry.at(1)] = entry.at(2)  # pyright: ignore[reportUnknownMemberType]

            case str() | bytes():
                continue

            case Sequence() if len(entry) >= 2:  # pyright: ignore[reportUnknownArgumentType]
                result[entry[0]] = entry[1]

            case _:
                continue

    return result


def filter[Key, Value](  # noqa: A001
    tbl: Mapping[Key, Value] | None,
    predicate: Callable[[Value, Key], Any],
    /,
) -> dict[Key, Value]:
    """New dict with entries passing the predicate."""
    if tbl is None:
        return {}

    return {key: value for key, value in tbl.items() if predicate(value, key)}


def map[Key, Value, Result](  # noqa: A001
    tbl: Mapping[Key, Value] | None,
    transform: Callable[[Value, Key], Result],
    /,
) -> dict[Key, Result]:
    """New dict with the same keys and transformed values."""
    if tbl is None:
        return {}

    return {key: transform(value, key) for key, value in tbl.items()}


def reduce[Key, Value, Accumulator](
    tbl: Mapping[Key, Value] | None,
    reducer: Callable[[Accumulator, Value, Key], Accumulator],
    initial: Accumulator,
    /,
) -> Accumulator:
    """
    Fold all entries into a single value.

    The visiting order is unspecified, use only commutative and associative
    reducers.
    """
    accumulator: Accumulator = initial
    if tbl is None:
        return accumulator

    for key, value in tbl.items():
        accumulator = reducer(accumulator, value, key)

    return accumulator


def for_each[Key, Value](
    tbl: Mapping[Key, Value] | None,
    action: Callable[[Value, Key], Any],
    /,
) -> None:
    if tbl is None:
        return

    for key, value in tbl.items():
        action(value, key)


def some[Key, Value](
    tbl: Mapping[Key, Value] | None,
    predicate: Callable[[Value, Key], Any],
    /,
) -> bool:
    if tbl is None:
        return False

    return any(predicate(value, key) for key, value in tbl.items())


def every[Key, Value](
    tbl: Mapping[Key, Value] | None,
    predicate: Callable[[Value, Key], Any],
    /,
) -> bool:
    if tbl is None:
        return True

    return all(predicate(value, key) for key, value in tbl.items())


def find[Key, Value](
    tbl: Mapping[Key, Value] | None,
    predicate: Callable[[Value, Key], Any],
    /,
) -> tuple[Value, Key] | tuple[None, None]:
    """
    Find an entry passing the predicate.

    Returns
    -------
    tuple[Value, Key] | tuple[None, None]
        ``(value, key)`` of the matching entry or ``(None, None)``
    """
    if tbl is None:
        return (None, None)

    for key, value in tbl.items():
        if predicate(value, key):
            return (value, key)

    return (None, None)


def group_by[Key, Value, Group](
    tbl: Mapping[Key, Value] | None,
    group: Callable[[Value, Key], Group],
    /,
) -> dict[Group, dict[Key, Value]]:
    """
    Split entries into sub-mappings by the computed group.

    Entries keep their original keys inside each group.
    """
    groups: dict[Group, dict[Key, Value]] = {}
    if tbl is None:
        return groups

    for key, value in tbl.items():
        groups.setdefault(group(value, key), {})[key] = value

    return groups


def _key_list(
    selection: Any,
) -> Iterable[Any]:
    # strings and other non-iterables select a single key
    if isinstance(selection, str | bytes) or not isinstance(selection, Iterable):
        return (selection,)

    return cast(Iterable[Any], selection)


def pick[Key, Value](
    tbl: Mapping[Key, Value] | None,
    selection: Key | Iterable[Key],
    /,
) -> dict[Key, Value]:
    """
    Sub-mapping with only the selected keys.

    The selection is a single key or an iterable of keys, strings always
    select a single key. Absent keys are ignored.
    """
    if tbl is None:
        return {}

    return {key: tbl[key] for key in _key_list(selection) if key in tbl}


def omit[Key, Value](
    tbl: Mapping[Key, Value] | None,
    selection: Key | Iterable[Key],
    /,
) -> dict[Key, Value]:
    """Copy without the selected keys, see ``pick`` for the selection rules."""
    if tbl is None:
        return {}

    omitted: set[Any] = set(_key_list(selection))
    return {key: value for key, value in tbl.items() if key not in omitted}


def invert[Key, Value](
    tbl: Mapping[Key, Value] | None,
    /,
) -> dict[Value, Key]:
    """
    Swap keys and values.

    The operation is lossy: when several keys share a value only one of them
    is kept. Values have to be hashable.
    """
    if tbl is None:
        return {}

    return {value: key for key, value in tbl.items()}


def contains(
    collection: Mapping[Any, Any] | Iterable[Any] | None,
    value: Any,
    /,
) -> bool:
    """
    Check if a collection holds a value, or every element of a value.

    Mappings are searched by their values. When the value is an Array, list,
    tuple or set all of its elements have to be present, for a mapping all of
    its values. Intended for simple values and unnested collections.
    """
    if collection is None:
        return False

    present: list[Any] = list(
        collection.values() if isinstance(collection, Mapping) else collection  # pyright: ignore[reportUnknownArgumentType, reportUnknownMemberType]
    )
    if isinstance(value, Mapping):
        return all(element in present for element in value.values())  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]

    if is_array(value) or isinstance(value, AbstractSet):
        return all(element in present for element in value)  # pyright: ignore[reportUnknownVariableType]

    return value in present


def _is_number(
    value: Any,
) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def merge[Key](
    target: MutableMapping[Key, Any],
    source: Mapping[Key, Any],
    /,
    add_duplicate_numbers: bool = True,
) -> MutableMapping[Key, Any]:
    """
    Merge source into target, recursing into nested mappings.

    Unlike ``deep_merge``, numbers present on both sides under the same key
    are added together by default. Pass ``add_duplicate_numbers=False`` to
    replace them with the source value instead. Any other value of the source
    replaces the target value.

    Parameters
    ----------
    target : MutableMapping[Key, Any]
        Mapping receiving the values, modified in place
    source : Mapping[Key, Any]
        Mapping providing the values
    add_duplicate_numbers : bool, default=True
        Add numeric values present on both sides, applies to nested mappings too

    Returns
    -------
    MutableMapping[Key, Any]
        The target mapping
    """
    for key, incoming in source.items():
        current: Any = target.get(key, MISSING)
        if isinstance(current, MutableMapping) and isinstance(incoming, Mapping):
            merge(
                cast(MutableMapping[Any, Any], current),
                cast(Mapping[Any, Any], incoming),
                add_duplicate_numbers,
            )

        elif add_duplicate_numbers and _is_number(current) and _is_number(incoming):
            target[key] = current + incoming

        else:
            target[key] = incoming

    return target


def deep_merge[Key](
    target: MutableMapping[Key, Any] | None,
    source: Mapping[Key, Any] | None,
    /,
) -> MutableMapping[Key, Any]:
    """
    Merge source into target, recursing where both sides hold a mapping.

    Any other source value replaces the target value. A missing target is
    replaced with a new dict, a missing source leaves the target unchanged.

    Returns
    -------
    MutableMapping[Key, Any]
        The target mapping, modified in place
    """
    merged: MutableMapping[Key, Any] = {} if target is None else target
    if source is None:
        return merged

    for key, incoming in source.items():
        current: Any = merged.get(key, MISSING)
        if isinstance(current, MutableMapping) and isinstance(incoming, Mapping):
            merged[key] = deep_merge(
                cast(MutableMapping[Any, Any], current),
                cast(Mapping[Any, Any], incoming),
            )

        else:
            merged[key] = incoming

    return merged


def matches(
    lhs: Any,
    rhs: Any,
    /,
) -> bool:
    """
    Deep structural equality.

    Mappings match when they have the same keys and matching values,
    sequences (Array, list, tuple) when they have the same length and
    matching elements at every position. A mapping never matches a sequence.
    Any other values are compared with ``==``.
    """
    match lhs:
        case Mapping():
            if not isinstance(rhs, Mapping) or len(lhs) != len(rhs):  # pyright: ignore[reportUnknownArgumentType]
                return False

            return all(
                key in rhs and matches(value, rhs[key])
                for key, value in lhs.items()  # pyright: ignore[reportUnknownVariableType]
            )

        case Array() | list() | tuple():
            if not is_array(rhs) or len(lhs) != len(rhs):  # pyright: ignore[reportUnknownArgumentType]
                return False

            return all(matches(left, right) for left, right in zip(lhs, rhs, strict=True))  # pyright: ignore[reportUnknownArgumentType, reportUnknownVariableType]

        case _:
            if isinstance(rhs, Mapping) or is_array(rhs):
                return False

            return lhs == rhs


def deepclone[Value](
    value: Value,
    /,
) -> Value:
    """
    Recursively copy containers so that no nested container is shared.

    Mappings become dicts, Arrays (frozen ones included) become Arrays, lists,
    tuples and sets keep their kind. Any other value is returned as is.
    """
    clone: Any
    match value:
        case Array():
            clone = Array(*(deepclone(element) for element in value))  # pyright: ignore[reportUnknownVariableType]

        case Mapping():
            clone = {key: deepclone(element) for key, element in value.items()}  # pyright: ignore[reportUnknownVariableType]

        case list():
            clone = [deepclone(element) for element in value]  # pyright: ignore[reportUnknownVariableType]

        case tuple():
            clone = tuple(deepclone(element) for element in value)  # pyright: ignore[reportUnknownVariableType]

        case set():
            clone = set(value)  # pyright: ignore[reportUnknownArgumentType]

        case _:
            clone = value

    return cast(Value, clone)
