"""Helpers for plain Python lists and tuples."""

from collections.abc import Iterable, MutableSequence
from typing import Any

from tabula.array import is_array
from tabula.utils.randomness import RandomSource, fisher_yates

__all__ = (
    "concat",
    "flatten",
    "shuffle",
)


def shuffle[Element](
    elements: MutableSequence[Element],
    /,
    *,
    rng: RandomSource | None = None,
) -> MutableSequence[Element]:
    """
    Shuffle a mutable sequence in place using the Fisher-Yates algorithm.

    Returns the same sequence. Use ``Array.shuffle`` for a shuffled copy.
    """
    return fisher_yates(
        elements,
        rng=rng,
    )


def flatten(
    elements: Iterable[Any] | None,
    /,
    depth: int = 1,
) -> list[Any]:
    """
    New list with nested Arrays, lists and tuples expanded up to the depth.
    """
    result: list[Any] = []
    if elements is None:
        return result

    def expand(
        items: Iterable[Any],
        level: int,
    ) -> None:
        for item in items:
            if level > 0 and is_array(item):
                expand(item, level - 1)

            else:
                result.append(item)

    expand(elements, depth)
    return result


def concat[Element](
    *collections: Iterable[Element] | None,
) -> list[Element]:
    """New list with elements of all collections in order, None is skipped."""
    return [
        element
        for collection in collections
        if collection is not None
        for element in collection
    ]
