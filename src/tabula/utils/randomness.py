from collections.abc import MutableSequence
from random import Random
from typing import Final, Protocol, runtime_checkable

from tabula.utils.env import getenv_int

__all__ = (
    "RandomSource",
    "fisher_yates",
    "shared_random",
)


@runtime_checkable
class RandomSource(Protocol):
    """
    Source of uniformly distributed integers used by shuffling and sampling.

    ``random.Random`` satisfies it, callers needing reproducible results can
    pass a seeded instance or any other object with a compatible ``randrange``.
    """

    def randrange(
        self,
        stop: int,
        /,
    ) -> int: ...


_SEED: Final[int | None] = getenv_int("TABULA_RANDOM_SEED")
_SHARED: Final[Random] = Random(_SEED)  # nosec B311


def shared_random() -> RandomSource:
    """
    Process-wide random source used when no explicit one is provided.

    It is seeded from the TABULA_RANDOM_SEED environment variable when set,
    otherwise from system entropy.
    """
    return _SHARED


def fisher_yates[Element](
    elements: MutableSequence[Element],
    /,
    *,
    rng: RandomSource | None = None,
) -> MutableSequence[Element]:
    """
    Shuffle elements in place so that every permutation is equally likely.

    Parameters
    ----------
    elements : MutableSequence[Element]
        Elements to shuffle, modified in place
    rng : RandomSource | None
        Random source to draw from, the shared one when omitted

    Returns
    -------
    MutableSequence[Element]
        The same sequence after shuffling
    """
    source: RandomSource = rng if rng is not None else _SHARED
    for idx in range(len(elements) - 1, 0, -1):
        swap: int = source.randrange(idx + 1)
        elements[idx], elements[swap] = elements[swap], elements[idx]

    return elements
