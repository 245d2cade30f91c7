"""Ordered, gap-free collection with 1-based positions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import cmp_to_key
from itertools import dropwhile, takewhile, zip_longest
from typing import Any, Self, overload

from typing_extensions import TypeIs

from tabula.types import MISSING, Missing, OrderingFailure, TypeMismatch, ValidationError
from tabula.utils.randomness import RandomSource, fisher_yates, shared_random

__all__ = (
    "Array",
    "is_array",
)


class Array[Element]:
    """
    Ordered collection addressed by positions ``1..len``.

    Negative positions count from the end: ``-1`` is the last element and
    ``-k`` is position ``len - k + 1``. Reading a position outside of the
    collection gives None instead of failing. Positions are always densely
    packed, removing an element shifts every following element left.

    Operations either change the Array in place (and return it, or the
    value documented for them) or return a new, independently owned Array.
    Callbacks receive only the element, see ``enumerate`` for positions.

    Examples
    --------
    ```python
    numbers = Array(5, 3, 1, 4, 2)
    numbers.at(-1)       # 2
    numbers.to_sorted()  # Array(1, 2, 3, 4, 5), numbers is unchanged
    numbers.chunk(2)     # Array(Array(5, 3), Array(1, 4), Array(2))
    ```
    """

    __slots__ = ("_elements",)

    def __init__(
        self,
        *elements: Element,
    ) -> None:
        self._elements: list[Element] = list(elements)

    @classmethod
    def from_iterable(
        cls,
        source: Any,
        /,
    ) -> Self:
        """
        Create an Array from an iterable value.

        Parameters
        ----------
        source : Any
            Either a string (split into single characters), a mapping (its
            values at keys 1, 2, ... up to the first absent key), any iterable
            or a zero-argument callable which is invoked until it returns None.

        Returns
        -------
        Self
            New Array holding the produced elements

        Raises
        ------
        ValidationError
            When the source is not one of the supported kinds
        """
        match source:
            case str():
                return cls(*source)

            case Mapping():
                elements: list[Any] = []
                position: int = 1
                while position in source:
                    elements.append(source[position])
                    position += 1

                return cls(*elements)

            case Iterable():
                return cls(*source)  # pyright: ignore[reportUnknownArgumentType]

            case producer if callable(producer):
                return cls(*iter(producer, None))

            case other:
                raise ValidationError(
                    f"Array.from_iterable argument was not a valid iterable value"
                    f" (received {type(other).__qualname__})"
                )

    # protocol

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __reversed__(self) -> Iterator[Element]:
        return reversed(self._elements)

    def __contains__(
        self,
        element: object,
    ) -> bool:
        return element in self._elements

    def __getitem__(
        self,
        index: int,
    ) -> Element | None:
        return self.at(index)

    def __setitem__(
        self,
        index: int,
        element: Element,
    ) -> None:
        length: int = len(self._elements)
        position: int = self._position(index)
        if position == length + 1:
            self._elements.append(element)

        elif 1 <= position <= length:
            self._elements[position - 1] = element

        else:
            raise ValidationError(f"Array position {index} is outside of 1..{length + 1}")

    def __delitem__(
        self,
        index: int,
    ) -> None:
        length: int = len(self._elements)
        position: int = self._position(index)
        if not 1 <= position <= length:
            raise ValidationError(f"Array position {index} is outside of 1..{length}")

        del self._elements[position - 1]

    def __eq__(
        self,
        other: object,
    ) -> bool:
        if not isinstance(other, Array):
            return NotImplemented

        return self._elements == other._elements  # pyright: ignore[reportUnknownMemberType]

    __hash__ = None  # pyright: ignore[reportAssignmentType]

    def __repr__(self) -> str:
        elements: str = ", ".join(repr(element) for element in self._elements)
        return f"{self.__class__.__name__}({elements})"

    def __copy__(self) -> Array[Element]:
        return self.clone()

    def _position(
        self,
        index: int,
    ) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeMismatch(key=index)

        if index < 0:
            return len(self._elements) + index + 1

        return index

    # access

    def at(
        self,
        index: int,
        /,
    ) -> Element | None:
        """
        Return the element at the given position.

        Negative positions count backwards from the end, positions outside
        of the Array give None.
        """
        position: int = self._position(index)
        if 1 <= position <= len(self._elements):
            return self._elements[position - 1]

        return None

    def first(self) -> Element | None:
        return self._elements[0] if self._elements else None

    def last(self) -> Element | None:
        return self._elements[-1] if self._elements else None

    def is_empty(self) -> bool:
        return not self._elements

    def clone(self) -> Array[Element]:
        """Shallow copy of the Array."""
        return Array(*self._elements)

    def to_list(self) -> list[Element]:
        return list(self._elements)

    def enumerate(self) -> Array[tuple[int, Element]]:
        """
        Copy pairing every element with its position.

        Callbacks receive only the element, chain with this copy when the
        position matters:

        ```python
        Array("a", "b", "c").enumerate().map(lambda entry: f"{entry[0]}{entry[1]}")
        # Array("1a", "2b", "3c")
        ```
        """
        return Array(*enumerate(self._elements, start=1))

    # in place

    def push(
        self,
        *elements: Element,
    ) -> int:
        """Append elements to the end and return the new length."""
        self._elements.extend(elements)
        return len(self._elements)

    def pop(self) -> Element | None:
        """Remove and return the last element, None when empty."""
        return self._elements.pop() if self._elements else None

    def shift(self) -> Element | None:
        """Remove and return the first element, None when empty."""
        return self._elements.pop(0) if self._elements else None

    def unshift(
        self,
        *elements: Element,
    ) -> int:
        """Insert elements at the start and return the new length."""
        self._elements[0:0] = elements
        return len(self._elements)

    def fill(
        self,
        element: Element,
        start: int = 1,
        end: int | None = None,
    ) -> Self:
        """Set every position within the inclusive range to the given element."""
        length: int = len(self._elements)
        first: int = max(self._position(start), 1)
        final: int = min(length if end is None else self._position(end), length)
        for position in range(first, final + 1):
            self._elements[position - 1] = element

        return self

    def reverse(self) -> Self:
        self._elements.reverse()
        return self

    def sort(
        self,
        compare: Callable[[Element, Element], bool] | None = None,
        *,
        key: Callable[[Element], Any] | None = None,
    ) -> Self:
        """
        Sort the Array in place.

        Parameters
        ----------
        compare : Callable[[Element, Element], bool] | None
            "less than" predicate, natural ``<`` ordering when omitted
        key : Callable[[Element], Any] | None
            Function deriving the compared value from each element

        Returns
        -------
        Self
            The same Array, sorted

        Raises
        ------
        OrderingFailure
            When the compared values have no mutual ordering
        """
        sort_key: Callable[[Element], Any] | None = key
        if compare is not None:
            ordering: Callable[[Any], Any] = cmp_to_key(_comparison(compare))
            extract: Callable[[Element], Any] = key if key is not None else _identity

            def compared(
                element: Element,
            ) -> Any:
                return ordering(extract(element))

            sort_key = compared

        try:
            self._elements.sort(key=sort_key)  # pyright: ignore[reportCallIssue, reportArgumentType]

        except TypeError as exc:
            raise OrderingFailure(f"Can't sort Array elements: {exc}") from exc

        return self

    def splice(
        self,
        start: int,
        delete_count: int | None = None,
        *elements: Element,
    ) -> Array[Element]:
        """
        Remove a range of elements and optionally insert new ones in its place.

        Parameters
        ----------
        start : int
            First affected position, negative values count from the end,
            clamped into ``1..len + 1``
        delete_count : int | None
            Number of elements to remove, everything from start when omitted,
            clamped into ``0..len - start + 1``
        *elements : Element
            Elements inserted at start

        Returns
        -------
        Array[Element]
            Removed elements in their original order
        """
        length: int = len(self._elements)
        first: int = min(max(self._position(start), 1), length + 1)
        available: int = length - first + 1
        count: int = available if delete_count is None else max(0, min(delete_count, available))

        removed: Array[Element] = Array(*self._elements[first - 1 : first - 1 + count])
        self._elements[first - 1 : first - 1 + count] = elements
        return removed

    # copies

    def slice(
        self,
        start: int = 1,
        finish: int | None = None,
    ) -> Array[Element]:
        """
        Copy of the inclusive range of positions.

        Both bounds accept negative positions and are clamped into the Array,
        a start after the finish gives an empty Array.
        """
        length: int = len(self._elements)
        first: int = max(self._position(start), 1)
        final: int = min(length if finish is None else self._position(finish), length)
        if first > final:
            return Array()

        return Array(*self._elements[first - 1 : final])

    def with_element(
        self,
        index: int,
        element: Element,
    ) -> Array[Element]:
        """Copy of the Array with the element at given position replaced."""
        copy: Array[Element] = self.clone()
        copy[index] = element
        return copy

    def merge(
        self,
        *others: Iterable[Element],
    ) -> Array[Element]:
        """New Array with elements of this and all other collections, in order."""
        merged: Array[Element] = self.clone()
        for other in others:
            merged._elements.extend(other)

        return merged

    def filter(
        self,
        test: Callable[[Element], Any],
    ) -> Array[Element]:
        return Array(*(element for element in self._elements if test(element)))

    def map[Result](
        self,
        transform: Callable[[Element], Result],
    ) -> Array[Result]:
        return Array(*(transform(element) for element in self._elements))

    def flat(
        self,
        depth: int = 1,
    ) -> Array[Any]:
        """
        Flatten nested arrays, lists and tuples up to the given depth.
        """
        flattened: Array[Any] = Array()

        def flatten(
            elements: Iterable[Any],
            level: int,
        ) -> None:
            for element in elements:
                if level > 0 and is_array(element):
                    flatten(element, level - 1)

                else:
                    flattened._elements.append(element)

        flatten(self._elements, depth)
        return flattened

    def flat_map(
        self,
        transform: Callable[[Element], Any],
        depth: int = 1,
    ) -> Array[Any]:
        return self.map(transform).flat(depth)

    def to_reversed(self) -> Array[Element]:
        return Array(*reversed(self._elements))

    def to_sorted(
        self,
        compare: Callable[[Element, Element], bool] | None = None,
        *,
        key: Callable[[Element], Any] | None = None,
    ) -> Array[Element]:
        """Sorted copy of the Array, see ``sort`` for the parameters."""
        return self.clone().sort(
            compare,
            key=key,
        )

    def unique(
        self,
        key: Callable[[Element], Any] | None = None,
    ) -> Array[Element]:
        """
        Copy keeping only the first element for each value (or computed key).

        Values, or computed keys, have to be hashable.
        """
        seen: set[Any] = set()
        result: Array[Element] = Array()
        for element in self._elements:
            identity: Any = element if key is None else key(element)
            if identity in seen:
                continue

            seen.add(identity)
            result._elements.append(element)

        return result

    def group_by[Group](
        self,
        group: Callable[[Element], Group],
    ) -> dict[Group, Array[Element]]:
        """
        Split elements into buckets by the computed group.

        Each bucket keeps the relative order of its elements, there is no
        ordering guarantee between buckets.
        """
        groups: dict[Group, Array[Element]] = {}
        for element in self._elements:
            groups.setdefault(group(element), Array())._elements.append(element)

        return groups

    def partition(
        self,
        predicate: Callable[[Element], Any],
    ) -> tuple[Array[Element], Array[Element]]:
        """Split elements into (matched, unmatched) Arrays in a single pass."""
        matched: Array[Element] = Array()
        unmatched: Array[Element] = Array()
        for element in self._elements:
            if predicate(element):
                matched._elements.append(element)

            else:
                unmatched._elements.append(element)

        return (matched, unmatched)

    def chunk(
        self,
        size: int,
    ) -> Array[Array[Element]]:
        """
        Split the Array into consecutive chunks of the given size.

        The last chunk holds the remaining elements and may be shorter.

        Raises
        ------
        ValidationError
            When size is not positive
        """
        if size <= 0:
            raise ValidationError("Chunk size must be positive")

        return Array(
            *(
                Array(*self._elements[offset : offset + size])
                for offset in range(0, len(self._elements), size)
            )
        )

    def rotate(
        self,
        amount: int,
    ) -> Array[Element]:
        """
        Copy with elements rotated right by amount, negative amount rotates left.
        """
        length: int = len(self._elements)
        if length <= 1 or amount % length == 0:
            return self.clone()

        offset: int = amount % length
        return Array(*self._elements[-offset:], *self._elements[:-offset])

    def shuffle(
        self,
        *,
        rng: RandomSource | None = None,
    ) -> Array[Element]:
        """Shuffled copy of the Array, the Array itself is not modified."""
        shuffled: Array[Element] = self.clone()
        fisher_yates(
            shuffled._elements,
            rng=rng,
        )
        return shuffled

    @overload
    def sample(
        self,
        count: None = None,
        replace: bool = False,
        *,
        rng: RandomSource | None = None,
    ) -> Element | None: ...

    @overload
    def sample(
        self,
        count: int,
        replace: bool = False,
        *,
        rng: RandomSource | None = None,
    ) -> Array[Element]: ...

    def sample(
        self,
        count: int | None = None,
        replace: bool = False,
        *,
        rng: RandomSource | None = None,
    ) -> Element | Array[Element] | None:
        """
        Draw random elements.

        Parameters
        ----------
        count : int | None
            Number of elements to draw, a single raw element is returned
            when omitted
        replace : bool
            Allow drawing the same position multiple times
        rng : RandomSource | None
            Random source, the shared one when omitted

        Returns
        -------
        Element | Array[Element] | None
            Without replacement at most ``len`` distinct positions are drawn,
            results are in draw order. Sampling an empty Array gives None for
            a single draw and an empty Array otherwise.
        """
        source: RandomSource = rng if rng is not None else shared_random()
        length: int = len(self._elements)
        if length == 0:
            return None if count is None else Array()

        if count is None:
            return self._elements[source.randrange(length)]

        if count <= 0:
            return Array()

        if replace:
            return Array(*(self._elements[source.randrange(length)] for _ in range(count)))

        available: list[Element] = list(self._elements)
        drawn: Array[Element] = Array()
        for _ in range(min(count, length)):
            drawn._elements.append(available.pop(source.randrange(len(available))))

        return drawn

    def zip(
        self,
        *others: Iterable[Any],
    ) -> Array[Array[Any]]:
        """
        Align elements of this and other collections into tuples.

        The result is as long as the longest input, positions missing in
        shorter inputs are filled with None. Every tuple is an Array.
        """
        return Array(*(Array(*aligned) for aligned in zip_longest(self._elements, *others)))

    def transpose(self) -> Array[Array[Any]]:
        """
        Swap rows and columns of an Array of rows.

        The column count is the length of the longest row, shorter rows and
        elements which are not rows are padded with None.
        """
        rows: list[list[Any] | None] = [
            list(row) if is_array(row) else None  # pyright: ignore[reportUnknownArgumentType]
            for row in self._elements
        ]
        columns: int = max((len(row) for row in rows if row is not None), default=0)
        return Array(
            *(
                Array(
                    *(
                        row[column] if row is not None and column < len(row) else None
                        for row in rows
                    )
                )
                for column in range(columns)
            )
        )

    def intersect(
        self,
        *others: Iterable[Any],
    ) -> Array[Element]:
        """Distinct elements of this Array present in every other collection."""
        if not others:
            return self.clone()

        collections: list[list[Any]] = [list(other) for other in others]
        result: Array[Element] = Array()
        for element in self._elements:
            if element in result._elements:
                continue

            if all(element in collection for collection in collections):
                result._elements.append(element)

        return result

    def difference(
        self,
        *others: Iterable[Any],
    ) -> Array[Element]:
        """Elements of this Array not present in any other collection."""
        collections: list[list[Any]] = [list(other) for other in others]
        return Array(
            *(
                element
                for element in self._elements
                if not any(element in collection for collection in collections)
            )
        )

    def union(
        self,
        *others: Iterable[Element],
    ) -> Array[Element]:
        """Copy of this Array extended with unseen elements of the others."""
        result: Array[Element] = self.clone()
        for other in others:
            for element in other:
                if element not in result._elements:
                    result._elements.append(element)

        return result

    def without(
        self,
        *values: Any,
    ) -> Array[Element]:
        return Array(*(element for element in self._elements if element not in values))

    def compact(self) -> Array[Element]:
        """Copy without None and False elements."""
        return Array(
            *(
                element
                for element in self._elements
                if element is not None and element is not False
            )
        )

    def tail(self) -> Array[Element]:
        return Array(*self._elements[1:])

    def initial(self) -> Array[Element]:
        return Array(*self._elements[:-1])

    def take(
        self,
        count: int,
    ) -> Array[Element]:
        return Array(*self._elements[: max(count, 0)])

    def take_last(
        self,
        count: int,
    ) -> Array[Element]:
        if count <= 0:
            return Array()

        return Array(*self._elements[-count:])

    def drop(
        self,
        count: int,
    ) -> Array[Element]:
        return Array(*self._elements[max(count, 0) :])

    def drop_last(
        self,
        count: int,
    ) -> Array[Element]:
        return Array(*self._elements[: max(len(self._elements) - max(count, 0), 0)])

    def take_while(
        self,
        predicate: Callable[[Element], Any],
    ) -> Array[Element]:
        return Array(*takewhile(predicate, self._elements))

    def drop_while(
        self,
        predicate: Callable[[Element], Any],
    ) -> Array[Element]:
        return Array(*dropwhile(predicate, self._elements))

    # queries

    def every(
        self,
        test: Callable[[Element], Any],
    ) -> bool:
        return all(test(element) for element in self._elements)

    def some(
        self,
        test: Callable[[Element], Any],
    ) -> bool:
        return any(test(element) for element in self._elements)

    def find(
        self,
        test: Callable[[Element], Any],
        last: bool = False,
    ) -> Element | None:
        """First (or last) element passing the test, None when nothing does."""
        for element in reversed(self._elements) if last else self._elements:
            if test(element):
                return element

        return None

    def find_index(
        self,
        test: Callable[[Element], Any],
        last: bool = False,
    ) -> int | None:
        """Position of the first (or last) element passing the test."""
        for position in self._positions(last):
            if test(self._elements[position - 1]):
                return position

        return None

    def index_of(
        self,
        element: Any,
        last: bool = False,
    ) -> int | None:
        """Position of the first (or last) element equal to the given one."""
        for position in self._positions(last):
            if self._elements[position - 1] == element:
                return position

        return None

    def _positions(
        self,
        last: bool,
    ) -> range:
        if last:
            return range(len(self._elements), 0, -1)

        return range(1, len(self._elements) + 1)

    def includes(
        self,
        element: Any,
        from_index: int = 1,
    ) -> bool:
        first: int = max(self._position(from_index), 1)
        return element in self._elements[first - 1 :]

    def for_each(
        self,
        action: Callable[[Element], Any],
    ) -> None:
        for element in self._elements:
            action(element)

    def join(
        self,
        separator: str = ",",
    ) -> str:
        return separator.join(str(element) for element in self._elements)

    def reduce[Accumulator](
        self,
        reducer: Callable[[Accumulator, Element], Accumulator],
        initial: Accumulator | Missing = MISSING,
        reverse: bool = False,
    ) -> Accumulator | None:
        """
        Fold the Array into a single value.

        Parameters
        ----------
        reducer : Callable[[Accumulator, Element], Accumulator]
            Function combining the accumulator with each element
        initial : Accumulator | Missing
            Starting accumulator. When omitted the first element (the last one
            when reversed) becomes the accumulator and folding starts from the
            element after it.
        reverse : bool
            Fold from the last element towards the first one

        Returns
        -------
        Accumulator | None
            Folded value, None for an empty Array without initial value
        """
        elements: Iterator[Element] = (
            reversed(self._elements) if reverse else iter(self._elements)
        )
        accumulator: Any
        if initial is MISSING:
            accumulator = next(elements, None)

        else:
            accumulator = initial

        for element in elements:
            accumulator = reducer(accumulator, element)

        return accumulator

    def min(
        self,
        key: Callable[[Element], Any] | None = None,
    ) -> Element | None:
        """Smallest element (first one on ties), None when empty."""
        if not self._elements:
            return None

        try:
            return min(self._elements, key=key)  # pyright: ignore[reportCallIssue, reportArgumentType]

        except TypeError as exc:
            raise OrderingFailure(f"Can't compare Array elements: {exc}") from exc

    def max(
        self,
        key: Callable[[Element], Any] | None = None,
    ) -> Element | None:
        """Largest element (first one on ties), None when empty."""
        if not self._elements:
            return None

        try:
            return max(self._elements, key=key)  # pyright: ignore[reportCallIssue, reportArgumentType]

        except TypeError as exc:
            raise OrderingFailure(f"Can't compare Array elements: {exc}") from exc

    def sum(
        self,
        key: Callable[[Element], Any] | None = None,
    ) -> int | float:
        """Sum of numeric values, other values are skipped."""
        total: int | float = 0
        for element in self._elements:
            value: Any = element if key is None else key(element)
            if isinstance(value, int | float) and not isinstance(value, bool):
                total += value

        return total

    def average(
        self,
        key: Callable[[Element], Any] | None = None,
    ) -> float | None:
        """Sum divided by the element count, None when empty."""
        if not self._elements:
            return None

        return self.sum(key) / len(self._elements)


def is_array(
    value: Any,
    /,
) -> TypeIs[Array[Any] | list[Any] | tuple[Any, ...]]:
    """
    Check if a value is sequence-shaped: an Array, a list or a tuple.
    """
    return isinstance(value, Array | list | tuple)


def _identity(
    value: Any,
) -> Any:
    return value


def _comparison[Element](
    compare: Callable[[Element, Element], bool],
) -> Callable[[Element, Element], int]:
    def comparison(
        lhs: Element,
        rhs: Element,
    ) -> int:
        if compare(lhs, rhs):
            return -1

        elif compare(rhs, lhs):
            return 1

        else:
            return 0

    return comparison
