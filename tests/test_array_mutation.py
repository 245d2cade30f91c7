import pytest

from tabula import Array, OrderingFailure


def test_push_and_pop_work_on_the_end() -> None:
    numbers = Array(1)

    assert numbers.push(2, 3) == 3
    assert numbers.pop() == 3
    assert numbers == Array(1, 2)
    assert Array().pop() is None


def test_shift_and_unshift_work_on_the_start() -> None:
    numbers = Array(3)

    assert numbers.unshift(1, 2) == 3
    assert numbers == Array(1, 2, 3)
    assert numbers.shift() == 1
    assert numbers == Array(2, 3)
    assert Array().shift() is None


def test_fill_sets_inclusive_range() -> None:
    numbers = Array(1, 2, 3, 4, 5)

    assert numbers.fill(0, 2, 3) is numbers
    assert numbers == Array(1, 0, 0, 4, 5)
    assert numbers.fill(9, -2) == Array(1, 0, 0, 9, 9)
    assert numbers.fill(7, 0, 10) == Array(7, 7, 7, 7, 7)


def test_reverse_is_in_place_and_involutive() -> None:
    numbers = Array(1, 2, 3, 4)

    assert numbers.reverse() is numbers
    assert numbers == Array(4, 3, 2, 1)
    assert numbers.reverse().reverse() == Array(4, 3, 2, 1)


def test_splice_removes_and_returns_range() -> None:
    numbers = Array(1, 2, 3, 4, 5)

    removed = numbers.splice(2, 2)

    assert removed == Array(2, 3)
    assert numbers == Array(1, 4, 5)


def test_splice_inserts_more_than_removed() -> None:
    numbers = Array(1, 2, 3, 4)

    removed = numbers.splice(2, 1, "a", "b", "c")

    assert removed == Array(2)
    assert numbers == Array(1, "a", "b", "c", 3, 4)


def test_splice_defaults_to_rest_of_array() -> None:
    numbers = Array(1, 2, 3, 4)

    assert numbers.splice(-2) == Array(3, 4)
    assert numbers == Array(1, 2)


def test_splice_clamps_start_and_delete_count() -> None:
    numbers = Array(1, 2, 3)

    assert numbers.splice(10, 5, 4) == Array()
    assert numbers == Array(1, 2, 3, 4)
    assert numbers.splice(-10, 1) == Array(1)
    assert numbers == Array(2, 3, 4)
    assert numbers.splice(2, -3, 9) == Array()
    assert numbers == Array(2, 9, 3, 4)
    assert numbers.splice(3, 100) == Array(3, 4)
    assert numbers == Array(2, 9)


@pytest.mark.parametrize(
    ("start", "delete_count"),
    [
        (1, 0),
        (1, 3),
        (2, 2),
        (4, 3),
        (6, 1),
        (-1, 1),
        (-3, 2),
    ],
)
def test_splice_then_reinsert_reconstructs_original(
    start: int,
    delete_count: int,
) -> None:
    numbers = Array(1, 2, 3, 4, 5, 6)
    position = start if start > 0 else len(numbers) + start + 1

    removed = numbers.splice(start, delete_count)
    numbers.splice(position, 0, *removed)

    assert numbers == Array(1, 2, 3, 4, 5, 6)


def test_sort_is_in_place() -> None:
    numbers = Array(5, 3, 1, 4, 2)

    assert numbers.sort() is numbers
    assert numbers == Array(1, 2, 3, 4, 5)


def test_sort_accepts_less_than_comparator() -> None:
    numbers = Array(5, 3, 1, 4, 2)

    numbers.sort(lambda lhs, rhs: lhs > rhs)

    assert numbers == Array(5, 4, 3, 2, 1)


def test_sort_accepts_key() -> None:
    words = Array("ccc", "a", "bb")

    assert words.sort(key=len) == Array("a", "bb", "ccc")
    assert words.sort(lambda lhs, rhs: lhs > rhs, key=len) == Array("ccc", "bb", "a")


def test_sort_of_unordered_elements_fails() -> None:
    mixed = Array(1, "a", 2)

    with pytest.raises(OrderingFailure):
        mixed.sort()

    with pytest.raises(OrderingFailure):
        mixed.to_sorted()
