from typing import Any

import pytest

from tabula import Array, ImmutabilityViolation, deep_merge, deepclone, freeze, matches, merge


def test_merge_adds_duplicate_numbers_by_default() -> None:
    target: dict[str, Any] = {"a": 1, "b": {"x": 1}}

    merged = merge(target, {"a": 2, "b": {"x": 3}})

    assert merged is target
    assert merged == {"a": 3, "b": {"x": 4}}


def test_merge_can_overwrite_numbers() -> None:
    target: dict[str, Any] = {"a": 1, "b": {"x": 1, "y": 1}}

    merged = merge(target, {"a": 2, "b": {"x": 3}}, add_duplicate_numbers=False)

    assert merged == {"a": 2, "b": {"x": 3, "y": 1}}


def test_merge_overwrites_non_numeric_values() -> None:
    target: dict[str, Any] = {"name": "old", "flag": True, "count": 1, "items": [1]}

    merge(target, {"name": "new", "flag": True, "count": "many", "items": [2], "extra": 1})

    assert target == {"name": "new", "flag": True, "count": "many", "items": [2], "extra": 1}


def test_merge_into_frozen_nested_mapping_fails() -> None:
    target: dict[str, Any] = {"options": freeze({"x": 1})}

    with pytest.raises(ImmutabilityViolation):
        merge(target, {"options": {"x": 2}})


def test_deep_merge_recurses_and_overwrites() -> None:
    target: dict[str, Any] = {"a": 1, "b": {"x": 1, "y": {"z": 1}}, "c": [1]}

    merged = deep_merge(target, {"a": 2, "b": {"y": {"w": 2}}, "c": {"new": True}})

    assert merged is target
    assert merged == {"a": 2, "b": {"x": 1, "y": {"z": 1, "w": 2}}, "c": {"new": True}}


def test_deep_merge_handles_missing_sides() -> None:
    target: dict[str, Any] = {"a": 1}

    assert deep_merge(target, None) is target
    assert deep_merge(None, {"a": 1}) == {"a": 1}


def test_deepclone_shares_no_nested_containers() -> None:
    original: dict[str, Any] = {
        "list": [1, {"x": 1}],
        "array": Array(Array(1), {"y": 2}),
        "tuple": ([1],),
        "set": {1, 2},
        "text": "value",
    }

    clone = deepclone(original)

    assert matches(clone, original)
    assert clone is not original
    assert clone["list"] is not original["list"]
    assert clone["list"][1] is not original["list"][1]
    assert clone["array"] is not original["array"]
    assert clone["array"].at(1) is not original["array"].at(1)
    assert clone["tuple"][0] is not original["tuple"][0]
    assert clone["set"] is not original["set"]

    clone["list"][1]["x"] = 2
    clone["array"].at(1).push(2)

    assert original["list"][1] == {"x": 1}
    assert original["array"].at(1) == Array(1)


def test_deepclone_thaws_frozen_values() -> None:
    frozen = freeze({"nested": freeze([1, 2])})

    clone = deepclone(frozen)
    clone["added"] = True
    clone["nested"].push(3)

    assert type(clone) is dict
    assert type(clone["nested"]) is Array
    assert frozen == {"nested": Array(1, 2)}


def test_deepclone_returns_scalars_unchanged() -> None:
    assert deepclone(1) == 1
    assert deepclone("text") == "text"
    assert deepclone(None) is None


def test_matches_compares_structures_both_ways() -> None:
    assert matches({"a": 1, "b": [1, {"c": 2}]}, {"b": [1, {"c": 2}], "a": 1})
    assert not matches({"a": 1}, {"a": 1, "b": 2})
    assert not matches({"a": 1, "b": 2}, {"a": 1})
    assert not matches({"a": 1}, {"b": 1})
    assert not matches({"a": {"b": 1}}, {"a": {"b": 2}})


def test_matches_compares_sequences_by_position() -> None:
    assert matches([1, 2, 3], Array(1, 2, 3))
    assert matches((1, [2]), [1, (2,)])
    assert not matches([1, 2], [2, 1])
    assert not matches([1, 2], [1, 2, 3])


def test_matches_distinguishes_kinds() -> None:
    assert matches(1, 1)
    assert matches("a", "a")
    assert not matches(1, "1")
    assert not matches({}, [])
    assert not matches([1], {0: 1})
    assert not matches(1, [1])
    assert not matches({"a": None}, {"b": None})
