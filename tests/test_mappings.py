from tabula import Array, mappings


def test_size_counts_entries() -> None:
    assert mappings.size({"a": 1, "b": 2}) == 2
    assert mappings.size({}) == 0
    assert mappings.size(None) == 0


def test_is_empty() -> None:
    assert mappings.is_empty(None)
    assert mappings.is_empty({})
    assert not mappings.is_empty({"a": None})


def test_conversions() -> None:
    tbl = {"a": 1, "b": 2}

    assert sorted(mappings.keys(tbl)) == ["a", "b"]
    assert sorted(mappings.values(tbl)) == [1, 2]
    assert sorted(mappings.entries(tbl)) == [("a", 1), ("b", 2)]
    assert mappings.keys(None) == []
    assert mappings.values(None) == []
    assert mappings.entries(None) == []


def test_from_entries_skips_malformed_entries() -> None:
    result = mappings.from_entries(
        [
            ("a", 1),
            ["b", 2, "extra"],
            Array("c", 3),
            ("short",),
            "xy",
            42,
            None,
        ]
    )

    assert result == {"a": 1, "b": 2, "c": 3}
    assert mappings.from_entries(None) == {}


def test_entries_round_trip() -> None:
    tbl = {"a": 1, "b": {"nested": True}}

    assert mappings.from_entries(mappings.entries(tbl)) == tbl


def test_filter_and_map_keep_keys() -> None:
    tbl = {"a": 1, "b": 2, "c": 3}

    assert mappings.filter(tbl, lambda value, key: value > 1) == {"b": 2, "c": 3}
    assert mappings.filter(tbl, lambda value, key: key == "a") == {"a": 1}
    assert mappings.map(tbl, lambda value, key: f"{key}{value}") == {
        "a": "a1",
        "b": "b2",
        "c": "c3",
    }
    assert mappings.filter(None, lambda value, key: True) == {}
    assert mappings.map(None, lambda value, key: value) == {}


def test_reduce_with_commutative_reducer() -> None:
    tbl = {"a": 1, "b": 2, "c": 3}

    assert mappings.reduce(tbl, lambda acc, value, key: acc + value, 0) == 6
    assert mappings.reduce(None, lambda acc, value, key: acc + value, 10) == 10


def test_for_each_visits_every_entry() -> None:
    visited: dict[str, int] = {}

    mappings.for_each({"a": 1, "b": 2}, lambda value, key: visited.update({key: value}))
    mappings.for_each(None, lambda value, key: visited.clear())

    assert visited == {"a": 1, "b": 2}


def test_some_and_every() -> None:
    tbl = {"a": 1, "b": 2}

    assert mappings.some(tbl, lambda value, key: value > 1)
    assert not mappings.some(tbl, lambda value, key: value > 2)
    assert mappings.every(tbl, lambda value, key: value > 0)
    assert not mappings.every(tbl, lambda value, key: key == "a")
    assert not mappings.some(None, lambda value, key: True)
    assert mappings.every(None, lambda value, key: False)


def test_find_returns_value_and_key() -> None:
    tbl = {"a": 1, "b": 2}

    assert mappings.find(tbl, lambda value, key: value == 2) == (2, "b")
    assert mappings.find(tbl, lambda value, key: value == 3) == (None, None)
    assert mappings.find(None, lambda value, key: True) == (None, None)


def test_group_by_keeps_original_keys() -> None:
    tbl = {"a": 1, "b": 2, "c": 3, "d": 4}

    groups = mappings.group_by(tbl, lambda value, key: "even" if value % 2 == 0 else "odd")

    assert groups == {
        "odd": {"a": 1, "c": 3},
        "even": {"b": 2, "d": 4},
    }
    assert sum(len(group) for group in groups.values()) == len(tbl)


def test_pick_and_omit() -> None:
    tbl = {"a": 1, "b": 2, "c": 3}

    assert mappings.pick(tbl, "a") == {"a": 1}
    assert mappings.pick(tbl, ["a", "c", "missing"]) == {"a": 1, "c": 3}
    assert mappings.pick(tbl, "missing") == {}
    assert mappings.omit(tbl, "a") == {"b": 2, "c": 3}
    assert mappings.omit(tbl, ("a", "c", "missing")) == {"b": 2}
    assert mappings.pick({1: "one", 2: "two"}, 2) == {2: "two"}
    assert mappings.pick(None, "a") == {}
    assert mappings.omit(None, "a") == {}


def test_invert_swaps_keys_and_values() -> None:
    assert mappings.invert({"a": 1, "b": 2}) == {1: "a", 2: "b"}
    assert mappings.invert(None) == {}


def test_invert_is_lossy_for_duplicate_values() -> None:
    inverted = mappings.invert({"a": 1, "b": 1})

    assert len(inverted) == 1
    assert inverted[1] in ("a", "b")


def test_contains_checks_values() -> None:
    tbl = {"a": 1, "b": 2, "c": 3}

    assert mappings.contains(tbl, 2)
    assert not mappings.contains(tbl, "a")
    assert mappings.contains(tbl, [1, 3])
    assert mappings.contains(tbl, {2, 3})
    assert not mappings.contains(tbl, Array(1, 4))
    assert mappings.contains([1, 2, 3], 3)
    assert not mappings.contains(None, 1)


def test_contains_checks_every_value_of_a_mapping() -> None:
    tbl = {"a": 1, "b": 2, "c": 3}

    assert mappings.contains(tbl, {"x": 1, "y": 3})
    assert not mappings.contains(tbl, {"x": 1, "y": 4})
    assert mappings.contains([1, 2], {"first": 2})
    assert mappings.contains(tbl, {})
