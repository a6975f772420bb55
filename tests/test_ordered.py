"""Tests for OrderedCollection."""

import random

import pytest

from data_structures import Collection, IndexedCollection, OrderedCollection, SequenceContainer


SOME_ITEMS = ["1st", "2nd", "3rd", "4th"]


@pytest.fixture
def ordered():
    return OrderedCollection(SOME_ITEMS)


def values(collection):
    return [item for _, item in collection]


def assert_contiguous(collection):
    assert collection.get_keys() == list(range(collection.get_length()))


class TestSetItems:
    """Tests for bulk replacement."""

    def test_mapping_is_renumbered(self):
        """Mapping keys are discarded and values renumbered 0..n-1."""
        ordered = OrderedCollection()
        ordered.set_items({"a": 42, "b": 666})
        assert ordered.get_keys() == [0, 1]
        assert ordered[0] == 42
        assert ordered.get(1) == 666
        assert not ordered.has(2)

    def test_sparse_int_keys_are_renumbered(self):
        """Non-contiguous int keys are renumbered in iteration order."""
        ordered = OrderedCollection({5: "x", 2: "y", 9: "z"})
        assert ordered.get_items() == {0: "x", 1: "y", 2: "z"}

    def test_none_values_are_skipped(self):
        """None values do not leave gaps."""
        ordered = OrderedCollection(["a", None, "b"])
        assert ordered.get_items() == {0: "a", 1: "b"}


class TestOffsetValidation:
    """Offsets must be ints."""

    @pytest.mark.parametrize("offset", ["1", 1.0, None, True])
    def test_has_rejects_non_int(self, ordered, offset):
        with pytest.raises(TypeError):
            ordered.has(offset)

    @pytest.mark.parametrize("offset", ["1", 1.0, None, True])
    def test_get_rejects_non_int(self, ordered, offset):
        with pytest.raises(TypeError):
            ordered.get(offset)

    @pytest.mark.parametrize("offset", ["1", 1.0, None, True])
    def test_set_rejects_non_int(self, ordered, offset):
        with pytest.raises(TypeError):
            ordered.set(offset, "x")
        assert values(ordered) == SOME_ITEMS

    @pytest.mark.parametrize("offset", ["1", 1.0, None, True])
    def test_unset_rejects_non_int(self, ordered, offset):
        with pytest.raises(TypeError):
            ordered.unset(offset)
        assert values(ordered) == SOME_ITEMS

    def test_subscript_rejects_non_int(self, ordered):
        with pytest.raises(TypeError):
            ordered["foo"]


class TestGetSet:
    """Tests for positional get/set/unset."""

    def test_get_out_of_range(self, ordered):
        """Out of range reads return None or the default."""
        assert ordered.get(4) is None
        assert ordered.get(-1) is None
        assert ordered.get(99, "default") == "default"

    def test_set_replaces_in_place(self, ordered):
        """Setting an occupied offset replaces the item."""
        assert ordered.set(1, "new") is ordered
        assert values(ordered) == ["1st", "new", "3rd", "4th"]

    def test_set_to_none_unsets(self, ordered):
        """Setting None removes the item and re-indexes."""
        ordered.set(1, None)
        assert ordered[1] == "3rd"
        assert len(ordered) == 3
        assert_contiguous(ordered)

    def test_set_beyond_length_appends(self, ordered):
        """Setting an unoccupied offset appends instead."""
        ordered.set(42, "5th")
        assert ordered[4] == "5th"
        assert not ordered.has(42)
        assert ordered.get_length() == 5

    def test_set_at_length_appends(self, ordered):
        ordered[4] = "5th"
        assert ordered.get_last() == "5th"

    def test_set_negative_offset(self, ordered):
        """Negative offsets are rejected and nothing changes."""
        with pytest.raises(IndexError):
            ordered.set(-1, "x")
        assert values(ordered) == SOME_ITEMS

    @pytest.mark.parametrize("index", [0, 1, 2, 3])
    def test_unset_shifts_following_items(self, ordered, index):
        """Items after the removed one move down by exactly one."""
        ordered.unset(index)
        expected = SOME_ITEMS[:index] + SOME_ITEMS[index + 1:]
        assert values(ordered) == expected
        assert_contiguous(ordered)

    def test_unset_missing_offset(self, ordered):
        """Unsetting an unoccupied offset is a no-op."""
        ordered.unset(10)
        assert values(ordered) == SOME_ITEMS

    def test_delitem(self, ordered):
        del ordered[0]
        assert ordered.get_first() == "2nd"
        assert_contiguous(ordered)

    def test_contains_checks_offsets(self, ordered):
        assert 3 in ordered
        assert 4 not in ordered


class TestFirstLast:
    """Tests for get_first() and get_last()."""

    def test_empty(self):
        ordered = OrderedCollection()
        assert ordered.get_first() is None
        assert ordered.get_last() is None

    def test_populated(self, ordered):
        assert ordered.get_first() == "1st"
        assert ordered.get_last() == "4th"


class TestTruncate:
    """Tests for truncate()."""

    def test_truncate(self, ordered):
        same = ordered.truncate(2)
        assert same is ordered
        assert values(ordered) == ["1st", "2nd"]

    @pytest.mark.parametrize("length", [0, 3, 4, 10])
    def test_truncate_length(self, ordered, length):
        ordered.truncate(length)
        assert ordered.get_length() == min(length, len(SOME_ITEMS))

    def test_truncate_negative_length(self, ordered):
        with pytest.raises(IndexError):
            ordered.truncate(-1)
        assert values(ordered) == SOME_ITEMS

    def test_truncate_non_int(self, ordered):
        with pytest.raises(TypeError):
            ordered.truncate("2")


class TestAppend:
    """Tests for append()."""

    def test_append_list(self, ordered):
        same = ordered.append(["bar", "baz"])
        assert same is ordered
        assert len(ordered) == len(SOME_ITEMS) + 2
        assert ordered[len(SOME_ITEMS)] == "bar"
        assert ordered.get_last() == "baz"

    def test_append_mapping_discards_keys(self, ordered):
        ordered.append({"x": "bar", 0: "baz"})
        assert values(ordered)[len(SOME_ITEMS):] == ["bar", "baz"]
        assert_contiguous(ordered)

    @pytest.mark.parametrize(
        "source",
        [
            OrderedCollection(["bar", "baz"]),
            IndexedCollection({"k": "bar", 9: "baz"}),
            Collection({"k": "bar", "l": "baz"}),
        ],
    )
    def test_append_container(self, ordered, source):
        ordered.append(source)
        assert values(ordered)[len(SOME_ITEMS):] == ["bar", "baz"]

    @pytest.mark.parametrize("source", ["foo", 42, None, {"a", "b"}])
    def test_append_invalid_source(self, ordered, source):
        with pytest.raises(TypeError):
            ordered.append(source)
        assert values(ordered) == SOME_ITEMS


class TestSort:
    """Tests for sort()."""

    @staticmethod
    def natural(a, b):
        return (a > b) - (a < b)

    def test_sort(self):
        shuffled = list(SOME_ITEMS)
        random.Random(7).shuffle(shuffled)
        ordered = OrderedCollection(shuffled)
        same = ordered.sort(self.natural)
        assert same is ordered
        assert values(ordered) == SOME_ITEMS
        assert_contiguous(ordered)

    def test_adjacent_pairs_are_ordered(self):
        items = [5, 3, 9, 1, 3, 7, 0]
        ordered = OrderedCollection(items).sort(self.natural)
        sorted_values = values(ordered)
        assert all(self.natural(a, b) <= 0 for a, b in zip(sorted_values, sorted_values[1:]))

    def test_sort_is_stable(self):
        items = [("b", 1), ("a", 1), ("c", 0)]
        ordered = OrderedCollection(items).sort(lambda x, y: x[1] - y[1])
        assert values(ordered) == [("c", 0), ("b", 1), ("a", 1)]

    def test_sort_requires_callable(self, ordered):
        with pytest.raises(TypeError):
            ordered.sort("asc")


class TestStackOperations:
    """Tests for push/pop/shift/unshift."""

    def test_push(self):
        ordered = OrderedCollection()
        same = ordered.push("foo")
        assert same is ordered
        assert ordered.get_last() == "foo"

    def test_push_one_at_a_time(self):
        """Pushing items one by one keeps keys contiguous."""
        ordered = OrderedCollection()
        for i in range(500):
            ordered.push(i)
        assert_contiguous(ordered)
        assert values(ordered) == list(range(500))

    def test_push_keeps_existing_keys(self, ordered):
        """push() writes after the last item without moving the others."""
        before = ordered.get_items()
        ordered.push("5th", None, "6th")
        items = ordered.get_items()
        assert {k: items[k] for k in before} == before
        assert items[4] == "5th"
        assert items[5] == "6th"
        assert_contiguous(ordered)

    def test_push_multiple(self):
        ordered = OrderedCollection().push(*SOME_ITEMS)
        assert values(ordered) == SOME_ITEMS

    def test_unshift(self, ordered):
        same = ordered.unshift("foo")
        assert same is ordered
        assert ordered.get_first() == "foo"

    def test_unshift_multiple_keeps_order(self):
        ordered = OrderedCollection(["3rd", "4th"]).unshift("1st", "2nd")
        assert values(ordered) == SOME_ITEMS

    def test_pop(self, ordered):
        assert ordered.pop() == "4th"
        assert values(ordered) == SOME_ITEMS[:3]

    def test_shift(self, ordered):
        length = len(ordered)
        assert ordered.shift() == "1st"
        assert len(ordered) == length - 1
        assert ordered[0] == "2nd"
        assert_contiguous(ordered)

    def test_shift_until_empty(self, ordered):
        while not ordered.is_empty():
            ordered.shift()
        assert ordered.shift() is None

    def test_pop_empty(self):
        assert OrderedCollection().pop() is None

    def test_keys_stay_contiguous(self):
        """Random stack operations never leave gaps."""
        rng = random.Random(42)
        ordered = OrderedCollection()
        for step in range(200):
            op = rng.choice(["push", "pop", "shift", "unshift"])
            if op == "push":
                ordered.push(step)
            elif op == "unshift":
                ordered.unshift(step, -step)
            elif op == "pop":
                ordered.pop()
            else:
                ordered.shift()
            assert_contiguous(ordered)

    def test_satisfies_sequence_protocol(self, ordered):
        assert isinstance(ordered, SequenceContainer)


class TestTransforms:
    """Tests for filter(), map() and search()."""

    def test_filter_renumbers(self, ordered):
        ordered.filter(lambda item: item != "2nd")
        assert ordered.get_items() == {0: "1st", 1: "3rd", 2: "4th"}

    def test_map(self, ordered):
        assert ordered.map(str.upper) == {0: "1ST", 1: "2ND", 2: "3RD", 3: "4TH"}

    def test_search(self, ordered):
        assert ordered.search("3rd") == 2
        assert ordered.search("void") is None

    def test_repr(self):
        assert repr(OrderedCollection(["a"])) == "OrderedCollection(['a'])"
