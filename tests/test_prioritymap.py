import random

import pytest

from shortpath.exceptions import AlgorithmError, ConfigError
from shortpath.heap import IndexedHeap
from shortpath.pair import Pair, compare_second
from shortpath.prioritymap import PriorityMap


def test_empty_map():
    pm = PriorityMap()
    assert pm.peek_min() is None
    assert pm.poll_min() is None
    assert pm.get("a") is None
    assert len(pm) == 0


def test_put_and_get():
    pm = PriorityMap()
    pm.put("a", 5)
    pm.put("b", 3)
    assert pm.get("a") == 5
    assert pm.get("missing", -1) == -1
    assert "a" in pm
    assert sorted(pm) == ["a", "b"]
    assert sorted(pm.items()) == [("a", 5), ("b", 3)]


def test_put_existing_key_replaces_value():
    pm = PriorityMap()
    pm.put("a", 5)
    pm.put("b", 3)
    pm.put("a", 1)
    assert len(pm) == 2
    assert pm.get("a") == 1
    assert pm.peek_min() == Pair("a", 1)
    pm.check_invariants()


def test_increase_key():
    pm = PriorityMap()
    pm.put("a", 1)
    pm.put("b", 3)
    pm.put("a", 9)
    assert pm.poll_min() == Pair("b", 3)
    assert pm.poll_min() == Pair("a", 9)


def test_poll_removes_key():
    pm = PriorityMap()
    pm.put("x", 2)
    assert pm.poll_min() == Pair("x", 2)
    assert pm.get("x") is None
    assert "x" not in pm
    assert not pm


def test_random_puts_match_model():
    rng = random.Random(3)
    pm = PriorityMap()
    model = {}
    for _ in range(1500):
        key = rng.randrange(25)
        if rng.random() < 0.8:
            value = rng.randrange(40)
            pm.put(key, value)
            model[key] = value
        elif model:
            pair = pm.poll_min()
            assert pair.second == min(model.values())
            assert model.pop(pair.first) == pair.second
        pm.check_invariants()
        assert len(pm) == len(model)
        for k, v in model.items():
            assert pm.get(k) == v
    values = []
    while pm:
        values.append(pm.poll_min().second)
    assert values == sorted(model.values())


def test_missing_old_pair_is_reported():
    pm = PriorityMap()
    pm.put("a", 1)
    pm._heap.remove(Pair("a", 1))
    with pytest.raises(AlgorithmError):
        pm.put("a", 2)


def test_str_includes_heap_and_table():
    pm = PriorityMap()
    pm.put("a", 1)
    text = str(pm)
    assert "<a,1>" in text
    assert "Map: {'a': 1}" in text


def test_custom_queue_decides_poll_order():
    largest_first = IndexedHeap(lambda p, q: compare_second(q, p))
    pm = PriorityMap(largest_first)
    for key, value in [("a", 3), ("b", 7), ("c", 1)]:
        pm.put(key, value)
    pm.put("c", 9)
    pm.check_invariants()
    assert [pm.poll_min() for _ in range(3)] == [Pair("c", 9), Pair("b", 7), Pair("a", 3)]
    assert len(pm) == 0


class _ListQueue:
    """Unsorted list queue without a check_invariants method."""

    def __init__(self):
        self.items = []

    def insert(self, element):
        self.items.append(element)
        return len(self.items) - 1

    def peek_min(self):
        return min(self.items, key=lambda p: p.second, default=None)

    def poll_min(self):
        best = self.peek_min()
        if best is not None:
            self.items.remove(best)
        return best

    def remove(self, element):
        if element in self.items:
            self.items.remove(element)
            return True
        return False

    def __len__(self):
        return len(self.items)

    def __contains__(self, element):
        return element in self.items


def test_queue_without_invariant_check():
    pm = PriorityMap(_ListQueue())
    pm.put("a", 4)
    pm.put("b", 2)
    pm.put("a", 1)
    pm.check_invariants()
    assert pm.poll_min() == Pair("a", 1)
    assert pm.poll_min() == Pair("b", 2)


def test_non_empty_queue_rejected():
    heap = IndexedHeap(compare_second)
    heap.insert(Pair("a", 1))
    with pytest.raises(ConfigError):
        PriorityMap(heap)
