import math
import random

import pytest

from shortpath.domain.errors import QueueProtocolError
from shortpath.graph.queue import DecreaseKeyQueue


def drain(queue: DecreaseKeyQueue) -> list:
    out = []
    while queue:
        out.append(queue.pop_min())
    return out


def test_pop_min_returns_vertices_by_distance():
    queue = DecreaseKeyQueue()
    for vertex, distance in [("c", 3.0), ("a", 1.0), ("d", 4.0), ("b", 2.0)]:
        queue.push(vertex, distance)

    assert len(queue) == 4
    assert drain(queue) == ["a", "b", "c", "d"]
    assert queue.empty()


def test_equal_distances_pop_in_push_order():
    queue = DecreaseKeyQueue()
    for vertex in ["x", "y", "z"]:
        queue.push(vertex, 5.0)

    assert drain(queue) == ["x", "y", "z"]


def test_decrease_key_moves_entry_to_front():
    queue = DecreaseKeyQueue()
    queue.push("a", 1.0)
    queue.push("b", 2.0)
    queue.push("c", 10.0)

    queue.decrease_key("c", 10.0, 0.5)

    assert queue.peek_distance("c") == 0.5
    assert drain(queue) == ["c", "a", "b"]


def test_decrease_key_from_infinity():
    queue = DecreaseKeyQueue()
    queue.push("a", math.inf)
    queue.push("b", 3.0)

    queue.decrease_key("a", math.inf, 1.0)

    assert queue.pop_min() == "a"


def test_contains_tracks_live_entries():
    queue = DecreaseKeyQueue()
    queue.push("a", 1.0)

    assert "a" in queue
    queue.pop_min()
    assert "a" not in queue


def test_unorderable_vertices_are_never_compared():
    queue = DecreaseKeyQueue()
    queue.push(("tuple", 1), 1.0)
    queue.push(frozenset({2}), 1.0)
    queue.push(None, 1.0)

    assert drain(queue) == [("tuple", 1), frozenset({2}), None]


def test_large_random_sequence_matches_sorted_order():
    rng = random.Random(7)
    queue = DecreaseKeyQueue()
    keys = {}
    for vertex in range(200):
        keys[vertex] = rng.uniform(10, 100)
        queue.push(vertex, keys[vertex])
    for vertex in rng.sample(range(200), 80):
        new_key = keys[vertex] - rng.uniform(0.1, 10)
        queue.decrease_key(vertex, keys[vertex], new_key)
        keys[vertex] = new_key

    popped = drain(queue)
    assert [keys[v] for v in popped] == sorted(keys.values())


class TestQueueProtocolErrors:
    def test_duplicate_push(self):
        queue = DecreaseKeyQueue()
        queue.push("a", 1.0)

        with pytest.raises(QueueProtocolError) as excinfo:
            queue.push("a", 0.5)
        assert excinfo.value.vertex == "a"

    def test_pop_from_empty_queue(self):
        with pytest.raises(QueueProtocolError):
            DecreaseKeyQueue().pop_min()

    def test_decrease_key_on_missing_vertex(self):
        queue = DecreaseKeyQueue()
        queue.push("a", 1.0)
        queue.pop_min()

        with pytest.raises(QueueProtocolError):
            queue.decrease_key("a", 1.0, 0.5)

    def test_decrease_key_with_stale_old_distance(self):
        queue = DecreaseKeyQueue()
        queue.push("a", 4.0)

        with pytest.raises(QueueProtocolError):
            queue.decrease_key("a", 5.0, 1.0)

    def test_decrease_key_must_decrease(self):
        queue = DecreaseKeyQueue()
        queue.push("a", 4.0)

        with pytest.raises(QueueProtocolError):
            queue.decrease_key("a", 4.0, 4.0)
        with pytest.raises(QueueProtocolError):
            queue.decrease_key("a", 4.0, 6.0)

    def test_peek_distance_on_missing_vertex(self):
        with pytest.raises(QueueProtocolError):
            DecreaseKeyQueue().peek_distance("nope")
