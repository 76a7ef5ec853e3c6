import pytest

from algorithms.priority_queue import PriorityQueue


def test_extract_min_orders_by_priority():
    pq = PriorityQueue()
    pq.insert("A", 3)
    pq.insert("B", 1)
    pq.insert("C", 2)
    assert [pq.extract_min() for _ in range(3)] == ["B", "C", "A"]
    assert not pq


def test_ties_break_by_insertion_order():
    pq = PriorityQueue()
    for vid in ("C", "A", "B"):
        pq.insert(vid, 1.0)
    assert [pq.extract_min() for _ in range(3)] == ["C", "A", "B"]


def test_decrease_priority_moves_vertex_forward():
    pq = PriorityQueue()
    pq.insert("A", 5)
    pq.insert("B", 4)
    pq.decrease_priority("A", 1)
    assert pq.priority_of("A") == 1
    assert len(pq) == 2
    assert pq.extract_min() == "A"
    assert pq.extract_min() == "B"


def test_decreased_vertex_keeps_original_tie_position():
    pq = PriorityQueue()
    pq.insert("A", 9)
    pq.insert("B", 2)
    pq.decrease_priority("A", 2)
    assert pq.extract_min() == "A"


def test_decrease_priority_absent_vertex_is_noop():
    pq = PriorityQueue()
    pq.insert("A", 1)
    pq.decrease_priority("Z", 0)
    assert "Z" not in pq
    assert len(pq) == 1


def test_contains_tracks_live_entries():
    pq = PriorityQueue()
    pq.insert("A", 1)
    assert pq.contains("A")
    assert "A" in pq
    pq.extract_min()
    assert "A" not in pq


def test_extract_from_empty_queue_raises():
    pq = PriorityQueue()
    with pytest.raises(KeyError):
        pq.extract_min()
