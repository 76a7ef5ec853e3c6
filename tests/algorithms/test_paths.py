import math

from algorithms.paths import reconstruct_paths, walk_predecessors


def test_walk_follows_links_to_root():
    prev = {"A": None, "B": "A", "C": "B"}
    assert walk_predecessors(prev, "C") == ["A", "B", "C"]


def test_walk_stops_on_predecessor_cycle():
    prev = {"A": None, "B": "C", "C": "B"}
    assert walk_predecessors(prev, "B") == ["C", "B"]


def test_walk_of_missing_vertex_is_just_itself():
    assert walk_predecessors({}, "Q") == ["Q"]


def test_reconstruct_skips_unbounded_and_unreached():
    prev = {"A": None, "B": "A", "C": None, "D": "A"}
    dist = {"A": 0, "B": 1, "C": math.inf, "D": -math.inf}
    assert reconstruct_paths(["A", "B", "C", "D"], prev, dist, "A") == {
        "A": ["A"],
        "B": ["A", "B"],
    }


def test_reconstruct_drops_walks_not_ending_at_source():
    prev = {"A": None, "B": "C", "C": "B"}
    dist = {"A": 0, "B": 1, "C": 1}
    assert reconstruct_paths(["A", "B", "C"], prev, dist, "A") == {"A": ["A"]}
