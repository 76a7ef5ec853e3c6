import json

import pytest

from core.config import EngineConfig
from core.errors import NegativeWeightError, UnknownAlgorithmError
from engine.recorder import Recorder
from graph import Graph


def _graph(*triples, ids=("A", "B", "C", "D")):
    g = Graph()
    for nid in ids:
        g.create_node(nid)
    for u, v, w in triples:
        g.create_edge(u, v, w)
    return g


def test_dijkstra_metrics():
    rec = Recorder()
    rec.start("dijkstra", _graph(("A", "B", 1), ("B", "C", 2), ("C", "D", 3)), "A")
    m = rec.run_to_completion()
    assert m.algo_label == "Dijkstra's Algorithm"
    assert m.source == "A"
    assert (m.vertex_count, m.edge_count) == (4, 3)
    assert m.total_steps == 9
    assert m.step_counts == {"init": 1, "visit": 4, "update": 3, "finish": 1}
    assert m.reachable == 4
    assert m.paths_found == 4
    assert not m.negative_cycle
    assert rec.get_metrics() is m


def test_bellman_ford_flags_negative_cycle():
    rec = Recorder()
    rec.start("bellman_ford", _graph(("A", "B", 1), ("B", "C", -3), ("C", "B", 1), ("C", "D", 2)), "A")
    m = rec.run_to_completion()
    assert m.negative_cycle
    assert m.reachable == 1


def test_floyd_warshall_ignores_source_and_reads_diagonal():
    rec = Recorder()
    rec.start("floyd_warshall", _graph(("A", "B", 1), ("B", "A", -3), ids=("A", "B")), "B")
    m = rec.run_to_completion()
    assert m.source == ""
    assert m.negative_cycle


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        Recorder().start("astar", _graph(), "A")
    with pytest.raises(ValueError):
        Recorder().start("astar", _graph(), "A")


def test_negative_weight_guard():
    g = _graph(("A", "B", -1))
    with pytest.raises(NegativeWeightError, match="non-negative"):
        Recorder().start("dijkstra", g, "A")
    # algorithms that accept negative weights are not guarded
    Recorder().start("bellman_ford", g, "A")


def test_negative_weight_guard_can_be_disabled():
    rec = Recorder(config=EngineConfig(reject_negative_weights=False))
    rec.start("dijkstra", _graph(("A", "B", -1)), "A")
    assert rec.run_to_completion().total_steps > 0


def test_run_before_start():
    with pytest.raises(RuntimeError):
        Recorder().run_to_completion()


def test_export_is_json_ready():
    rec = Recorder()
    rec.start("dijkstra", _graph(("A", "B", 2)), "A")
    rec.run_to_completion()
    out = rec.export()
    json.dumps(out, allow_nan=False)
    assert out["algo_key"] == "dijkstra"
    assert out["result"]["finalDistances"] == {"A": 0.0, "B": 2.0, "C": "∞", "D": "∞"}
    assert out["result"]["shortestPaths"]["B"] == ["A", "B"]
    assert len(out["graph"]["nodes"]) == 4


def test_run_uses_a_snapshot_of_the_graph():
    g = _graph(("A", "B", 2))
    rec = Recorder()
    rec.start("dijkstra", g, "A")
    rec.run_to_completion()
    g.create_edge("B", "C", 1)
    assert rec.result.distances["C"] == float("inf")
