import dataclasses
import json
import math

import pytest

from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, list_algorithms
from algorithms.dijkstra import dijkstra
from algorithms.step import AlgorithmResult, StepKind, StepRecorder, encode_number, format_distance


def test_recorded_step_is_independent_of_live_state():
    rec = StepRecorder()
    dist = {"A": 0.0, "B": math.inf}
    prev = {"A": None, "B": None}
    order = ["A"]
    matrix = [[0, 1], [math.inf, 0]]
    rec.record(StepKind.INIT, "start", distances=dist, previous=prev, visited=order, matrix=matrix)

    dist["B"] = 4.0
    prev["B"] = "A"
    order.append("B")
    matrix[1][0] = 7

    step = rec.steps[0]
    assert step.distances["B"] == math.inf
    assert step.previous["B"] is None
    assert step.visited == ("A",)
    assert step.matrix == ((0, 1), (math.inf, 0))


def test_step_cannot_be_mutated():
    rec = StepRecorder()
    step = rec.record(StepKind.VISIT, "v", distances={"A": 0.0})
    with pytest.raises(TypeError):
        step.distances["A"] = 1.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        step.message = "changed"


def test_irrelevant_fields_are_none():
    step = StepRecorder().record(StepKind.FINISH, "done", matrix=[[0]], vertices=["A"])
    assert step.distances is None
    assert step.previous is None
    assert step.current_vertex is None


def test_early_steps_survive_later_relaxation(chain):
    vs, es = chain
    r = dijkstra(vs, es, "A")
    assert r.steps[0].distances["D"] == math.inf
    assert r.steps[0].previous["D"] is None
    assert r.distances["D"] == 6


def test_result_to_dict_is_strict_json():
    rec = StepRecorder()
    rec.record(StepKind.UPDATE, "u", distances={"A": -math.inf, "B": math.inf},
               matrix=[[0, math.inf]], vertices=["A", "B"], highlight=("A", "B", "A"))
    result = AlgorithmResult(steps=rec.steps, distances={"B": math.inf}, paths={"A": ["A"]})
    out = result.to_dict()
    json.dumps(out, allow_nan=False)
    step = out["steps"][0]
    assert step["type"] == "update"
    assert step["distances"] == {"A": "-∞", "B": "∞"}
    assert step["distanceMatrix"] == [[0, "∞"]]
    assert (step["iNode"], step["jNode"], step["kNode"]) == ("A", "B", "A")
    assert out["finalDistances"] == {"B": "∞"}


def test_number_helpers():
    assert encode_number(2.5) == 2.5
    assert encode_number(-math.inf) == "-∞"
    assert format_distance(3) == "3.0"
    assert format_distance(math.inf) == "∞"


def test_registry_lookup():
    assert [a.key for a in list_algorithms()] == ["dijkstra", "bellman_ford", "floyd_warshall"]
    assert get_algorithm("missing") is None
    assert get_algorithm("floyd_warshall").is_all_pairs
    assert not REGISTRY["dijkstra"].supports_negative
    assert {a.key for a in algorithms_by_tag("negative-edges")} == {"bellman_ford", "floyd_warshall"}
    assert "fn" not in REGISTRY["dijkstra"].to_dict()
