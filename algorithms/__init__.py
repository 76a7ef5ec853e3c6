"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the engine knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "dijkstra": AlgoInfo(key, label, fn, tags, supports_negative, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The run recorder and the web API
both consume it, so adding an algorithm is: write the function, add one
entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from algorithms.bellman_ford   import bellman_ford
from algorithms.dijkstra       import dijkstra
from algorithms.floyd_warshall import floyd_warshall
from algorithms.step           import AlgorithmResult, Step, StepKind


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "dijkstra"
    label:             str                    # human label, e.g. "Dijkstra's Algorithm"
    fn:                Callable[..., AlgorithmResult]
    tags:              List[str] = field(default_factory=list)
    supports_negative: bool     = False       # can handle negative edges?
    is_all_pairs:      bool     = False       # takes no source
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    def to_dict(self) -> dict:
        return {
            "key":               self.key,
            "label":             self.label,
            "tags":              list(self.tags),
            "supports_negative": self.supports_negative,
            "is_all_pairs":      self.is_all_pairs,
            "complexity_time":   self.complexity_time,
            "complexity_space":  self.complexity_space,
            "description":       self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=dijkstra,
        tags=["weighted", "shortest-path", "single-source"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Requires non-negative weights.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", fn=bellman_ford,
        tags=["weighted", "shortest-path", "single-source", "negative-edges"],
        supports_negative=True,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Marks nodes reachable from a negative cycle as −∞.",
    ),

    "floyd_warshall": AlgoInfo(
        key="floyd_warshall", label="Floyd–Warshall", fn=floyd_warshall,
        tags=["weighted", "all-pairs", "negative-edges"],
        supports_negative=True, is_all_pairs=True,
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths via dynamic programming. Watch the matrix evolve!",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "AlgoInfo",
    "AlgorithmResult",
    "REGISTRY",
    "Step",
    "StepKind",
    "algorithms_by_tag",
    "bellman_ford",
    "dijkstra",
    "floyd_warshall",
    "get_algorithm",
    "list_algorithms",
]
