"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm records a sequence of Step objects while it runs.
A Step is a frozen-in-time picture of the state a presentation layer
needs to render one frame:

    • What kind of event this is (init / visit / update / finish)
    • A plain-English message
    • The distance map and predecessor map at that instant
    • The visited set and the vertex being processed
    • The full distance matrix and the (i, j, k) cell that changed
      (all-pairs only)

Design decisions:
  - Step is a frozen dataclass.  Maps are wrapped in MappingProxyType over
    a private copy, sequences and matrices are tuples.  Once recorded, a
    step can never observe a later in-place mutation by the algorithm.
  - StepRecorder is created fresh inside each algorithm call and its
    tuple of steps is handed wholesale to the AlgorithmResult.  No step
    buffer outlives a single invocation.
  - Fields that don't apply to an algorithm or moment are None.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple


class StepKind(Enum):
    INIT   = "init"
    VISIT  = "visit"
    UPDATE = "update"
    FINISH = "finish"


Matrix = Tuple[Tuple[float, ...], ...]


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        kind           : StepKind of this event.
        message        : Human-readable description of what just happened.
        current_vertex : ID of the vertex being processed (or None).
        distances      : {vertex_id: float} at this instant.
        previous       : {vertex_id: predecessor_id or None} at this instant.
        visited        : Vertex ids finalised so far, in visit order.
        matrix         : Full distance matrix (all-pairs only).
        vertices       : Axis order of `matrix`.
        highlight      : (i, j, k) vertex ids of the cell that just changed.
    """

    kind:           StepKind
    message:        str                                   = ""
    current_vertex: Optional[str]                         = None
    distances:      Optional[Mapping[str, float]]         = None
    previous:       Optional[Mapping[str, Optional[str]]] = None
    visited:        Optional[Tuple[str, ...]]             = None
    matrix:         Optional[Matrix]                      = None
    vertices:       Optional[Tuple[str, ...]]             = None
    highlight:      Optional[Tuple[str, str, str]]        = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form; ±∞ become the strings "∞" / "-∞"."""
        out: Dict[str, Any] = {"type": self.kind.value, "message": self.message}
        if self.current_vertex is not None:
            out["currentNode"] = self.current_vertex
        if self.distances is not None:
            out["distances"] = {k: encode_number(v) for k, v in self.distances.items()}
        if self.previous is not None:
            out["previous"] = dict(self.previous)
        if self.visited is not None:
            out["visited"] = list(self.visited)
        if self.matrix is not None:
            out["distanceMatrix"] = [[encode_number(v) for v in row] for row in self.matrix]
        if self.vertices is not None:
            out["nodes"] = list(self.vertices)
        if self.highlight is not None:
            out["iNode"], out["jNode"], out["kNode"] = self.highlight
        return out


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Attributes:
        steps     : Ordered, immutable trace of the run.
        distances : Final {vertex_id: distance}.
        paths     : {vertex_id: [source, …, vertex_id]} for reconstructed paths.
    """

    steps:     Tuple[Step, ...]          = ()
    distances: Dict[str, float]          = field(default_factory=dict)
    paths:     Dict[str, List[str]]      = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps":          [s.to_dict() for s in self.steps],
            "finalDistances": {k: encode_number(v) for k, v in self.distances.items()},
            "shortestPaths":  {k: list(p) for k, p in self.paths.items()},
        }


# ---------------------------------------------------------------------------
# Recorder: the only writer of Steps
# ---------------------------------------------------------------------------
class StepRecorder:
    """
    Append-only accumulator owned by one algorithm call.

    Usage inside an algorithm:
        rec = StepRecorder()
        rec.record(StepKind.VISIT, "Visiting A", current_vertex="A",
                   distances=dist, previous=prev, visited=order)
        ...
        return AlgorithmResult(steps=rec.steps, ...)

    Every map / matrix handed to `record` is copied before it is frozen,
    so the caller may keep mutating its working state afterwards.
    """

    def __init__(self):
        self._steps: List[Step] = []

    def record(
        self,
        kind: StepKind,
        message: str,
        *,
        current_vertex: Optional[str] = None,
        distances: Optional[Mapping[str, float]] = None,
        previous: Optional[Mapping[str, Optional[str]]] = None,
        visited: Optional[Sequence[str]] = None,
        matrix: Optional[Sequence[Sequence[float]]] = None,
        vertices: Optional[Sequence[str]] = None,
        highlight: Optional[Tuple[str, str, str]] = None,
    ) -> Step:
        step = Step(
            kind=kind,
            message=message,
            current_vertex=current_vertex,
            distances=_freeze_map(distances),
            previous=_freeze_map(previous),
            visited=tuple(visited) if visited is not None else None,
            matrix=tuple(tuple(row) for row in matrix) if matrix is not None else None,
            vertices=tuple(vertices) if vertices is not None else None,
            highlight=tuple(highlight) if highlight is not None else None,
        )
        self._steps.append(step)
        return step

    @property
    def steps(self) -> Tuple[Step, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _freeze_map(mapping: Optional[Mapping]) -> Optional[Mapping]:
    if mapping is None:
        return None
    return MappingProxyType(dict(mapping))


def encode_number(value: float) -> Any:
    """Map ±∞ to strings so the value survives strict JSON encoders."""
    if isinstance(value, float) and math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return value


def format_distance(value: float) -> str:
    """One-decimal rendering used in step messages."""
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    return f"{value:.1f}"
