"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm on one graph snapshot, keeps the AlgorithmResult,
then computes the metrics the analytics panel needs.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", graph=g, source="A")
    rec.run_to_completion()          # runs the algorithm
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # JSON-friendly snapshot for replay
"""

import math
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.step import AlgorithmResult, StepKind
from core.config import ENGINE_CONFIG, EngineConfig
from core.errors import NegativeWeightError, UnknownAlgorithmError
from core.logging import get_logger
from graph import Graph

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:        str   = ""
    algo_label:      str   = ""
    source:          str   = ""
    vertex_count:    int   = 0
    edge_count:      int   = 0
    total_steps:     int   = 0
    step_counts:     Dict[str, int] = field(default_factory=dict)   # per StepKind value
    reachable:       int   = 0          # vertices with a finite distance
    paths_found:     int   = 0
    negative_cycle:  bool  = False
    wall_time_ms:    float = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        result  : AlgorithmResult of the last run (None until run).
        metrics : Computed RunMetrics (available after run_to_completion).
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.result:  Optional[AlgorithmResult] = None
        self.metrics: Optional[RunMetrics]      = None

        self._config:    EngineConfig       = config or ENGINE_CONFIG
        self._algo_info: Optional[AlgoInfo] = None
        self._graph:     Optional[Graph]    = None
        self._source:    str                = ""

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, graph: Graph, source: Optional[str] = None) -> None:
        """Resolve the algorithm and check its precondition for this graph."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithmError(algo_key)

        if not info.supports_negative and self._config.reject_negative_weights:
            bad = graph.first_negative_edge()
            if bad is not None:
                raise NegativeWeightError(info.label, repr(bad))

        self._algo_info = info
        self._graph     = graph
        self._source    = "" if info.is_all_pairs else (source or "")
        self.result     = None
        self.metrics    = None

    def run_to_completion(self) -> RunMetrics:
        """Run the algorithm on a fresh snapshot and compute metrics."""
        if self._algo_info is None or self._graph is None:
            raise RuntimeError("Call start() first.")

        info = self._algo_info
        vertices, edges = self._graph.vertices(), self._graph.edge_list()

        started = time.monotonic()
        if info.is_all_pairs:
            self.result = info.fn(vertices, edges)
        else:
            self.result = info.fn(vertices, edges, self._source)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "%s run: %d steps, %d/%d reachable, %.2f ms",
            info.key, self.metrics.total_steps, self.metrics.reachable,
            self.metrics.vertex_count, self.metrics.wall_time_ms,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (JSON-friendly snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "source":   self._source,
            "graph":    self._graph.to_dict() if self._graph else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "result":   self.result.to_dict() if self.result else {},
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._algo_info
        result = self.result

        counts = {kind.value: 0 for kind in StepKind}
        for s in result.steps:
            counts[s.kind.value] += 1

        negative = any(d == -math.inf for d in result.distances.values())
        if info.is_all_pairs and result.steps:
            final = result.steps[-1].matrix or ()
            negative = any(final[i][i] < 0 for i in range(len(final)))

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            source=self._source,
            vertex_count=self._graph.node_count(),
            edge_count=self._graph.edge_count(),
            total_steps=len(result.steps),
            step_counts=counts,
            reachable=sum(1 for d in result.distances.values() if math.isfinite(d)),
            paths_found=len(result.paths),
            negative_cycle=negative,
            wall_time_ms=round(wall_ms, 2),
        )
