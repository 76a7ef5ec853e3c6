"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
Single-source shortest paths that tolerates NEGATIVE edge weights and
detects negative cycles reachable from the source.

Structure:
  • Up to |V|-1 passes relaxing every edge; stop early after a quiet pass.
  • One detector pass: any edge that still relaxes points at a vertex
    reachable from a negative cycle.
  • Propagation: everything reachable from those vertices gets −∞ and
    loses its predecessor.

Records a Step for:
  1. init    – distances set
  2. update  – each successful relaxation (tagged with the iteration)
  3. visit   – a pass with no relaxation (early termination)
  4. update  – each edge flagged by the detector pass
  5. finish  – summary, including how many vertices were affected
"""

import math
from collections import deque
from typing import Dict, List, Optional, Sequence

from algorithms.paths import reconstruct_paths
from algorithms.step import AlgorithmResult, StepKind, StepRecorder, format_distance
from core.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(vertices: Sequence, edges: Sequence, source: str) -> AlgorithmResult:
    """
    Args:
        vertices : objects with `.id` and `.label`, in iteration order.
        edges    : objects with `.source`, `.target`, `.weight` (directed).
        source   : id of the start vertex.

    An unknown source yields no steps, +∞ for every listed vertex, no paths.
    """
    INF    = math.inf
    labels = {v.id: v.label for v in vertices}

    if source not in labels:
        logger.warning("bellman_ford: source %r is not in the graph", source)
        return AlgorithmResult(distances={vid: INF for vid in labels})

    # (u, v, w) in edge-list order; dangling edges dropped
    all_edges = [
        (e.source, e.target, e.weight)
        for e in edges
        if e.source in labels and e.target in labels
    ]
    V = len(labels)
    logger.debug("bellman_ford: %d vertices, %d edges, source=%s", V, len(all_edges), source)

    dist: Dict[str, float]         = {vid: INF for vid in labels}
    prev: Dict[str, Optional[str]] = {vid: None for vid in labels}
    dist[source] = 0.0
    rec = StepRecorder()

    rec.record(
        StepKind.INIT,
        "Bellman-Ford Algorithm initialized. Source node distance set to 0.",
        distances=dist, previous=prev,
    )

    # ==============================================================
    # RELAXATION PASSES
    # ==============================================================
    for iteration in range(1, V):
        any_relaxed = False

        for u, v, w in all_edges:
            if dist[u] == INF:
                continue   # can't relax from an unreachable vertex
            new_dist = dist[u] + w
            if new_dist < dist[v]:
                dist[v] = new_dist
                prev[v] = u
                any_relaxed = True
                rec.record(
                    StepKind.UPDATE,
                    f"Iteration {iteration}: Relaxed edge {labels[u]} → {labels[v]}, "
                    f"updated distance to {format_distance(new_dist)}",
                    current_vertex=u, distances=dist, previous=prev,
                )

        if not any_relaxed:
            rec.record(
                StepKind.VISIT,
                f"No updates in iteration {iteration}, algorithm can terminate early.",
                distances=dist, previous=prev,
            )
            break

    # ==============================================================
    # NEGATIVE-CYCLE DETECTOR
    # ==============================================================
    flagged: List[str] = []
    for u, v, w in all_edges:
        if dist[u] == INF:
            continue
        if dist[u] + w < dist[v]:
            if v not in flagged:
                flagged.append(v)
            rec.record(
                StepKind.UPDATE,
                f"Negative cycle detected! Edge {labels[u]} → {labels[v]} can still be relaxed.",
                distances=dist, previous=prev,
            )

    if flagged:
        affected = _propagate_unbounded(flagged, all_edges, dist, prev)
        logger.info("bellman_ford: negative cycle reachable from %s, %d vertices unbounded", source, affected)
        rec.record(
            StepKind.FINISH,
            f"Bellman-Ford completed with negative cycle detection. "
            f"{affected} nodes affected by negative cycles.",
            distances=dist, previous=prev,
        )
    else:
        rec.record(
            StepKind.FINISH,
            "Bellman-Ford algorithm completed successfully! No negative cycles detected.",
            distances=dist, previous=prev,
        )

    paths = reconstruct_paths(labels, prev, dist, source)
    logger.debug("bellman_ford: %d steps, %d paths", len(rec), len(paths))
    return AlgorithmResult(steps=rec.steps, distances=dist, paths=paths)


# ---------------------------------------------------------------------------
def _propagate_unbounded(
    frontier: List[str],
    all_edges: List[tuple],
    dist: Dict[str, float],
    prev: Dict[str, Optional[str]],
) -> int:
    """
    Breadth-first walk outward from `frontier`; every vertex reached gets
    −∞ and no predecessor.  Returns the number of vertices marked.
    """
    queue = deque(frontier)
    marked = set()
    while queue:
        cur = queue.popleft()
        if cur in marked:
            continue
        marked.add(cur)
        dist[cur] = -math.inf
        prev[cur] = None
        for u, v, _ in all_edges:
            if u == cur and v not in marked:
                queue.append(v)
    return len(marked)
