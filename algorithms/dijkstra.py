"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Single-source shortest paths by greedy selection from a min-priority queue.

Records a Step at:
  1. init    – distances set, source queued
  2. visit   – a vertex is dequeued and marked visited
  3. update  – every successful relaxation
  4. finish  – queue exhausted

Correctness note: Dijkstra requires non-negative weights.  This function
does not check; negative weights give an unspecified result.  The run
layer (engine.recorder) refuses such graphs when configured to.
"""

import math
from typing import Dict, List, Optional, Sequence

from algorithms.paths import reconstruct_paths
from algorithms.priority_queue import PriorityQueue
from algorithms.step import AlgorithmResult, StepKind, StepRecorder, format_distance
from core.logging import get_logger

logger = get_logger(__name__)


def dijkstra(vertices: Sequence, edges: Sequence, source: str) -> AlgorithmResult:
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
        logger.warning("dijkstra: source %r is not in the graph", source)
        return AlgorithmResult(distances={vid: INF for vid in labels})

    logger.debug("dijkstra: %d vertices, %d edges, source=%s", len(labels), len(edges), source)

    # outgoing edges per vertex, in edge-list order; dangling edges dropped
    outgoing: Dict[str, List] = {vid: [] for vid in labels}
    for edge in edges:
        if edge.source in labels and edge.target in labels:
            outgoing[edge.source].append(edge)

    dist:    Dict[str, float]         = {vid: INF for vid in labels}
    prev:    Dict[str, Optional[str]] = {vid: None for vid in labels}
    visited: set                      = set()
    order:   List[str]                = []
    rec = StepRecorder()
    pq  = PriorityQueue()

    dist[source] = 0.0
    pq.insert(source, 0.0)

    rec.record(
        StepKind.INIT,
        "Dijkstra's Algorithm initialized with priority queue. Source node distance set to 0.",
        distances=dist, previous=prev, visited=order,
    )

    # --- main loop ---
    while pq:
        node = pq.extract_min()
        if node in visited:
            continue

        visited.add(node)
        order.append(node)
        rec.record(
            StepKind.VISIT,
            f"Visiting node {labels[node]} with distance {format_distance(dist[node])}",
            current_vertex=node, distances=dist, previous=prev, visited=order,
        )

        # -- relax neighbours --
        for edge in outgoing[node]:
            nbr = edge.target
            if nbr in visited:
                continue

            new_dist = dist[node] + edge.weight
            if new_dist < dist[nbr]:
                dist[nbr] = new_dist
                prev[nbr] = node
                if nbr in pq:
                    pq.decrease_priority(nbr, new_dist)
                else:
                    pq.insert(nbr, new_dist)
                rec.record(
                    StepKind.UPDATE,
                    f"Updated distance to {labels[nbr]}: {format_distance(new_dist)} "
                    f"(via {labels[node]})",
                    current_vertex=node, distances=dist, previous=prev, visited=order,
                )
            elif nbr not in pq:
                # no improvement, but make sure it is eventually visited
                pq.insert(nbr, dist[nbr])

    rec.record(
        StepKind.FINISH,
        "Dijkstra's algorithm completed!",
        distances=dist, previous=prev, visited=order,
    )

    paths = reconstruct_paths(labels, prev, dist, source)
    logger.debug("dijkstra: %d steps, %d/%d vertices reachable", len(rec), len(paths), len(labels))
    return AlgorithmResult(steps=rec.steps, distances=dist, paths=paths)
