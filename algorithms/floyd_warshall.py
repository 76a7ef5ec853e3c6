"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  Every recorded step carries the full
N×N distance matrix so the presentation layer can render it as a live grid.

Structure:
  for k in vertices:          ← "intermediate" vertex
      for i in vertices:
          for j in vertices:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Records a Step for:
  1. init    – adjacency → matrix
  2. update  – each (i, j) cell that actually changes, with its (i, j, k)
  3. finish  – the final matrix

Quirks kept on purpose:
  - Parallel edges overwrite each other while the matrix is seeded: the
    last edge in the list wins, no minimum is taken.
  - Final distances and paths are reported relative to the FIRST vertex in
    the supplied order, and each "path" is the two-element [first, v].
  - A negative cycle shows up as a negative diagonal entry.
"""

import math
from typing import Dict, List, Optional, Sequence

from algorithms.step import AlgorithmResult, StepKind, StepRecorder
from core.logging import get_logger

logger = get_logger(__name__)


def floyd_warshall(vertices: Sequence, edges: Sequence) -> AlgorithmResult:
    """
    Args:
        vertices : objects with `.id`, in matrix axis order.
        edges    : objects with `.source`, `.target`, `.weight` (directed).
    """
    INF   = math.inf
    nodes = [v.id for v in vertices]
    n     = len(nodes)
    if n == 0:
        return AlgorithmResult()

    # id → matrix index; a repeated id maps to its first position
    idx: Dict[str, int] = {}
    for i, nid in enumerate(nodes):
        idx.setdefault(nid, i)

    logger.debug("floyd_warshall: %d vertices, %d edges", n, len(edges))

    # --- initialise dist & next matrices ---
    dist: List[List[float]]         = [[INF] * n for _ in range(n)]
    nxt:  List[List[Optional[int]]] = [[None] * n for _ in range(n)]

    for i in range(n):
        dist[i][i] = 0

    for edge in edges:
        u = idx.get(edge.source)
        v = idx.get(edge.target)
        if u is None or v is None:
            continue
        dist[u][v] = edge.weight
        nxt[u][v]  = v

    rec = StepRecorder()
    rec.record(
        StepKind.INIT,
        "Floyd-Warshall Algorithm initialized with direct edge distances.",
        matrix=dist, vertices=nodes,
    )

    # ==============================================================
    # MAIN TRIPLE LOOP
    # ==============================================================
    for k in range(n):
        for i in range(n):
            for j in range(n):
                new_dist = dist[i][k] + dist[k][j]
                if new_dist < dist[i][j]:
                    dist[i][j] = new_dist
                    nxt[i][j]  = nxt[i][k]
                    rec.record(
                        StepKind.UPDATE,
                        f"Using {nodes[k]} as intermediate: Updated distance "
                        f"from {nodes[i]} to {nodes[j]}: {new_dist}",
                        matrix=dist, vertices=nodes,
                        highlight=(nodes[i], nodes[j], nodes[k]),
                    )

    rec.record(
        StepKind.FINISH,
        "Floyd-Warshall algorithm completed!",
        matrix=dist, vertices=nodes,
    )

    # ==============================================================
    # REPORT relative to the first vertex
    # ==============================================================
    # TODO: expose next-hop paths (nxt) once consumers of the two-element
    # [first, v] form have moved over.
    ref = nodes[0]
    distances: Dict[str, float]     = {nid: dist[0][idx[nid]] for nid in nodes}
    paths:     Dict[str, List[str]] = {nid: [ref, nid] for nid in nodes}

    negative = [nodes[i] for i in range(n) if dist[i][i] < 0]
    if negative:
        logger.info("floyd_warshall: negative cycle through %s", ", ".join(negative))
    logger.debug("floyd_warshall: %d steps", len(rec))
    return AlgorithmResult(steps=rec.steps, distances=distances, paths=paths)
