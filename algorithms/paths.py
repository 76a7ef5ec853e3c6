"""
paths.py — Path reconstruction from predecessor maps
=====================================================
Predecessors are id → id links, never object references.  The relaxation
process does not guarantee those links are acyclic (zero-weight cycles,
negative cycles), so every backward walk carries its own visited set and
stops at the first revisit instead of looping.
"""

import math
from typing import Dict, Iterable, List, Mapping, Optional


def walk_predecessors(
    previous: Mapping[str, Optional[str]],
    target: str,
) -> List[str]:
    """
    Follow predecessor links back from `target`.

    Returns the vertices in forward order (first reached … target).  The
    walk ends at a vertex with no predecessor or just before a vertex it
    has already seen.
    """
    path: List[str] = []
    seen = set()
    cur: Optional[str] = target
    while cur is not None and cur not in seen:
        seen.add(cur)
        path.append(cur)
        cur = previous.get(cur)
    path.reverse()
    return path


def reconstruct_paths(
    vertex_ids: Iterable[str],
    previous: Mapping[str, Optional[str]],
    distances: Mapping[str, float],
    source: str,
) -> Dict[str, List[str]]:
    """
    {vertex_id: [source, …, vertex_id]} for every vertex with a finite
    distance whose backward walk terminates exactly at `source`.
    """
    paths: Dict[str, List[str]] = {}
    for vid in vertex_ids:
        d = distances.get(vid, math.inf)
        if math.isinf(d) or math.isnan(d):
            continue
        path = walk_predecessors(previous, vid)
        if path and path[0] == source:
            paths[vid] = path
    return paths
