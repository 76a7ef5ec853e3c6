"""
graph.py — Graph Container
==========================
Caller-side owner of the vertex and edge lists that get handed to the
algorithms.  The algorithms never see this object, only the ordered
snapshots returned by `vertices()` and `edge_list()`.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (neighbours, get_edge_between)
  3. Snapshots for an algorithm run         (vertices, edge_list)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes & edges stored in plain dicts keyed by id.  Dicts keep insertion
    order, and that order IS the iteration order every algorithm sees, so
    runs stay deterministic.
  - A separate adjacency dict `_adj[node_id] → [edge_id, …]` is maintained
    incrementally so neighbour queries are O(out-degree), not O(E).
"""

from typing import Dict, List, Optional, Tuple

from graph.node import Node
from graph.edge import Edge


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : {edge_id: Edge}
        _adj  : {node_id: [edge_id, …]}   outgoing edges only
    """

    def __init__(self):
        self.nodes: Dict[str, Node]      = {}
        self.edges: Dict[str, Edge]      = {}
        self._adj:  Dict[str, List[str]] = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, label: Optional[str] = None, node_id: Optional[str] = None) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(label=label, node_id=node_id or label))

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        # remove every edge touching this node
        incident = [eid for eid, e in self.edges.items() if node_id in (e.source, e.target)]
        for eid in incident:
            self.remove_edge(eid)
        del self.nodes[node_id]
        self._adj.pop(node_id, None)

    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        self.edges[edge.id] = edge
        self._adj.setdefault(edge.source, []).append(edge.id)
        return edge

    def create_edge(self, source: str, target: str, weight: float = 1.0, edge_id: Optional[str] = None) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight, edge_id=edge_id))

    def remove_edge(self, edge_id: str) -> None:
        edge = self.edges.pop(edge_id, None)
        if edge is None:
            return
        out = self._adj.get(edge.source)
        if out is not None:
            out[:] = [eid for eid in out if eid != edge_id]

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def get_edge_between(self, a: str, b: str) -> Optional[Edge]:
        """First edge a → b in insertion order."""
        for eid in self._adj.get(a, []):
            e = self.edges[eid]
            if e.target == b:
                return e
        return None

    def set_weight(self, edge_id: str, weight: float) -> None:
        edge = self.edges.get(edge_id)
        if edge is not None:
            edge.weight = weight

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Tuple[str, Edge]]:
        """Return [(neighbour_id, edge)] for every outgoing edge."""
        return [(self.edges[eid].target, self.edges[eid]) for eid in self._adj.get(node_id, [])]

    # ==================================================================
    # SNAPSHOTS (what the algorithms consume)
    # ==================================================================
    def vertices(self) -> List[Node]:
        return list(self.nodes.values())

    def edge_list(self) -> List[Edge]:
        return list(self.edges.values())

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._adj.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls()
        for nd in data.get("nodes", []):
            g.add_node(Node.from_dict(nd))
        for ed in data.get("edges", []):
            g.add_edge(Edge.from_dict(ed))
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges.values())

    def first_negative_edge(self) -> Optional[Edge]:
        return next((e for e in self.edges.values() if e.weight < 0), None)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
