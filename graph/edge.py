"""
edge.py — Directed Weighted Edge
================================
Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Every edge has its own id, so parallel edges between the same
    ordered pair stay distinct.  Nothing deduplicates them.
  - Always directed: (u, v) says nothing about (v, u).
"""

from typing import Optional
import uuid


class Edge:
    """
    Attributes:
        id     : Unique identifier.
        source : ID of the tail node.
        target : ID of the head node.
        weight : Real-valued cost (default 1). May be negative.
    """

    __slots__ = ("id", "source", "target", "weight")

    def __init__(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        edge_id: Optional[str] = None,
    ):
        self.id:     str   = edge_id or str(uuid.uuid4())[:8]
        self.source: str   = source
        self.target: str   = target
        self.weight: float = weight

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge runs node_a → node_b."""
        return self.source == node_a and self.target == node_b

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=float(data.get("weight", 1.0)),
            edge_id=data.get("id"),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
