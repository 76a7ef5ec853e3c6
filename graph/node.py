"""
node.py — Graph Vertex
======================
A vertex is an opaque string id plus a display label.  Only the id is
load-bearing for the algorithms; the label is used in step messages.
"""

from typing import Optional
import uuid


class Node:
    """
    Attributes:
        id    : Unique identifier (short uuid by default, or user-supplied).
        label : Human-readable name; defaults to the id.
    """

    __slots__ = ("id", "label")

    def __init__(self, label: Optional[str] = None, node_id: Optional[str] = None):
        self.id: str    = node_id or str(uuid.uuid4())[:8]
        self.label: str = label or self.id

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(label=data.get("label"), node_id=data["id"])

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
