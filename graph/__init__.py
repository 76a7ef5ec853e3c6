"""
graph/
-----
Graph snapshot layer.  Public API:

    from graph import Graph, Node, Edge
"""

from graph.node  import Node
from graph.edge  import Edge
from graph.graph import Graph

__all__ = [
    "Node",
    "Edge",
    "Graph",
]
