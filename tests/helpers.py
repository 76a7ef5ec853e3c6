"""Builders for vertex / edge lists used across the tests."""

from graph import Edge, Node


def nodes(*ids):
    return [Node(label=i, node_id=i) for i in ids]


def edges(*triples):
    return [Edge(u, v, w) for u, v, w in triples]
