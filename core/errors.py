"""
errors.py — Exception hierarchy
================================
The algorithms themselves never raise for bad graph data; malformed input
degrades to sentinel values (+∞ / −∞ / missing path).  These exceptions
belong to the run layer (Recorder, web API) where a caller has asked for
something that cannot be honoured.
"""


class SpvizError(Exception):
    """Base class for every error raised by this package."""


class UnknownAlgorithmError(SpvizError, ValueError):
    def __init__(self, key: str):
        super().__init__(f"Unknown algorithm: {key}")
        self.key = key


class NegativeWeightError(SpvizError, ValueError):
    """Raised when an algorithm that requires weights ≥ 0 gets a negative edge."""

    def __init__(self, algo_label: str, edge_repr: str):
        super().__init__(
            f"{algo_label} requires non-negative edge weights; found {edge_repr}"
        )
        self.algo_label = algo_label
        self.edge_repr = edge_repr


class UnknownSourceError(SpvizError, ValueError):
    """Raised by the web layer when a single-source run has no source set."""
