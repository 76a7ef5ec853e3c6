"""Shared fixtures: small graphs built from Node/Edge lists."""

import pytest

from core.logging import reset_logging, setup_root_logger
from tests.helpers import edges, nodes


@pytest.fixture
def chain():
    """A→B(1)→C(2)→D(3)."""
    return nodes("A", "B", "C", "D"), edges(("A", "B", 1), ("B", "C", 2), ("C", "D", 3))


@pytest.fixture
def negative_cycle():
    """B⇄C is a cycle of weight −2 reachable from A; D hangs off C."""
    return (
        nodes("A", "B", "C", "D"),
        edges(("A", "B", 1), ("B", "C", -3), ("C", "B", 1), ("C", "D", 2)),
    )


@pytest.fixture
def clean_logging():
    reset_logging()
    yield
    reset_logging()
    setup_root_logger()
