import io
import logging

from algorithms.bellman_ford import bellman_ford
from core.logging import ROOT_LOGGER_NAME, get_logger, set_global_log_level, setup_root_logger
from tests.helpers import edges, nodes


def test_module_loggers_live_under_package_root():
    assert get_logger("algorithms.dijkstra").name == "spviz.algorithms.dijkstra"
    assert get_logger("spviz.engine").name == "spviz.engine"


def test_single_handler_writes_records(clean_logging):
    buf = io.StringIO()
    setup_root_logger(handler=logging.StreamHandler(buf), format_string="%(levelname)s %(message)s")
    setup_root_logger()  # second call is a no-op
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1

    get_logger("tests").warning("hello")
    assert buf.getvalue() == "WARNING hello\n"


def test_debug_level_exposes_algorithm_trace(clean_logging, caplog):
    set_global_log_level(logging.DEBUG)
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        bellman_ford(nodes("A", "B"), edges(("A", "B", 1)), "A")
    assert any(r.name == "spviz.algorithms.bellman_ford" for r in caplog.records)


def test_negative_cycle_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger=ROOT_LOGGER_NAME):
        bellman_ford(nodes("A", "B"), edges(("A", "B", 1), ("B", "A", -2)), "A")
    assert any("negative cycle" in r.getMessage() for r in caplog.records)


def test_global_level_applies_to_handlers(clean_logging):
    set_global_log_level(logging.WARNING)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    assert root.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in root.handlers)
