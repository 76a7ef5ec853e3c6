"""
core/
-----
Ambient plumbing shared by every layer: logging, configuration, errors.

    from core import get_logger, ENGINE_CONFIG
"""

from core.config  import EngineConfig, ENGINE_CONFIG
from core.errors  import (
    SpvizError,
    UnknownAlgorithmError,
    NegativeWeightError,
    UnknownSourceError,
)
from core.logging import get_logger, set_global_log_level

__all__ = [
    "EngineConfig",
    "ENGINE_CONFIG",
    "SpvizError",
    "UnknownAlgorithmError",
    "NegativeWeightError",
    "UnknownSourceError",
    "get_logger",
    "set_global_log_level",
]
