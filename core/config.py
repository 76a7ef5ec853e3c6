"""Configuration for the engine and the web layer."""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class EngineConfig:
    """Runtime switches read by the Recorder and the Flask app."""

    # Refuse to run a non-negative-only algorithm on a graph with a negative
    # edge. The algorithm functions themselves never check this.
    reject_negative_weights: bool = True

    # Level applied to the package root logger at app start-up
    log_level: int = logging.INFO

    # Flask session signing key; None means generate one per process
    secret_key: Optional[str] = None

    # Replay speed preset used by new Steppers
    default_speed: str = "medium"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """Build a config from ``SPVIZ_*`` environment variables."""
        env = os.environ if environ is None else environ
        cfg = cls()

        raw = env.get("SPVIZ_REJECT_NEGATIVE_WEIGHTS")
        if raw is not None:
            cfg.reject_negative_weights = raw.strip().lower() in _TRUTHY

        raw = env.get("SPVIZ_LOG_LEVEL")
        if raw:
            level = logging.getLevelName(raw.strip().upper())
            if isinstance(level, int):
                cfg.log_level = level

        cfg.secret_key = env.get("SPVIZ_SECRET_KEY") or None
        cfg.default_speed = env.get("SPVIZ_DEFAULT_SPEED", cfg.default_speed)
        return cfg


# Global configuration instance
ENGINE_CONFIG = EngineConfig.from_env()
