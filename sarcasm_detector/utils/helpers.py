"""
Shared Utilities
=================
Config I/O and logging, kept apart from the scoring logic.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml


_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_DEFAULT_CONFIG = _PROJECT_ROOT / "config" / "config.yaml"


def load_config(config_path: Optional[str] = None) -> dict:
    """Load YAML config, defaulting to the project-root config file."""
    path = Path(config_path) if config_path else _DEFAULT_CONFIG
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def setup_logging(level: Optional[int] = None) -> logging.Logger:
    """Project-wide logger.

    Without an explicit *level*, an already configured level is kept and a
    fresh logger starts at INFO.
    """
    logger = logging.getLogger("sarcasm_detector")
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter(
            "[%(asctime)s] %(levelname)-8s %(name)s — %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        if level is None:
            level = logging.INFO
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(config: dict) -> logging.Logger:
    """Apply the ``logging.level`` setting from a loaded config."""
    name = str(config.get("logging", {}).get("level", "INFO")).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level in config: {name!r}")
    return setup_logging(level)


def ensure_dir(path) -> Path:
    """Create directory (and parents) if missing; return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
