"""Shared utilities — config loading, logging, helpers."""

from sarcasm_detector.utils.helpers import (
    configure_logging,
    ensure_dir,
    load_config,
    setup_logging,
)

__all__ = ["load_config", "setup_logging", "configure_logging", "ensure_dir"]
