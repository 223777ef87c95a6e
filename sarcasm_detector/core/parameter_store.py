"""
Parameter Store — Copy-on-Write Edits of SarcasmParameters
===========================================================
The configuration surface edits one live ``SarcasmParameters`` value per
session.  Each operation returns a NEW value and leaves its input
untouched, so a scorer call that already holds the old value keeps seeing
a consistent configuration.

No bounds validation happens here.  Sliders clamp their own input; the
scorer stays correct for negative or >1 values because it only compares
and sums.
"""

from __future__ import annotations

from typing import Optional

from sarcasm_detector.core.parameters import DEFAULT_PARAMETERS, SarcasmParameters
from sarcasm_detector.utils.helpers import setup_logging

logger = setup_logging()


# ---------------------------------------------------------------------------
# Pure operations
# ---------------------------------------------------------------------------

def set_weight(params: SarcasmParameters, key: str, value: float) -> SarcasmParameters:
    return params.with_pattern(key, weight=value)


def toggle_enabled(params: SarcasmParameters, key: str) -> SarcasmParameters:
    if key not in params.pattern_weights:
        raise KeyError(f"Unknown pattern: {key!r}")
    return params.with_pattern(key, enabled=not params.pattern_weights[key].enabled)


def set_threshold(params: SarcasmParameters, name: str, value: float) -> SarcasmParameters:
    """Set a threshold by snake_case or camelCase name."""
    return params.with_threshold(name, value)


def reset_to_defaults() -> SarcasmParameters:
    return DEFAULT_PARAMETERS


# ---------------------------------------------------------------------------
# Session holder
# ---------------------------------------------------------------------------

class ParameterStore:
    """Hold the live parameters of one session.

    Every edit replaces the held value wholesale; callers read
    ``store.parameters`` right before scoring.
    """

    def __init__(self, defaults: Optional[SarcasmParameters] = None):
        self.defaults = defaults if defaults is not None else DEFAULT_PARAMETERS
        self._parameters = self.defaults

    @classmethod
    def from_config(cls, config: Optional[dict]) -> "ParameterStore":
        """Store whose defaults come from the ``sarcasm`` config section."""
        return cls(SarcasmParameters.from_config(config))

    @property
    def parameters(self) -> SarcasmParameters:
        return self._parameters

    def replace(self, params: SarcasmParameters) -> SarcasmParameters:
        self._parameters = params
        return params

    def set_weight(self, key: str, value: float) -> SarcasmParameters:
        logger.info("Pattern %s weight -> %s", key, value)
        return self.replace(set_weight(self._parameters, key, value))

    def toggle_enabled(self, key: str) -> SarcasmParameters:
        params = self.replace(toggle_enabled(self._parameters, key))
        logger.info(
            "Pattern %s %s", key,
            "enabled" if params.pattern_weights[key].enabled else "disabled",
        )
        return params

    def set_threshold(self, name: str, value: float) -> SarcasmParameters:
        logger.info("Threshold %s -> %s", name, value)
        return self.replace(set_threshold(self._parameters, name, value))

    def reset_to_defaults(self) -> SarcasmParameters:
        """Restore the store's defaults (the canonical table unless configured)."""
        logger.info("Sarcasm parameters reset to defaults")
        return self.replace(self.defaults)
