"""
Sarcasm Parameters — Pattern Weights & Thresholds
==================================================
The scoring ensemble is hand-tuned, so every rule stays independently
toggleable and reweightable at runtime.  A ``SarcasmParameters`` value is
that runtime configuration:

  - pattern_weights : key -> PatternWeight (weight, enabled, labels)
  - thresholds      : the five numeric cutoffs

Values are immutable.  Every edit produces a new value (see
``parameter_store``), so a scorer call never observes a half-applied edit.

Config files and the UI use the camelCase names (``patternWeights``,
``detectionThreshold``); Python code uses snake_case attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from types import MappingProxyType
from typing import Mapping, Optional

_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0")


def _as_bool(value, key: str) -> bool:
    """Read a config flag; quoted YAML booleans such as "false" are parsed."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"Pattern '{key}': enabled must be a boolean, got {value!r}")


@dataclass(frozen=True)
class PatternWeight:
    """One rule of the ensemble, as the user sees and edits it."""

    name: str
    weight: float
    enabled: bool = True
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "weight": self.weight,
            "enabled": self.enabled,
            "description": self.description,
        }


@dataclass(frozen=True)
class Thresholds:
    base_threshold: float = 0.15             # seed offset for a strong indicator
    strong_indicator_threshold: float = 0.25
    indicator_score_threshold: float = 0.15
    misleading_score_threshold: float = 0.2
    detection_threshold: float = 0.18        # score above this = sarcastic

    def to_dict(self) -> dict:
        return {_SNAKE_TO_CAMEL[f.name]: getattr(self, f.name) for f in fields(self)}


_SNAKE_TO_CAMEL = {
    "base_threshold": "baseThreshold",
    "strong_indicator_threshold": "strongIndicatorThreshold",
    "indicator_score_threshold": "indicatorScoreThreshold",
    "misleading_score_threshold": "misleadingScoreThreshold",
    "detection_threshold": "detectionThreshold",
}
_CAMEL_TO_SNAKE = {v: k for k, v in _SNAKE_TO_CAMEL.items()}

THRESHOLD_NAMES: tuple[str, ...] = tuple(_SNAKE_TO_CAMEL)


def threshold_field(name: str) -> str:
    """Resolve a threshold name in either spelling to its attribute name."""
    if name in _SNAKE_TO_CAMEL:
        return name
    if name in _CAMEL_TO_SNAKE:
        return _CAMEL_TO_SNAKE[name]
    raise KeyError(f"Unknown threshold: {name!r}")


@dataclass(frozen=True)
class SarcasmParameters:
    """Complete, immutable scorer configuration."""

    pattern_weights: Mapping[str, PatternWeight]
    thresholds: Thresholds = Thresholds()

    def __post_init__(self):
        # Freeze the mapping so a shared value cannot be edited in place.
        object.__setattr__(
            self, "pattern_weights", MappingProxyType(dict(self.pattern_weights))
        )

    # ------------------------------------------------------------------
    # Lookups used by the scorer
    # ------------------------------------------------------------------

    def active_weight(self, key: str) -> Optional[float]:
        """Weight of an enabled pattern; None when it is missing or disabled."""
        pattern = self.pattern_weights.get(key)
        if pattern is None or not pattern.enabled:
            return None
        return pattern.weight

    def is_enabled(self, key: str) -> bool:
        return self.active_weight(key) is not None

    def label(self, key: str) -> str:
        pattern = self.pattern_weights.get(key)
        return pattern.name if pattern is not None else key

    # ------------------------------------------------------------------
    # Copy-on-write builders
    # ------------------------------------------------------------------

    def with_pattern(self, key: str, **changes) -> "SarcasmParameters":
        if key not in self.pattern_weights:
            raise KeyError(f"Unknown pattern: {key!r}")
        patterns = dict(self.pattern_weights)
        patterns[key] = replace(patterns[key], **changes)
        return SarcasmParameters(pattern_weights=patterns, thresholds=self.thresholds)

    def with_threshold(self, name: str, value: float) -> "SarcasmParameters":
        thresholds = replace(self.thresholds, **{threshold_field(name): value})
        return SarcasmParameters(
            pattern_weights=self.pattern_weights, thresholds=thresholds
        )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict:
        return {
            "patternWeights": {k: p.to_dict() for k, p in self.pattern_weights.items()},
            "thresholds": self.thresholds.to_dict(),
        }

    @classmethod
    def from_config(
        cls,
        config: Optional[dict],
        base: Optional["SarcasmParameters"] = None,
    ) -> "SarcasmParameters":
        """Overlay the ``sarcasm`` section of a loaded config on *base*.

        Entries may be partial: only the listed fields of a pattern or the
        listed thresholds change.  Patterns not known to *base* are added.
        """
        params = base if base is not None else DEFAULT_PARAMETERS
        section = (config or {}).get("sarcasm") or {}

        patterns = dict(params.pattern_weights)
        for key, entry in (section.get("patternWeights") or {}).items():
            entry = entry or {}
            current = patterns.get(key, PatternWeight(name=key, weight=0.0))
            patterns[key] = PatternWeight(
                name=str(entry.get("name", current.name)),
                weight=float(entry.get("weight", current.weight)),
                enabled=_as_bool(entry.get("enabled", current.enabled), key),
                description=str(entry.get("description", current.description)),
            )

        thresholds = params.thresholds
        overrides = section.get("thresholds") or {}
        if overrides:
            thresholds = replace(
                thresholds,
                **{threshold_field(k): float(v) for k, v in overrides.items()},
            )

        return cls(pattern_weights=patterns, thresholds=thresholds)


# ---------------------------------------------------------------------------
# Canonical defaults
# ---------------------------------------------------------------------------
DEFAULT_PATTERN_WEIGHTS: Mapping[str, PatternWeight] = MappingProxyType({
    "amusementContempt": PatternWeight(
        name="Amusement + Contempt",
        weight=0.2,
        description=(
            "Combines humor with disdain; strongly indicates sarcasm when the "
            "laughter or amusement masks scorn"
        ),
    ),
    "exaggeratedPositive": PatternWeight(
        name="Exaggerated Positive Emotion",
        weight=0.2,
        description=(
            "Overstated positive signals (e.g., extreme joy or excitement) that "
            "contrast sharply with negative context"
        ),
    ),
    "contrastingEmotions": PatternWeight(
        name="Contrasting Emotions",
        weight=0.3,
        description=(
            "Simultaneous expression of conflicting emotions is a key indicator "
            "of sarcastic intent"
        ),
    ),
    "angerPositive": PatternWeight(
        name="Anger + Positive Emotion",
        weight=0.25,
        description=(
            "Indicates passive-aggressive sarcasm: positive language masking "
            "underlying frustration or anger"
        ),
    ),
    "positiveNegativeUndertones": PatternWeight(
        name="Positive Emotion + Negative Undertones",
        weight=0.3,
        description=(
            "Surface-level enthusiasm that hides an underlying negative "
            "sentiment (e.g., false praise)"
        ),
    ),
    "awkwardness": PatternWeight(
        name="Awkwardness",
        weight=0.15,
        description=(
            "High awkwardness often signals discomfort with saying something "
            "insincere"
        ),
    ),
    "exaggeratedSingleEmotion": PatternWeight(
        name="Exaggerated Single Emotion",
        weight=0.15,
        description=(
            "One dominant emotion that's much stronger than others, suggesting "
            "possible exaggeration"
        ),
    ),
    "emotionalComplexity": PatternWeight(
        name="Emotional Complexity",
        weight=0.1,
        description=(
            "Multiple different emotions detected at significant levels, "
            "suggesting complex intent"
        ),
    ),
    "noDominantEmotion": PatternWeight(
        name="No Dominant Emotion",
        weight=0.1,
        description=(
            "Mixed or ambiguous emotional signals that may indicate masked "
            "sarcasm, but with less certainty"
        ),
    ),
    "contemptDetected": PatternWeight(
        name="Contempt Detected",
        weight=0.2,
        description="Presence of contempt, which often signals sarcastic intent",
    ),
    "realizationAmusement": PatternWeight(
        name="Realization + Amusement",
        weight=0.15,
        description="Combination indicating recognition of a contradiction or joke",
    ),
    "emphaticSarcasm": PatternWeight(
        name="Emphatic Sarcasm",
        weight=0.15,
        description=(
            "High determination combined with misleading emotions suggesting "
            "deliberate sarcasm"
        ),
    ),
})

DEFAULT_PARAMETERS = SarcasmParameters(
    pattern_weights=DEFAULT_PATTERN_WEIGHTS,
    thresholds=Thresholds(),
)
