"""
Core Module — Sarcasm Scoring Engine
=====================================
  - SarcasmParameters: pattern weights + thresholds (immutable)
  - ParameterStore:    copy-on-write edits for one session
  - SarcasmScorer:     emotion vector -> ScoreResult (rule ensemble)
  - Explainer:         human-readable explanations for scores
"""

from sarcasm_detector.core.parameters import (
    DEFAULT_PARAMETERS,
    PatternWeight,
    SarcasmParameters,
    Thresholds,
)
from sarcasm_detector.core.parameter_store import ParameterStore
from sarcasm_detector.core.sarcasm_result import Contribution, ScoreResult
from sarcasm_detector.core.scorer import SarcasmScorer, score
from sarcasm_detector.core.explainer import Explainer

__all__ = [
    "DEFAULT_PARAMETERS",
    "PatternWeight",
    "SarcasmParameters",
    "Thresholds",
    "ParameterStore",
    "Contribution",
    "ScoreResult",
    "SarcasmScorer",
    "score",
    "Explainer",
]
