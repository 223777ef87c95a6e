"""
Emotion Vocabulary & Vector Normalisation
==========================================
The voice SDK reports 48 expression dimensions per observation.  Depending
on the client they arrive as ``surpriseNegative`` (voice stream),
``Surprise (negative)`` (batch / face models) or already snake_cased.
Everything downstream works on one canonical snake_case vocabulary.

An observation is normalised into a read-only mapping that covers every
canonical emotion:

  - missing emotions read as 0.0
  - unknown labels are ignored
  - non-numeric or non-finite values are skipped (logged, never raised)
"""

from __future__ import annotations

import math
import numbers
import re
from types import MappingProxyType
from typing import Mapping

import numpy as np

from sarcasm_detector.utils.helpers import setup_logging

logger = setup_logging()

EMOTIONS: tuple[str, ...] = (
    "admiration", "adoration", "aesthetic_appreciation", "amusement",
    "anger", "anxiety", "awe", "awkwardness", "boredom", "calmness",
    "concentration", "confusion", "contemplation", "contempt",
    "contentment", "craving", "desire", "determination", "disappointment",
    "disgust", "distress", "doubt", "ecstasy", "embarrassment",
    "empathic_pain", "entrancement", "envy", "excitement", "fear", "guilt",
    "horror", "interest", "joy", "love", "nostalgia", "pain", "pride",
    "realization", "relief", "romance", "sadness", "satisfaction", "shame",
    "surprise_negative", "surprise_positive", "sympathy", "tiredness",
    "triumph",
)

# Elevated scores here are weak evidence of sarcasm on their own.
SARCASM_INDICATORS: tuple[str, ...] = (
    "amusement", "contempt", "disappointment", "awkwardness", "realization",
    "surprise_negative", "doubt", "confusion", "anger",
)

# Read as sincerity alone, but strengthen a sarcasm reading when they
# co-occur with indicators.
MISLEADING_EMOTIONS: tuple[str, ...] = (
    "excitement", "joy", "satisfaction", "pride", "interest",
    "determination", "surprise_positive",
)

_EMOTION_SET = frozenset(EMOTIONS)
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")
_NON_WORD = re.compile(r"[^a-z0-9]+")


def canonical_emotion_name(label: str) -> str:
    """Map any SDK spelling of an emotion label to its snake_case form.

    >>> canonical_emotion_name("Surprise (negative)")
    'surprise_negative'
    >>> canonical_emotion_name("empathicPain")
    'empathic_pain'
    """
    name = label.strip()
    if not name.isupper():
        name = _CAMEL_BOUNDARY.sub("_", name)
    return _NON_WORD.sub("_", name.lower()).strip("_")


def normalise_vector(scores: Mapping[str, object]) -> Mapping[str, float]:
    """Return a read-only, complete emotion vector built from *scores*."""
    vector = dict.fromkeys(EMOTIONS, 0.0)
    for label, value in scores.items():
        name = canonical_emotion_name(str(label))
        if name not in _EMOTION_SET:
            continue
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            logger.warning("Skipping non-numeric score for %s: %r", label, value)
            continue
        value = float(value)
        if not math.isfinite(value):
            logger.warning("Skipping non-finite score for %s: %r", label, value)
            continue
        vector[name] = value
    return MappingProxyType(vector)


def top_two(vector: Mapping[str, float]) -> tuple[float, float]:
    """Highest and second-highest score in the vector."""
    values = np.fromiter(vector.values(), dtype=float)
    if values.size == 0:
        return 0.0, 0.0
    if values.size == 1:
        return float(values[0]), 0.0
    ranked = np.sort(values)[::-1]
    return float(ranked[0]), float(ranked[1])


def rank_emotions(vector: Mapping[str, float], floor: float = 0.0) -> list[tuple[str, float]]:
    """Emotions above *floor*, highest first (ties broken by name)."""
    items = [(k, v) for k, v in vector.items() if v > floor]
    return sorted(items, key=lambda kv: (-kv[1], kv[0]))
