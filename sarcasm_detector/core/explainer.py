"""
Explainer — Human-Readable Reasoning for Sarcasm Scores
========================================================
Transforms a ``ScoreResult`` (and the emotion vector it came from) into
plain-English, display-ready pieces that answer **why** the score is what
it is.

The Explainer does NOT score; it reads the contributions the scorer
already produced and narrates them.  Rendering (bars, colours, layout) is
left to whichever front end consumes the dict.

Every explanation follows:
  1. What was observed (the emotions)
  2. What it suggests (the fired patterns)
  3. How much to trust it (honest uncertainty)
"""

from __future__ import annotations

from typing import Mapping, Optional

from sarcasm_detector.core.emotions import SARCASM_INDICATORS, normalise_vector, rank_emotions
from sarcasm_detector.core.parameters import DEFAULT_PARAMETERS, SarcasmParameters
from sarcasm_detector.core.sarcasm_result import ScoreResult

_DEFAULT_BANDS = {"strong": 0.5, "moderate": 0.2, "floor": 0.01}


class Explainer:
    """Generate clear, honest explanations for sarcasm scores."""

    def __init__(self, config: Optional[dict] = None):
        bands = dict(_DEFAULT_BANDS)
        bands.update(((config or {}).get("explainer") or {}).get("bands") or {})
        self.strong = float(bands["strong"])
        self.moderate = float(bands["moderate"])
        self.floor = float(bands["floor"])

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def explain(
        self,
        vector: Mapping[str, float],
        result: ScoreResult,
        params: SarcasmParameters = DEFAULT_PARAMETERS,
    ) -> dict:
        """Build a full explanation package.

        Returns
        -------
        dict with keys:
            detected                - score above the detection threshold
            verdict                 - one-line summary with the percentage
            contribution_narratives - one line per fired pattern, highest first
            emotion_groups          - {"strong"|"moderate"|"weak": [entries]}
            confidence_note         - how much to trust this result
            limitations             - honest list of caveats
            disclaimer              - not-a-lie-detector disclaimer
        """
        detected = result.exceeds(params.thresholds.detection_threshold)
        return {
            "detected": detected,
            "verdict": self._verdict(result, params, detected),
            "contribution_narratives": self._contribution_narratives(result),
            "emotion_groups": self.emotion_groups(vector, detected),
            "confidence_note": self._confidence_note(result, params),
            "limitations": self._limitations(vector, result),
            "disclaimer": self._disclaimer(),
        }

    def emotion_groups(self, vector: Mapping[str, float], detected: bool = False) -> dict:
        """Emotions above the floor, highest first, bucketed by magnitude.

        Each entry is ``{"emotion", "score", "indicator"}``; ``indicator``
        marks sarcasm-indicator emotions, and only when sarcasm was detected.
        """
        groups = {"strong": [], "moderate": [], "weak": []}
        for emotion, value in rank_emotions(normalise_vector(vector), self.floor):
            if value >= self.strong:
                band = "strong"
            elif value >= self.moderate:
                band = "moderate"
            else:
                band = "weak"
            groups[band].append({
                "emotion": emotion,
                "score": value,
                "indicator": detected and emotion in SARCASM_INDICATORS,
            })
        return groups

    # ------------------------------------------------------------------
    # Narratives
    # ------------------------------------------------------------------

    @staticmethod
    def _verdict(result: ScoreResult, params: SarcasmParameters, detected: bool) -> str:
        threshold = params.thresholds.detection_threshold
        if detected:
            return (
                f"**Sarcasm detected** (score: {result.score:.0%}, "
                f"threshold: {threshold:.0%})."
            )
        return (
            f"**No sarcasm detected** (score: {result.score:.0%}, "
            f"threshold: {threshold:.0%})."
        )

    @staticmethod
    def _contribution_narratives(result: ScoreResult) -> list[str]:
        return [
            f"**{c.pattern}** (+{c.score:.0%}): {c.explanation}"
            for c in result.contributions
        ]

    @staticmethod
    def _confidence_note(result: ScoreResult, params: SarcasmParameters) -> str:
        """Honest statement about how settled the verdict is."""
        margin = abs(result.score - params.thresholds.detection_threshold)
        n = len(result.contributions)

        if n == 0:
            return (
                "**Confidence: Low.**  No sarcasm pattern fired.  The expression "
                "reads as sincere, or too faint to judge."
            )
        if n >= 3 and margin > 0.2:
            return (
                "**Confidence: Moderate to High.**  Several independent patterns "
                "agree and the score is well clear of the threshold."
            )
        if margin > 0.1:
            return (
                "**Confidence: Moderate.**  The score is clearly on one side of "
                "the threshold, but rests on few patterns."
            )
        return (
            "**Confidence: Low.**  The score sits close to the detection "
            "threshold -- small changes in expression could flip the verdict."
        )

    @staticmethod
    def _limitations(vector: Mapping[str, float], result: ScoreResult) -> list[str]:
        limits = []

        full = normalise_vector(vector)
        if not any(full[e] > 0 for e in SARCASM_INDICATORS) and result.contributions:
            limits.append(
                "No sarcasm-indicator emotion was present.  The score comes only "
                "from positive-emotion patterns, which sincere enthusiasm can "
                "trigger as well."
            )

        limits.append(
            "Scores come from hand-tuned rules, not a trained model.  Weights "
            "and thresholds are adjustable and the defaults are not calibrated "
            "against labelled data."
        )
        limits.append(
            "Expression measures are a single-moment snapshot.  Sarcasm often "
            "depends on words and context the emotion vector does not carry."
        )
        return limits

    @staticmethod
    def _disclaimer() -> str:
        return (
            "**Disclaimer:** This is a heuristic demo.  A sarcasm score "
            "describes vocal / facial expression patterns only and says nothing "
            "certain about what a person meant."
        )
