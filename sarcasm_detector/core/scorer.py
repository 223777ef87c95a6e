"""
Sarcasm Scorer — Emotion Vector → Sarcasm Probability
=======================================================
Turns one emotion observation into a sarcasm score in [0, 1] plus the list
of patterns that produced it.

The score is a hand-tuned additive rule ensemble, not a learned model.
Evaluation order is fixed:

1. **Indicator sets.**  Keep indicator scores at or above
   ``indicator_score_threshold`` and misleading scores strictly above
   ``misleading_score_threshold``.  Only the indicator and strong-indicator
   thresholds are inclusive, so an indicator sitting exactly on its
   threshold still counts (contempt 0.15 with amusement 0.25 scores 0.425).
   The misleading threshold and the fixed cutoffs inside the rules are
   strict.

2. **Single strong indicator.**  The highest indicator that reaches
   ``strong_indicator_threshold`` (and whose gating pattern is enabled)
   seeds the score at ``base_threshold + 0.3 × score``.

3. **Multiple indicators.**  With two or more kept indicators, the score is
   raised to their mean, then the ``MULTI_INDICATOR_RULES`` apply.

4. **Single-signal rules.**  ``SIGNAL_RULES`` apply regardless of step 3.
   All of them add their weight except ``contemptDetected``, which raises
   the score to its weight (a ceiling, not a sum).

5. **Clamp.**  The final score is clamped to [0, 1]; contributions are
   sorted by amount, highest first.

The mean in step 3 is not gated by any pattern, so disabling every pattern
still leaves it in place when two or more indicators are present.

Missing emotions read as 0 and missing patterns as disabled: the scorer
has no failure mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

import numpy as np

from sarcasm_detector.core.emotions import (
    MISLEADING_EMOTIONS,
    SARCASM_INDICATORS,
    normalise_vector,
    top_two,
)
from sarcasm_detector.core.parameters import (
    DEFAULT_PARAMETERS,
    SarcasmParameters,
    Thresholds,
)
from sarcasm_detector.core.sarcasm_result import Contribution, ScoreResult
from sarcasm_detector.utils.helpers import setup_logging

logger = setup_logging()

ADD = "add"
CEILING = "ceiling"

STRONG_INDICATOR_FACTOR = 0.3

# Pattern whose enabled flag gates each indicator in step 2.  The rules
# themselves leave this pairing open.  Doubt, confusion and surprise_negative
# borrow the switch of the pattern they most often fire with, so disabling
# "No Dominant Emotion" also stops doubt from seeding the score.
STRONG_INDICATOR_PATTERNS: dict[str, str] = {
    "amusement": "amusementContempt",
    "contempt": "contemptDetected",
    "disappointment": "positiveNegativeUndertones",
    "awkwardness": "awkwardness",
    "realization": "realizationAmusement",
    "surprise_negative": "contrastingEmotions",
    "doubt": "noDominantEmotion",
    "confusion": "emotionalComplexity",
    "anger": "angerPositive",
}

_POSITIVE = ("excitement", "joy", "pride", "satisfaction")
_NEGATIVE = ("anger", "disappointment", "contempt", "disgust")
_UNDERTONES = ("disappointment", "contempt", "disgust", "anger", "distress")


@dataclass(frozen=True)
class ScoringContext:
    """Everything a rule may look at for one observation."""

    vector: Mapping[str, float]
    thresholds: Thresholds
    indicators: tuple[str, ...]     # kept by step 1
    misleading: tuple[str, ...]     # kept by step 1
    top: float
    second: float

    @property
    def indicator_scores(self) -> tuple[float, ...]:
        return tuple(self[e] for e in self.indicators)

    def __getitem__(self, emotion: str) -> float:
        return self.vector.get(emotion, 0.0)

    def above(self, emotions, threshold: float) -> list[str]:
        return [e for e in emotions if self[e] > threshold]

    def describe(self, emotions) -> str:
        return ", ".join(f"{e.replace('_', ' ')} {self[e]:.2f}" for e in emotions)


@dataclass(frozen=True)
class Rule:
    """One named pattern of the ensemble."""

    key: str
    predicate: Callable[[ScoringContext], bool]
    explain: Callable[[ScoringContext], str]
    mode: str = ADD
    label: Optional[str] = None     # overrides the pattern's display name


# ---------------------------------------------------------------------------
# Step 3: only evaluated with two or more kept indicators
# ---------------------------------------------------------------------------
MULTI_INDICATOR_RULES: tuple[Rule, ...] = (
    Rule(
        key="amusementContempt",
        predicate=lambda c: c["amusement"] > 0.2 and c["contempt"] > 0.1,
        explain=lambda c: (
            f"Amusement ({c['amusement']:.2f}) alongside contempt "
            f"({c['contempt']:.2f}): laughter masking scorn."
        ),
    ),
    Rule(
        key="awkwardness",
        predicate=lambda c: c["awkwardness"] > 0.3,
        explain=lambda c: (
            f"Awkwardness is high ({c['awkwardness']:.2f}), a sign of "
            "discomfort with saying something insincere."
        ),
    ),
    Rule(
        key="contrastingEmotions",
        label="Mixed Emotions",
        predicate=lambda c: (
            bool(c.misleading)
            and len(c.above(SARCASM_INDICATORS, 0.1)) >= 1
        ),
        explain=lambda c: (
            "Positive-seeming emotions ("
            + c.describe(c.misleading)
            + ") mixed with sarcasm indicators ("
            + c.describe(c.above(SARCASM_INDICATORS, 0.1))
            + ")."
        ),
    ),
    Rule(
        key="emotionalComplexity",
        predicate=lambda c: sum(1 for v in c.vector.values() if v > 0.15) >= 3,
        explain=lambda c: (
            f"{sum(1 for v in c.vector.values() if v > 0.15)} emotions are "
            "above 0.15 at once, suggesting complex intent."
        ),
    ),
    Rule(
        key="noDominantEmotion",
        predicate=lambda c: c.top - c.second < 0.1,
        explain=lambda c: (
            f"The two strongest emotions are close ({c.top:.2f} vs "
            f"{c.second:.2f}); no single emotion dominates."
        ),
    ),
)

# ---------------------------------------------------------------------------
# Step 4: evaluated for every observation
# ---------------------------------------------------------------------------
SIGNAL_RULES: tuple[Rule, ...] = (
    Rule(
        key="contemptDetected",
        mode=CEILING,
        predicate=lambda c: c["contempt"] > 0.18,
        explain=lambda c: f"Contempt is present ({c['contempt']:.2f}).",
    ),
    Rule(
        key="realizationAmusement",
        predicate=lambda c: c["realization"] > 0.2 and c["amusement"] > 0.15,
        explain=lambda c: (
            f"Realization ({c['realization']:.2f}) with amusement "
            f"({c['amusement']:.2f}): a contradiction or joke was recognised."
        ),
    ),
    Rule(
        key="emphaticSarcasm",
        predicate=lambda c: c["determination"] > 0.25 and bool(c.misleading),
        explain=lambda c: (
            f"Determination ({c['determination']:.2f}) combined with "
            "misleading positive emotions."
        ),
    ),
    Rule(
        key="exaggeratedPositive",
        predicate=lambda c: c["excitement"] > 0.6 or c["joy"] > 0.5,
        explain=lambda c: (
            f"Overstated positive emotion (excitement {c['excitement']:.2f}, "
            f"joy {c['joy']:.2f})."
        ),
    ),
    Rule(
        key="angerPositive",
        predicate=lambda c: (
            c["anger"] > 0.15 and (c["excitement"] > 0.15 or c["joy"] > 0.15)
        ),
        explain=lambda c: (
            f"Anger ({c['anger']:.2f}) under positive emotion "
            f"(excitement {c['excitement']:.2f}, joy {c['joy']:.2f})."
        ),
    ),
    Rule(
        key="exaggeratedSingleEmotion",
        predicate=lambda c: (
            c.second > 0
            and c.top / max(c.second, 0.01) > 3
            and c.top > 0.4
        ),
        explain=lambda c: (
            f"One emotion ({c.top:.2f}) is more than three times the next "
            f"strongest ({c.second:.2f})."
        ),
    ),
    Rule(
        key="positiveNegativeUndertones",
        predicate=lambda c: c["excitement"] > 0.3 and bool(c.above(_UNDERTONES, 0.10)),
        explain=lambda c: (
            f"Excitement ({c['excitement']:.2f}) over negative undertones ("
            + c.describe(c.above(_UNDERTONES, 0.10))
            + ")."
        ),
    ),
    Rule(
        key="contrastingEmotions",
        predicate=lambda c: (
            bool(c.above(_POSITIVE, 0.15)) and bool(c.above(_NEGATIVE, 0.15))
        ),
        explain=lambda c: (
            "Conflicting emotions at once: "
            + c.describe(c.above(_POSITIVE, 0.15))
            + " against "
            + c.describe(c.above(_NEGATIVE, 0.15))
            + "."
        ),
    ),
)


class SarcasmScorer:
    """Score emotion vectors with the pattern ensemble."""

    def __init__(
        self,
        multi_indicator_rules: tuple[Rule, ...] = MULTI_INDICATOR_RULES,
        signal_rules: tuple[Rule, ...] = SIGNAL_RULES,
    ):
        self.multi_indicator_rules = multi_indicator_rules
        self.signal_rules = signal_rules

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def score(
        self,
        vector: Mapping[str, float],
        params: SarcasmParameters = DEFAULT_PARAMETERS,
    ) -> ScoreResult:
        """Score one observation.

        Parameters
        ----------
        vector : emotion label -> intensity.  Any subset of labels; unknown
                 labels are ignored.
        params : pattern weights and thresholds to score with.
        """
        ctx = self._build_context(vector, params.thresholds)
        running = 0.0
        contributions: list[Contribution] = []

        running = self._strong_indicator(ctx, params, running, contributions)

        if len(ctx.indicator_scores) >= 2:
            mean = float(np.mean(ctx.indicator_scores))
            if mean > running:
                contributions.append(Contribution(
                    pattern="Multiple Indicators",
                    score=mean - running,
                    explanation=(
                        f"{len(ctx.indicator_scores)} sarcasm indicators reach "
                        f"{ctx.thresholds.indicator_score_threshold:.2f}, "
                        f"averaging {mean:.2f}."
                    ),
                ))
                running = mean
            running = self._apply(self.multi_indicator_rules, ctx, params, running, contributions)

        running = self._apply(self.signal_rules, ctx, params, running, contributions)

        final = min(1.0, max(0.0, running))
        ranked = sorted(contributions, key=lambda c: c.score, reverse=True)
        logger.debug("Sarcasm score %.3f from %d pattern(s)", final, len(ranked))
        return ScoreResult(score=final, contributions=tuple(ranked))

    @staticmethod
    def is_sarcastic(result: ScoreResult, params: SarcasmParameters = DEFAULT_PARAMETERS) -> bool:
        """Detection flag: score above ``detection_threshold``."""
        return result.exceeds(params.thresholds.detection_threshold)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    @staticmethod
    def _build_context(vector: Mapping[str, float], thresholds: Thresholds) -> ScoringContext:
        full = normalise_vector(vector)
        top, second = top_two(full)
        return ScoringContext(
            vector=full,
            thresholds=thresholds,
            indicators=tuple(
                e for e in SARCASM_INDICATORS
                if full[e] >= thresholds.indicator_score_threshold
            ),
            misleading=tuple(
                e for e in MISLEADING_EMOTIONS
                if full[e] > thresholds.misleading_score_threshold
            ),
            top=top,
            second=second,
        )

    @staticmethod
    def _strong_indicator(
        ctx: ScoringContext,
        params: SarcasmParameters,
        running: float,
        contributions: list[Contribution],
    ) -> float:
        threshold = ctx.thresholds.strong_indicator_threshold
        candidates = [
            e for e in SARCASM_INDICATORS
            if ctx[e] >= threshold and params.is_enabled(STRONG_INDICATOR_PATTERNS[e])
        ]
        if not candidates:
            return running

        strongest = max(candidates, key=lambda e: ctx[e])
        seed = ctx.thresholds.base_threshold + STRONG_INDICATOR_FACTOR * ctx[strongest]
        listed = ctx.describe(ctx.above(SARCASM_INDICATORS, 0.2)) or "none"
        contributions.append(Contribution(
            pattern="Strong Sarcasm Indicator",
            score=seed,
            explanation=(
                f"{strongest.replace('_', ' ').capitalize()} reached the strong-indicator "
                f"threshold ({ctx[strongest]:.2f} ≥ {threshold:.2f}). "
                f"Indicators above 0.20: {listed}."
            ),
        ))
        logger.debug("Strong indicator %s seeds score at %.3f", strongest, seed)
        return seed

    @staticmethod
    def _apply(
        rules: tuple[Rule, ...],
        ctx: ScoringContext,
        params: SarcasmParameters,
        running: float,
        contributions: list[Contribution],
    ) -> float:
        for rule in rules:
            weight = params.active_weight(rule.key)
            if weight is None or not rule.predicate(ctx):
                continue

            if rule.mode == CEILING:
                if weight <= running:
                    continue
                amount = weight - running
                running = weight
            else:
                amount = weight
                running += weight

            contributions.append(Contribution(
                pattern=rule.label or params.label(rule.key),
                score=amount,
                explanation=rule.explain(ctx),
            ))
            logger.debug("Pattern %s fired: +%.3f", rule.key, amount)
        return running


_DEFAULT_SCORER = SarcasmScorer()


def score(
    vector: Mapping[str, float],
    params: SarcasmParameters = DEFAULT_PARAMETERS,
) -> ScoreResult:
    """Score *vector* with the standard rule ensemble."""
    return _DEFAULT_SCORER.score(vector, params)
