"""
Sarcasm Result Data Model
==========================
Holds the result of one scoring call: the clamped sarcasm score and the
ranked list of patterns that produced it.

Results are transient.  They are recomputed on every scoring call and never
cached or merged, so the model stays a plain value that serialises to JSON
for logs, the CLI and the UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
import json


@dataclass(frozen=True)
class Contribution:
    """How much one fired pattern added to the score, and why."""

    pattern: str            # display label, e.g. "Amusement + Contempt"
    score: float            # additive amount (raise amount for ceiling rules)
    explanation: str


@dataclass(frozen=True)
class ScoreResult:
    """Sarcasm score in [0, 1] plus contributions, highest first."""

    score: float
    contributions: tuple[Contribution, ...] = field(default_factory=tuple)

    def exceeds(self, threshold: float) -> bool:
        return self.score > threshold

    def to_dict(self) -> dict:
        d = asdict(self)
        d["contributions"] = list(d["contributions"])
        return d

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
