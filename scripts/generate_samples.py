"""
Generate Sample Data — emotion vectors for smoke testing the CLI and UI.

Creates, in the configured sample directory:
  • amused_contempt.json      — the classic eye-roll: amusement + contempt
  • exaggerated_joy.json      — over-the-top excitement, nothing else
  • sincere_calm.json         — calm, content, no sarcasm cues
  • random_observation.json   — a sparse random vector (seeded)
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import numpy as np

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_PROJECT_ROOT))

from sarcasm_detector.core.emotions import EMOTIONS
from sarcasm_detector.utils.helpers import load_config, ensure_dir

FIXED_SAMPLES = {
    "amused_contempt": {"amusement": 0.25, "contempt": 0.15},
    "exaggerated_joy": {"excitement": 0.7},
    "sincere_calm": {"calmness": 0.45, "contentment": 0.3, "interest": 0.12},
}


def random_vector(seed: int = 7, active: int = 6) -> dict[str, float]:
    """A sparse observation: a handful of emotions active, the rest zero."""
    rng = np.random.default_rng(seed)
    picked = rng.choice(len(EMOTIONS), size=active, replace=False)
    values = rng.beta(2.0, 5.0, size=active)
    return {EMOTIONS[i]: round(float(v), 4) for i, v in zip(picked, values)}


def write_sample(out_dir: Path, name: str, vector: dict) -> Path:
    path = out_dir / f"{name}.json"
    path.write_text(json.dumps(vector, indent=2), encoding="utf-8")
    return path


def main() -> None:
    config = load_config()
    out_dir = ensure_dir(_PROJECT_ROOT / config["paths"]["sample_data"])
    print(f"Generating sample vectors in: {out_dir}\n")

    for name, vector in FIXED_SAMPLES.items():
        print(f"  [fixed]  {write_sample(out_dir, name, vector)}")
    print(f"  [random] {write_sample(out_dir, 'random_observation', random_vector())}")
    print("\nDone.")


if __name__ == "__main__":
    main()
