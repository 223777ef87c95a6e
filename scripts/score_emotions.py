"""
CLI Scoring — Sarcasm Assessment from the Command Line
=======================================================

The vector file is a JSON object of emotion scores, as delivered by the
voice SDK (any label spelling)::

    {"amusement": 0.25, "contempt": 0.15, "Surprise (negative)": 0.05}

Examples::

    python scripts/score_emotions.py --vector data/samples/amused_contempt.json

    # Tuned weights from another config, machine-readable output
    python scripts/score_emotions.py --vector obs.json --config my.yaml --json
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(_PROJECT_ROOT))

from sarcasm_detector.core.explainer import Explainer
from sarcasm_detector.core.parameters import SarcasmParameters
from sarcasm_detector.core.scorer import SarcasmScorer
from sarcasm_detector.utils.helpers import configure_logging, load_config, setup_logging

logger = setup_logging()


def read_vector(path: Path) -> dict:
    data = json.loads(path.read_text(encoding="utf-8"))
    # Accept either a bare score map or an SDK message with "scores" inside.
    if isinstance(data, dict) and isinstance(data.get("scores"), dict):
        data = data["scores"]
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object of emotion scores")
    return data


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Sarcasm Detector — CLI")
    parser.add_argument("--vector", type=str, required=True, help="Path to JSON emotion scores")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    vector_path = Path(args.vector)
    if not vector_path.exists():
        parser.error(f"Vector file not found: {vector_path}")

    config = load_config(args.config)
    configure_logging(config)

    try:
        vector = read_vector(vector_path)
    except ValueError as e:     # json.JSONDecodeError is a ValueError
        parser.error(str(e))

    params = SarcasmParameters.from_config(config)
    scorer = SarcasmScorer()
    result = scorer.score(vector, params)
    explanation = Explainer(config).explain(vector, result, params)
    logger.info("Scored %s: %.3f", vector_path.name, result.score)

    if args.json:
        payload = result.to_dict()
        payload["detected"] = explanation["detected"]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    # --- Print results --------------------------------------------------
    print("\n" + "=" * 62)
    print("  SARCASM ASSESSMENT")
    print("=" * 62)
    print(f"  {explanation['verdict']}")
    print("-" * 62)

    print("\n  Contributing patterns:")
    if not explanation["contribution_narratives"]:
        print("    (none)")
    for line in explanation["contribution_narratives"]:
        print(f"    - {line}")

    print("\n  Emotions:")
    for band, entries in explanation["emotion_groups"].items():
        for entry in entries:
            mark = " ✓" if entry["indicator"] else ""
            print(f"    [{band:>8s}] {entry['emotion']:<24s} {entry['score']:.2f}{mark}")

    print(f"\n  {explanation['confidence_note']}")
    print("\n  " + explanation["disclaimer"])
    print("=" * 62)


if __name__ == "__main__":
    main()
