"""
Unit Tests for Parameters, the Parameter Store and Config Loading
==================================================================
Tests cover:
  - The canonical default table
  - Copy-on-write edit operations (weights, toggles, thresholds, reset)
  - ParameterStore session holder
  - YAML config overlay and the shipped config file
"""

import sys
import tempfile
import unittest
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sarcasm_detector.core import parameter_store
from sarcasm_detector.core.parameter_store import ParameterStore
from sarcasm_detector.core.parameters import (
    DEFAULT_PARAMETERS,
    PatternWeight,
    SarcasmParameters,
    Thresholds,
)
from sarcasm_detector.utils.helpers import load_config

EXPECTED_WEIGHTS = {
    "amusementContempt": 0.2,
    "exaggeratedPositive": 0.2,
    "contrastingEmotions": 0.3,
    "angerPositive": 0.25,
    "positiveNegativeUndertones": 0.3,
    "awkwardness": 0.15,
    "exaggeratedSingleEmotion": 0.15,
    "emotionalComplexity": 0.1,
    "noDominantEmotion": 0.1,
    "contemptDetected": 0.2,
    "realizationAmusement": 0.15,
    "emphaticSarcasm": 0.15,
}


class TestDefaults(unittest.TestCase):

    def test_default_weights(self):
        weights = {k: p.weight for k, p in DEFAULT_PARAMETERS.pattern_weights.items()}
        self.assertEqual(weights, EXPECTED_WEIGHTS)
        self.assertTrue(all(p.enabled for p in DEFAULT_PARAMETERS.pattern_weights.values()))

    def test_default_thresholds(self):
        self.assertEqual(
            DEFAULT_PARAMETERS.thresholds.to_dict(),
            {
                "baseThreshold": 0.15,
                "strongIndicatorThreshold": 0.25,
                "indicatorScoreThreshold": 0.15,
                "misleadingScoreThreshold": 0.2,
                "detectionThreshold": 0.18,
            },
        )

    def test_defaults_are_read_only(self):
        with self.assertRaises(TypeError):
            DEFAULT_PARAMETERS.pattern_weights["awkwardness"] = PatternWeight("x", 1.0)
        with self.assertRaises(AttributeError):
            DEFAULT_PARAMETERS.thresholds.detection_threshold = 0.5

    def test_active_weight(self):
        self.assertEqual(DEFAULT_PARAMETERS.active_weight("awkwardness"), 0.15)
        self.assertIsNone(DEFAULT_PARAMETERS.active_weight("noSuchPattern"))
        disabled = parameter_store.toggle_enabled(DEFAULT_PARAMETERS, "awkwardness")
        self.assertIsNone(disabled.active_weight("awkwardness"))


class TestCopyOnWrite(unittest.TestCase):

    def test_set_weight_returns_new_value(self):
        edited = parameter_store.set_weight(DEFAULT_PARAMETERS, "awkwardness", 0.9)
        self.assertEqual(edited.pattern_weights["awkwardness"].weight, 0.9)
        self.assertEqual(DEFAULT_PARAMETERS.pattern_weights["awkwardness"].weight, 0.15)
        self.assertEqual(edited.pattern_weights["awkwardness"].name, "Awkwardness")

    def test_toggle_twice_restores(self):
        once = parameter_store.toggle_enabled(DEFAULT_PARAMETERS, "angerPositive")
        self.assertFalse(once.pattern_weights["angerPositive"].enabled)
        twice = parameter_store.toggle_enabled(once, "angerPositive")
        self.assertEqual(twice, DEFAULT_PARAMETERS)

    def test_set_threshold_either_spelling(self):
        camel = parameter_store.set_threshold(DEFAULT_PARAMETERS, "detectionThreshold", 0.3)
        snake = parameter_store.set_threshold(DEFAULT_PARAMETERS, "detection_threshold", 0.3)
        self.assertEqual(camel, snake)
        self.assertEqual(camel.thresholds.detection_threshold, 0.3)
        self.assertEqual(DEFAULT_PARAMETERS.thresholds.detection_threshold, 0.18)

    def test_out_of_range_values_accepted(self):
        edited = parameter_store.set_weight(DEFAULT_PARAMETERS, "awkwardness", -2.5)
        edited = parameter_store.set_threshold(edited, "baseThreshold", 4.0)
        self.assertEqual(edited.pattern_weights["awkwardness"].weight, -2.5)
        self.assertEqual(edited.thresholds.base_threshold, 4.0)

    def test_unknown_names_raise(self):
        with self.assertRaises(KeyError):
            parameter_store.set_weight(DEFAULT_PARAMETERS, "noSuchPattern", 0.1)
        with self.assertRaises(KeyError):
            parameter_store.toggle_enabled(DEFAULT_PARAMETERS, "noSuchPattern")
        with self.assertRaises(KeyError):
            parameter_store.set_threshold(DEFAULT_PARAMETERS, "noSuchThreshold", 0.1)

    def test_reset_after_edits(self):
        params = DEFAULT_PARAMETERS
        for key in params.pattern_weights:
            params = parameter_store.set_weight(params, key, 0.99)
            params = parameter_store.toggle_enabled(params, key)
        params = parameter_store.set_threshold(params, "strongIndicatorThreshold", 0.01)
        self.assertNotEqual(params, DEFAULT_PARAMETERS)

        reset = parameter_store.reset_to_defaults()
        self.assertEqual(reset, DEFAULT_PARAMETERS)
        self.assertEqual(reset.to_dict(), DEFAULT_PARAMETERS.to_dict())


class TestParameterStore(unittest.TestCase):

    def test_edits_replace_value_wholesale(self):
        store = ParameterStore()
        before = store.parameters
        after = store.set_weight("awkwardness", 0.5)
        self.assertIs(store.parameters, after)
        self.assertEqual(before.pattern_weights["awkwardness"].weight, 0.15)

        store.toggle_enabled("awkwardness")
        store.set_threshold("detectionThreshold", 0.4)
        self.assertFalse(store.parameters.pattern_weights["awkwardness"].enabled)
        self.assertEqual(store.parameters.thresholds.detection_threshold, 0.4)

    def test_reset(self):
        store = ParameterStore()
        store.set_weight("contemptDetected", 0.9)
        self.assertEqual(store.reset_to_defaults(), DEFAULT_PARAMETERS)
        self.assertEqual(store.parameters, DEFAULT_PARAMETERS)

    def test_configured_defaults(self):
        config = {"sarcasm": {"thresholds": {"detectionThreshold": 0.3}}}
        store = ParameterStore.from_config(config)
        store.set_threshold("detectionThreshold", 0.1)
        store.reset_to_defaults()
        self.assertEqual(store.parameters.thresholds.detection_threshold, 0.3)


class TestConfigOverlay(unittest.TestCase):

    def test_partial_overlay(self):
        config = {
            "sarcasm": {
                "patternWeights": {
                    "awkwardness": {"weight": 0.4},
                    "angerPositive": {"enabled": False},
                },
                "thresholds": {"baseThreshold": 0.1, "detection_threshold": 0.2},
            }
        }
        params = SarcasmParameters.from_config(config)
        self.assertEqual(params.pattern_weights["awkwardness"].weight, 0.4)
        self.assertEqual(params.pattern_weights["awkwardness"].name, "Awkwardness")
        self.assertFalse(params.pattern_weights["angerPositive"].enabled)
        self.assertEqual(params.thresholds.base_threshold, 0.1)
        self.assertEqual(params.thresholds.detection_threshold, 0.2)
        self.assertEqual(params.thresholds.strong_indicator_threshold, 0.25)

    def test_quoted_enabled_flags(self):
        config = {
            "sarcasm": {
                "patternWeights": {
                    "awkwardness": {"enabled": "false"},
                    "angerPositive": {"enabled": "Yes"},
                },
            }
        }
        params = SarcasmParameters.from_config(config)
        self.assertFalse(params.pattern_weights["awkwardness"].enabled)
        self.assertTrue(params.pattern_weights["angerPositive"].enabled)

    def test_invalid_enabled_flag(self):
        config = {"sarcasm": {"patternWeights": {"awkwardness": {"enabled": "maybe"}}}}
        with self.assertRaises(ValueError):
            SarcasmParameters.from_config(config)

    def test_empty_config(self):
        self.assertEqual(SarcasmParameters.from_config(None), DEFAULT_PARAMETERS)
        self.assertEqual(SarcasmParameters.from_config({"sarcasm": None}), DEFAULT_PARAMETERS)

    def test_unknown_threshold_in_config(self):
        with self.assertRaises(KeyError):
            SarcasmParameters.from_config({"sarcasm": {"thresholds": {"nope": 1}}})

    def test_round_trip_through_dict(self):
        edited = parameter_store.set_weight(DEFAULT_PARAMETERS, "emphaticSarcasm", 0.35)
        rebuilt = SarcasmParameters.from_config({"sarcasm": edited.to_dict()})
        self.assertEqual(rebuilt, edited)

    def test_shipped_config_matches_defaults(self):
        config = load_config()
        self.assertEqual(SarcasmParameters.from_config(config), DEFAULT_PARAMETERS)

    def test_missing_config_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(str(Path(tempfile.gettempdir()) / "does-not-exist.yaml"))

    def test_thresholds_dataclass_defaults(self):
        self.assertEqual(Thresholds(), DEFAULT_PARAMETERS.thresholds)


if __name__ == "__main__":
    unittest.main()
