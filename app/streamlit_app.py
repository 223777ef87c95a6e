"""
Sarcasm Detector — Streamlit Frontend
======================================
A thin front end over the scoring engine:

  - Assess:   paste an emotion vector (JSON) or pick a sample, see the score
  - Settings: toggle / reweight patterns, move thresholds, reset
  - About:    how the rule ensemble works

The live parameters sit in ``st.session_state.store``; every edit replaces
them wholesale and the next assessment reads the fresh value.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import streamlit as st

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sarcasm_detector.core.explainer import Explainer
from sarcasm_detector.core.parameter_store import ParameterStore
from sarcasm_detector.core.parameters import THRESHOLD_NAMES
from sarcasm_detector.core.scorer import SarcasmScorer
from sarcasm_detector.utils.helpers import load_config

# ---------------------------------------------------------------------------
# Page configuration
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="Sarcasm Detector",
    page_icon="👀",
    layout="wide",
    initial_sidebar_state="expanded",
)

SAMPLE_VECTORS = {
    "Amusement + contempt": {"amusement": 0.25, "contempt": 0.15},
    "Exaggerated excitement": {"excitement": 0.7},
    "Angry praise": {"joy": 0.35, "anger": 0.3, "contempt": 0.2},
    "Sincere calm": {"calmness": 0.45, "contentment": 0.3},
}

THRESHOLD_LABELS = {
    "base_threshold": "Base Threshold",
    "strong_indicator_threshold": "Strong Indicator Threshold",
    "indicator_score_threshold": "Indicator Score Threshold",
    "misleading_score_threshold": "Misleading Score Threshold",
    "detection_threshold": "Detection Threshold",
}


# ---------------------------------------------------------------------------
# Engine loading (cached across Streamlit reruns)
# ---------------------------------------------------------------------------
@st.cache_resource
def load_engine():
    config = load_config()
    return SarcasmScorer(), Explainer(config), config


scorer, explainer, config = load_engine()

# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------
if "store" not in st.session_state:
    st.session_state.store = ParameterStore.from_config(config)
if "vector_text" not in st.session_state:
    st.session_state.vector_text = json.dumps(SAMPLE_VECTORS["Amusement + contempt"], indent=2)

store: ParameterStore = st.session_state.store

# ---------------------------------------------------------------------------
# Sidebar navigation
# ---------------------------------------------------------------------------
st.sidebar.title("Navigation")
page = st.sidebar.radio(
    "Go to", ["Assess", "Settings", "About"], label_visibility="collapsed",
)
st.sidebar.divider()
st.sidebar.caption("Heuristic demo: expression patterns, not intent.")


# =====================================================================
# Page: Assess
# =====================================================================
if page == "Assess":
    st.title("Sarcasm Detector")

    col_in, col_out = st.columns(2)

    with col_in:
        st.subheader("Emotion vector")
        sample = st.selectbox("Load a sample", ["—"] + list(SAMPLE_VECTORS))
        if sample != "—" and st.button("Use this sample"):
            st.session_state.vector_text = json.dumps(SAMPLE_VECTORS[sample], indent=2)
            st.rerun()
        text = st.text_area("Scores (JSON)", key="vector_text", height=260)

    with col_out:
        try:
            vector = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as e:
            st.error(f"Invalid JSON: {e}")
            st.stop()
        if not isinstance(vector, dict):
            st.error("Expected a JSON object of emotion scores.")
            st.stop()

        params = store.parameters
        result = scorer.score(vector, params)
        explanation = explainer.explain(vector, result, params)

        st.subheader("Result")
        st.markdown(explanation["verdict"])
        st.progress(result.score, text=f"Sarcasm probability: {result.score:.0%}")
        st.markdown(explanation["confidence_note"])

        with st.expander("Why? (contributing patterns)"):
            if not explanation["contribution_narratives"]:
                st.write("No pattern fired.")
            for line in explanation["contribution_narratives"]:
                st.markdown(f"- {line}")

        st.subheader("Emotions")
        for band, entries in explanation["emotion_groups"].items():
            if not entries:
                continue
            st.caption(band.title())
            for entry in entries:
                mark = " ✓" if entry["indicator"] else ""
                st.progress(
                    min(max(entry["score"], 0.0), 1.0),
                    text=f"{entry['emotion']}{mark}: {entry['score']:.2f}",
                )

        with st.expander("Limitations"):
            for limit in explanation["limitations"]:
                st.markdown(f"- {limit}")
        st.caption(explanation["disclaimer"])


# =====================================================================
# Page: Settings
# =====================================================================
elif page == "Settings":
    st.title("Sarcasm Detection Settings")
    params = store.parameters

    st.subheader("Pattern Weights")
    for key, pattern in params.pattern_weights.items():
        enabled = st.checkbox(pattern.name, value=pattern.enabled, help=pattern.description)
        if enabled != pattern.enabled:
            store.toggle_enabled(key)
        # Configured weights may sit outside 0..1; widen the range to hold them.
        weight = st.slider(
            f"{pattern.name} weight",
            min(0.0, float(pattern.weight)), max(1.0, float(pattern.weight)),
            float(pattern.weight), 0.05,
            disabled=not enabled, label_visibility="collapsed",
        )
        if weight != pattern.weight:
            store.set_weight(key, weight)

    st.subheader("Detection Thresholds")
    for name in THRESHOLD_NAMES:
        current = float(getattr(store.parameters.thresholds, name))
        value = st.slider(
            THRESHOLD_LABELS[name], min(0.0, current), max(0.5, current), current, 0.01,
        )
        if value != current:
            store.set_threshold(name, value)

    if st.button("Reset to Defaults"):
        store.reset_to_defaults()
        st.rerun()

    with st.expander("Current parameters (JSON)"):
        st.json(store.parameters.to_dict())


# =====================================================================
# Page: About
# =====================================================================
elif page == "About":
    st.title("About")
    st.markdown("""
### How scoring works

An emotion SDK measures 48 expression dimensions per utterance.  The
scorer reads them in five fixed steps:

1. **Indicator sets**: sarcasm indicators (amusement, contempt,
   disappointment, awkwardness, ...) and misleading positives (excitement,
   joy, pride, ...) above their thresholds are kept.
2. **Strong indicator**: the strongest indicator at or above the strong
   threshold seeds the score.
3. **Multiple indicators**: two or more indicators raise the score to their
   mean, and the combination patterns apply.
4. **Single-signal patterns**: exaggerated positives, anger under praise,
   contrasting emotions and the rest apply to every observation.
5. **Clamp** to [0, 1].

Every pattern can be switched off or reweighted on the Settings page.
    """)
