"""
Heuristic Sarcasm Detector
===========================
Scores emotion-expression observations (from a real-time voice / face
emotion SDK) for sarcasm using a configurable, explainable rule ensemble.
"""

__version__ = "1.0.0"
