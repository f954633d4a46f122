"""Energy Budget Tracker Engine Module.

Engines:
    RecommendationEngine: Symptom state to energy budget and suggestions.
"""
from engines.recommendation_engine import RecommendationEngine

__all__ = [
    "RecommendationEngine",
]
