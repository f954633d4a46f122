"""Energy Budget Tracker Data Models.

This module contains immutable dataclasses for session state.

Models:
    SymptomAxis: Enum of the four tracked symptom axes.
    SymptomState: Current level of every symptom axis.
    RecommendationSnapshot: Energy budget plus diet/exercise suggestions.
    TrendSeries: Seven-day energy/activity history for the chart.
    DashboardState: Session container tying the above together.
"""
from models.session import (
    SymptomAxis,
    AxisInfo,
    SYMPTOM_AXIS_INFO,
    SymptomState,
    RecommendationSnapshot,
    TrendPoint,
    TrendSeries,
    DashboardState,
)

__all__ = [
    "SymptomAxis",
    "AxisInfo",
    "SYMPTOM_AXIS_INFO",
    "SymptomState",
    "RecommendationSnapshot",
    "TrendPoint",
    "TrendSeries",
    "DashboardState",
]
