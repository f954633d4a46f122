"""Energy Budget Tracker Tools Module.

This module contains the deterministic energy budget calculations and the
symptom input boundary.

Tools:
    calc_raw_energy: Weighted symptom score against the baseline.
    calc_energy_budget: Raw score clamped to the budget range.
    build_recommendation_snapshot: Budget plus diet/exercise suggestions.
    parse_axis: Resolve a symptom axis name.
    parse_symptom_level: Parse a raw slider value to an integer level.
    validate_symptom_report: Check a raw report against the input policy.
"""
from tools.energy_budget import (
    clamp,
    calc_raw_energy,
    calc_energy_budget,
    build_recommendation_snapshot,
    SYMPTOM_WEIGHTS,
    DIET_RECOMMENDATIONS,
    EXERCISE_RECOMMENDATIONS,
)
from tools.symptom_input import (
    parse_axis,
    parse_symptom_level,
    validate_symptom_report,
)

__all__ = [
    "clamp",
    "calc_raw_energy",
    "calc_energy_budget",
    "build_recommendation_snapshot",
    "SYMPTOM_WEIGHTS",
    "DIET_RECOMMENDATIONS",
    "EXERCISE_RECOMMENDATIONS",
    "parse_axis",
    "parse_symptom_level",
    "validate_symptom_report",
]
