from typing import Dict, Mapping, Tuple

from config.settings import ENERGY_BASELINE, ENERGY_FLOOR, ENERGY_CEILING
from models.session import SymptomAxis, SymptomState, RecommendationSnapshot


# Per-level contribution of each axis against the baseline.
# Symptoms are penalties, sleep quality is a bonus.
SYMPTOM_WEIGHTS: Dict[SymptomAxis, int] = {
    SymptomAxis.FATIGUE: -5,
    SymptomAxis.PAIN: -3,
    SymptomAxis.COGNITIVE_ISSUES: -4,
    SymptomAxis.SLEEP_QUALITY: 3,
}

DIET_RECOMMENDATIONS: Tuple[str, ...] = (
    "Increase anti-inflammatory foods",
    "Focus on protein with each meal",
    "Stay hydrated (aim for 2.5L daily)",
)

EXERCISE_RECOMMENDATIONS: Tuple[str, ...] = (
    "Light walking for 10-15 minutes",
    "Gentle stretching in the morning",
    "Keep heart rate below 110 BPM",
)


def clamp(value: int, low: int, high: int) -> int:
    """Saturate `value` to the closed range [low, high]."""
    return max(low, min(high, value))


def calc_raw_energy(
    state: SymptomState,
    weights: Mapping[SymptomAxis, int] = SYMPTOM_WEIGHTS,
    baseline: int = ENERGY_BASELINE,
) -> int:
    """
    Unclamped energy score: baseline plus the weighted level of every axis.

    With the default weights:
        100 - fatigue*5 - pain*3 - cognitiveIssues*4 + sleepQuality*3
    """
    raw = baseline
    for axis in SymptomAxis:
        raw += weights.get(axis, 0) * state.get(axis)
    return raw


def calc_energy_budget(
    state: SymptomState,
    weights: Mapping[SymptomAxis, int] = SYMPTOM_WEIGHTS,
    baseline: int = ENERGY_BASELINE,
) -> int:
    """
    Energy budget in percent, clamped to [ENERGY_FLOOR, ENERGY_CEILING].

    The floor keeps the tool from ever reporting zero capacity; the ceiling
    caps favourable inputs at nominal full energy. Total over any integer
    state, including levels outside the slider range.
    """
    return clamp(calc_raw_energy(state, weights, baseline), ENERGY_FLOOR, ENERGY_CEILING)


def build_recommendation_snapshot(state: SymptomState) -> RecommendationSnapshot:
    """
    Build the full recommendation snapshot for a symptom state.

    Diet and exercise suggestions are fixed lists; they do not vary with
    the state or the computed budget.
    """
    return RecommendationSnapshot(
        energy_budget=calc_energy_budget(state),
        diet_recommendations=DIET_RECOMMENDATIONS,
        exercise_recommendations=EXERCISE_RECOMMENDATIONS,
    )
