"""RecommendationEngine - Symptom-to-Budget Mapping

This engine turns the current symptom levels into a recommendation snapshot
using the deterministic tools in energy_budget.py.

Design Decision:
    The engine is a pure function of the symptom state. It keeps no state of
    its own, never raises for an integer-valued state, and is recomputed in
    full on every symptom change so the snapshot is never partially updated.
"""
import logging

from core.observability import trace_component
from models.session import SymptomState, RecommendationSnapshot
from tools.energy_budget import build_recommendation_snapshot, calc_raw_energy

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    RecommendationEngine - Deterministic Energy Budget

    Computes:
    - energy budget: 100 - fatigue*5 - pain*3 - cognitiveIssues*4
      + sleepQuality*3, clamped to [30, 100]
    - diet and exercise suggestions (fixed lists)
    """

    @trace_component
    def compute(self, state: SymptomState) -> RecommendationSnapshot:
        snapshot = build_recommendation_snapshot(state)
        logger.debug(
            f"Energy budget {snapshot.energy_budget}% "
            f"(raw {calc_raw_energy(state)}) for {state.to_dict()}"
        )
        return snapshot
