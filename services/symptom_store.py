"""Symptom State Store

This module provides:
1. Pure transitions from one DashboardState to the next
2. A session-owned store holding the current DashboardState
3. Publication of every new (symptoms, recommendations) pair to listeners

The update is applied before the engine runs, so recomputation always sees
the state produced by the triggering report.
"""
import logging
from dataclasses import replace
from typing import Any, Callable, List, Optional

from config.settings import INPUT_POLICY, INPUT_POLICIES
from core.errors import InvalidSymptomInput
from core.observability import Tracer, metrics
from engines.recommendation_engine import RecommendationEngine
from models.session import (
    AxisLike,
    DashboardState,
    RecommendationSnapshot,
    SymptomAxis,
    SymptomState,
    TrendSeries,
)
from services.trend_service import DEFAULT_TREND
from tools.symptom_input import validate_symptom_report

logger = logging.getLogger(__name__)

Listener = Callable[[SymptomState, RecommendationSnapshot], None]


def initial_dashboard_state(
    engine: RecommendationEngine,
    trend: Optional[TrendSeries] = None,
    symptoms: Optional[SymptomState] = None,
) -> DashboardState:
    """Session start: default symptoms and the snapshot computed from them."""
    symptoms = symptoms or SymptomState()
    return DashboardState(
        symptoms=symptoms,
        recommendations=engine.compute(symptoms),
        trend=trend if trend is not None else DEFAULT_TREND,
    )


def apply_symptom_update(
    state: DashboardState,
    axis: SymptomAxis,
    level: int,
    engine: RecommendationEngine,
) -> DashboardState:
    """Replace one axis and recompute the snapshot from the new symptoms."""
    symptoms = state.symptoms.with_level(axis, level)
    return replace(state, symptoms=symptoms, recommendations=engine.compute(symptoms))


class SymptomStore:
    """
    Holds the current DashboardState for one session.

    Mutated only through update()/reset(); each mutation replaces the whole
    state and notifies every subscribed listener.
    """

    def __init__(
        self,
        engine: Optional[RecommendationEngine] = None,
        trend: Optional[TrendSeries] = None,
        input_policy: str = INPUT_POLICY,
    ):
        if input_policy not in INPUT_POLICIES:
            raise ValueError(f"Unknown input policy: {input_policy!r}")
        self.engine = engine or RecommendationEngine()
        self.input_policy = input_policy
        self._state = initial_dashboard_state(self.engine, trend)
        self._listeners: List[Listener] = []

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def symptoms(self) -> SymptomState:
        return self._state.symptoms

    @property
    def recommendations(self) -> RecommendationSnapshot:
        return self._state.recommendations

    # === Listeners ===

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    # === Mutations ===

    def update(self, axis: AxisLike, raw_value: Any) -> RecommendationSnapshot:
        """
        Apply a user-reported symptom level.

        Raises InvalidSymptomInput (state untouched) when the report does not
        pass the input policy.
        """
        try:
            resolved, level = validate_symptom_report(axis, raw_value, self.input_policy)
        except InvalidSymptomInput as e:
            metrics.record_rejection()
            logger.warning(f"Rejected symptom report: {e}")
            raise

        with Tracer("SymptomStore.update", f"{resolved.value}={level}"):
            self._state = apply_symptom_update(self._state, resolved, level, self.engine)

        logger.info(
            f"{resolved.value} -> {level}, energy budget {self._state.recommendations.energy_budget}%"
        )
        self._publish()
        return self._state.recommendations

    def reset(self) -> RecommendationSnapshot:
        """Return to the session start symptoms."""
        self._state = initial_dashboard_state(self.engine, self._state.trend)
        logger.info("Symptom state reset to defaults")
        self._publish()
        return self._state.recommendations

    def _publish(self):
        for listener in list(self._listeners):
            listener(self._state.symptoms, self._state.recommendations)
