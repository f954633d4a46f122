"""Energy Dashboard - session orchestrator

Wires one session's symptom store, recommendation engine and trend series to
the rendering collaborator:

    input widget -> report_symptom(axis, value) -> SymptomStore.update
                 -> RecommendationEngine.compute -> renderer.render_snapshot

The trend chart is pushed to the renderer once, when the dashboard starts.
"""
import logging
from typing import Any, Dict, Optional

from config.settings import DASHBOARD_TITLE
from core.observability import log_snapshot
from engines.recommendation_engine import RecommendationEngine
from models.session import (
    SYMPTOM_AXIS_INFO,
    AxisLike,
    RecommendationSnapshot,
    SymptomState,
    TrendSeries,
)
from services.session_service import InMemorySessionService, Session, get_session_service

logger = logging.getLogger(__name__)


class DashboardRenderer:
    """
    Rendering collaborator interface. The default implementation draws
    nothing; UI layers subclass it.
    """

    def render_trend(self, payload: Dict[str, Any]) -> None:
        pass

    def render_snapshot(self, symptoms: Dict[str, int], snapshot: Dict[str, Any]) -> None:
        pass


class EnergyDashboard:
    """Single-session energy dashboard.

    Attributes:
        session: The Session holding this dashboard's store and trend series.
        session_id: Identifier of the session in the session service.
        renderer: Collaborator receiving trend and snapshot payloads.
        session_service: Registry the session lives in.
    """

    def __init__(
        self,
        renderer: Optional[DashboardRenderer] = None,
        session_id: str = None,
        session_service: Optional[InMemorySessionService] = None,
        engine: Optional[RecommendationEngine] = None,
        trend_series: Optional[TrendSeries] = None,
        input_policy: Optional[str] = None,
    ):
        self.session_service = session_service or get_session_service()
        self.renderer = renderer or DashboardRenderer()

        session = self.session_service.get_session(session_id) if session_id else None
        if session:
            logger.info(f"Resumed session: {session_id}")
            ignored = [
                name for name, value in
                (("engine", engine), ("trend_series", trend_series), ("input_policy", input_policy))
                if value is not None
            ]
            if ignored:
                logger.warning(
                    f"Session {session_id} already exists; ignoring {', '.join(ignored)}"
                )
        else:
            kwargs = {"engine": engine, "trend_series": trend_series}
            if input_policy is not None:
                kwargs["input_policy"] = input_policy
            session = self.session_service.create_session(session_id, **kwargs)
        self.session: Session = session
        self.session_id = session.session_id

        self.session.store.subscribe(self._publish)
        self.renderer.render_trend(self.session.trend.chart_payload())
        self._publish(self.symptoms, self.recommendations)

    @property
    def symptoms(self) -> SymptomState:
        return self.session.store.symptoms

    @property
    def recommendations(self) -> RecommendationSnapshot:
        return self.session.store.recommendations

    def report_symptom(self, axis: AxisLike, value: Any) -> RecommendationSnapshot:
        """Inbound boundary: one call per slider interaction.

        Raises:
            InvalidSymptomInput: unknown axis or a value the input policy refuses.
        """
        return self.session.store.update(axis, value)

    def reset(self) -> RecommendationSnapshot:
        return self.session.store.reset()

    def view(self) -> Dict[str, Any]:
        """Everything the page shows, as plain data."""
        return {
            "title": DASHBOARD_TITLE,
            "symptoms": self.symptoms.to_dict(),
            "axes": [
                {
                    "axis": axis.value,
                    "label": info.label,
                    "lowAnchor": info.low_anchor,
                    "highAnchor": info.high_anchor,
                    "value": self.symptoms.get(axis),
                }
                for axis, info in SYMPTOM_AXIS_INFO.items()
            ],
            "recommendations": self.recommendations.to_dict(),
            "trend": self.session.trend.chart_payload(),
        }

    def close(self) -> None:
        """Detach from the store; the last dashboard to detach drops the session."""
        self.session.store.unsubscribe(self._publish)
        if self.session.store.listener_count == 0:
            self.session_service.delete_session(self.session_id)

    def _publish(self, symptoms: SymptomState, snapshot: RecommendationSnapshot) -> None:
        symptoms_dict = symptoms.to_dict()
        snapshot_dict = snapshot.to_dict()
        log_snapshot(symptoms_dict, snapshot_dict, self.session_id)
        self.renderer.render_snapshot(symptoms_dict, snapshot_dict)
