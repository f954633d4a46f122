"""Session Service Module

This module provides in-memory, session-scoped dashboard state:
1. Create/Get/Delete/List sessions
2. One SymptomStore and TrendSeriesStore per session

Nothing is written to disk; a session lives as long as the process keeps it.
"""
import logging
import uuid
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field
from datetime import datetime

from config.settings import INPUT_POLICY
from engines.recommendation_engine import RecommendationEngine
from models.session import TrendSeries
from services.symptom_store import SymptomStore
from services.trend_service import TrendSeriesStore

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """One independent dashboard session."""
    session_id: str
    store: SymptomStore
    trend: TrendSeriesStore
    created_at: str = field(default_factory=lambda: datetime.now().isoformat())
    metadata: Dict[str, Any] = field(default_factory=dict)


class InMemorySessionService:
    """
    In-memory session registry.

    Sessions never share state: each gets its own store, snapshot and trend
    series.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def create_session(
        self,
        session_id: str = None,
        engine: Optional[RecommendationEngine] = None,
        trend_series: Optional[TrendSeries] = None,
        input_policy: str = INPUT_POLICY,
    ) -> Session:
        """Create a new session starting from the default symptoms."""
        if session_id is None:
            session_id = f"session_{uuid.uuid4().hex[:12]}"
        if session_id in self._sessions:
            raise ValueError(f"Session already exists: {session_id}")

        trend = TrendSeriesStore(trend_series)
        store = SymptomStore(engine=engine, trend=trend.series, input_policy=input_policy)
        session = Session(session_id=session_id, store=store, trend=trend)

        self._sessions[session_id] = session
        logger.info(f"Created session: {session_id}")
        return session

    def get_session(self, session_id: str) -> Optional[Session]:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        """Delete a session."""
        if session_id in self._sessions:
            self._sessions.pop(session_id)
            logger.info(f"Deleted session: {session_id}")
            return True
        return False

    def list_sessions(self) -> List[Session]:
        return list(self._sessions.values())


# Global session service instance
_session_service = None

def get_session_service() -> InMemorySessionService:
    """Get or create the global session service."""
    global _session_service
    if _session_service is None:
        _session_service = InMemorySessionService()
    return _session_service
