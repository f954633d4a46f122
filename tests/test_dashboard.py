"""Tests for the dashboard orchestrator, session service and trend chart."""
import logging

import pytest

from core.errors import InvalidSymptomInput
from dashboard import DashboardRenderer, EnergyDashboard
from models.session import SymptomState, TrendPoint, TrendSeries
from services.session_service import InMemorySessionService, get_session_service
from services.trend_service import DEFAULT_TREND, TrendSeriesStore


class RecordingRenderer(DashboardRenderer):
    def __init__(self):
        self.trends = []
        self.snapshots = []

    def render_trend(self, payload):
        self.trends.append(payload)

    def render_snapshot(self, symptoms, snapshot):
        self.snapshots.append((symptoms, snapshot))


@pytest.fixture
def service():
    return InMemorySessionService()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def dashboard(service, renderer):
    return EnergyDashboard(renderer=renderer, session_service=service, input_policy="reject")


class TestTrendSeriesStore:

    def test_default_fixture(self):
        series = TrendSeriesStore().series
        assert series.labels == ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
        assert series.energy_values == (70, 65, 75, 60, 80, 75, 65)
        assert series.activity_values == (60, 75, 70, 80, 65, 85, 60)

    def test_chart_payload(self):
        payload = TrendSeriesStore().chart_payload()
        energy, activity = payload["data"]["datasets"]
        assert energy["label"] == "Energy Level"
        assert energy["borderColor"] == "rgb(75, 192, 192)"
        assert activity["label"] == "Activity Level"
        assert activity["data"] == [60, 75, 70, 80, 65, 85, 60]
        assert payload["options"]["plugins"]["title"]["text"] == "Weekly Energy & Activity Trends"
        assert payload["options"]["scales"]["y"]["min"] == 0
        assert payload["options"]["scales"]["y"]["max"] == 100

    def test_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            TrendSeriesStore(TrendSeries(points=DEFAULT_TREND.points[:5]))

    def test_rejects_empty_series(self):
        with pytest.raises(ValueError):
            TrendSeriesStore(TrendSeries())

    def test_rejects_out_of_range_values(self):
        points = DEFAULT_TREND.points[:6] + (TrendPoint("Sun", 120, 50),)
        with pytest.raises(ValueError):
            TrendSeriesStore(TrendSeries(points=points))


class TestSessionService:

    def test_create_and_get(self, service):
        session = service.create_session("s1")
        assert service.get_session("s1") is session
        assert session.store.recommendations.energy_budget == 72

    def test_generated_ids_are_unique(self, service):
        a = service.create_session()
        b = service.create_session()
        assert a.session_id != b.session_id
        assert len(service.list_sessions()) == 2

    def test_duplicate_id(self, service):
        service.create_session("s1")
        with pytest.raises(ValueError):
            service.create_session("s1")

    def test_sessions_are_independent(self, service):
        a = service.create_session("a", input_policy="reject")
        b = service.create_session("b", input_policy="reject")
        a.store.update("fatigue", 5)
        assert b.store.symptoms == SymptomState()

    def test_unknown_policy_registers_nothing(self, service):
        with pytest.raises(ValueError):
            service.create_session("s1", input_policy="bogus")
        assert service.get_session("s1") is None

    def test_dashboard_with_unknown_policy_renders_nothing(self, service, renderer):
        with pytest.raises(ValueError):
            EnergyDashboard(renderer=renderer, session_service=service, input_policy="bogus")
        assert renderer.trends == []
        assert service.list_sessions() == []

    def test_delete(self, service):
        service.create_session("s1")
        assert service.delete_session("s1") is True
        assert service.delete_session("s1") is False
        assert service.get_session("s1") is None

    def test_global_service(self):
        assert get_session_service() is get_session_service()


class TestEnergyDashboard:

    def test_initialization_pushes_trend_once_and_initial_snapshot(self, dashboard, renderer):
        assert len(renderer.trends) == 1
        assert renderer.trends[0]["data"]["labels"][0] == "Mon"
        assert len(renderer.snapshots) == 1
        symptoms, snapshot = renderer.snapshots[0]
        assert symptoms == {"fatigue": 3, "pain": 2, "cognitiveIssues": 4, "sleepQuality": 3}
        assert snapshot["energyBudget"] == 72

    def test_report_symptom_pushes_snapshot(self, dashboard, renderer):
        snapshot = dashboard.report_symptom("cognitiveIssues", "1")
        # 100-15-6-4+9
        assert snapshot.energy_budget == 84
        assert renderer.snapshots[-1][1]["energyBudget"] == 84
        assert renderer.snapshots[-1][0]["cognitiveIssues"] == 1
        assert len(renderer.trends) == 1

    def test_invalid_report_raises_and_pushes_nothing(self, dashboard, renderer):
        with pytest.raises(InvalidSymptomInput):
            dashboard.report_symptom("fatigue", "10")
        assert len(renderer.snapshots) == 1
        assert dashboard.symptoms == SymptomState()

    def test_view(self, dashboard):
        dashboard.report_symptom("pain", 4)
        view = dashboard.view()
        assert view["title"] == "Long COVID Energy Management"
        assert view["symptoms"]["pain"] == 4
        assert view["recommendations"]["energyBudget"] == 66
        pain = next(a for a in view["axes"] if a["axis"] == "pain")
        assert pain["value"] == 4
        assert pain["lowAnchor"] == "None"
        assert len(view["trend"]["data"]["datasets"]) == 2

    def test_resume_existing_session(self, service, dashboard):
        dashboard.report_symptom("sleepQuality", 1)
        resumed = EnergyDashboard(renderer=RecordingRenderer(), session_id=dashboard.session_id,
                                  session_service=service)
        assert resumed.session is dashboard.session
        assert resumed.symptoms.sleep_quality == 1

    def test_resume_warns_about_ignored_arguments(self, service, dashboard, caplog):
        with caplog.at_level(logging.WARNING, logger="dashboard"):
            resumed = EnergyDashboard(session_id=dashboard.session_id, session_service=service,
                                      input_policy="lenient")
        assert "ignoring input_policy" in caplog.text
        assert resumed.session.store.input_policy == "reject"

    def test_close_keeps_session_while_another_dashboard_attached(self, service, dashboard):
        other = EnergyDashboard(session_id=dashboard.session_id, session_service=service)
        dashboard.close()
        assert service.get_session(dashboard.session_id) is other.session
        other.close()
        assert service.get_session(dashboard.session_id) is None

    def test_reset(self, dashboard, renderer):
        dashboard.report_symptom("fatigue", 1)
        assert dashboard.reset().energy_budget == 72
        assert renderer.snapshots[-1][1]["energyBudget"] == 72

    def test_close(self, service, dashboard, renderer):
        session = dashboard.session
        dashboard.close()
        assert service.get_session(dashboard.session_id) is None
        session.store.update("fatigue", 1)
        assert len(renderer.snapshots) == 1

    def test_default_renderer_is_silent(self, service):
        dashboard = EnergyDashboard(session_service=service, input_policy="reject")
        assert dashboard.report_symptom("pain", 1).energy_budget == 75
