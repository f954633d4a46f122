"""Tests for the session data models."""
import dataclasses

import pytest

from models.session import (
    SYMPTOM_AXIS_INFO,
    DashboardState,
    RecommendationSnapshot,
    SymptomAxis,
    SymptomState,
    TrendPoint,
    TrendSeries,
)


class TestSymptomState:

    def test_defaults(self):
        assert SymptomState().to_dict() == {
            "fatigue": 3,
            "pain": 2,
            "cognitiveIssues": 4,
            "sleepQuality": 3,
        }

    def test_with_level_replaces_one_axis(self):
        state = SymptomState()
        updated = state.with_level(SymptomAxis.COGNITIVE_ISSUES, 1)
        assert updated.cognitive_issues == 1
        assert updated.fatigue == state.fatigue
        assert updated.pain == state.pain
        assert updated.sleep_quality == state.sleep_quality
        # Source state untouched
        assert state.cognitive_issues == 4

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            SymptomState().fatigue = 5

    def test_from_dict_keeps_defaults_for_missing_axes(self):
        state = SymptomState.from_dict({"sleepQuality": 5})
        assert state == SymptomState(sleep_quality=5)

    def test_from_dict_roundtrip(self):
        data = {"fatigue": 1, "pain": 5, "cognitiveIssues": 2, "sleepQuality": 4}
        assert SymptomState.from_dict(data).to_dict() == data

    def test_equal_states_are_equal(self):
        assert SymptomState(fatigue=3) == SymptomState()


class TestAxisMetadata:

    def test_every_axis_described(self):
        assert set(SYMPTOM_AXIS_INFO) == set(SymptomAxis)

    def test_slider_anchors(self):
        info = SYMPTOM_AXIS_INFO[SymptomAxis.COGNITIVE_ISSUES]
        assert info.label == "Cognitive Issues (1-5)"
        assert (info.low_anchor, info.high_anchor) == ("Clear", "Foggy")


class TestTrendSeries:

    def test_accessors(self):
        series = TrendSeries(points=(TrendPoint("Mon", 70, 60), TrendPoint("Tue", 65, 75)))
        assert len(series) == 2
        assert series.labels == ("Mon", "Tue")
        assert series.energy_values == (70, 65)
        assert series.activity_values == (60, 75)


class TestDashboardState:

    def test_replace_is_wholesale(self):
        snapshot = RecommendationSnapshot(energy_budget=72)
        state = DashboardState(symptoms=SymptomState(), recommendations=snapshot)
        new_state = dataclasses.replace(state, recommendations=RecommendationSnapshot(energy_budget=50))
        assert state.recommendations.energy_budget == 72
        assert new_state.recommendations.energy_budget == 50
        assert new_state.symptoms is state.symptoms
