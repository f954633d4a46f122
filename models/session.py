from typing import Dict, Any, Tuple, Union
from dataclasses import dataclass, field, replace
from enum import Enum

from config.settings import DEFAULT_SYMPTOMS


class SymptomAxis(Enum):
    """The closed set of tracked symptom axes (values are the wire names)."""
    FATIGUE = "fatigue"
    PAIN = "pain"
    COGNITIVE_ISSUES = "cognitiveIssues"
    SLEEP_QUALITY = "sleepQuality"

    @property
    def field_name(self) -> str:
        return _AXIS_FIELDS[self]


_AXIS_FIELDS = {
    SymptomAxis.FATIGUE: "fatigue",
    SymptomAxis.PAIN: "pain",
    SymptomAxis.COGNITIVE_ISSUES: "cognitive_issues",
    SymptomAxis.SLEEP_QUALITY: "sleep_quality",
}


@dataclass(frozen=True)
class AxisInfo:
    """Slider metadata shown next to each symptom input."""
    label: str
    low_anchor: str
    high_anchor: str


SYMPTOM_AXIS_INFO: Dict[SymptomAxis, AxisInfo] = {
    SymptomAxis.FATIGUE: AxisInfo("Fatigue Level (1-5)", "Mild", "Severe"),
    SymptomAxis.PAIN: AxisInfo("Pain Level (1-5)", "None", "Severe"),
    SymptomAxis.COGNITIVE_ISSUES: AxisInfo("Cognitive Issues (1-5)", "Clear", "Foggy"),
    SymptomAxis.SLEEP_QUALITY: AxisInfo("Sleep Quality (1-5)", "Poor", "Great"),
}


@dataclass(frozen=True)
class SymptomState:
    """Current level of every symptom axis.

    Levels are expected in the 1-5 slider range. The type does not enforce
    it: range checks happen where raw input enters the system, so that the
    energy formula stays total over any integer state.
    """
    fatigue: int = DEFAULT_SYMPTOMS["fatigue"]
    pain: int = DEFAULT_SYMPTOMS["pain"]
    cognitive_issues: int = DEFAULT_SYMPTOMS["cognitiveIssues"]
    sleep_quality: int = DEFAULT_SYMPTOMS["sleepQuality"]

    def get(self, axis: SymptomAxis) -> int:
        return getattr(self, axis.field_name)

    def with_level(self, axis: SymptomAxis, level: int) -> "SymptomState":
        """Return a new state with only `axis` replaced."""
        return replace(self, **{axis.field_name: level})

    def to_dict(self) -> Dict[str, int]:
        return {axis.value: self.get(axis) for axis in SymptomAxis}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "SymptomState":
        """Build a state from wire-named levels; missing axes keep defaults."""
        kwargs = {}
        for axis in SymptomAxis:
            if axis.value in data:
                kwargs[axis.field_name] = data[axis.value]
        return cls(**kwargs)


@dataclass(frozen=True)
class RecommendationSnapshot:
    """Derived output pushed to the renderer after every symptom change."""
    energy_budget: int
    diet_recommendations: Tuple[str, ...] = ()
    exercise_recommendations: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "energyBudget": self.energy_budget,
            "dietRecommendations": list(self.diet_recommendations),
            "exerciseRecommendations": list(self.exercise_recommendations),
        }


@dataclass(frozen=True)
class TrendPoint:
    """One day of chart history (levels in percent)."""
    day: str
    energy: int
    activity: int


@dataclass(frozen=True)
class TrendSeries:
    """Fixed-length, ordered energy/activity history for the chart."""
    points: Tuple[TrendPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(p.day for p in self.points)

    @property
    def energy_values(self) -> Tuple[int, ...]:
        return tuple(p.energy for p in self.points)

    @property
    def activity_values(self) -> Tuple[int, ...]:
        return tuple(p.activity for p in self.points)


@dataclass(frozen=True)
class DashboardState:
    """Everything one session renders, replaced wholesale on each update."""
    symptoms: SymptomState
    recommendations: RecommendationSnapshot
    trend: TrendSeries = field(default_factory=TrendSeries)


AxisLike = Union[SymptomAxis, str]
