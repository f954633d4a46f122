"""Trend Series Store - the weekly energy/activity chart fixture."""
import logging
from typing import Any, Dict, Optional

from models.session import TrendPoint, TrendSeries

logger = logging.getLogger(__name__)

TREND_LENGTH = 7
TREND_MIN = 0
TREND_MAX = 100

DEFAULT_TREND = TrendSeries(points=(
    TrendPoint("Mon", 70, 60),
    TrendPoint("Tue", 65, 75),
    TrendPoint("Wed", 75, 70),
    TrendPoint("Thu", 60, 80),
    TrendPoint("Fri", 80, 65),
    TrendPoint("Sat", 75, 85),
    TrendPoint("Sun", 65, 60),
))

CHART_TITLE = "Weekly Energy & Activity Trends"
Y_AXIS_TITLE = "Level (%)"

# Line style per dataset: (label, border colour, fill colour)
ENERGY_STYLE = ("Energy Level", "rgb(75, 192, 192)", "rgba(75, 192, 192, 0.5)")
ACTIVITY_STYLE = ("Activity Level", "rgb(255, 99, 132)", "rgba(255, 99, 132, 0.5)")
LINE_TENSION = 0.4


def _dataset(style, data) -> Dict[str, Any]:
    label, border, background = style
    return {
        "label": label,
        "data": list(data),
        "borderColor": border,
        "backgroundColor": background,
        "tension": LINE_TENSION,
    }


class TrendSeriesStore:
    """
    Read-only holder of a session's trend series.

    The series is seeded once and never changes during the session; it is
    not derived from the computed energy budget.
    """

    def __init__(self, series: Optional[TrendSeries] = None):
        series = series if series is not None else DEFAULT_TREND
        self._check(series)
        self._series = series
        logger.debug(f"Trend series seeded for {', '.join(series.labels)}")

    @property
    def series(self) -> TrendSeries:
        return self._series

    @staticmethod
    def _check(series: TrendSeries):
        if len(series) != TREND_LENGTH:
            raise ValueError(f"Trend series needs {TREND_LENGTH} points, got {len(series)}")
        for point in series.points:
            for value in (point.energy, point.activity):
                if not TREND_MIN <= value <= TREND_MAX:
                    raise ValueError(
                        f"Trend value {value} for {point.day} outside [{TREND_MIN}, {TREND_MAX}]"
                    )

    def chart_payload(self) -> Dict[str, Any]:
        """Chart data and options for the line chart renderer."""
        return {
            "data": {
                "labels": list(self._series.labels),
                "datasets": [
                    _dataset(ENERGY_STYLE, self._series.energy_values),
                    _dataset(ACTIVITY_STYLE, self._series.activity_values),
                ],
            },
            "options": {
                "responsive": True,
                "plugins": {
                    "legend": {"position": "top"},
                    "title": {"display": True, "text": CHART_TITLE},
                },
                "scales": {
                    "y": {
                        "min": TREND_MIN,
                        "max": TREND_MAX,
                        "title": {"display": True, "text": Y_AXIS_TITLE},
                    },
                },
            },
        }
