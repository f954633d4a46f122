"""Validation boundary for raw symptom reports coming from input widgets."""
import math
import re
from typing import Any, Optional, Tuple

from config.settings import INPUT_POLICY, INPUT_POLICIES, SYMPTOM_SCALE_MIN, SYMPTOM_SCALE_MAX
from core.errors import InvalidSymptomInput, UnknownSymptomAxis, SymptomValueOutOfRange
from models.session import SymptomAxis, AxisLike
from tools.energy_budget import clamp

# Leading base-10 integer of a slider value ("4", " 4 ", "4.7", "4px").
# Hex prefixes are not recognised: "0x5" reads as 0.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_axis(axis: AxisLike) -> SymptomAxis:
    """
    Resolve an axis given as enum, wire name ("cognitiveIssues") or
    field name ("cognitive_issues").
    """
    if isinstance(axis, SymptomAxis):
        return axis
    if isinstance(axis, str):
        name = axis.strip()
        for candidate in SymptomAxis:
            if name in (candidate.value, candidate.field_name):
                return candidate
    raise UnknownSymptomAxis(axis)


def parse_symptom_level(raw: Any, axis: Optional[AxisLike] = None) -> int:
    """
    Parse a raw slider value to an integer level.

    Strings use their leading integer part and floats truncate toward zero.
    Booleans, blanks, NaN/infinity and non-numeric text are rejected.
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidSymptomInput(axis, raw, "not an integer level")

    if isinstance(raw, int):
        return raw

    if isinstance(raw, float):
        if math.isnan(raw) or math.isinf(raw):
            raise InvalidSymptomInput(axis, raw, "not a finite number")
        return int(raw)

    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if not match:
            raise InvalidSymptomInput(axis, raw, "not an integer level")
        try:
            return int(match.group(1))
        except ValueError:
            # digit strings past the interpreter conversion limit
            raise InvalidSymptomInput(axis, raw, "not an integer level")

    # Type coercion for other numerics (Decimal, numpy scalars, ...)
    try:
        return int(raw)
    except (ValueError, TypeError, OverflowError):
        raise InvalidSymptomInput(axis, raw, "not an integer level")


def validate_symptom_report(
    axis: AxisLike,
    raw: Any,
    policy: str = INPUT_POLICY,
) -> Tuple[SymptomAxis, int]:
    """
    Turn a raw (axis, value) report into a checked (SymptomAxis, level) pair.

    policy:
        'reject'  - levels outside the slider scale raise SymptomValueOutOfRange
        'clamp'   - levels are saturated to the slider scale
        'lenient' - integer parsing only, no range check
    """
    if policy not in INPUT_POLICIES:
        raise ValueError(f"Unknown input policy: {policy!r}")

    resolved = parse_axis(axis)
    level = parse_symptom_level(raw, resolved.value)

    if SYMPTOM_SCALE_MIN <= level <= SYMPTOM_SCALE_MAX or policy == "lenient":
        return resolved, level
    if policy == "clamp":
        return resolved, clamp(level, SYMPTOM_SCALE_MIN, SYMPTOM_SCALE_MAX)
    raise SymptomValueOutOfRange(resolved.value, raw, SYMPTOM_SCALE_MIN, SYMPTOM_SCALE_MAX, parsed=level)
