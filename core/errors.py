"""Input errors raised at the symptom reporting boundary.

The recommendation engine never raises; these are only produced when a raw
value from the input collaborator is turned into a SymptomState update.
"""
from typing import Any, Optional


class InvalidSymptomInput(ValueError):
    """A reported symptom could not be accepted."""

    def __init__(self, axis: Any, value: Any, reason: str):
        self.axis = axis
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid symptom input {axis!r}={value!r}: {reason}")


class UnknownSymptomAxis(InvalidSymptomInput):
    """The axis name is not one of the tracked symptom axes."""

    def __init__(self, axis: Any, value: Any = None):
        super().__init__(axis, value, "unknown symptom axis")


class SymptomValueOutOfRange(InvalidSymptomInput):
    """The parsed level falls outside the slider scale."""

    def __init__(self, axis: Any, value: Any, low: int, high: int, parsed: Optional[int] = None):
        self.low = low
        self.high = high
        self.parsed = parsed
        super().__init__(axis, value, f"level must be between {low} and {high}")
