"""Energy Budget Tracker Configuration Module.

This module handles formula constants and environment settings.
"""
from config.settings import (
    INPUT_POLICY,
    LOG_LEVEL,
    ENERGY_BASELINE,
    ENERGY_FLOOR,
    ENERGY_CEILING,
    SYMPTOM_SCALE_MIN,
    SYMPTOM_SCALE_MAX,
)

__all__ = [
    "INPUT_POLICY",
    "LOG_LEVEL",
    "ENERGY_BASELINE",
    "ENERGY_FLOOR",
    "ENERGY_CEILING",
    "SYMPTOM_SCALE_MIN",
    "SYMPTOM_SCALE_MAX",
]
