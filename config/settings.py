"""Central Configuration for the Energy Budget Tracker."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Base Directory (Root of the project)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load Environment Variables
load_dotenv(BASE_DIR / ".env")

# Logging
LOG_LEVEL = os.getenv("ENERGY_LOG_LEVEL", "INFO").upper()

# Input Boundary
# reject: out-of-range values raise, clamp: saturate to the slider scale,
# lenient: integer parsing only, no range check
INPUT_POLICIES = ("reject", "clamp", "lenient")
INPUT_POLICY = os.getenv("ENERGY_INPUT_POLICY", "reject").lower()
if INPUT_POLICY not in INPUT_POLICIES:
    INPUT_POLICY = "reject"

# Symptom Scale (slider domain)
SYMPTOM_SCALE_MIN = 1
SYMPTOM_SCALE_MAX = 5

# Energy Budget Formula
ENERGY_BASELINE = 100
ENERGY_FLOOR = 30
ENERGY_CEILING = 100

# Session start snapshot
DEFAULT_SYMPTOMS = {
    "fatigue": 3,
    "pain": 2,
    "cognitiveIssues": 4,
    "sleepQuality": 3,
}

DASHBOARD_TITLE = "Long COVID Energy Management"
