# mixdesign/config.py
from __future__ import annotations

import logging
import os

# ============================================================
# Exposure conditions (RCC durability limits)
# ============================================================
# maxWc      = maximum free water-cement ratio
# minCement  = minimum cement content (kg/m³)
# minGradeFck = minimum characteristic strength (MPa)
EXPOSURES = {
    "mild":       {"label": "Mild (RCC)",        "maxWc": 0.55, "minCement": 300, "minGradeFck": 20},
    "moderate":   {"label": "Moderate (RCC)",    "maxWc": 0.50, "minCement": 300, "minGradeFck": 25},
    "severe":     {"label": "Severe (RCC)",      "maxWc": 0.45, "minCement": 320, "minGradeFck": 30},
    "verySevere": {"label": "Very Severe (RCC)", "maxWc": 0.45, "minCement": 340, "minGradeFck": 35},
    "extreme":    {"label": "Extreme (RCC)",     "maxWc": 0.40, "minCement": 360, "minGradeFck": 40},
}

# Unknown exposure keys silently fall back to this class (historical behavior).
DEFAULT_EXPOSURE = "mild"

# ============================================================
# Regression curves: y = a*x² + b*x + c, x = fck (MPa)
# Fitted constants, do not refit or simplify.
# ============================================================
CURVE_COEFFS = {
    "target_mean_strength": (-0.0035, 1.3074, 1.6883),     # MPa
    "water_cement_ratio":   (9e-06, -0.0044, 0.5617),      # -
    "water_content":        (-0.0107, -0.0941, 195.56),    # kg/m³
    "cement_content":       (-0.0308, 4.7223, 298.78),     # kg/m³
    "fine_aggregate":       (-0.1156, 10.473, 484.42),     # kg/m³
    "coarse_aggregate":     (0.0335, -5.2723, 1234.4),     # kg/m³
}

# Output precision (decimal places) per curve
OUTPUT_DECIMALS = {
    "target_mean_strength": 2,
    "water_cement_ratio": 3,
    "water_content": 2,
    "cement_content": 2,
    "fine_aggregate": 2,
    "coarse_aggregate": 2,
}

# ============================================================
# Run records / CSV export
# ============================================================
MIX_ID_TEMPLATE = "MIX-{:03d}"

CSV_COLUMNS = [
    "id", "timestamp",
    "projectName", "projectSite", "mixId", "castingDate",
    "fck", "cementGrade", "exposure",
    "fckMean", "w_c", "water", "cement", "fineAgg", "coarseAgg",
    "isWcOk", "isCementOk", "isGradeOk",
]
CSV_FILENAME = "mix_design_runs.csv"

# Design curve defaults (UI / CLI chart)
CURVE_FCK_RANGE = (10.0, 60.0)
CURVE_POINTS = 51

# ============================================================
# Runtime settings (environment)
# ============================================================
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "4000"))
LOG_LEVEL = os.environ.get("MIXDESIGN_LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    o.strip() for o in os.environ.get("MIXDESIGN_CORS_ORIGINS", "*").split(",") if o.strip()
]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """Entry points only (CLI / server). Library modules just get a logger."""
    logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
