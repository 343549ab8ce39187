"""
Diagnosis scoring.

The score is a placeholder, not a medical algorithm: twenty points per
chosen symptom, bucketed with two fixed thresholds.

    n symptoms │ score │ risk
    ───────────┼───────┼────────
        0..2   │ 0..40 │ Rendah
         3     │  60   │ Sedang
        4..    │ 80..  │ Tinggi
"""

from typing import Sequence

SCORE_PER_SYMPTOM = 20
HIGH_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 40

# Returned for every risk level; the recommendations table is not consulted
DEFAULT_RECOMMENDATION = "Periksa ke dokter"


def compute_score(symptoms: Sequence) -> int:
    return len(symptoms) * SCORE_PER_SYMPTOM


def risk_level(score: float) -> str:
    """Both thresholds are strict: 40 is Rendah, 70 would still be Sedang."""
    if score > HIGH_RISK_THRESHOLD:
        return "Tinggi"
    if score > MEDIUM_RISK_THRESHOLD:
        return "Sedang"
    return "Rendah"
