"""
Diabetes Diagnosis API — Scoring Unit Tests
=============================================

What:  The fixed score formula and its two strict thresholds.
How:   Pure functions; no database.
"""

import pytest

from diabetes_api.services.diagnosis_service import DiagnosisService
from diabetes_api.services.scoring import DEFAULT_RECOMMENDATION, compute_score, risk_level


class TestComputeScore:

    @pytest.mark.parametrize("n", range(0, 11))
    def test_twenty_points_per_symptom(self, n):
        assert compute_score(["G"] * n) == 20 * n

    def test_items_are_not_inspected(self):
        """Duplicates and mixed types still count one each."""
        assert compute_score(["G001", "G001", 3, None]) == 80


class TestRiskLevel:

    @pytest.mark.parametrize(
        "n, expected_score, expected_risk",
        [
            (0, 0, "Rendah"),
            (1, 20, "Rendah"),
            (2, 40, "Rendah"),
            (3, 60, "Sedang"),
            (4, 80, "Tinggi"),
            (5, 100, "Tinggi"),
        ],
    )
    def test_reference_points(self, n, expected_score, expected_risk):
        score = compute_score(list(range(n)))
        assert score == expected_score
        assert risk_level(score) == expected_risk

    def test_thresholds_are_strict(self):
        assert risk_level(40) == "Rendah"
        assert risk_level(40.01) == "Sedang"
        assert risk_level(70) == "Sedang"
        assert risk_level(70.01) == "Tinggi"

    @pytest.mark.parametrize("n", range(0, 15))
    def test_risk_matches_definition(self, n):
        score = 20 * n
        if score > 70:
            expected = "Tinggi"
        elif score > 40:
            expected = "Sedang"
        else:
            expected = "Rendah"
        assert risk_level(compute_score([0] * n)) == expected


class TestEvaluate:

    def test_result_carries_static_recommendation(self):
        result = DiagnosisService().evaluate(["G001", "G002", "G003"])
        assert result.success is True
        assert result.skor_akhir == 60
        assert result.tingkat_risiko == "Sedang"
        assert result.rekomendasi == DEFAULT_RECOMMENDATION

    def test_recommendation_is_the_same_for_every_level(self):
        service = DiagnosisService()
        texts = {service.evaluate([0] * n).rekomendasi for n in (0, 3, 4)}
        assert texts == {"Periksa ke dokter"}
