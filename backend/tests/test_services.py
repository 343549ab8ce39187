"""
Diabetes Diagnosis API — Service Tests
========================================

What:  Authentication, listings, diagnosis persistence and statistics.
How:   Real SQLite gateway for the happy paths; AsyncMock gateway to
       simulate database failures.
"""

import json
from unittest.mock import MagicMock

import pytest
from sqlalchemy import insert, select

from diabetes_api.exceptions import AuthError, DatabaseError
from diabetes_api.models import Diagnosis, User
from diabetes_api.services.auth_service import AuthService
from diabetes_api.services.catalog_service import CatalogService
from diabetes_api.services.diagnosis_service import DiagnosisRecorder, DiagnosisService
from diabetes_api.services.stats_service import StatsService


class TestAuthService:

    def setup_method(self):
        self.service = AuthService()

    @pytest.mark.asyncio
    async def test_valid_credentials_return_admin_without_secret(self, gateway):
        admin = await self.service.authenticate_admin(gateway, "admin", "admin123")
        assert admin.name == "admin"
        assert admin.nama_lengkap == "Administrator"
        assert "sandi" not in admin.model_dump()

    @pytest.mark.asyncio
    async def test_wrong_secret_is_rejected(self, gateway):
        with pytest.raises(AuthError):
            await self.service.authenticate_admin(gateway, "admin", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_name_is_rejected(self, gateway):
        with pytest.raises(AuthError):
            await self.service.authenticate_admin(gateway, "root", "admin123")

    @pytest.mark.asyncio
    async def test_name_match_is_exact(self, gateway):
        with pytest.raises(AuthError):
            await self.service.authenticate_admin(gateway, "admin ", "admin123")

    @pytest.mark.asyncio
    async def test_database_failure_propagates(self, mock_gateway):
        mock_gateway.fetch_one.side_effect = DatabaseError(detail="connection refused")
        with pytest.raises(DatabaseError):
            await self.service.authenticate_admin(mock_gateway, "admin", "admin123")


class TestCatalogService:

    def setup_method(self):
        self.service = CatalogService()

    @pytest.mark.asyncio
    async def test_users_empty_table_is_empty_list(self, gateway):
        assert await self.service.list_users(gateway) == []

    @pytest.mark.asyncio
    async def test_users_ordered_by_id(self, gateway):
        for name in ("Budi", "Ani"):
            await gateway.execute(insert(User.__table__).values(nama_lengkap=name))
        users = await self.service.list_users(gateway)
        assert [u.nama_lengkap for u in users] == ["Budi", "Ani"]

    @pytest.mark.asyncio
    async def test_symptoms_and_recommendations_are_seeded(self, gateway):
        symptoms = await self.service.list_symptoms(gateway)
        recommendations = await self.service.list_recommendations(gateway)
        assert [s.kode for s in symptoms] == ["G001", "G002", "G003", "G004", "G005"]
        assert len(recommendations) == 3

    @pytest.mark.asyncio
    async def test_diagnoses_join_user_name(self, gateway):
        user = await gateway.execute(insert(User.__table__).values(nama_lengkap="Budi Santoso"))
        await gateway.execute(
            insert(Diagnosis.__table__).values(
                user_id=user.insert_id,
                skor_akhir=60,
                tingkat_risiko="Sedang",
                gejala_terpilih=json.dumps(["G003", "G001", "G002"]),
            )
        )

        [record] = await self.service.list_diagnoses(gateway)

        assert record.nama_lengkap == "Budi Santoso"
        assert record.skor_akhir == 60
        assert record.gejala_terpilih == ["G003", "G001", "G002"]

    @pytest.mark.asyncio
    async def test_diagnosis_without_user_is_kept_with_null_name(self, gateway):
        await gateway.execute(
            insert(Diagnosis.__table__).values(
                user_id=None,
                skor_akhir=20,
                tingkat_risiko="Rendah",
                gejala_terpilih="[]",
            )
        )
        [record] = await self.service.list_diagnoses(gateway)
        assert record.user_id is None
        assert record.nama_lengkap is None

    @pytest.mark.asyncio
    async def test_diagnoses_newest_first(self, gateway):
        for score in (20, 40, 60):
            await gateway.execute(
                insert(Diagnosis.__table__).values(skor_akhir=score, gejala_terpilih="[]")
            )
        records = await self.service.list_diagnoses(gateway)
        assert [r.skor_akhir for r in records] == [60, 40, 20]


class TestDiagnosisService:

    @pytest.mark.asyncio
    async def test_without_user_nothing_is_written(self, mock_gateway):
        result = await DiagnosisService().process_diagnosis(mock_gateway, ["G001", "G002"])
        assert (result.skor_akhir, result.tingkat_risiko) == (40, "Rendah")
        mock_gateway.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_with_user_row_is_persisted(self, gateway):
        user = await gateway.execute(insert(User.__table__).values(nama_lengkap="Ani"))

        result = await DiagnosisService().process_diagnosis(
            gateway, ["G001", "G002", "G003", "G004"], user_id=user.insert_id
        )

        rows = await gateway.fetch_all(select(Diagnosis.__table__))
        assert result.tingkat_risiko == "Tinggi"
        assert len(rows) == 1
        assert rows[0]["user_id"] == user.insert_id
        assert rows[0]["skor_akhir"] == 80
        assert rows[0]["tingkat_risiko"] == "Tinggi"
        assert json.loads(rows[0]["gejala_terpilih"]) == ["G001", "G002", "G003", "G004"]

    @pytest.mark.asyncio
    async def test_write_failure_does_not_change_result(self, mock_gateway):
        mock_gateway.execute.side_effect = DatabaseError(detail="foreign key violation")

        result = await DiagnosisService().process_diagnosis(
            mock_gateway, ["G001", "G002", "G003"], user_id=99
        )

        assert (result.skor_akhir, result.tingkat_risiko) == (60, "Sedang")
        mock_gateway.execute.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_deferred_write_is_scheduled_not_awaited(self, mock_gateway):
        service = DiagnosisService()
        defer = MagicMock()

        result = await service.process_diagnosis(mock_gateway, ["G001"], user_id=5, defer=defer)

        defer.assert_called_once_with(service.recorder.record, mock_gateway, 5, result, ["G001"])
        mock_gateway.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_recorder_returns_none_on_failure(self, mock_gateway):
        mock_gateway.execute.side_effect = DatabaseError(detail="connection lost")
        result = DiagnosisService().evaluate(["G001"])
        assert await DiagnosisRecorder().record(mock_gateway, 1, result, ["G001"]) is None


class TestStatsService:

    def setup_method(self):
        self.service = StatsService()

    @pytest.mark.asyncio
    async def test_counts_match_tables(self, gateway):
        await gateway.execute(insert(User.__table__).values(nama_lengkap="Ani"))
        await gateway.execute(insert(Diagnosis.__table__).values(skor_akhir=0, gejala_terpilih="[]"))
        await gateway.execute(insert(Diagnosis.__table__).values(skor_akhir=20, gejala_terpilih="[]"))

        stats = await self.service.get_stats(gateway)

        assert stats.total_users == 1
        assert stats.total_diagnoses == 2
        assert stats.total_symptoms == 5
        assert stats.total_recommendations == 3
        assert stats.error is None

    @pytest.mark.asyncio
    async def test_counts_are_not_cached(self, gateway):
        before = await self.service.get_stats(gateway)
        await gateway.execute(insert(User.__table__).values(nama_lengkap="Ani"))
        after = await self.service.get_stats(gateway)
        assert (before.total_users, after.total_users) == (0, 1)

    @pytest.mark.asyncio
    async def test_single_failure_fails_the_whole_call(self, mock_gateway):
        mock_gateway.fetch_one.side_effect = [
            {"total": 1},
            DatabaseError(detail="timeout"),
            {"total": 5},
            {"total": 3},
        ]
        with pytest.raises(DatabaseError):
            await self.service.get_stats(mock_gateway)
