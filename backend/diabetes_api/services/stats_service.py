"""
Diabetes Diagnosis API — Dashboard Statistics
===============================================

What:  Row counts for the admin dashboard.
How:   Four COUNT(*) queries run concurrently through the gateway (each on
       its own pooled connection) and are combined into one response.
       Any failure propagates as DatabaseError; the route turns that into
       a zeroed body with HTTP 500.
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import Table, func, select

from diabetes_api.gateway import QueryGateway
from diabetes_api.models import Diagnosis, Recommendation, Symptom, User
from diabetes_api.schemas.system import StatsResponse

logger = logging.getLogger(__name__)


class StatsService:

    async def _count(self, gateway: QueryGateway, table: Table) -> int:
        row = await gateway.fetch_one(select(func.count().label("total")).select_from(table))
        return int(row["total"]) if row else 0

    async def get_stats(self, gateway: QueryGateway) -> StatsResponse:
        users, diagnoses, symptoms, recommendations = await asyncio.gather(
            self._count(gateway, User.__table__),
            self._count(gateway, Diagnosis.__table__),
            self._count(gateway, Symptom.__table__),
            self._count(gateway, Recommendation.__table__),
        )
        return StatsResponse(
            total_users=users,
            total_diagnoses=diagnoses,
            total_symptoms=symptoms,
            total_recommendations=recommendations,
            last_updated=datetime.now(timezone.utc),
        )

    @staticmethod
    def zeroed(error: str) -> StatsResponse:
        """Fallback body returned with HTTP 500 when any count fails."""
        return StatsResponse(last_updated=datetime.now(timezone.utc), error=error)


stats_service = StatsService()
