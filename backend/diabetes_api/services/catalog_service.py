"""
Diabetes Diagnosis API — Catalog Listings
===========================================

What:  Full-table reads for users, symptoms, diagnoses and recommendations.
How:   Each method issues one SELECT through the gateway and validates the
       rows into response models. There is no pagination or filtering;
       every call returns the whole table.

Ordering:
    users, symptoms, recommendations   id ascending
    diagnoses                          created_at DESC, id DESC
"""

import logging
from typing import List

from sqlalchemy import select

from diabetes_api.gateway import QueryGateway
from diabetes_api.models import Diagnosis, Recommendation, Symptom, User
from diabetes_api.schemas.records import (
    DiagnosisRecord,
    RecommendationRecord,
    SymptomRecord,
    UserRecord,
)

logger = logging.getLogger(__name__)


class CatalogService:

    async def list_users(self, gateway: QueryGateway) -> List[UserRecord]:
        users = User.__table__
        rows = await gateway.fetch_all(select(users).order_by(users.c.id))
        return [UserRecord.model_validate(row) for row in rows]

    async def list_symptoms(self, gateway: QueryGateway) -> List[SymptomRecord]:
        symptoms = Symptom.__table__
        rows = await gateway.fetch_all(select(symptoms).order_by(symptoms.c.id))
        return [SymptomRecord.model_validate(row) for row in rows]

    async def list_recommendations(self, gateway: QueryGateway) -> List[RecommendationRecord]:
        recommendations = Recommendation.__table__
        rows = await gateway.fetch_all(select(recommendations).order_by(recommendations.c.id))
        return [RecommendationRecord.model_validate(row) for row in rows]

    async def list_diagnoses(self, gateway: QueryGateway) -> List[DiagnosisRecord]:
        """
        Diagnosis history, newest first, with the user's name.

        LEFT JOIN keeps diagnoses whose user was deleted (user_id is NULL);
        their `nama_lengkap` comes back as null.
        """
        diagnoses = Diagnosis.__table__
        users = User.__table__
        query = (
            select(diagnoses, users.c.nama_lengkap)
            .select_from(diagnoses.outerjoin(users, diagnoses.c.user_id == users.c.id))
            .order_by(diagnoses.c.created_at.desc(), diagnoses.c.id.desc())
        )
        rows = await gateway.fetch_all(query)
        return [DiagnosisRecord.model_validate(row) for row in rows]


catalog_service = CatalogService()
