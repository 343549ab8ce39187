"""
Diabetes Diagnosis API — Resource Listing Routes
==================================================

What:  GET handlers returning whole tables as JSON arrays.
How:   Each handler calls CatalogService with the injected gateway.
       An empty table gives `[]`. Database failures propagate as
       DatabaseError and are answered by the global handler with HTTP 500.
"""

from typing import List

from fastapi import APIRouter, Depends

from diabetes_api.dependencies import get_gateway
from diabetes_api.gateway import QueryGateway
from diabetes_api.schemas.records import (
    DiagnosisRecord,
    RecommendationRecord,
    SymptomRecord,
    UserRecord,
)
from diabetes_api.schemas.system import ErrorResponse
from diabetes_api.services.catalog_service import catalog_service

router = APIRouter(
    prefix="/api",
    tags=["Resources"],
    responses={500: {"description": "Database error", "model": ErrorResponse}},
)


@router.get("/users", response_model=List[UserRecord], summary="List all users")
async def list_users(gateway: QueryGateway = Depends(get_gateway)) -> List[UserRecord]:
    return await catalog_service.list_users(gateway)


@router.get("/symptoms", response_model=List[SymptomRecord], summary="List all symptoms")
async def list_symptoms(gateway: QueryGateway = Depends(get_gateway)) -> List[SymptomRecord]:
    return await catalog_service.list_symptoms(gateway)


@router.get(
    "/diagnoses",
    response_model=List[DiagnosisRecord],
    summary="Diagnosis history, newest first, with user names",
)
async def list_diagnoses(gateway: QueryGateway = Depends(get_gateway)) -> List[DiagnosisRecord]:
    return await catalog_service.list_diagnoses(gateway)


@router.get(
    "/recommendations",
    response_model=List[RecommendationRecord],
    summary="List all recommendations",
)
async def list_recommendations(
    gateway: QueryGateway = Depends(get_gateway),
) -> List[RecommendationRecord]:
    return await catalog_service.list_recommendations(gateway)
