"""
Diabetes Diagnosis API — Health & Diagnostic Routes
=====================================================

What:  Liveness, database connectivity check and a static service descriptor.
How:   /health touches nothing; /test-db runs `SELECT 1 + 1` through the
       query gateway and reports the computed value. Neither reads a
       business table.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from diabetes_api import __version__
from diabetes_api.dependencies import get_gateway
from diabetes_api.exceptions import DatabaseError
from diabetes_api.gateway import QueryGateway
from diabetes_api.schemas.system import (
    DbCheckResponse,
    ErrorResponse,
    HealthResponse,
    InfoResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

SERVICE_NAME = "Diabetes Diagnosis System"


@router.get("/", response_class=PlainTextResponse, summary="Service banner")
async def root() -> str:
    return "Diabetes Diagnosis API is running"


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> HealthResponse:
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))


@router.get(
    "/test-db",
    response_model=DbCheckResponse,
    responses={500: {"description": "Database unreachable", "model": ErrorResponse}},
    summary="Database connectivity check",
)
async def test_db(gateway: QueryGateway = Depends(get_gateway)):
    """
    Execute `SELECT 1 + 1` and report the result.

    Success: {"status": "success", "message": ..., "data": {"result": 2}}
    Failure: HTTP 500 {"status": "error", "error": <driver message>}
    """
    try:
        row = await gateway.fetch_one("SELECT 1 + 1 AS result")
    except DatabaseError as e:
        logger.error("Database check failed: %s", e.detail or e.message)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "error": e.detail or e.message},
        )
    return DbCheckResponse(data={"result": row["result"] if row else None})


@router.get("/api/info", response_model=InfoResponse, summary="Service descriptor")
async def info() -> InfoResponse:
    return InfoResponse(service=SERVICE_NAME, status="online", version=__version__)
