"""
Diabetes Diagnosis API — Dashboard Statistics Route
=====================================================

What:  GET /api/stats returns live row counts.
How:   On any DatabaseError the handler answers HTTP 500 with the usual
       body shape, every count set to 0 and an `error` message.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from diabetes_api.dependencies import get_gateway
from diabetes_api.exceptions import DatabaseError
from diabetes_api.gateway import QueryGateway
from diabetes_api.schemas.system import StatsResponse
from diabetes_api.services.stats_service import stats_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Stats"])


@router.get(
    "/stats",
    response_model=StatsResponse,
    response_model_exclude_none=True,
    responses={500: {"description": "Counts unavailable; zeroed body", "model": StatsResponse}},
    summary="Dashboard counters",
)
async def get_stats(gateway: QueryGateway = Depends(get_gateway)):
    try:
        return await stats_service.get_stats(gateway)
    except DatabaseError as e:
        logger.error("Stats unavailable: %s", e.detail or e.message)
        fallback = stats_service.zeroed(error="Gagal memuat statistik")
        return JSONResponse(status_code=500, content=jsonable_encoder(fallback))
