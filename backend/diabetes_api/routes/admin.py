"""
Diabetes Diagnosis API — Admin Login Route
============================================

What:  POST /admin/login checks an admin name/secret pair.
How:   Delegates to AuthService; AuthError becomes 401 {"error": "Login gagal"}
       through the global handler. No session or token is created.
"""

import logging

from fastapi import APIRouter, Depends

from diabetes_api.dependencies import get_gateway
from diabetes_api.gateway import QueryGateway
from diabetes_api.schemas.admin import LoginRequest, LoginResponse
from diabetes_api.schemas.system import ErrorResponse
from diabetes_api.services.auth_service import auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/login", summary="Login usage hint")
async def login_hint() -> dict:
    return {"message": "Gunakan POST"}


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        400: {"description": "Missing name or sandi", "model": ErrorResponse},
        401: {"description": "Credentials do not match", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Admin login",
)
async def login(
    body: LoginRequest,
    gateway: QueryGateway = Depends(get_gateway),
) -> LoginResponse:
    admin = await auth_service.authenticate_admin(gateway, body.name, body.sandi)
    return LoginResponse(success=True, admin=admin)
