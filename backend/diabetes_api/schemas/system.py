"""
Diabetes Diagnosis API — System Schemas
=========================================

What:  Bodies for the health, diagnostics, info and dashboard endpoints,
       plus the common error body.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(default="healthy")
    timestamp: datetime


class DbCheckResponse(BaseModel):
    status: str = Field(default="success")
    message: str = Field(default="Database terhubung")
    data: Dict[str, Any]


class InfoResponse(BaseModel):
    service: str
    status: str
    version: str


class StatsResponse(BaseModel):
    """
    What:  Dashboard counters read at call time (no caching).
    How:   On failure the same shape is returned with every count at zero
           and an `error` message, alongside HTTP 500.
    """
    total_users: int = 0
    total_diagnoses: int = 0
    total_symptoms: int = 0
    total_recommendations: int = 0
    last_updated: datetime
    error: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str = Field(description="Human-readable error")
    message: Optional[str] = Field(default=None, description="Extra detail, when exposed")
    details: Optional[Any] = Field(default=None, description="Field-level validation errors")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
