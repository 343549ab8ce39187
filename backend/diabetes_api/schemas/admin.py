"""
Diabetes Diagnosis API — Admin Login Schemas
==============================================

What:  Body of POST /admin/login and its success response.
How:   Both fields must be present. `sandi` may arrive as a number (older
       frontends send numeric PINs) and is normalised to a string before
       the plaintext comparison.
"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    name: str = Field(description="Admin login name")
    sandi: Union[str, int] = Field(description="Admin secret (compared as plaintext)")

    @field_validator("sandi")
    @classmethod
    def normalise_secret(cls, v: Union[str, int]) -> str:
        return str(v)


class AdminRecord(BaseModel):
    """Admin row as returned to the client; the secret is never included."""
    id: int
    name: str
    nama_lengkap: Optional[str] = None
    email: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    success: bool = True
    admin: AdminRecord
