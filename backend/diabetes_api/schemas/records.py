"""
Diabetes Diagnosis API — Record Schemas
=========================================

What:  Response models for the four listing endpoints.
How:   Each model validates a row mapping returned by the query gateway.
       Field names are the database column names, which is also the JSON
       contract the frontend reads.
"""

import json
from datetime import date, datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class UserRecord(BaseModel):
    id: int
    nama_lengkap: str
    email: Optional[str] = None
    tanggal_lahir: Optional[date] = None
    jenis_kelamin: Optional[str] = Field(default=None, description="Laki-laki or Perempuan")
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SymptomRecord(BaseModel):
    id: int
    kode: str = Field(description="Unique symptom code, e.g. G001")
    nama_gejala: str
    kategori: Optional[str] = None
    bobot: Optional[int] = Field(default=None, description="Optional weight; not used by scoring")
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DiagnosisRecord(BaseModel):
    """
    What:  A persisted diagnosis joined with the owning user's name.
    How:   `gejala_terpilih` is stored as a JSON array string and decoded
           back to a list here, in the order it was submitted.
           `nama_lengkap` is null when the user row no longer exists.
    """
    id: int
    user_id: Optional[int] = None
    nama_lengkap: Optional[str] = None
    skor_akhir: Optional[Union[int, float]] = None
    tingkat_risiko: Optional[str] = None
    gejala_terpilih: List[Any] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @field_validator("skor_akhir", mode="before")
    @classmethod
    def whole_score_as_int(cls, v: Any) -> Any:
        """NUMERIC(5,2) comes back as 60.0; report it as 60, the same as the scoring response."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @field_validator("gejala_terpilih", mode="before")
    @classmethod
    def decode_symptom_list(cls, v: Any) -> Any:
        """Accepts the stored JSON text; legacy non-JSON text becomes a one-item list."""
        if v is None or v == "":
            return []
        if isinstance(v, str):
            try:
                decoded = json.loads(v)
            except ValueError:
                return [v]
            return decoded if isinstance(decoded, list) else [decoded]
        return v


class RecommendationRecord(BaseModel):
    id: int
    tingkat_risiko: str
    rekomendasi: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
