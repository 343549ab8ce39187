"""
Diabetes Diagnosis API — Diagnosis Schemas
============================================

What:  Body of POST /api/diagnosis/process and the scoring result.

Request example:
    {"symptoms": ["G001", "G002", "G004"], "user_id": 7}

Response example:
    {"success": true, "skor_akhir": 60, "tingkat_risiko": "Sedang",
     "rekomendasi": "Periksa ke dokter"}

Only the length of `symptoms` matters to scoring; the items themselves are
stored verbatim when the diagnosis is persisted.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class DiagnosisRequest(BaseModel):
    symptoms: List[Any] = Field(default_factory=list, description="Chosen symptom identifiers")
    user_id: Optional[int] = Field(default=None, description="Persist the result for this user")


class DiagnosisResult(BaseModel):
    success: bool = True
    skor_akhir: int = Field(description="Symptom count multiplied by 20")
    tingkat_risiko: str = Field(description="Rendah, Sedang or Tinggi")
    rekomendasi: str
