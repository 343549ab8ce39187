"""
Diabetes Diagnosis API — Symptom Model
========================================

What:  The `symptoms` catalogue, seeded by the setup script and read-only
       at runtime.
How:   `kode` (e.g. "G001") is unique; the seed inserts a code only when it
       is absent. `bobot` (weight) is optional and unused by scoring.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from diabetes_api.database import Base
from diabetes_api.models.types import created_at_column


class Symptom(Base):
    __tablename__ = "symptoms"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kode: Mapped[str] = mapped_column(String(20), unique=True, nullable=False)
    nama_gejala: Mapped[str] = mapped_column(Text, nullable=False)
    kategori: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bobot: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        return f"<Symptom(id={self.id}, kode='{self.kode}')>"
