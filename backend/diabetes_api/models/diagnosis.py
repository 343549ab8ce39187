"""
Diabetes Diagnosis API — Diagnosis Model
==========================================

What:  The `diagnoses` table: one row per persisted scoring result.
How:   `tingkat_risiko` is derived from `skor_akhir` before the insert and
       `gejala_terpilih` holds the submitted symptom list as a JSON array.
       Rows are never updated or deleted through the API.

Lifecycle:
    Created by the best-effort side write after POST /api/diagnosis/process
    when the request carries a user_id. Deleting the user keeps the row
    and sets `user_id` to NULL.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from diabetes_api.database import Base
from diabetes_api.models.types import RiskLevelType, created_at_column


class Diagnosis(Base):
    __tablename__ = "diagnoses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    # Returned as float so JSON output and SQLite tests see plain numbers
    skor_akhir: Mapped[Optional[float]] = mapped_column(Numeric(5, 2, asdecimal=False), nullable=True)
    tingkat_risiko: Mapped[Optional[str]] = mapped_column(RiskLevelType, nullable=True)
    gejala_terpilih: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = created_at_column()

    # History listing orders by created_at
    __table_args__ = (
        Index("idx_diagnoses_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Diagnosis(id={self.id}, user_id={self.user_id}, "
            f"skor_akhir={self.skor_akhir}, tingkat_risiko='{self.tingkat_risiko}')>"
        )
