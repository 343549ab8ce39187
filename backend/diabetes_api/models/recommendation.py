"""
Diabetes Diagnosis API — Recommendation Model
===============================================

What:  Static advice text, one or more rows per risk level. Seeded and
       read-only at runtime.
"""

from datetime import datetime

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from diabetes_api.database import Base
from diabetes_api.models.types import RiskLevelType, created_at_column


class Recommendation(Base):
    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tingkat_risiko: Mapped[str] = mapped_column(RiskLevelType, nullable=False)
    rekomendasi: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        return f"<Recommendation(id={self.id}, tingkat_risiko='{self.tingkat_risiko}')>"
