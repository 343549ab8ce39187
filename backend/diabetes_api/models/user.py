"""
Diabetes Diagnosis API — User Model
=====================================

What:  The `users` table: people who take the self-assessment.
Who:   Referenced by `diagnoses.user_id`; listed by GET /api/users.

There is no registration endpoint; rows are inserted directly.
"""

from datetime import date, datetime
from typing import Optional

from sqlalchemy import Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from diabetes_api.database import Base
from diabetes_api.models.types import SexType, created_at_column


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_lengkap: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    tanggal_lahir: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    jenis_kelamin: Mapped[Optional[str]] = mapped_column(SexType, nullable=True)
    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        return f"<User(id={self.id}, nama_lengkap='{self.nama_lengkap}')>"
