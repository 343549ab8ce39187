"""
Diabetes Diagnosis API — Admin Model
======================================

What:  The `admin` table: privileged operators who log in to the dashboard.
How:   `name` is unique, so a name/secret lookup matches at most one row.

The secret (`sandi`) is stored and compared as plaintext. Hashing it is
out of scope for this service.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from diabetes_api.database import Base
from diabetes_api.models.types import created_at_column


class Admin(Base):
    __tablename__ = "admin"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    sandi: Mapped[str] = mapped_column(String(100), nullable=False)
    nama_lengkap: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = created_at_column()

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, name='{self.name}')>"
