"""Column types shared by more than one table."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, func
from sqlalchemy.orm import Mapped, mapped_column

# Ordered low → high
RISK_LEVELS = ("Rendah", "Sedang", "Tinggi")

# Male / female, stored with their Indonesian labels
SEXES = ("Laki-laki", "Perempuan")

# One named type so PostgreSQL creates a single ENUM for both tables
RiskLevelType = Enum(*RISK_LEVELS, name="risk_level")
SexType = Enum(*SEXES, name="sex")


def created_at_column() -> Mapped[datetime]:
    """`created_at` with a server-side CURRENT_TIMESTAMP default."""
    return mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.current_timestamp(),
    )
