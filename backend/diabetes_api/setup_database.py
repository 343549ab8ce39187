"""
Diabetes Diagnosis API — Database Setup Script
================================================

What:  One-time schema creation and seed-data insertion.
How:   Creates every table that is missing, then inserts the seed rows that
       are not there yet (looked up by their natural key). Running it again
       changes nothing.
Who:   Operators, via `diabetes-setup-db` or
       `python -m diabetes_api.setup_database`. Not run by the server.

Seed data:
    admin            admin / admin123 (plaintext)
    symptoms         G001–G005
    recommendations  one text per risk level
"""

import asyncio
import logging
import sys
from typing import Any, Dict, Iterable, Optional, Sequence

from sqlalchemy import Table, insert, select

from diabetes_api.config import Settings, settings as default_settings
from diabetes_api.database import Database
from diabetes_api.gateway import QueryGateway
from diabetes_api.models import Admin, Recommendation, Symptom

logger = logging.getLogger(__name__)


SEED_ADMINS = [
    {
        "name": "admin",
        "sandi": "admin123",
        "nama_lengkap": "Administrator",
        "email": "admin@diabetes.com",
    },
]

SEED_SYMPTOMS = [
    {"kode": "G001", "nama_gejala": "Sering haus dan banyak minum", "kategori": "Gejala Umum"},
    {"kode": "G002", "nama_gejala": "Sering buang air kecil", "kategori": "Gejala Umum"},
    {"kode": "G003", "nama_gejala": "Cepat lapar", "kategori": "Gejala Umum"},
    {"kode": "G004", "nama_gejala": "Penurunan berat badan tanpa sebab", "kategori": "Gejala Umum"},
    {"kode": "G005", "nama_gejala": "Penglihatan kabur", "kategori": "Gejala Lanjut"},
]

SEED_RECOMMENDATIONS = [
    {"tingkat_risiko": "Rendah", "rekomendasi": "Pertahankan pola makan sehat dan rutin berolahraga"},
    {"tingkat_risiko": "Sedang", "rekomendasi": "Periksa gula darah rutin dan konsultasi dengan dokter"},
    {
        "tingkat_risiko": "Tinggi",
        "rekomendasi": "Segera konsultasi dengan dokter spesialis dan lakukan pemeriksaan lengkap",
    },
]


async def insert_if_absent(
    gateway: QueryGateway,
    table: Table,
    rows: Iterable[Dict[str, Any]],
    key: Sequence[str],
) -> int:
    """
    Insert each row whose `key` columns do not match an existing row.

    Returns the number of rows inserted.
    """
    inserted = 0
    for row in rows:
        lookup = select(table.c.id).where(*(table.c[col] == row[col] for col in key)).limit(1)
        if await gateway.fetch_one(lookup) is not None:
            continue
        await gateway.execute(insert(table).values(**row))
        inserted += 1
    logger.info("%s: %d seed row(s) inserted", table.name, inserted)
    return inserted


async def setup_database(database: Database) -> Dict[str, int]:
    """
    Create the schema and seed it.

    Returns:
        Rows inserted per table, e.g. {"admin": 1, "symptoms": 5, "recommendations": 3}
        on a fresh database and all zeros on a second run.
    """
    await database.create_schema()

    gateway = database.gateway
    return {
        "admin": await insert_if_absent(gateway, Admin.__table__, SEED_ADMINS, key=("name",)),
        "symptoms": await insert_if_absent(gateway, Symptom.__table__, SEED_SYMPTOMS, key=("kode",)),
        "recommendations": await insert_if_absent(
            gateway,
            Recommendation.__table__,
            SEED_RECOMMENDATIONS,
            key=("tingkat_risiko", "rekomendasi"),
        ),
    }


async def _run(config: Settings) -> None:
    database = Database.from_settings(config)
    try:
        counts = await setup_database(database)
    finally:
        await database.dispose()
    logger.info("Database setup completed: %s", counts)


def main(config: Optional[Settings] = None) -> int:
    """Console entry point. Returns a process exit code."""
    config = config or default_settings
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    try:
        config.validate_required_for_production()
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.info("Setting up %s", config.sqlalchemy_url.render_as_string(hide_password=True))
    try:
        asyncio.run(_run(config))
    except Exception:
        logger.exception("Database setup failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
