"""
Diabetes Diagnosis API — Configuration and Pool Tests
=======================================================

What:  Database URL assembly (DB_* and PG* variables), the production
       credential check, and the bounded connection pool.
How:   Settings are built with `_env_file=None` so a developer's .env never
       leaks in; environment variables are set through monkeypatch.
"""

import pytest

from diabetes_api.config import Settings
from diabetes_api.database import build_engine


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every database variable conftest or the shell may have set."""
    for name in (
        "DATABASE_URL",
        "DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME",
        "PGHOST", "PGPORT", "PGUSER", "PGPASSWORD", "PGDATABASE",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestDatabaseUrl:

    def test_defaults(self, clean_env):
        url = Settings(_env_file=None).sqlalchemy_url
        assert url.drivername == "postgresql+asyncpg"
        assert url.host == "localhost"
        assert url.port == 5432
        assert url.username == "postgres"
        assert url.database == "diabetes_db"

    def test_pg_variables_feed_the_url(self, clean_env):
        clean_env.setenv("PGHOST", "db.internal")
        clean_env.setenv("PGPORT", "6543")
        clean_env.setenv("PGUSER", "diag")
        clean_env.setenv("PGPASSWORD", "s3cret")
        clean_env.setenv("PGDATABASE", "diagnosa")

        url = Settings(_env_file=None).sqlalchemy_url

        assert (url.host, url.port, url.username, url.database) == ("db.internal", 6543, "diag", "diagnosa")
        assert url.password == "s3cret"

    def test_db_variables_win_over_pg_variables(self, clean_env):
        clean_env.setenv("PGHOST", "pg.internal")
        clean_env.setenv("DB_HOST", "db.internal")
        assert Settings(_env_file=None).sqlalchemy_url.host == "db.internal"

    def test_database_url_wins_over_parts(self, clean_env):
        clean_env.setenv("DB_HOST", "ignored")
        clean_env.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@managed:5432/prod")
        assert Settings(_env_file=None).sqlalchemy_url.host == "managed"


class TestProductionValidation:

    def test_production_without_credentials_fails(self, clean_env):
        config = Settings(_env_file=None, environment="production")
        with pytest.raises(ValueError, match="DATABASE_URL"):
            config.validate_required_for_production()

    def test_production_with_password_passes(self, clean_env):
        clean_env.setenv("DB_PASSWORD", "s3cret")
        Settings(_env_file=None, environment="production").validate_required_for_production()

    def test_production_with_database_url_passes(self, clean_env):
        clean_env.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@managed:5432/prod")
        Settings(_env_file=None, environment="production").validate_required_for_production()

    def test_development_never_fails(self, clean_env):
        Settings(_env_file=None, environment="development").validate_required_for_production()


class TestConnectionPool:

    @pytest.mark.asyncio
    async def test_pool_is_fixed_at_ten_without_timeout(self, clean_env):
        engine = build_engine("postgresql+asyncpg://u:p@localhost/diabetes_db", Settings(_env_file=None))
        try:
            pool = engine.sync_engine.pool
            assert pool.size() == 10
            assert pool._max_overflow == 0
            assert pool._timeout is None
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_pool_timeout_is_configurable(self, clean_env):
        config = Settings(_env_file=None, db_pool_timeout=5)
        engine = build_engine("postgresql+asyncpg://u:p@localhost/diabetes_db", config)
        try:
            assert engine.sync_engine.pool._timeout == 5
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_sqlite_skips_pool_sizing(self, tmp_path):
        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'x.db'}", Settings(_env_file=None))
        try:
            assert engine.dialect.name == "sqlite"
        finally:
            await engine.dispose()
