"""
Diabetes Diagnosis API — Query Gateway
========================================

What:  Thin wrapper that executes parameterized statements and returns plain
       Python results.
How:   Reads check out a connection, run the statement and return the rows
       as dictionaries. Writes run inside their own transaction and return a
       `WriteResult`. Any SQLAlchemy/driver error is logged and re-raised as
       `DatabaseError`, which the global handler turns into a 500 response.
Who:   Every service talks to the database through this class.

There is no retry and no health check beyond what the pool does itself.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.sql import Executable

from diabetes_api.exceptions import DatabaseError

logger = logging.getLogger(__name__)

Statement = Union[str, Executable]


class WriteResult(BaseModel):
    """Acknowledgement of a write statement."""

    insert_id: Optional[int] = Field(default=None, description="Primary key of the inserted row")
    affected_rows: int = Field(default=0, description="Rows touched by the statement")

    def as_dict(self) -> Dict[str, Any]:
        return {"insertId": self.insert_id, "affectedRows": self.affected_rows}


def _coerce(statement: Statement) -> Executable:
    if isinstance(statement, str):
        return text(statement)
    return statement


def _describe(statement: Statement) -> str:
    # First line only; enough to identify the query in logs
    lines = str(statement).strip().splitlines()
    return lines[0][:120] if lines else "<empty statement>"


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class QueryGateway:
    """
    Executes statements against an `AsyncEngine`.

    Statements are SQLAlchemy Core/ORM constructs or raw SQL strings with
    named bind parameters (`:name`); bind values are always passed
    separately, never interpolated.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    async def fetch_all(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Run a read statement and return every row as a dict.

        Returns an empty list (never None) when no rows match.

        Raises:
            DatabaseError: connection unavailable or statement rejected
        """
        try:
            async with self._engine.connect() as conn:
                result = await conn.execute(_coerce(statement), dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            message = _driver_message(e)
            logger.error("Query failed: %s | %s", _describe(statement), message)
            raise DatabaseError(detail=message, context={"error_type": type(e).__name__})

    async def fetch_one(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Run a read statement and return the first row, or None."""
        rows = await self.fetch_all(statement, params)
        return rows[0] if rows else None

    async def execute(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> WriteResult:
        """
        Run a write statement in its own transaction.

        `insert_id` is filled for single-row `insert()` constructs; raw SQL
        strings report only `affected_rows`.

        Raises:
            DatabaseError: connection unavailable or statement rejected
        """
        try:
            async with self._engine.begin() as conn:
                result = await conn.execute(_coerce(statement), dict(params or {}))
                insert_id = None
                if result.is_insert and result.inserted_primary_key:
                    insert_id = result.inserted_primary_key[0]
                affected = result.rowcount if result.rowcount is not None else 0
                return WriteResult(insert_id=insert_id, affected_rows=max(affected, 0))
        except SQLAlchemyError as e:
            message = _driver_message(e)
            logger.error("Write failed: %s | %s", _describe(statement), message)
            raise DatabaseError(detail=message, context={"error_type": type(e).__name__})
