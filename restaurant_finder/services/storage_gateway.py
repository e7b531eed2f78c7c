"""
Restaurant Finder - Storage Gateway
====================================

What:  Thin query-execution facade over the pooled async database session.
How:   Accepts a parameterized statement (SQL text or a SQLAlchemy Core
       construct) plus its arguments, executes it on the request's session
       and returns the rows as plain dicts.
Who:   Called by RestaurantService for every read and write.

Failure contract:
    Any driver or SQLAlchemy failure is logged with the operation name and
    re-raised as DatabaseError, which the global handler turns into a 500.
    Nothing is retried.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from restaurant_finder.exceptions import DatabaseError

logger = logging.getLogger(__name__)

Statement = Union[str, Executable]


class StorageGateway:
    """
    Executes parameterized statements and returns rows.

    Writes are committed before returning (commit=True), so a created or
    updated row is durable by the time the response is built.
    """

    async def query(
        self,
        db: AsyncSession,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
        *,
        operation: str = "query",
        commit: bool = False,
    ) -> List[Dict[str, Any]]:
        """
        Run one statement and return its rows.

        Args:
            db: Request-scoped async session
            statement: Raw SQL (bound with :name placeholders) or a Core construct
            params: Bind parameters for the statement
            operation: Short label used in logs and error context
            commit: Commit the transaction after a successful execute

        Returns:
            List of row dicts. Empty for statements that return no rows.

        Raises:
            DatabaseError: The statement or the commit failed
        """
        if isinstance(statement, str):
            statement = text(statement)

        try:
            result = await db.execute(statement, params)
            rows = [dict(row) for row in result.mappings().all()] if result.returns_rows else []
            if commit:
                await db.commit()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Storage error during %s: %s", operation, str(e))
            raise DatabaseError(
                context={"operation": operation, "error_type": type(e).__name__},
            ) from e

        logger.debug("%s returned %d row(s)", operation, len(rows))
        return rows

    async def query_one(
        self,
        db: AsyncSession,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
        *,
        operation: str = "query",
        commit: bool = False,
    ) -> Optional[Dict[str, Any]]:
        """Like query(), returning the first row or None."""
        rows = await self.query(db, statement, params, operation=operation, commit=commit)
        return rows[0] if rows else None


storage_gateway = StorageGateway()
