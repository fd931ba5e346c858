"""Shared plumbing for the PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import StoreFailureError


class PostgresRepository:
    """Base class holding the request's session.

    Every statement runs inside its own SAVEPOINT so one failed step of a
    multi-document sequence does not poison the request transaction for
    the steps after it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, operation: str, stmt: Any) -> Result[Any]:
        try:
            async with self.session.begin_nested():
                return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            logfire.error("Store operation failed", operation=operation, error=str(e))
            raise StoreFailureError(operation, e) from e
