"""
Aviary Backend — Bird Service
===============================

What:  Read access to the bird store.
Why:   Keeps SQL out of the route handlers and gives tests one seam to mock.
How:   Stateless methods that take the request's AsyncSession.

Query plan:
    SELECT * FROM birds ORDER BY id ASC
    → primary key index scan; ids are assigned in insertion order, so
      ascending id is also insertion order
"""

import logging
from typing import List

from sqlalchemy import asc, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import DatabaseError
from app.models.bird import Bird

logger = logging.getLogger(__name__)


class BirdService:
    """
    Business logic layer for bird reads.

    Error Handling Strategy:
        SQLAlchemy errors are wrapped in DatabaseError so the global handler
        returns a generic 500 and the SQL never reaches the client.
    """

    async def list_birds(self, db: AsyncSession) -> List[Bird]:
        """
        Return every bird in the store, ascending by id.

        Args:
            db: Async database session

        Returns:
            List of Bird rows; empty when the store is empty

        Raises:
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(Bird).order_by(asc(Bird.id)))
            birds = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing birds: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve birds. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.debug("Loaded %d birds", len(birds))
        return birds

    async def count_birds(self, db: AsyncSession) -> int:
        """Number of rows in the birds table."""
        try:
            result = await db.execute(select(func.count(Bird.id)))
        except SQLAlchemyError as e:
            logger.error("Database error counting birds: %s", str(e))
            raise DatabaseError(
                message="Could not count birds.",
                context={"error_type": type(e).__name__},
            )
        return result.scalar() or 0


# ── Singleton Instance ────────────────────────────────────────────────────
bird_service = BirdService()
