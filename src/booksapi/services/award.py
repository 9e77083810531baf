"""Persistence helpers for Award rows."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from ..database.connection import get_async_session
from ..dbmodels import Awards
from ..logging import get_logger

logger = get_logger(__name__)


class AwardService:
    """Create, look up and delete awards.

    Every call runs in its own session and commits before returning.
    """

    async def save(self, award: Awards) -> None:
        async with get_async_session() as session:
            session.add(award)
            await session.flush()
            logger.debug("Award saved", award_id=award.id)

    async def find_by_id(self, award_id: int) -> Awards | None:
        async with get_async_session() as session:
            stmt = select(Awards).where(Awards.id == award_id).options(selectinload(Awards.books))
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def find_all(self) -> list[Awards]:
        async with get_async_session() as session:
            stmt = select(Awards).options(selectinload(Awards.books)).order_by(
                Awards.year, Awards.id
            )
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def delete_award(self, award: Awards) -> None:
        """Delete ``award`` and its book links.

        ``award`` usually comes from another (closed) session, so the row is
        reloaded here with its books; the caller's instance is left untouched.
        """
        async with get_async_session() as session:
            stmt = select(Awards).where(Awards.id == award.id).options(selectinload(Awards.books))
            result = await session.execute(stmt)
            persistent = result.scalar_one_or_none()
            if persistent is None:
                logger.debug("Award already removed", award_id=award.id)
                return

            await session.delete(persistent)
            logger.debug("Award removed", award_id=award.id)
