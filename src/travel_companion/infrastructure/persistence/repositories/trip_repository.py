"""Repository for trip lookups."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.infrastructure.persistence.models import TripModel


class TripRepository:
    """Read-only repository for trips."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_id(self, trip_id: int) -> TripModel | None:
        """Get a trip by ID, or None if it does not exist."""
        result = await self.session.execute(
            select(TripModel).where(TripModel.id == trip_id)
        )
        return result.scalar_one_or_none()
