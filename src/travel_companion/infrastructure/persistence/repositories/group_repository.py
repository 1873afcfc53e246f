"""Repository for group database operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.infrastructure.persistence.models import GroupModel


class GroupRepository:
    """Repository for group database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, group: GroupModel) -> GroupModel:
        """Create a new group.

        Args:
            group: Group model to create.

        Returns:
            Created group model with its generated id.
        """
        self.session.add(group)
        await self.session.flush()
        return group

    async def get_by_id(self, group_id: int) -> GroupModel | None:
        """Get a group by ID.

        Args:
            group_id: Group ID.

        Returns:
            Group model if found, None otherwise.
        """
        result = await self.session.execute(
            select(GroupModel).where(GroupModel.id == group_id)
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[GroupModel]:
        """List all groups in the database's natural order."""
        result = await self.session.execute(select(GroupModel))
        return list(result.scalars().all())
