"""Repository for group membership database operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.infrastructure.persistence.models import GroupMemberModel


class GroupMemberRepository:
    """Repository for group membership database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, member: GroupMemberModel) -> GroupMemberModel:
        """Insert a membership row.

        Args:
            member: Member model to create.

        Returns:
            Created member model with its generated id.
        """
        self.session.add(member)
        await self.session.flush()
        return member

    async def list_by_group(self, group_id: int) -> list[GroupMemberModel]:
        """List the members of a group.

        Args:
            group_id: Group ID.

        Returns:
            List of member models, in insertion order.
        """
        result = await self.session.execute(
            select(GroupMemberModel)
            .where(GroupMemberModel.group_id == group_id)
            .order_by(GroupMemberModel.id)
        )
        return list(result.scalars().all())
