"""Repository for group message database operations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.infrastructure.persistence.models import MessageModel


class MessageRepository:
    """Repository for group message database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, message: MessageModel) -> MessageModel:
        """Insert a message.

        Args:
            message: Message model to create.

        Returns:
            Created message model with its generated id.
        """
        self.session.add(message)
        await self.session.flush()
        return message

    async def get_by_id(self, message_id: int) -> MessageModel | None:
        """Get a message by ID.

        Args:
            message_id: Message ID.

        Returns:
            Message model if found, None otherwise.
        """
        result = await self.session.execute(
            select(MessageModel).where(MessageModel.id == message_id)
        )
        return result.scalar_one_or_none()

    async def list_by_group(self, group_id: int) -> list[MessageModel]:
        """List a group's messages, oldest first.

        Messages posted within the same timestamp keep insertion order.

        Args:
            group_id: Group ID.

        Returns:
            List of message models.
        """
        result = await self.session.execute(
            select(MessageModel)
            .where(MessageModel.group_id == group_id)
            .order_by(MessageModel.created_at.asc(), MessageModel.id.asc())
        )
        return list(result.scalars().all())

    async def delete(self, message_id: int) -> MessageModel | None:
        """Delete a message by ID.

        Args:
            message_id: Message ID.

        Returns:
            The deleted message model, or None if no row was deleted.
        """
        message = await self.get_by_id(message_id)
        if message is None:
            return None
        await self.session.delete(message)
        await self.session.flush()
        return message
