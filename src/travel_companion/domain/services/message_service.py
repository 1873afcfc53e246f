"""Message service.

Messages are polled by clients: they are listed in posting order and
deleted one at a time. Deletion is not gated by any permission check.
"""

from datetime import datetime, timezone
from typing import Any

from travel_companion.core.logging import get_logger
from travel_companion.domain.entities import ANONYMOUS_SENDER, Message
from travel_companion.domain.errors import ErrorCode, GatewayError
from travel_companion.domain.services.group_service import parse_group_id, require_group
from travel_companion.domain.services.request_validation import (
    optional_text,
    parse_identifier,
    require_text,
)
from travel_companion.domain.services.store import TravelStore, store_errors_as_internal

logger = get_logger(__name__)


class MessageService:
    """Service for group messaging."""

    def __init__(self, store: TravelStore) -> None:
        """Initialize the message service.

        Args:
            store: Datastore used for all reads and writes.
        """
        self.store = store

    async def list_messages(self, group_id: Any) -> list[Message]:
        """List a group's messages, oldest first.

        Raises:
            GatewayError: INVALID_GROUP_ID, GROUP_NOT_FOUND or INTERNAL_ERROR.
        """
        parsed_id = parse_group_id(group_id)

        async with store_errors_as_internal("list_messages"):
            await require_group(self.store, parsed_id)
            return await self.store.list_messages(parsed_id)

    async def post_message(self, group_id: Any, message: Any, sender_name: Any = None) -> Message:
        """Post a message to a group.

        Args:
            group_id: Target group identifier.
            message: Message body; must be a non-blank string.
            sender_name: Optional sender; absent or blank becomes "Anonymous".

        Raises:
            GatewayError: INVALID_GROUP_ID, INVALID_MESSAGE, INVALID_SENDER_NAME,
                GROUP_NOT_FOUND or INTERNAL_ERROR.
        """
        parsed_id = parse_group_id(group_id)
        text = require_text(
            message, ErrorCode.INVALID_MESSAGE, "Message is required and cannot be empty"
        )
        sender = optional_text(
            sender_name, ErrorCode.INVALID_SENDER_NAME, "Sender name must be a string"
        )

        async with store_errors_as_internal("post_message"):
            await require_group(self.store, parsed_id)
            created = await self.store.create_message(
                group_id=parsed_id,
                sender_name=sender or ANONYMOUS_SENDER,
                message=text,
                created_at=datetime.now(timezone.utc),
            )
            await self.store.commit()

        logger.info("Message posted", group_id=parsed_id, message_id=created.id)
        return created

    async def delete_message(self, group_id: Any, message_id: Any) -> Message:
        """Delete a single message from a group.

        The message must exist and must belong to ``group_id``; the group
        itself is not looked up.

        Returns:
            The deleted message.

        Raises:
            GatewayError: INVALID_GROUP_ID, INVALID_MESSAGE_ID, MESSAGE_NOT_FOUND,
                MESSAGE_NOT_IN_GROUP, DELETE_FAILED or INTERNAL_ERROR.
        """
        parsed_group_id = parse_group_id(group_id)
        parsed_message_id = parse_identifier(
            message_id, ErrorCode.INVALID_MESSAGE_ID, "Valid message ID is required"
        )

        async with store_errors_as_internal("delete_message"):
            existing = await self.store.get_message(parsed_message_id)
            if existing is None:
                raise GatewayError(ErrorCode.MESSAGE_NOT_FOUND, "Message not found")

            if existing.group_id != parsed_group_id:
                logger.warning(
                    "Message does not belong to group",
                    message_id=parsed_message_id,
                    group_id=parsed_group_id,
                    owning_group_id=existing.group_id,
                )
                raise GatewayError(
                    ErrorCode.MESSAGE_NOT_IN_GROUP, "Message does not belong to this group"
                )

            deleted = await self.store.delete_message(parsed_message_id)
            if deleted is None:
                logger.error("Delete returned no row", message_id=parsed_message_id)
                raise GatewayError(ErrorCode.DELETE_FAILED, "Failed to delete message")
            await self.store.commit()

        logger.info("Message deleted", group_id=parsed_group_id, message_id=parsed_message_id)
        return deleted
