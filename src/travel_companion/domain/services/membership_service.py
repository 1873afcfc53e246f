"""Membership service.

Invite and join are two entry points onto one operation: both create a
plain "member" row and neither records who initiated it.
"""

from datetime import datetime, timezone
from typing import Any

from travel_companion.core.logging import get_logger
from travel_companion.domain.entities import MEMBER_ROLE, GroupMember
from travel_companion.domain.errors import ErrorCode
from travel_companion.domain.services.group_service import parse_group_id, require_group
from travel_companion.domain.services.request_validation import optional_text, require_text
from travel_companion.domain.services.store import TravelStore, store_errors_as_internal

logger = get_logger(__name__)


class MembershipService:
    """Service for adding members to groups."""

    def __init__(self, store: TravelStore) -> None:
        self.store = store

    async def invite_member(
        self, group_id: Any, member_name: Any, member_email: Any = None
    ) -> GroupMember:
        """Add a member on someone else's behalf."""
        return await self._add_member(group_id, member_name, member_email, via="invite")

    async def join_group(
        self, group_id: Any, member_name: Any, member_email: Any = None
    ) -> GroupMember:
        """Add the caller as a member."""
        return await self._add_member(group_id, member_name, member_email, via="join")

    async def _add_member(
        self, group_id: Any, member_name: Any, member_email: Any, via: str
    ) -> GroupMember:
        """Validate the request and insert a membership row.

        Checks run in a fixed order: member name, group id, member email,
        group existence. No row is written unless all of them pass.

        Raises:
            GatewayError: MISSING_MEMBER_NAME, INVALID_GROUP_ID,
                INVALID_MEMBER_EMAIL, GROUP_NOT_FOUND or INTERNAL_ERROR.
        """
        name = require_text(member_name, ErrorCode.MISSING_MEMBER_NAME, "Member name is required")
        parsed_id = parse_group_id(group_id)
        email = optional_text(
            member_email, ErrorCode.INVALID_MEMBER_EMAIL, "Member email must be a string"
        )

        async with store_errors_as_internal(via):
            await require_group(self.store, parsed_id)
            member = await self.store.add_member(
                group_id=parsed_id,
                member_name=name,
                member_email=email,
                role=MEMBER_ROLE,
                joined_at=datetime.now(timezone.utc),
            )
            await self.store.commit()

        logger.info("Member added to group", group_id=parsed_id, member_id=member.id, via=via)
        return member
