"""Group service for business logic.

Provides group creation, listing and detail retrieval. Validation always
completes before the store is touched.
"""

from datetime import datetime, timezone
from typing import Any

from travel_companion.core.logging import get_logger
from travel_companion.domain.entities import GROUP_STATUS_ACTIVE, Group, GroupDetail
from travel_companion.domain.errors import ErrorCode, GatewayError
from travel_companion.domain.services.request_validation import (
    parse_identifier,
    parse_optional_integer,
    require_text,
)
from travel_companion.domain.services.store import TravelStore, store_errors_as_internal

logger = get_logger(__name__)

INVALID_GROUP_ID_MESSAGE = "Valid group ID is required"


def parse_group_id(raw: Any) -> int:
    """Parse a group identifier from a request path."""
    return parse_identifier(raw, ErrorCode.INVALID_GROUP_ID, INVALID_GROUP_ID_MESSAGE)


async def require_group(store: TravelStore, group_id: int) -> Group:
    """Fetch a group or raise GROUP_NOT_FOUND."""
    group = await store.get_group(group_id)
    if group is None:
        logger.info("Group not found", group_id=group_id)
        raise GatewayError.group_not_found()
    return group


class GroupService:
    """Service for group management."""

    def __init__(self, store: TravelStore) -> None:
        """Initialize the group service.

        Args:
            store: Datastore used for all reads and writes.
        """
        self.store = store

    async def create_group(self, name: Any, trip_id: Any = None) -> Group:
        """Create a new active group.

        Args:
            name: Group name; must be a non-blank string.
            trip_id: Optional trip reference; must be an integer when given.

        Returns:
            The created group, including its generated id.

        Raises:
            GatewayError: MISSING_NAME, INVALID_TRIP_ID or INTERNAL_ERROR.
        """
        group_name = require_text(
            name,
            ErrorCode.MISSING_NAME,
            "Name is required and must be a non-empty string",
        )
        parsed_trip_id = parse_optional_integer(
            trip_id,
            ErrorCode.INVALID_TRIP_ID,
            "Trip ID must be a valid integer",
        )

        now = datetime.now(timezone.utc)
        async with store_errors_as_internal("create_group"):
            group = await self.store.create_group(
                name=group_name,
                # trip ids start at 1; a zero reference means no trip
                trip_id=parsed_trip_id or None,
                status=GROUP_STATUS_ACTIVE,
                created_at=now,
                updated_at=now,
            )
            await self.store.commit()

        logger.info("Group created", group_id=group.id, trip_id=group.trip_id)
        return group

    async def list_groups(self) -> list[GroupDetail]:
        """List every group with its members, in storage order."""
        async with store_errors_as_internal("list_groups"):
            groups = await self.store.list_groups()
            return [
                GroupDetail(group=group, members=await self.store.list_members(group.id))
                for group in groups
            ]

    async def get_group(self, group_id: Any) -> GroupDetail:
        """Get a group with its members and trip.

        A trip reference that no longer resolves is reported as no trip.

        Raises:
            GatewayError: INVALID_GROUP_ID, GROUP_NOT_FOUND or INTERNAL_ERROR.
        """
        parsed_id = parse_group_id(group_id)

        async with store_errors_as_internal("get_group"):
            group = await require_group(self.store, parsed_id)
            members = await self.store.list_members(parsed_id)
            trip = None
            if group.trip_id is not None:
                trip = await self.store.get_trip(group.trip_id)
                if trip is None:
                    logger.debug(
                        "Referenced trip not found", group_id=parsed_id, trip_id=group.trip_id
                    )

        return GroupDetail(group=group, members=members, trip=trip)
