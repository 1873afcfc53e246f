"""Storage contract for the group gateway.

Services never reach a global database handle. They receive a
``TravelStore`` at construction time, which lets the SQL-backed store be
swapped for the in-memory one in tests or lightweight deployments.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Protocol

from travel_companion.core.logging import get_logger
from travel_companion.domain.entities import Group, GroupMember, Message, Trip
from travel_companion.domain.errors import GatewayError

logger = get_logger(__name__)


class StoreError(Exception):
    """Raised by a store when the underlying datastore fails."""


class TravelStore(Protocol):
    """Operations the gateway needs from a datastore.

    Mutations become durable on ``commit``. Lookups return ``None`` when the
    row does not exist.
    """

    async def create_group(
        self,
        *,
        name: str,
        trip_id: int | None,
        status: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Group: ...

    async def list_groups(self) -> list[Group]: ...

    async def get_group(self, group_id: int) -> Group | None: ...

    async def get_trip(self, trip_id: int) -> Trip | None: ...

    async def list_members(self, group_id: int) -> list[GroupMember]: ...

    async def add_member(
        self,
        *,
        group_id: int,
        member_name: str,
        member_email: str | None,
        role: str,
        joined_at: datetime,
    ) -> GroupMember: ...

    async def list_messages(self, group_id: int) -> list[Message]: ...

    async def create_message(
        self,
        *,
        group_id: int,
        sender_name: str,
        message: str,
        created_at: datetime,
    ) -> Message: ...

    async def get_message(self, message_id: int) -> Message | None: ...

    async def delete_message(self, message_id: int) -> Message | None: ...

    async def commit(self) -> None: ...


@asynccontextmanager
async def store_errors_as_internal(operation: str) -> AsyncIterator[None]:
    """Convert ``StoreError`` raised inside the block into an internal gateway error.

    Args:
        operation: Short name of the operation, used for logging.
    """
    try:
        yield
    except StoreError as e:
        logger.error("Store operation failed", operation=operation, error=str(e))
        raise GatewayError.internal(str(e)) from e
