"""SQLAlchemy-backed implementation of the TravelStore contract.

Wraps the repositories around one request-scoped ``AsyncSession`` and maps
ORM models to domain entities. Database failures are rolled back and
re-raised as ``StoreError``.
"""

import functools
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.core.logging import get_logger
from travel_companion.domain.entities import Group, GroupMember, Message, Trip
from travel_companion.domain.services.store import StoreError
from travel_companion.infrastructure.persistence.models import (
    GroupMemberModel,
    GroupModel,
    MessageModel,
    TripModel,
)
from travel_companion.infrastructure.persistence.repositories import (
    GroupMemberRepository,
    GroupRepository,
    MessageRepository,
    TripRepository,
)

logger = get_logger(__name__)

T = TypeVar("T")

# SQLite and PostgreSQL integer keys are signed 64-bit
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable_id(value: int) -> bool:
    """Check whether an id fits the database's integer key column."""
    return _MIN_ID <= value <= _MAX_ID


def _as_utc(value: datetime) -> datetime:
    """Attach UTC to a timestamp read back without timezone info.

    SQLite does not keep the offset of ``DateTime(timezone=True)`` columns,
    so rows loaded from the database come back naive.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _translate_errors(
    method: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Roll back and raise StoreError when a database call fails."""

    @functools.wraps(method)
    async def wrapper(self: "SqlAlchemyTravelStore", *args: Any, **kwargs: Any) -> T:
        try:
            return await method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error("Database operation failed", operation=method.__name__, error=str(e))
            await self.session.rollback()
            raise StoreError(str(e)) from e

    return wrapper


def trip_from_model(model: TripModel) -> Trip:
    return Trip(
        id=model.id,
        source=model.source,
        destination=model.destination,
        source_coordinates=model.source_coordinates,
        destination_coordinates=model.destination_coordinates,
        travel_date=model.travel_date,
        travel_time=model.travel_time,
        transport_mode=model.transport_mode,
        optimization_mode=model.optimization_mode,
        status=model.status,
        route_data=model.route_data,
        route_geometry=model.route_geometry,
        match_radius=model.match_radius,
        created_at=_as_utc(model.created_at),
        updated_at=_as_utc(model.updated_at),
    )


def group_from_model(model: GroupModel) -> Group:
    return Group(
        id=model.id,
        name=model.name,
        trip_id=model.trip_id,
        status=model.status,
        created_at=_as_utc(model.created_at),
        updated_at=_as_utc(model.updated_at),
    )


def member_from_model(model: GroupMemberModel) -> GroupMember:
    return GroupMember(
        id=model.id,
        group_id=model.group_id,
        member_name=model.member_name,
        member_email=model.member_email,
        role=model.role,
        joined_at=_as_utc(model.joined_at),
    )


def message_from_model(model: MessageModel) -> Message:
    return Message(
        id=model.id,
        group_id=model.group_id,
        sender_name=model.sender_name,
        message=model.message,
        created_at=_as_utc(model.created_at),
    )


class SqlAlchemyTravelStore:
    """TravelStore backed by a SQLAlchemy async session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the store.

        Args:
            session: SQLAlchemy async session, owned by the caller.
        """
        self.session = session
        self.groups = GroupRepository(session)
        self.members = GroupMemberRepository(session)
        self.messages = MessageRepository(session)
        self.trips = TripRepository(session)

    @_translate_errors
    async def create_group(
        self,
        *,
        name: str,
        trip_id: int | None,
        status: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Group:
        if trip_id is not None and not _storable_id(trip_id):
            raise StoreError(f"Trip id {trip_id} is out of range")
        model = await self.groups.create(
            GroupModel(
                name=name,
                trip_id=trip_id,
                status=status,
                created_at=created_at,
                updated_at=updated_at,
            )
        )
        return group_from_model(model)

    @_translate_errors
    async def list_groups(self) -> list[Group]:
        return [group_from_model(model) for model in await self.groups.list_all()]

    @_translate_errors
    async def get_group(self, group_id: int) -> Group | None:
        if not _storable_id(group_id):
            return None
        model = await self.groups.get_by_id(group_id)
        return group_from_model(model) if model is not None else None

    @_translate_errors
    async def get_trip(self, trip_id: int) -> Trip | None:
        if not _storable_id(trip_id):
            return None
        model = await self.trips.get_by_id(trip_id)
        return trip_from_model(model) if model is not None else None

    @_translate_errors
    async def list_members(self, group_id: int) -> list[GroupMember]:
        if not _storable_id(group_id):
            return []
        return [member_from_model(model) for model in await self.members.list_by_group(group_id)]

    @_translate_errors
    async def add_member(
        self,
        *,
        group_id: int,
        member_name: str,
        member_email: str | None,
        role: str,
        joined_at: datetime,
    ) -> GroupMember:
        model = await self.members.create(
            GroupMemberModel(
                group_id=group_id,
                member_name=member_name,
                member_email=member_email,
                role=role,
                joined_at=joined_at,
            )
        )
        return member_from_model(model)

    @_translate_errors
    async def list_messages(self, group_id: int) -> list[Message]:
        if not _storable_id(group_id):
            return []
        return [message_from_model(model) for model in await self.messages.list_by_group(group_id)]

    @_translate_errors
    async def create_message(
        self,
        *,
        group_id: int,
        sender_name: str,
        message: str,
        created_at: datetime,
    ) -> Message:
        model = await self.messages.create(
            MessageModel(
                group_id=group_id,
                sender_name=sender_name,
                message=message,
                created_at=created_at,
            )
        )
        return message_from_model(model)

    @_translate_errors
    async def get_message(self, message_id: int) -> Message | None:
        if not _storable_id(message_id):
            return None
        model = await self.messages.get_by_id(message_id)
        return message_from_model(model) if model is not None else None

    @_translate_errors
    async def delete_message(self, message_id: int) -> Message | None:
        if not _storable_id(message_id):
            return None
        model = await self.messages.delete(message_id)
        return message_from_model(model) if model is not None else None

    @_translate_errors
    async def commit(self) -> None:
        await self.session.commit()
