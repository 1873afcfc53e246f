"""In-memory implementation of the TravelStore contract.

Keeps rows in dictionaries keyed by generated ids. Used by the unit tests
and by deployments configured with ``storage_backend = "memory"``. Data
lives for the lifetime of the process only.
"""

import itertools
from dataclasses import replace
from datetime import datetime

from travel_companion.domain.entities import Group, GroupMember, Message, Trip
from travel_companion.domain.services.store import StoreError


class InMemoryTravelStore:
    """TravelStore keeping all rows in process memory.

    Writes are visible immediately; ``commit`` is a no-op. Returned
    entities are copies, so callers cannot mutate stored rows.
    """

    def __init__(self) -> None:
        self._groups: dict[int, Group] = {}
        self._members: dict[int, GroupMember] = {}
        self._messages: dict[int, Message] = {}
        self._trips: dict[int, Trip] = {}
        self._group_ids = itertools.count(1)
        self._member_ids = itertools.count(1)
        self._message_ids = itertools.count(1)

    def add_trip(self, trip: Trip) -> Trip:
        """Seed a trip; trips are not created through the gateway."""
        self._trips[trip.id] = replace(trip)
        return trip

    def delete_group(self, group_id: int) -> None:
        """Remove a group together with its members and messages."""
        self._groups.pop(group_id, None)
        self._members = {k: m for k, m in self._members.items() if m.group_id != group_id}
        self._messages = {k: m for k, m in self._messages.items() if m.group_id != group_id}

    def _require_group(self, group_id: int) -> None:
        if group_id not in self._groups:
            raise StoreError("FOREIGN KEY constraint failed: groups.id")

    async def create_group(
        self,
        *,
        name: str,
        trip_id: int | None,
        status: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Group:
        if trip_id is not None and trip_id not in self._trips:
            raise StoreError("FOREIGN KEY constraint failed: trips.id")
        group = Group(
            id=next(self._group_ids),
            name=name,
            trip_id=trip_id,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
        self._groups[group.id] = group
        return replace(group)

    async def list_groups(self) -> list[Group]:
        return [replace(group) for group in self._groups.values()]

    async def get_group(self, group_id: int) -> Group | None:
        group = self._groups.get(group_id)
        return replace(group) if group is not None else None

    async def get_trip(self, trip_id: int) -> Trip | None:
        trip = self._trips.get(trip_id)
        return replace(trip) if trip is not None else None

    async def list_members(self, group_id: int) -> list[GroupMember]:
        return [replace(m) for m in self._members.values() if m.group_id == group_id]

    async def add_member(
        self,
        *,
        group_id: int,
        member_name: str,
        member_email: str | None,
        role: str,
        joined_at: datetime,
    ) -> GroupMember:
        self._require_group(group_id)
        member = GroupMember(
            id=next(self._member_ids),
            group_id=group_id,
            member_name=member_name,
            member_email=member_email,
            role=role,
            joined_at=joined_at,
        )
        self._members[member.id] = member
        return replace(member)

    async def list_messages(self, group_id: int) -> list[Message]:
        messages = [m for m in self._messages.values() if m.group_id == group_id]
        messages.sort(key=lambda m: (m.created_at, m.id))
        return [replace(m) for m in messages]

    async def create_message(
        self,
        *,
        group_id: int,
        sender_name: str,
        message: str,
        created_at: datetime,
    ) -> Message:
        self._require_group(group_id)
        created = Message(
            id=next(self._message_ids),
            group_id=group_id,
            sender_name=sender_name,
            message=message,
            created_at=created_at,
        )
        self._messages[created.id] = created
        return replace(created)

    async def get_message(self, message_id: int) -> Message | None:
        message = self._messages.get(message_id)
        return replace(message) if message is not None else None

    async def delete_message(self, message_id: int) -> Message | None:
        return self._messages.pop(message_id, None)

    async def commit(self) -> None:
        return None
