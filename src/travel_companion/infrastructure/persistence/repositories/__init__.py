"""Persistence repositories for database operations."""

from travel_companion.infrastructure.persistence.repositories.group_member_repository import (
    GroupMemberRepository,
)
from travel_companion.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from travel_companion.infrastructure.persistence.repositories.message_repository import (
    MessageRepository,
)
from travel_companion.infrastructure.persistence.repositories.trip_repository import (
    TripRepository,
)

__all__ = [
    "GroupMemberRepository",
    "GroupRepository",
    "MessageRepository",
    "TripRepository",
]
