"""Group entities.

A group is a named collection of trip participants coordinating together.
It exclusively owns its members and messages.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from travel_companion.domain.entities.group_member import GroupMember
from travel_companion.domain.entities.trip import Trip

GROUP_STATUS_ACTIVE = "active"


@dataclass
class Group:
    """Group entity.

    Attributes:
        id: Numeric identifier generated by the store.
        name: Non-empty group name.
        trip_id: Optional reference to a trip.
        status: Group status, "active" on creation.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
    """

    id: int
    name: str
    trip_id: int | None = None
    status: str = GROUP_STATUS_ACTIVE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        """Validate group data after initialization."""
        if not self.name:
            raise ValueError("Group name is required")


@dataclass
class GroupDetail:
    """A group together with its members and, optionally, its trip."""

    group: Group
    members: list[GroupMember] = field(default_factory=list)
    trip: Trip | None = None

    @property
    def member_count(self) -> int:
        return len(self.members)
