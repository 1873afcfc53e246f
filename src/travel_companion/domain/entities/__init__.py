"""Domain entities for Travel Companion.

Entities are pure Python dataclasses that represent core business concepts.
They have no dependencies on infrastructure or external frameworks.
"""

from travel_companion.domain.entities.group import GROUP_STATUS_ACTIVE, Group, GroupDetail
from travel_companion.domain.entities.group_member import MEMBER_ROLE, GroupMember
from travel_companion.domain.entities.message import ANONYMOUS_SENDER, Message
from travel_companion.domain.entities.trip import Trip

__all__ = [
    "ANONYMOUS_SENDER",
    "GROUP_STATUS_ACTIVE",
    "MEMBER_ROLE",
    "Group",
    "GroupDetail",
    "GroupMember",
    "Message",
    "Trip",
]
