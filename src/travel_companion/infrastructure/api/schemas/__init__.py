"""API Schemas for request/response validation."""

from travel_companion.infrastructure.api.schemas.error_schemas import ErrorResponse
from travel_companion.infrastructure.api.schemas.group_schemas import (
    CamelModel,
    CamelResponse,
    GroupCreate,
    GroupDetailResponse,
    GroupJoinResponse,
    GroupMemberResponse,
    GroupResponse,
    GroupWithMembersResponse,
    MemberCreate,
    MemberInviteResponse,
    TripResponse,
)
from travel_companion.infrastructure.api.schemas.message_schemas import (
    MessageCreate,
    MessageDeleteResponse,
    MessageResponse,
)

__all__ = [
    "CamelModel",
    "CamelResponse",
    "ErrorResponse",
    "GroupCreate",
    "GroupDetailResponse",
    "GroupJoinResponse",
    "GroupMemberResponse",
    "GroupResponse",
    "GroupWithMembersResponse",
    "MemberCreate",
    "MemberInviteResponse",
    "MessageCreate",
    "MessageDeleteResponse",
    "MessageResponse",
    "TripResponse",
]
