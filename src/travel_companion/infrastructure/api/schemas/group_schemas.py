"""Pydantic schemas for group and membership operations.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from travel_companion.domain.entities import GroupDetail


class CamelModel(BaseModel):
    """Base schema serialising field names in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CamelResponse(CamelModel):
    """Base response schema, built from domain entities."""

    model_config = ConfigDict(from_attributes=True)


class GroupCreate(CamelModel):
    """Request body for creating a group.

    Fields are left untyped; the group service validates them so each
    problem is reported with its own error code.
    """

    name: Any = Field(None, description="Group name")
    trip_id: Any = Field(None, description="Optional trip ID")


class MemberCreate(CamelModel):
    """Request body for inviting or joining a member."""

    member_name: Any = Field(None, description="Member display name")
    member_email: Any = Field(None, description="Optional member email")


class TripResponse(CamelResponse):
    """Schema for a trip attached to a group."""

    id: int
    source: str
    destination: str
    source_coordinates: str | None = None
    destination_coordinates: str | None = None
    travel_date: str
    travel_time: str
    transport_mode: str
    optimization_mode: str
    status: str
    route_data: Any = None
    route_geometry: Any = None
    match_radius: int
    created_at: datetime
    updated_at: datetime


class GroupResponse(CamelResponse):
    """Schema for group response."""

    id: int = Field(..., description="Group ID")
    name: str = Field(..., description="Group name")
    trip_id: int | None = Field(None, description="Referenced trip ID")
    status: str = Field(..., description="Group status")
    created_at: datetime
    updated_at: datetime


class GroupMemberResponse(CamelResponse):
    """Schema for a group member."""

    id: int
    group_id: int
    member_name: str
    member_email: str | None = None
    role: str
    joined_at: datetime


class GroupWithMembersResponse(GroupResponse):
    """Schema for a group in the listing, with its members."""

    member_count: int = Field(0, description="Number of members in the group")
    members: list[GroupMemberResponse] = Field(default_factory=list)

    @classmethod
    def from_detail(cls, detail: GroupDetail) -> "GroupWithMembersResponse":
        return cls.model_validate(
            {
                **GroupResponse.model_validate(detail.group).model_dump(),
                "member_count": detail.member_count,
                "members": [GroupMemberResponse.model_validate(m) for m in detail.members],
            }
        )


class GroupDetailResponse(GroupWithMembersResponse):
    """Schema for a single group with members and trip."""

    trip: TripResponse | None = Field(None, description="Referenced trip, if it exists")

    @classmethod
    def from_detail(cls, detail: GroupDetail) -> "GroupDetailResponse":
        return cls.model_validate(
            {
                **GroupWithMembersResponse.from_detail(detail).model_dump(),
                "trip": TripResponse.model_validate(detail.trip) if detail.trip else None,
            }
        )


class MemberInviteResponse(CamelResponse):
    """Response for an invite."""

    message: str = "Member invited successfully"
    member: GroupMemberResponse


class GroupJoinResponse(CamelResponse):
    """Response for a join."""

    message: str = "Successfully joined the group"
    membership: GroupMemberResponse
