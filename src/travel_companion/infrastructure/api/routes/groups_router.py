"""Router for groups and group membership.

Path identifiers are accepted as raw strings; the services parse them so
malformed ids are reported with the gateway's own error codes.
"""

from fastapi import APIRouter, status

from travel_companion.infrastructure.api.dependencies import Groups, Memberships
from travel_companion.infrastructure.api.schemas import (
    ErrorResponse,
    GroupCreate,
    GroupDetailResponse,
    GroupJoinResponse,
    GroupMemberResponse,
    GroupResponse,
    GroupWithMembersResponse,
    MemberCreate,
    MemberInviteResponse,
)

router = APIRouter(tags=["Groups"])

_errors = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
    responses=_errors,
)
async def create_group(group_data: GroupCreate, groups: Groups) -> GroupResponse:
    """Create a group, optionally linked to a trip."""
    group = await groups.create_group(group_data.name, group_data.trip_id)
    return GroupResponse.model_validate(group)


@router.get(
    "",
    response_model=list[GroupWithMembersResponse],
    summary="List groups",
    responses=_errors,
)
async def list_groups(groups: Groups) -> list[GroupWithMembersResponse]:
    """List every group with its members and member count."""
    details = await groups.list_groups()
    return [GroupWithMembersResponse.from_detail(detail) for detail in details]


@router.get(
    "/{group_id}",
    response_model=GroupDetailResponse,
    summary="Get a group",
    responses=_errors,
)
async def get_group(group_id: str, groups: Groups) -> GroupDetailResponse:
    """Get a group with its members and, when it exists, its trip."""
    detail = await groups.get_group(group_id)
    return GroupDetailResponse.from_detail(detail)


@router.post(
    "/{group_id}/invite",
    response_model=MemberInviteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Invite a member to a group",
    responses=_errors,
)
async def invite_member(
    group_id: str,
    member_data: MemberCreate,
    memberships: Memberships,
) -> MemberInviteResponse:
    member = await memberships.invite_member(
        group_id, member_data.member_name, member_data.member_email
    )
    return MemberInviteResponse(member=GroupMemberResponse.model_validate(member))


@router.post(
    "/{group_id}/join",
    response_model=GroupJoinResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join a group",
    responses=_errors,
)
async def join_group(
    group_id: str,
    member_data: MemberCreate,
    memberships: Memberships,
) -> GroupJoinResponse:
    member = await memberships.join_group(
        group_id, member_data.member_name, member_data.member_email
    )
    return GroupJoinResponse(membership=GroupMemberResponse.model_validate(member))
