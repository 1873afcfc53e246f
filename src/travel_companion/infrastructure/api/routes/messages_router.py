"""Router for group messages."""

from fastapi import APIRouter, status

from travel_companion.infrastructure.api.dependencies import Messages
from travel_companion.infrastructure.api.schemas import (
    ErrorResponse,
    MessageCreate,
    MessageDeleteResponse,
    MessageResponse,
)

router = APIRouter(tags=["Messages"])

_errors = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get(
    "/{group_id}/messages",
    response_model=list[MessageResponse],
    summary="List group messages",
    responses=_errors,
)
async def list_messages(group_id: str, messages: Messages) -> list[MessageResponse]:
    """List a group's messages, oldest first."""
    rows = await messages.list_messages(group_id)
    return [MessageResponse.model_validate(row) for row in rows]


@router.post(
    "/{group_id}/messages",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a message to a group",
    responses=_errors,
)
async def post_message(
    group_id: str,
    message_data: MessageCreate,
    messages: Messages,
) -> MessageResponse:
    """Post a message; a missing or blank sender name is stored as "Anonymous"."""
    created = await messages.post_message(
        group_id, message_data.message, message_data.sender_name
    )
    return MessageResponse.model_validate(created)


@router.delete(
    "/{group_id}/messages/{message_id}",
    response_model=MessageDeleteResponse,
    summary="Delete a group message",
    responses=_errors,
)
async def delete_message(
    group_id: str,
    message_id: str,
    messages: Messages,
) -> MessageDeleteResponse:
    """Delete a message, provided it belongs to the given group."""
    deleted = await messages.delete_message(group_id, message_id)
    return MessageDeleteResponse(deleted_message=MessageResponse.model_validate(deleted))
