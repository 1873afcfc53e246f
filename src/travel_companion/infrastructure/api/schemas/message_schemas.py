"""Pydantic schemas for group messages."""

from datetime import datetime
from typing import Any

from pydantic import Field

from travel_companion.infrastructure.api.schemas.group_schemas import CamelModel, CamelResponse


class MessageCreate(CamelModel):
    """Request body for posting a message."""

    message: Any = Field(None, description="Message text")
    sender_name: Any = Field(None, description="Optional sender name")


class MessageResponse(CamelResponse):
    """Schema for a group message."""

    id: int
    group_id: int
    sender_name: str
    message: str
    created_at: datetime


class MessageDeleteResponse(CamelResponse):
    """Response for a deleted message."""

    message: str = "Message deleted successfully"
    deleted_message: MessageResponse
