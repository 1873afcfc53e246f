"""Group message entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

ANONYMOUS_SENDER = "Anonymous"


@dataclass
class Message:
    """A timestamped text entry posted to a group.

    Attributes:
        id: Numeric identifier generated by the store.
        group_id: Owning group.
        sender_name: Free-text sender identity.
        message: Message body, trimmed and non-empty.
        created_at: Timestamp when the message was posted.
    """

    id: int
    group_id: int
    message: str
    sender_name: str = ANONYMOUS_SENDER
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Message text is required")
