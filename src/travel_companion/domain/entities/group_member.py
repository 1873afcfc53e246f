"""Group member entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

MEMBER_ROLE = "member"


@dataclass
class GroupMember:
    """A named participant attached to exactly one group.

    Members are created once and never updated. Invited and self-joined
    members are indistinguishable: both carry the plain "member" role.

    Attributes:
        id: Numeric identifier generated by the store.
        group_id: Owning group.
        member_name: Display name, trimmed and non-empty.
        member_email: Optional contact email.
        role: Membership role.
        joined_at: Timestamp when the member was added.
    """

    id: int
    group_id: int
    member_name: str
    member_email: str | None = None
    role: str = MEMBER_ROLE
    joined_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if not self.member_name:
            raise ValueError("Member name is required")
