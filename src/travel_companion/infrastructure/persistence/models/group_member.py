"""SQLAlchemy model for the group_members table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_companion.infrastructure.persistence.database import Base


class GroupMemberModel(Base):
    """SQLAlchemy model for the group_members table.

    Attributes:
        id: Primary key (autoincrement).
        group_id: Foreign key to groups, cascades on delete.
        member_name: Member display name.
        member_email: Optional member email.
        role: Membership role.
        joined_at: Timestamp when the member joined.
    """

    __tablename__ = "group_members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    member_name: Mapped[str] = mapped_column(String, nullable=False)
    member_email: Mapped[str | None] = mapped_column(String, nullable=True)
    role: Mapped[str] = mapped_column(
        String, nullable=False, default="member", server_default="member"
    )
    joined_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    group: Mapped["GroupModel"] = relationship(  # noqa: F821
        "GroupModel",
        back_populates="members",
    )

    def __repr__(self) -> str:
        return f"<GroupMember(id={self.id}, group_id={self.group_id}, member_name={self.member_name})>"
