"""SQLAlchemy model for the messages table."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_companion.infrastructure.persistence.database import Base


class MessageModel(Base):
    """SQLAlchemy model for the messages table.

    Attributes:
        id: Primary key (autoincrement).
        group_id: Foreign key to groups, cascades on delete.
        sender_name: Free-text sender identity.
        message: Message body.
        created_at: Timestamp when the message was posted.
    """

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    group_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
    )
    sender_name: Mapped[str] = mapped_column(String, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    group: Mapped["GroupModel"] = relationship(  # noqa: F821
        "GroupModel",
        back_populates="messages",
    )

    __table_args__ = (
        # Listing reads a group's messages in posting order
        Index("ix_messages_group_created", "group_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, group_id={self.group_id}, sender_name={self.sender_name})>"
