"""SQLAlchemy model for the groups table.

A group owns its members and messages; deleting a group removes both.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_companion.infrastructure.persistence.database import Base


class GroupModel(Base):
    """SQLAlchemy model for the groups table.

    Attributes:
        id: Primary key (autoincrement).
        name: Group name.
        trip_id: Optional foreign key to trips, nulled when the trip is deleted.
        status: Group status.
        created_at: Timestamp when the group was created.
        updated_at: Timestamp when the group was last updated.
    """

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    trip_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("trips.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String, nullable=False, default="active", server_default="active"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # Relationships
    trip: Mapped[Optional["TripModel"]] = relationship(  # noqa: F821
        "TripModel",
        back_populates="groups",
    )
    members: Mapped[list["GroupMemberModel"]] = relationship(  # noqa: F821
        "GroupMemberModel",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    messages: Mapped[list["MessageModel"]] = relationship(  # noqa: F821
        "MessageModel",
        back_populates="group",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Group(id={self.id}, name={self.name}, trip_id={self.trip_id})>"
