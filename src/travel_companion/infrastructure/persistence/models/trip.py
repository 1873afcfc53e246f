"""SQLAlchemy model for the trips table.

Trips are read by the group gateway but written by other parts of the
travel companion application.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_companion.infrastructure.persistence.database import Base


class TripModel(Base):
    """SQLAlchemy model for the trips table.

    Attributes:
        id: Primary key (autoincrement).
        source: Departure location.
        destination: Arrival location.
        source_coordinates: Optional coordinates of the source.
        destination_coordinates: Optional coordinates of the destination.
        travel_date: Travel date as entered.
        travel_time: Travel time as entered.
        transport_mode: Transport mode.
        optimization_mode: Route optimisation preference.
        status: Trip status.
        route_data: Route data supplied by the routing provider.
        route_geometry: Route geometry supplied by the routing provider.
        match_radius: Matching radius in kilometres.
        created_at: Timestamp when the trip was created.
        updated_at: Timestamp when the trip was last updated.
    """

    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    source: Mapped[str] = mapped_column(String, nullable=False)
    destination: Mapped[str] = mapped_column(String, nullable=False)
    source_coordinates: Mapped[str | None] = mapped_column(String, nullable=True)
    destination_coordinates: Mapped[str | None] = mapped_column(String, nullable=True)
    travel_date: Mapped[str] = mapped_column(String, nullable=False)
    travel_time: Mapped[str] = mapped_column(String, nullable=False)
    transport_mode: Mapped[str] = mapped_column(String, nullable=False)
    optimization_mode: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default="active", server_default="active"
    )
    route_data: Mapped[Any] = mapped_column(JSON, nullable=True)
    route_geometry: Mapped[Any] = mapped_column(JSON, nullable=True)
    match_radius: Mapped[int] = mapped_column(
        Integer, nullable=False, default=10, server_default="10"
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
    groups: Mapped[list["GroupModel"]] = relationship(  # noqa: F821
        "GroupModel",
        back_populates="trip",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Trip(id={self.id}, source={self.source}, destination={self.destination})>"
