"""Trip entity.

Trips are owned by the wider travel companion application; the group
gateway only reads them to enrich group details.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Trip:
    """A planned journey that a group may be organised around.

    Attributes:
        id: Numeric identifier.
        source: Departure location.
        destination: Arrival location.
        source_coordinates: Optional "lat,lng" string for the source.
        destination_coordinates: Optional "lat,lng" string for the destination.
        travel_date: Date of travel as entered by the user.
        travel_time: Time of travel as entered by the user.
        transport_mode: Transport mode (e.g. "car", "train").
        optimization_mode: Route optimisation preference.
        status: Trip status, "active" by default.
        route_data: Externally supplied route data (JSON).
        route_geometry: Externally supplied route geometry (JSON).
        match_radius: Radius in kilometres used when matching trips.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int
    source: str
    destination: str
    travel_date: str
    travel_time: str
    transport_mode: str
    optimization_mode: str
    source_coordinates: str | None = None
    destination_coordinates: str | None = None
    status: str = "active"
    route_data: Any = None
    route_geometry: Any = None
    match_radius: int = 10
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)
