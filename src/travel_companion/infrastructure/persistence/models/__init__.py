"""SQLAlchemy models for the Travel Companion tables.

All models inherit from the Base class defined in database.py and are
automatically created on application startup outside production.
"""

from travel_companion.infrastructure.persistence.models.group import GroupModel
from travel_companion.infrastructure.persistence.models.group_member import GroupMemberModel
from travel_companion.infrastructure.persistence.models.message import MessageModel
from travel_companion.infrastructure.persistence.models.trip import TripModel

__all__ = [
    "GroupMemberModel",
    "GroupModel",
    "MessageModel",
    "TripModel",
]
