"""Domain services for Travel Companion.

Services hold the group gateway's validation and referential rules. They
depend only on the ``TravelStore`` contract, never on a concrete database.
"""

from travel_companion.domain.services.group_service import GroupService
from travel_companion.domain.services.membership_service import MembershipService
from travel_companion.domain.services.message_service import MessageService
from travel_companion.domain.services.store import (
    StoreError,
    TravelStore,
    store_errors_as_internal,
)

__all__ = [
    "GroupService",
    "MembershipService",
    "MessageService",
    "StoreError",
    "TravelStore",
    "store_errors_as_internal",
]
