"""FastAPI dependencies wiring the domain services to a TravelStore.

Requests are served by a SQLAlchemy store bound to the request's database
session. With the memory storage backend, ``create_app`` overrides
``get_travel_store`` with one process-wide in-memory store, so no database
session is opened.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.domain.services import (
    GroupService,
    MembershipService,
    MessageService,
    TravelStore,
)
from travel_companion.infrastructure.persistence.database import get_db_session
from travel_companion.infrastructure.persistence.sql_store import SqlAlchemyTravelStore


def get_travel_store(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> TravelStore:
    """Return the store serving this request."""
    return SqlAlchemyTravelStore(session)


Store = Annotated[TravelStore, Depends(get_travel_store)]


def get_group_service(store: Store) -> GroupService:
    return GroupService(store)


def get_membership_service(store: Store) -> MembershipService:
    return MembershipService(store)


def get_message_service(store: Store) -> MessageService:
    return MessageService(store)


# Type aliases for cleaner route signatures
Groups = Annotated[GroupService, Depends(get_group_service)]
Memberships = Annotated[MembershipService, Depends(get_membership_service)]
Messages = Annotated[MessageService, Depends(get_message_service)]
