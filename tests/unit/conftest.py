"""Pytest configuration for unit tests."""

import pytest

from travel_companion.domain.services import GroupService, MembershipService, MessageService
from travel_companion.infrastructure.persistence.memory_store import InMemoryTravelStore


@pytest.fixture
def group_service(memory_store: InMemoryTravelStore) -> GroupService:
    return GroupService(memory_store)


@pytest.fixture
def membership_service(memory_store: InMemoryTravelStore) -> MembershipService:
    return MembershipService(memory_store)


@pytest.fixture
def message_service(memory_store: InMemoryTravelStore) -> MessageService:
    return MessageService(memory_store)
