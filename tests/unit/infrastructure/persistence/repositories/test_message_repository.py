"""Unit tests for MessageRepository."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from travel_companion.infrastructure.persistence.models import MessageModel
from travel_companion.infrastructure.persistence.repositories import MessageRepository


@pytest.fixture
def mock_session():
    """Create a mock database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def message_repository(mock_session):
    return MessageRepository(mock_session)


@pytest.mark.asyncio
async def test_create_message(message_repository, mock_session):
    model = MessageModel(group_id=1, sender_name="Al", message="hi")

    result = await message_repository.create(model)

    assert result is model
    mock_session.add.assert_called_once_with(model)
    mock_session.flush.assert_awaited_once()
    mock_session.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_missing_message(message_repository, mock_session):
    result_proxy = MagicMock()
    result_proxy.scalar_one_or_none.return_value = None
    mock_session.execute.return_value = result_proxy

    assert await message_repository.delete(9) is None
    mock_session.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_existing_message(message_repository, mock_session):
    model = MessageModel(id=3, group_id=1, sender_name="Al", message="hi")
    result_proxy = MagicMock()
    result_proxy.scalar_one_or_none.return_value = model
    mock_session.execute.return_value = result_proxy

    assert await message_repository.delete(3) is model
    mock_session.delete.assert_awaited_once_with(model)
    mock_session.flush.assert_awaited_once()
