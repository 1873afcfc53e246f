"""Unit tests for MessageService."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from travel_companion.domain.entities import Message
from travel_companion.domain.errors import ErrorCode, GatewayError
from travel_companion.domain.services import MessageService


@pytest_asyncio.fixture
async def group(group_service):
    return await group_service.create_group("Road Trip")


@pytest.mark.asyncio
async def test_post_message(message_service, group):
    """Test posting a message with a sender."""
    message = await message_service.post_message(str(group.id), " hi ", " Al ")

    assert message.group_id == group.id
    assert message.message == "hi"
    assert message.sender_name == "Al"


@pytest.mark.asyncio
@pytest.mark.parametrize("sender", [None, "", "   "])
async def test_post_message_anonymous(message_service, group, sender):
    message = await message_service.post_message(group.id, "hello", sender)

    assert message.sender_name == "Anonymous"


@pytest.mark.asyncio
@pytest.mark.parametrize("text", [None, "", "   ", 5])
async def test_post_message_invalid_text(message_service, memory_store, group, text):
    with pytest.raises(GatewayError) as exc:
        await message_service.post_message(group.id, text)

    assert exc.value.code is ErrorCode.INVALID_MESSAGE
    assert await memory_store.list_messages(group.id) == []


@pytest.mark.asyncio
async def test_post_message_invalid_sender(message_service, group):
    with pytest.raises(GatewayError) as exc:
        await message_service.post_message(group.id, "hello", ["Al"])

    assert exc.value.code is ErrorCode.INVALID_SENDER_NAME


@pytest.mark.asyncio
async def test_post_message_group_id_checked_first(message_service):
    with pytest.raises(GatewayError) as exc:
        await message_service.post_message("x", "")

    assert exc.value.code is ErrorCode.INVALID_GROUP_ID


@pytest.mark.asyncio
async def test_post_message_missing_group(message_service):
    with pytest.raises(GatewayError) as exc:
        await message_service.post_message("999", "hello")

    assert exc.value.code is ErrorCode.GROUP_NOT_FOUND


@pytest.mark.asyncio
async def test_list_messages_in_posting_order(message_service, group):
    for text in ("first", "second", "third"):
        await message_service.post_message(group.id, text)

    messages = await message_service.list_messages(str(group.id))

    assert [m.message for m in messages] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_list_messages_missing_group(message_service):
    with pytest.raises(GatewayError) as exc:
        await message_service.list_messages("404")

    assert exc.value.code is ErrorCode.GROUP_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_message(message_service, memory_store, group):
    posted = await message_service.post_message(group.id, "bye", "Al")

    deleted = await message_service.delete_message(str(group.id), str(posted.id))

    assert deleted == posted
    assert await memory_store.get_message(posted.id) is None


@pytest.mark.asyncio
async def test_delete_message_twice(message_service, group):
    posted = await message_service.post_message(group.id, "bye")
    await message_service.delete_message(group.id, posted.id)

    with pytest.raises(GatewayError) as exc:
        await message_service.delete_message(group.id, posted.id)

    assert exc.value.code is ErrorCode.MESSAGE_NOT_FOUND
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_delete_message_from_other_group(message_service, group_service, memory_store, group):
    other = await group_service.create_group("Other")
    posted = await message_service.post_message(group.id, "keep me")

    with pytest.raises(GatewayError) as exc:
        await message_service.delete_message(other.id, posted.id)

    assert exc.value.code is ErrorCode.MESSAGE_NOT_IN_GROUP
    assert exc.value.status_code == 400
    assert await memory_store.get_message(posted.id) == posted


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "group_id,message_id,code",
    [
        ("abc", "1", ErrorCode.INVALID_GROUP_ID),
        ("1", "abc", ErrorCode.INVALID_MESSAGE_ID),
        ("abc", "abc", ErrorCode.INVALID_GROUP_ID),
    ],
)
async def test_delete_message_invalid_ids(message_service, group_id, message_id, code):
    with pytest.raises(GatewayError) as exc:
        await message_service.delete_message(group_id, message_id)

    assert exc.value.code is code


@pytest.mark.asyncio
async def test_delete_failed_when_store_deletes_nothing():
    existing = Message(id=5, group_id=1, message="hi")
    store = AsyncMock()
    store.get_message.return_value = existing
    store.delete_message.return_value = None
    service = MessageService(store)

    with pytest.raises(GatewayError) as exc:
        await service.delete_message("1", "5")

    assert exc.value.code is ErrorCode.DELETE_FAILED
    assert exc.value.status_code == 500
    store.commit.assert_not_called()
