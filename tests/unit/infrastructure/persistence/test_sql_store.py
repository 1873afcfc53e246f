"""Tests for SqlAlchemyTravelStore against in-memory SQLite."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import delete, select, text

from travel_companion.domain.services import StoreError
from travel_companion.infrastructure.persistence.models import (
    GroupMemberModel,
    GroupModel,
    MessageModel,
    TripModel,
)
from travel_companion.infrastructure.persistence.sql_store import SqlAlchemyTravelStore

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store(db_session):
    return SqlAlchemyTravelStore(db_session)


async def create_group(store, name="Road Trip", trip_id=None):
    group = await store.create_group(
        name=name, trip_id=trip_id, status="active", created_at=NOW, updated_at=NOW
    )
    await store.commit()
    return group


@pytest.mark.asyncio
async def test_create_and_get_group(store):
    group = await create_group(store)

    fetched = await store.get_group(group.id)

    assert fetched.id == group.id
    assert fetched.name == "Road Trip"
    assert fetched.status == "active"
    assert await store.get_group(group.id + 100) is None


@pytest.mark.asyncio
async def test_unknown_trip_raises_store_error(store):
    with pytest.raises(StoreError):
        await store.create_group(
            name="Alps", trip_id=42, status="active", created_at=NOW, updated_at=NOW
        )

    assert await store.list_groups() == []


@pytest.mark.asyncio
async def test_get_trip(store, trip):
    fetched = await store.get_trip(trip.id)

    assert fetched.source == "Berlin"
    assert fetched.match_radius == 10
    assert fetched.status == "active"


@pytest.mark.asyncio
async def test_members_listed_per_group(store):
    group = await create_group(store)
    other = await create_group(store, "Other")
    await store.add_member(
        group_id=group.id, member_name="Al", member_email="al@example.com",
        role="member", joined_at=NOW,
    )
    await store.add_member(
        group_id=other.id, member_name="Bo", member_email=None, role="member", joined_at=NOW,
    )
    await store.commit()

    members = await store.list_members(group.id)

    assert [m.member_name for m in members] == ["Al"]
    assert members[0].member_email == "al@example.com"


@pytest.mark.asyncio
async def test_messages_ordered_oldest_first(store):
    group = await create_group(store)
    for offset, text in [(10, "third"), (0, "first"), (5, "second")]:
        await store.create_message(
            group_id=group.id, sender_name="Al", message=text,
            created_at=NOW + timedelta(seconds=offset),
        )
    await store.commit()

    messages = await store.list_messages(group.id)

    assert [m.message for m in messages] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_delete_message_returns_row(store):
    group = await create_group(store)
    created = await store.create_message(
        group_id=group.id, sender_name="Al", message="bye", created_at=NOW
    )
    await store.commit()

    deleted = await store.delete_message(created.id)
    await store.commit()

    assert deleted.id == created.id
    assert deleted.message == "bye"
    assert await store.get_message(created.id) is None
    assert await store.delete_message(created.id) is None


@pytest.mark.asyncio
async def test_group_delete_cascades_to_children(store, db_session):
    group = await create_group(store)
    await store.add_member(
        group_id=group.id, member_name="Al", member_email=None, role="member", joined_at=NOW
    )
    await store.create_message(group_id=group.id, sender_name="Al", message="hi", created_at=NOW)
    await store.commit()

    await db_session.execute(delete(GroupModel).where(GroupModel.id == group.id))
    await db_session.commit()

    members = await db_session.execute(
        select(GroupMemberModel).where(GroupMemberModel.group_id == group.id)
    )
    messages = await db_session.execute(
        select(MessageModel).where(MessageModel.group_id == group.id)
    )
    assert members.scalars().all() == []
    assert messages.scalars().all() == []


@pytest.mark.asyncio
async def test_trip_delete_nulls_group_reference(store, db_session, trip):
    group = await create_group(store, trip_id=trip.id)

    await db_session.execute(delete(TripModel).where(TripModel.id == trip.id))
    await db_session.commit()
    db_session.expire_all()

    fetched = await store.get_group(group.id)

    assert fetched is not None
    assert fetched.trip_id is None


@pytest.mark.asyncio
@pytest.mark.parametrize("oversized", [2**63, -(2**63) - 1, 10**22])
async def test_ids_beyond_integer_column_are_not_found(store, oversized):
    group = await create_group(store)

    assert await store.get_group(oversized) is None
    assert await store.get_trip(oversized) is None
    assert await store.get_message(oversized) is None
    assert await store.delete_message(oversized) is None
    assert await store.list_members(oversized) == []
    assert await store.list_messages(oversized) == []
    assert (await store.get_group(group.id)).name == "Road Trip"


@pytest.mark.asyncio
async def test_oversized_trip_id_raises_store_error(store):
    with pytest.raises(StoreError):
        await store.create_group(
            name="Alps", trip_id=10**22, status="active", created_at=NOW, updated_at=NOW
        )


@pytest.mark.asyncio
async def test_timestamps_read_back_as_utc(db_session):
    writer = SqlAlchemyTravelStore(db_session)
    group = await create_group(writer)
    member = await writer.add_member(
        group_id=group.id, member_name="Al", member_email=None, role="member", joined_at=NOW
    )
    posted = await writer.create_message(
        group_id=group.id, sender_name="Al", message="hi", created_at=NOW
    )
    await writer.commit()
    db_session.expunge_all()

    reader = SqlAlchemyTravelStore(db_session)
    fetched = await reader.get_group(group.id)
    [fetched_member] = await reader.list_members(group.id)
    fetched_message = await reader.get_message(posted.id)

    assert fetched.created_at == NOW
    assert fetched.created_at.tzinfo is not None
    assert fetched.updated_at.tzinfo is not None
    assert fetched_member.joined_at == member.joined_at == NOW
    assert fetched_message == posted


@pytest.mark.asyncio
async def test_rows_written_outside_the_orm_get_column_defaults(store, db_session):
    await db_session.execute(
        text(
            "INSERT INTO trips (source, destination, travel_date, travel_time, "
            "transport_mode, optimization_mode) "
            "VALUES ('Berlin', 'Munich', '2026-11-02', '08:30', 'car', 'fastest')"
        )
    )
    await db_session.execute(text("INSERT INTO groups (name) VALUES ('Raw')"))
    await db_session.execute(
        text("INSERT INTO group_members (group_id, member_name) VALUES (1, 'Al')")
    )
    await db_session.commit()

    trip = await store.get_trip(1)
    group = await store.get_group(1)
    [member] = await store.list_members(1)

    assert trip.status == "active"
    assert trip.match_radius == 10
    assert group.status == "active"
    assert group.created_at.tzinfo is not None
    assert member.role == "member"
