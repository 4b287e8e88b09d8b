"""Tests for the participant removal use case."""

from datetime import datetime

import pytest

from app.application.use_cases.users import delete_user
from app.domain.results import DomainError, ErrorKind, Result


@pytest.fixture
def open_room(store, user_factory, room_factory):
    room = room_factory(
        1, [user_factory(1, code="admin-code", is_admin=True), user_factory(2)]
    )
    store.rooms[room.id] = room
    return room


async def _delete(user_repository, room_repository, user_code, user_id):
    return await delete_user(
        user_repository=user_repository,
        room_repository=room_repository,
        user_code=user_code,
        user_id=user_id,
    )


async def test_unknown_admin_code_is_not_found(user_repository, room_repository, open_room):
    result = await _delete(user_repository, room_repository, "invalid-code", 2)

    assert result.is_failure
    assert result.error.kind is ErrorKind.NOT_FOUND
    assert result.error.fields == ["userCode"]
    assert room_repository.updated == []


async def test_admin_lookup_includes_room_but_not_wishes(
    user_repository, room_repository, open_room
):
    await _delete(user_repository, room_repository, "admin-code", 2)

    assert user_repository.calls[0] == ("get_by_code", "admin-code", True, False)
    assert user_repository.calls[1] == ("get_by_id", 2, False, False)


async def test_non_admin_is_forbidden_even_for_missing_target(
    store, user_repository, room_repository, open_room
):
    result = await _delete(user_repository, room_repository, "code-2", 999)

    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.fields == ["userCode"]
    assert "Only admin can delete users" in result.error.message
    assert [call[0] for call in user_repository.calls] == ["get_by_code"]


async def test_unknown_target_is_not_found(user_repository, room_repository, open_room):
    result = await _delete(user_repository, room_repository, "admin-code", 999)

    assert result.error.kind is ErrorKind.NOT_FOUND
    assert result.error.fields == ["id"]


async def test_target_from_another_room_is_forbidden(
    store, user_repository, room_repository, open_room, user_factory, room_factory
):
    other = room_factory(
        2, [user_factory(3, room_id=2, is_admin=True), user_factory(4, room_id=2)]
    )
    store.rooms[other.id] = other

    result = await _delete(user_repository, room_repository, "admin-code", 4)

    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.fields == ["id"]
    assert "belong to different rooms" in result.error.message
    assert len(store.rooms[2].users) == 2


async def test_admin_cannot_delete_himself(user_repository, room_repository, open_room):
    result = await _delete(user_repository, room_repository, "admin-code", 1)

    assert result.error.kind is ErrorKind.BAD_REQUEST
    assert result.error.fields == ["id"]
    assert result.error.message == "Admin cannot delete himself"
    assert room_repository.updated == []


async def test_closed_room_is_left_untouched(store, user_repository, room_repository, open_room):
    open_room.closed_on = datetime(2024, 12, 1)

    result = await _delete(user_repository, room_repository, "admin-code", 2)

    assert result.error.kind is ErrorKind.BAD_REQUEST
    assert result.error.fields == ["room"]
    assert "Cannot delete user from a closed room" in result.error.message
    assert [user.id for user in store.rooms[1].users] == [1, 2]
    assert room_repository.updated == []


async def test_room_lookup_failure_is_passed_through(
    store, user_repository, room_repository, open_room
):
    async def missing_room(code):
        return Result.failure(DomainError.forbidden("room", "Room is locked"))

    room_repository.get_by_user_code = missing_room

    result = await _delete(user_repository, room_repository, "admin-code", 2)

    assert result.error.kind is ErrorKind.FORBIDDEN
    assert result.error.fields == ["room"]
    assert result.error.message == "Room is locked"


async def test_admin_deletes_member(store, user_repository, room_repository, open_room):
    result = await _delete(user_repository, room_repository, "admin-code", 2)

    assert result.is_success
    assert result.value is None
    assert len(room_repository.updated) == 1
    saved = room_repository.updated[0]
    assert [user.id for user in saved.users] == [1]
    assert [user.id for user in store.rooms[1].users] == [1]


async def test_sequential_deletes_remove_both_users(
    store, user_repository, room_repository, open_room, user_factory
):
    store.rooms[1].users.append(user_factory(3))

    first = await _delete(user_repository, room_repository, "admin-code", 2)
    second = await _delete(user_repository, room_repository, "admin-code", 3)

    assert first.is_success and second.is_success
    assert [user.id for user in store.rooms[1].users] == [1]
    assert len(room_repository.updated) == 2


async def test_deleting_twice_is_not_found_the_second_time(
    user_repository, room_repository, open_room
):
    assert (await _delete(user_repository, room_repository, "admin-code", 2)).is_success

    again = await _delete(user_repository, room_repository, "admin-code", 2)

    assert again.error.kind is ErrorKind.NOT_FOUND
    assert again.error.fields == ["id"]


async def test_target_missing_from_loaded_room_still_saves(
    store, user_repository, room_repository, open_room
):
    original = room_repository.get_by_user_code

    async def room_without_target(code):
        result = await original(code)
        result.value.users = [user for user in result.value.users if user.id != 2]
        return result

    room_repository.get_by_user_code = room_without_target

    result = await _delete(user_repository, room_repository, "admin-code", 2)

    assert result.is_success
    assert len(room_repository.updated) == 1


async def test_update_failure_becomes_bad_request(
    store, user_repository, room_repository, open_room
):
    room_repository.update_error = "Database update failed"

    result = await _delete(user_repository, room_repository, "admin-code", 2)

    assert result.error.kind is ErrorKind.BAD_REQUEST
    assert result.error.fields == [""]
    assert result.error.message == "Database update failed"
    assert [user.id for user in store.rooms[1].users] == [1, 2]
