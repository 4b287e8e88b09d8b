"""In-memory repositories and entity factories for use case tests."""

from __future__ import annotations

import copy
from datetime import date, datetime

import pytest

from app.domain.entities import Room, User
from app.domain.results import DomainError, Result


class FakeStore:
    """Rooms shared by the fake repositories, keyed by room id."""

    def __init__(self, rooms: list[Room] | None = None) -> None:
        self.rooms = {room.id: room for room in rooms or []}

    def iter_users(self):
        for room in self.rooms.values():
            yield from room.users


class FakeUserRepository:
    def __init__(self, store: FakeStore) -> None:
        self.store = store
        self.calls: list[tuple] = []
        self.added: list[User] = []

    async def get_by_code(self, code, *, include_room=False, include_wishes=False):
        self.calls.append(("get_by_code", code, include_room, include_wishes))
        user = next((u for u in self.store.iter_users() if u.authorization_code == code), None)
        if user is None:
            return Result.failure(
                DomainError.not_found("userCode", "User with such code not found")
            )
        return Result.success(copy.deepcopy(user))

    async def get_by_id(self, user_id, *, include_room=False, include_wishes=False):
        self.calls.append(("get_by_id", user_id, include_room, include_wishes))
        user = next((u for u in self.store.iter_users() if u.id == user_id), None)
        if user is None:
            return Result.failure(DomainError.not_found("id", "User with such id not found"))
        return Result.success(copy.deepcopy(user))

    async def list_by_room_id(self, room_id, *, include_wishes=False):
        room = self.store.rooms.get(room_id)
        return copy.deepcopy(room.users) if room else []

    async def add(self, user):
        stored = copy.deepcopy(user)
        stored.id = max((u.id for u in self.store.iter_users()), default=0) + 1
        self.store.rooms[user.room_id].users.append(stored)
        self.added.append(stored)
        return Result.success(copy.deepcopy(stored))


class FakeRoomRepository:
    def __init__(self, store: FakeStore, *, update_error: str | None = None) -> None:
        self.store = store
        self.update_error = update_error
        self.updated: list[Room] = []

    async def get_by_user_code(self, code):
        for room in self.store.rooms.values():
            if any(user.authorization_code == code for user in room.users):
                return Result.success(copy.deepcopy(room))
        return Result.failure(
            DomainError.not_found("userCode", "Room with such user code not found")
        )

    async def get_by_invitation_code(self, code):
        for room in self.store.rooms.values():
            if room.invitation_code == code:
                return Result.success(copy.deepcopy(room))
        return Result.failure(
            DomainError.not_found("roomCode", "Room with such invitation code not found")
        )

    async def add(self, room):
        stored = copy.deepcopy(room)
        stored.id = max(self.store.rooms, default=0) + 1
        next_user_id = max((u.id for u in self.store.iter_users()), default=0) + 1
        for offset, user in enumerate(stored.users):
            user.id = next_user_id + offset
            user.room_id = stored.id
        stored.admin_id = stored.admin.id
        self.store.rooms[stored.id] = stored
        return Result.success(copy.deepcopy(stored))

    async def update(self, room):
        self.updated.append(copy.deepcopy(room))
        if self.update_error is not None:
            return Result.failure(self.update_error)
        self.store.rooms[room.id] = copy.deepcopy(room)
        return Result.success(None)


def build_user(
    user_id: int,
    *,
    room_id: int = 1,
    code: str | None = None,
    is_admin: bool = False,
) -> User:
    return User(
        id=user_id,
        room_id=room_id,
        authorization_code=code or f"code-{user_id}",
        is_admin=is_admin,
        first_name=f"User{user_id}",
        last_name="Test",
        phone="+380123456789",
        email=f"user{user_id}@test.com",
        delivery_info="Test address",
        want_surprise=True,
        interests="Testing",
        gift_recipient_user_id=None,
        created_on=datetime(2024, 1, 1),
        modified_on=datetime(2024, 1, 1),
    )


def build_room(
    room_id: int,
    users: list[User],
    *,
    closed_on: datetime | None = None,
    invitation_code: str | None = None,
) -> Room:
    admin = next((user for user in users if user.is_admin), None)
    return Room(
        id=room_id,
        name=f"Room {room_id}",
        description="Test room",
        invitation_code=invitation_code or f"invite-{room_id}",
        gift_exchange_date=date(2030, 12, 24),
        gift_maximum_budget=1000,
        admin_id=admin.id if admin else None,
        closed_on=closed_on,
        created_on=datetime(2024, 1, 1),
        modified_on=datetime(2024, 1, 1),
        users=users,
    )


@pytest.fixture
def user_factory():
    return build_user


@pytest.fixture
def room_factory():
    return build_room


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def user_repository(store: FakeStore) -> FakeUserRepository:
    return FakeUserRepository(store)


@pytest.fixture
def room_repository(store: FakeStore) -> FakeRoomRepository:
    return FakeRoomRepository(store)
