"""Persistence layer for the room aggregate."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domain.entities import Room
from app.domain.results import DomainError, Result
from app.infrastructure.models import RoomModel, UserModel

from .user_repository import apply_user_to_model, user_to_entity, wish_to_model

logger = logging.getLogger(__name__)


def _roster_options():
    return selectinload(RoomModel.users).selectinload(UserModel.wishes)


class RoomRepository:
    """Load and persist rooms together with their participants."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_user_code(self, code: str) -> Result[Room, DomainError]:
        query = (
            select(RoomModel)
            .join(UserModel, UserModel.room_id == RoomModel.id)
            .where(UserModel.authorization_code == code)
            .options(_roster_options())
            .execution_options(populate_existing=True)
        )
        model = (await self.session.scalars(query)).first()
        if model is None:
            return Result.failure(
                DomainError.not_found("userCode", "Room with such user code not found")
            )
        return Result.success(self._to_entity(model))

    async def get_by_invitation_code(self, code: str) -> Result[Room, DomainError]:
        query = (
            select(RoomModel)
            .where(RoomModel.invitation_code == code)
            .options(_roster_options())
            .execution_options(populate_existing=True)
        )
        model = (await self.session.scalars(query)).first()
        if model is None:
            return Result.failure(
                DomainError.not_found("roomCode", "Room with such invitation code not found")
            )
        return Result.success(self._to_entity(model))

    async def add(self, room: Room) -> Result[Room, str]:
        """Insert ``room`` with its initial roster and link the admin."""

        model = RoomModel()
        self._apply_entity_to_model(model, room)
        for user in room.users:
            user_model = UserModel()
            apply_user_to_model(user_model, user)
            user_model.wishes = [wish_to_model(wish) for wish in user.wishes]
            model.users.append(user_model)
        self.session.add(model)
        try:
            await self.session.flush()
            admin_model = next((user for user in model.users if user.is_admin), None)
            model.admin_id = admin_model.id if admin_model is not None else None
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to create room '%s'", room.name)
            return Result.failure("Failed to create the room")
        return Result.success(self._to_entity(model))

    async def update(self, room: Room) -> Result[None, str]:
        """Persist ``room``, deleting only the participants removed from it.

        Participants that joined after ``room`` was loaded are left untouched.
        """

        model = await self.session.get(
            RoomModel, room.id, options=[_roster_options()], populate_existing=True
        )
        if model is None:
            return Result.failure(f"Room with id {room.id} not found")

        self._apply_entity_to_model(model, room)
        loaded = {user.id: user for user in room.users}
        for user_model in list(model.users):
            if user_model.id in room.removed_user_ids:
                model.users.remove(user_model)
                continue
            user = loaded.get(user_model.id)
            if user is not None:
                apply_user_to_model(user_model, user)

        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to update room %s", room.id)
            return Result.failure(f"Failed to update room with id {room.id}")
        room.removed_user_ids.clear()
        return Result.success(None)

    @staticmethod
    def _to_entity(model: RoomModel) -> Room:
        return Room(
            id=model.id,
            name=model.name,
            description=model.description,
            invitation_code=model.invitation_code,
            gift_exchange_date=model.gift_exchange_date,
            gift_maximum_budget=model.gift_maximum_budget,
            admin_id=model.admin_id,
            closed_on=model.closed_on,
            created_on=model.created_on,
            modified_on=model.modified_on,
            users=[user_to_entity(user, include_wishes=True) for user in model.users],
        )

    @staticmethod
    def _apply_entity_to_model(model: RoomModel, room: Room) -> None:
        model.name = room.name
        model.description = room.description
        model.invitation_code = room.invitation_code
        model.gift_exchange_date = room.gift_exchange_date
        model.gift_maximum_budget = room.gift_maximum_budget
        model.admin_id = room.admin_id
        model.closed_on = room.closed_on


__all__ = ["RoomRepository"]
