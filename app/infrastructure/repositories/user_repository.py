"""Persistence layer for room participants."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domain.entities import Room, User, Wish
from app.domain.results import DomainError, Result
from app.infrastructure.models import RoomModel, UserModel, WishModel

logger = logging.getLogger(__name__)


class UserRepository:
    """Provide read and create operations for participants."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_code(
        self, code: str, *, include_room: bool = False, include_wishes: bool = False
    ) -> Result[User, DomainError]:
        model = await self._get_model(
            UserModel.authorization_code == code,
            include_room=include_room,
            include_wishes=include_wishes,
        )
        if model is None:
            return Result.failure(
                DomainError.not_found("userCode", "User with such code not found")
            )
        return Result.success(
            user_to_entity(model, include_room=include_room, include_wishes=include_wishes)
        )

    async def get_by_id(
        self, user_id: int, *, include_room: bool = False, include_wishes: bool = False
    ) -> Result[User, DomainError]:
        model = await self._get_model(
            UserModel.id == user_id,
            include_room=include_room,
            include_wishes=include_wishes,
        )
        if model is None:
            return Result.failure(DomainError.not_found("id", "User with such id not found"))
        return Result.success(
            user_to_entity(model, include_room=include_room, include_wishes=include_wishes)
        )

    async def list_by_room_id(self, room_id: int, *, include_wishes: bool = False) -> list[User]:
        query = select(UserModel).where(UserModel.room_id == room_id).order_by(UserModel.id)
        if include_wishes:
            query = query.options(selectinload(UserModel.wishes))
        models = (await self.session.scalars(query)).all()
        return [user_to_entity(model, include_wishes=include_wishes) for model in models]

    async def add(self, user: User) -> Result[User, str]:
        model = UserModel(room_id=user.room_id)
        apply_user_to_model(model, user)
        model.wishes = [wish_to_model(wish) for wish in user.wishes]
        self.session.add(model)
        try:
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception("Failed to add user to room %s", user.room_id)
            return Result.failure("Failed to save the user")
        return Result.success(user_to_entity(model, include_wishes=True))

    async def _get_model(
        self, *criteria, include_room: bool, include_wishes: bool
    ) -> UserModel | None:
        query = select(UserModel).where(*criteria)
        if include_room:
            query = query.options(selectinload(UserModel.room))
        if include_wishes:
            query = query.options(selectinload(UserModel.wishes))
        return (await self.session.scalars(query)).first()


def user_to_entity(
    model: UserModel, *, include_room: bool = False, include_wishes: bool = False
) -> User:
    """Convert ``model`` touching only the relationships that were loaded."""

    return User(
        id=model.id,
        room_id=model.room_id,
        authorization_code=model.authorization_code,
        is_admin=model.is_admin,
        first_name=model.first_name,
        last_name=model.last_name,
        phone=model.phone,
        email=model.email,
        delivery_info=model.delivery_info,
        want_surprise=model.want_surprise,
        interests=model.interests,
        gift_recipient_user_id=model.gift_recipient_user_id,
        created_on=model.created_on,
        modified_on=model.modified_on,
        wishes=[_wish_to_entity(wish) for wish in model.wishes] if include_wishes else [],
        room=_room_summary(model.room) if include_room and model.room else None,
    )


def apply_user_to_model(model: UserModel, user: User) -> None:
    model.authorization_code = user.authorization_code
    model.is_admin = user.is_admin
    model.first_name = user.first_name
    model.last_name = user.last_name
    model.phone = user.phone
    model.email = user.email
    model.delivery_info = user.delivery_info
    model.want_surprise = user.want_surprise
    model.interests = user.interests
    model.gift_recipient_user_id = user.gift_recipient_user_id


def wish_to_model(wish: Wish) -> WishModel:
    return WishModel(name=wish.name, info_link=wish.info_link)


def _wish_to_entity(model: WishModel) -> Wish:
    return Wish(id=model.id, name=model.name, info_link=model.info_link)


def _room_summary(model: RoomModel) -> Room:
    # The roster is not loaded alongside a single user.
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
    )


__all__ = ["UserRepository", "apply_user_to_model", "user_to_entity", "wish_to_model"]
