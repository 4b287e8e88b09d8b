"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.application.use_cases.users import ParticipantDetails
from app.domain.entities import Room, User, Wish
from app.domain.results import DomainError, ErrorKind
from app.interfaces.api.schemas import RoomRead, UserCreate, UserRead, WishRead

ERROR_STATUS_CODES = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
}


def error_to_http_exception(error: DomainError) -> HTTPException:
    """Translate a use case error into the matching ``HTTPException``."""

    return HTTPException(
        status_code=ERROR_STATUS_CODES[error.kind],
        detail=[
            {"field": failure.field, "message": failure.message}
            for failure in error.failures
        ],
    )


def to_participant_details(user_in: UserCreate) -> ParticipantDetails:
    return ParticipantDetails(
        first_name=user_in.first_name,
        last_name=user_in.last_name,
        phone=user_in.phone,
        email=str(user_in.email) if user_in.email else None,
        delivery_info=user_in.delivery_info,
        want_surprise=user_in.want_surprise,
        interests=user_in.interests,
        wishes=tuple(
            Wish(id=None, name=wish.name, info_link=wish.info_link)
            for wish in user_in.wishes
        ),
    )


def to_room_read(room: Room) -> RoomRead:
    return RoomRead.model_validate(room)


def to_user_read(user: User, *, include_details: bool) -> UserRead:
    """Project ``user`` hiding private fields unless ``include_details`` is set."""

    read = UserRead(
        id=user.id,
        room_id=user.room_id,
        is_admin=user.is_admin,
        first_name=user.first_name,
        last_name=user.last_name,
        created_on=user.created_on,
        modified_on=user.modified_on,
    )
    if not include_details:
        return read
    return read.model_copy(
        update={
            "user_code": user.authorization_code,
            "phone": user.phone,
            "email": user.email,
            "delivery_info": user.delivery_info,
            "want_surprise": user.want_surprise,
            "interests": user.interests,
            "wishes": [WishRead.model_validate(wish) for wish in user.wishes],
            "gift_recipient_user_id": user.gift_recipient_user_id,
        }
    )
