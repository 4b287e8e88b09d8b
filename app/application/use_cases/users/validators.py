"""Common validation helpers for participant use cases."""

from app.domain.results import DomainError

from .details import ParticipantDetails


def validate_participant_details(details: ParticipantDetails) -> DomainError | None:
    """Return the first problem with ``details`` or ``None`` when they are valid."""

    if details.want_surprise:
        if not (details.interests or "").strip():
            return DomainError.bad_request(
                "interests", "Interests are required when a surprise gift is wanted"
            )
        return None

    if not details.wishes:
        return DomainError.bad_request(
            "wishes", "At least one wish is required when no surprise is wanted"
        )
    return None
