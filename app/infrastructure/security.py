"""Generation of the opaque codes used instead of passwords."""

import secrets

CODE_BYTES = 16


def generate_authorization_code() -> str:
    """Return a new per-participant authorization code."""

    return secrets.token_hex(CODE_BYTES)


def generate_invitation_code() -> str:
    """Return a new per-room invitation code."""

    return secrets.token_hex(CODE_BYTES)
