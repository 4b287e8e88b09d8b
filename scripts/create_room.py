"""Utility script to create a room and its admin from the command line."""

from __future__ import annotations

import argparse
import asyncio
from datetime import date

from app.application.use_cases.rooms import create_room
from app.application.use_cases.users import ParticipantDetails
from app.config import get_settings
from app.domain.entities import Wish
from app.infrastructure.database import close_database, init_db, initialize_database
from app.infrastructure.repositories import RoomRepository


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for room creation."""

    parser = argparse.ArgumentParser(
        description="Create a Secret Santa room and print its codes.",
    )
    parser.add_argument("--name", required=True, help="Room name")
    parser.add_argument("--description", default="Secret Santa", help="Room description")
    parser.add_argument(
        "--gift-exchange-date",
        required=True,
        type=date.fromisoformat,
        help="Gift exchange date in YYYY-MM-DD format",
    )
    parser.add_argument("--budget", type=int, default=0, help="Maximum gift budget")
    parser.add_argument("--first-name", required=True, help="Admin first name")
    parser.add_argument("--last-name", required=True, help="Admin last name")
    parser.add_argument("--phone", required=True, help="Admin phone, e.g. +380123456789")
    parser.add_argument("--email", default=None, help="Admin email (optional)")
    parser.add_argument("--delivery-info", required=True, help="Where gifts are delivered")
    parser.add_argument(
        "--interests",
        default=None,
        help="Admin interests; when given the admin asks for a surprise gift",
    )
    parser.add_argument(
        "--wish",
        action="append",
        default=[],
        help="A wish for the admin; repeat for several wishes",
    )
    return parser.parse_args()


async def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    manager = init_db(settings.database_url, echo=settings.sql_echo)
    await initialize_database()
    try:
        async with manager.session() as session:
            result = await create_room(
                room_repository=RoomRepository(session),
                name=args.name,
                description=args.description,
                gift_exchange_date=args.gift_exchange_date,
                gift_maximum_budget=args.budget,
                admin=ParticipantDetails(
                    first_name=args.first_name,
                    last_name=args.last_name,
                    phone=args.phone,
                    email=args.email,
                    delivery_info=args.delivery_info,
                    want_surprise=args.interests is not None,
                    interests=args.interests,
                    wishes=tuple(Wish(id=None, name=name) for name in args.wish),
                ),
            )
    finally:
        await close_database()

    if result.is_failure:
        raise SystemExit(f"Could not create the room: {result.error.message}")

    room = result.value
    print(
        "Room created successfully:\n"
        f"  ID: {room.id}\n"
        f"  Name: {room.name}\n"
        f"  Invitation code: {room.invitation_code}\n"
        f"  Admin code: {room.admin.authorization_code}"
    )


def main() -> None:
    """Create a room using the provided command line arguments."""

    asyncio.run(run(parse_args()))


if __name__ == "__main__":
    main()
