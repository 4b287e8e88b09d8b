"""API test fixtures: fresh in-memory database and an async HTTP client."""

from datetime import date, timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure import database


@pytest.fixture
async def client():
    database.init_db("sqlite+aiosqlite:///:memory:")
    await database.initialize_database()

    from main import create_app

    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client

    await database.close_database()


def user_payload(first_name: str = "Test", last_name: str = "User") -> dict:
    return {
        "firstName": first_name,
        "lastName": last_name,
        "phone": "+380987654321",
        "email": f"{first_name.lower()}@test.com",
        "deliveryInfo": "Test address",
        "wantSurprise": True,
        "interests": "Testing",
    }


@pytest.fixture
def create_room_with_admin(client):
    async def _create() -> dict:
        payload = {
            "room": {
                "name": "Test Room",
                "description": "Test Description",
                "giftExchangeDate": (date.today() + timedelta(days=30)).isoformat(),
                "giftMaximumBudget": 1000,
            },
            "adminUser": user_payload("Admin", "User"),
        }
        response = await client.post("/rooms", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def add_user_to_room(client):
    async def _add(room_code: str, first_name: str = "Test", last_name: str = "User") -> dict:
        response = await client.post(
            "/users", params={"roomCode": room_code}, json=user_payload(first_name, last_name)
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _add
