"""Integration tests for the room endpoints."""

from datetime import date, timedelta


async def test_create_room_returns_admin_code(client, create_room_with_admin):
    created = await create_room_with_admin()

    assert created["userCode"]
    room = created["room"]
    assert room["isClosed"] is False
    assert room["closedOn"] is None
    assert room["adminId"] is not None
    assert room["invitationCode"]


async def test_create_room_in_the_past_is_bad_request(client):
    payload = {
        "room": {
            "name": "Late Room",
            "description": "Too late",
            "giftExchangeDate": (date.today() - timedelta(days=2)).isoformat(),
            "giftMaximumBudget": 10,
        },
        "adminUser": {
            "firstName": "Admin",
            "lastName": "User",
            "phone": "+380123456789",
            "deliveryInfo": "Test address",
            "wantSurprise": True,
            "interests": "Testing",
        },
    }

    response = await client.post("/rooms", json=payload)

    assert response.status_code == 400
    assert response.json()["detail"][0]["field"] == "giftExchangeDate"


async def test_read_room_by_member_code(client, create_room_with_admin, add_user_to_room):
    created = await create_room_with_admin()
    member = await add_user_to_room(created["room"]["invitationCode"])

    response = await client.get("/rooms", params={"userCode": member["userCode"]})

    assert response.status_code == 200
    assert response.json()["id"] == created["room"]["id"]


async def test_read_room_without_code_is_bad_request(client):
    response = await client.get("/rooms")

    assert response.status_code == 400


async def test_draw_closes_room_and_assigns_everyone(
    client, create_room_with_admin, add_user_to_room
):
    created = await create_room_with_admin()
    for index in (1, 2, 3):
        await add_user_to_room(created["room"]["invitationCode"], f"User{index}", "Test")

    response = await client.post("/rooms/draw", params={"userCode": created["userCode"]})

    assert response.status_code == 200
    assert response.json()["isClosed"] is True
    users = (await client.get("/users", params={"userCode": created["userCode"]})).json()
    recipients = [user["giftRecipientUserId"] for user in users]
    assert sorted(recipients) == sorted(user["id"] for user in users)
    assert all(user["giftRecipientUserId"] != user["id"] for user in users)


async def test_draw_twice_is_bad_request(client, create_room_with_admin, add_user_to_room):
    created = await create_room_with_admin()
    for index in (1, 2):
        await add_user_to_room(created["room"]["invitationCode"], f"User{index}", "Test")
    params = {"userCode": created["userCode"]}

    assert (await client.post("/rooms/draw", params=params)).status_code == 200
    second = await client.post("/rooms/draw", params=params)

    assert second.status_code == 400
    assert second.json()["detail"] == [{"field": "room", "message": "Room is already closed"}]


async def test_draw_with_too_few_participants(client, create_room_with_admin, add_user_to_room):
    created = await create_room_with_admin()
    await add_user_to_room(created["room"]["invitationCode"])

    response = await client.post("/rooms/draw", params={"userCode": created["userCode"]})

    assert response.status_code == 400


async def test_draw_by_member_is_forbidden(client, create_room_with_admin, add_user_to_room):
    created = await create_room_with_admin()
    member = await add_user_to_room(created["room"]["invitationCode"])

    response = await client.post("/rooms/draw", params={"userCode": member["userCode"]})

    assert response.status_code == 403


async def test_join_closed_room_is_bad_request(client, create_room_with_admin, add_user_to_room):
    created = await create_room_with_admin()
    invitation = created["room"]["invitationCode"]
    for index in (1, 2):
        await add_user_to_room(invitation, f"User{index}", "Test")
    await client.post("/rooms/draw", params={"userCode": created["userCode"]})

    response = await client.post(
        "/users",
        params={"roomCode": invitation},
        json={
            "firstName": "Late",
            "lastName": "User",
            "phone": "+380987654321",
            "deliveryInfo": "Test address",
            "wantSurprise": True,
            "interests": "Testing",
        },
    )

    assert response.status_code == 400


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
