import time

import anyio
import pytest

from pathlab.core.security import hash_password, verify_password
from pathlab.models import User

pytestmark = pytest.mark.anyio


def _signup(**overrides):
    data = {
        "username": "asha",
        "fullName": "Asha Patel",
        "password": "s3cret!",
        "role": "technician",
        "contactNumber": "9000000001",
        "securityQuestion": "First school?",
        "securityAnswer": "St. Mary",
    }
    data.update(overrides)
    return data


def test_password_hash_roundtrip():
    stored = hash_password("s3cret!")
    assert stored.startswith("$argon2id$")
    assert "s3cret!" not in stored
    assert verify_password("s3cret!", stored)
    assert not verify_password("wrong", stored)
    assert not verify_password("s3cret!", "s3cret!")


async def test_signup_and_login(client):
    r = await client.post("/api/signup", json=_signup())
    assert r.status_code == 200, r.text
    assert r.json() == {"success": True, "message": "Account created successfully"}

    r = await client.post("/api/login", json={"username": "asha", "password": "s3cret!"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Login successful"
    assert body["user"]["username"] == "asha"
    assert body["user"]["full_name"] == "Asha Patel"
    assert body["user"]["role"] == "technician"
    assert "password" not in body["user"]

    r = await client.get(f"/api/users/{body['user']['user_id']}")
    assert r.status_code == 200
    assert r.json()["user"]["contact_number"] == "9000000001"


async def test_login_wrong_password(client):
    await client.post("/api/signup", json=_signup())

    r = await client.post("/api/login", json={"username": "asha", "password": "nope"})
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Invalid username or password"}


async def test_login_unknown_user(client):
    r = await client.post("/api/login", json={"username": "ghost", "password": "whatever"})
    assert r.status_code == 400
    assert r.json()["success"] is False


async def test_duplicate_username(client):
    assert (await client.post("/api/signup", json=_signup())).status_code == 200

    r = await client.post("/api/signup", json=_signup(fullName="Other"))
    assert r.status_code == 409
    assert r.json() == {"success": False, "message": "Username already exists"}


async def test_unknown_user(client):
    r = await client.get("/api/users/12345")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "User not found"}


@pytest.mark.parametrize("stored", ["s3cret!", "pbkdf2_sha256$many$salt$00", "$argon2id$v=19$broken", ""])
async def test_login_with_unreadable_stored_hash(client, database, stored):
    async with database.session() as s:
        s.add(User(username="legacy", password=stored))
        await s.commit()

    r = await client.post("/api/login", json={"username": "legacy", "password": "s3cret!"})
    assert r.status_code == 400, r.text
    assert r.json() == {"success": False, "message": "Invalid username or password"}


async def test_login_keeps_event_loop_responsive(client):
    assert (await client.post("/api/signup", json=_signup())).status_code == 200

    worst_stall = 0.0
    finished = False

    async def ticker():
        nonlocal worst_stall
        while not finished:
            started = time.perf_counter()
            await anyio.sleep(0.005)
            worst_stall = max(worst_stall, time.perf_counter() - started - 0.005)

    async with anyio.create_task_group() as tg:
        tg.start_soon(ticker)
        for _ in range(3):
            r = await client.post("/api/login", json={"username": "asha", "password": "s3cret!"})
            assert r.status_code == 200, r.text
        finished = True

    assert worst_stall < 0.05
