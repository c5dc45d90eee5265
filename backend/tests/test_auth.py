from datetime import timedelta

from skip2love.auth.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from skip2love.models.user import User

from conftest import PASSWORD


def test_register_returns_user_and_token(client):
    response = client.post("/api/register", json={
        "username": "alice",
        "email": "alice@skip2love.io",
        "password": PASSWORD,
        "full_name": "Alice Doe",
        "city": "Eureka",
        "preferences": ["hiking", "coffee"],
    })
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    user = data["user"]
    assert user["username"] == "alice"
    assert user["preferences"] == ["hiking", "coffee"]
    assert user["rating"] == 0
    assert user["rating_count"] == 0
    assert user["is_verified"] is False
    assert "password" not in user
    assert "hashed_password" not in user


def test_register_duplicate_email_or_username(client, make_user):
    make_user("alice")

    response = client.post("/api/register", json={
        "username": "other", "email": "alice@skip2love.io", "password": PASSWORD,
    })
    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"

    response = client.post("/api/register", json={
        "username": "alice", "email": "new@skip2love.io", "password": PASSWORD,
    })
    assert response.status_code == 400


def test_register_validation_error_has_field_detail(client):
    response = client.post("/api/register", json={
        "username": "bob", "email": "not-an-email", "password": PASSWORD,
    })
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request data"
    assert any(error["field"] == "email" for error in body["errors"])


def test_login(client, make_user):
    alice = make_user("alice")

    response = client.post("/api/login", json={"email": alice.email, "password": PASSWORD})
    assert response.status_code == 200
    assert response.json()["user"]["id"] == alice.id

    response = client.post("/api/login", json={"email": alice.email, "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"

    response = client.post("/api/login", json={"email": "nobody@skip2love.io", "password": PASSWORD})
    assert response.status_code == 401


def test_suspended_account_cannot_log_in(client, make_user, db):
    alice = make_user("alice")
    db.query(User).filter(User.id == alice.id).update({User.is_blocked: True})
    db.commit()

    response = client.post("/api/login", json={"email": alice.email, "password": PASSWORD})
    assert response.status_code == 403


def test_me_requires_valid_token(client, make_user):
    assert client.get("/api/me").status_code == 401
    assert client.get("/api/me").json()["message"] == "Access token required"

    response = client.get("/api/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401

    alice = make_user("alice")
    response = client.get("/api/me", headers=alice.headers)
    assert response.status_code == 200
    assert response.json()["email"] == alice.email


def test_password_hashing():
    hashed = hash_password("correct horse")
    assert hashed != "correct horse"
    assert verify_password("correct horse", hashed)
    assert not verify_password("wrong horse", hashed)
    assert not verify_password("correct horse", "not-a-hash")


def test_access_token_round_trip_and_expiry():
    token = create_access_token(42)
    assert decode_access_token(token) == 42

    expired = create_access_token(42, expires_delta=timedelta(minutes=-1))
    assert decode_access_token(expired) is None
    assert decode_access_token("not.a.token") is None


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
