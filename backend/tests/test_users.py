from conftest import PASSWORD


def test_get_profile(client, make_user):
    alice = make_user("alice", city="Arcata", bio="Hi there")

    response = client.get(f"/api/users/{alice.id}")
    assert response.status_code == 200
    profile = response.json()
    assert profile["username"] == "alice"
    assert profile["city"] == "Arcata"
    assert "email" not in profile
    assert "hashed_password" not in profile


def test_get_missing_profile(client):
    response = client.get("/api/users/404")
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_blocked_profile_is_hidden_both_ways(client, make_user):
    alice = make_user()
    bob = make_user()
    carol = make_user()
    client.post("/api/blocks", json={"blocked_user_id": bob.id}, headers=alice.headers)

    assert client.get(f"/api/users/{bob.id}", headers=alice.headers).status_code == 403
    assert client.get(f"/api/users/{alice.id}", headers=bob.headers).status_code == 403

    # Unrelated viewers and guests are unaffected
    assert client.get(f"/api/users/{bob.id}", headers=carol.headers).status_code == 200
    assert client.get(f"/api/users/{bob.id}").status_code == 200


def test_update_own_profile_ignores_password_and_aggregates(client, make_user):
    alice = make_user()

    response = client.put(f"/api/users/{alice.id}", json={
        "bio": "Updated bio",
        "images": ["https://img.example/1.jpg", "https://img.example/2.jpg"],
        "password": "hijacked",
        "rating": 100,
        "is_premium": True,
    }, headers=alice.headers)
    assert response.status_code == 200
    user = response.json()
    assert user["bio"] == "Updated bio"
    assert user["images"] == ["https://img.example/1.jpg", "https://img.example/2.jpg"]
    assert user["rating"] == 0
    assert user["is_premium"] is False

    login = client.post("/api/login", json={"email": alice.email, "password": PASSWORD})
    assert login.status_code == 200
    assert client.post("/api/login", json={"email": alice.email, "password": "hijacked"}).status_code == 401


def test_null_image_and_preference_lists_are_left_unchanged(client, make_user, make_post):
    alice = make_user(images=["https://img.example/a.jpg"], preferences=["hiking"])
    make_post(alice)

    response = client.put(
        f"/api/users/{alice.id}",
        json={"images": None, "preferences": None, "bio": "Still here"},
        headers=alice.headers,
    )
    assert response.status_code == 200
    assert response.json()["images"] == ["https://img.example/a.jpg"]
    assert response.json()["preferences"] == ["hiking"]
    assert response.json()["bio"] == "Still here"

    me = client.get("/api/me", headers=alice.headers)
    assert me.status_code == 200
    assert me.json()["images"] == ["https://img.example/a.jpg"]

    assert client.get(f"/api/users/{alice.id}").status_code == 200
    posts = client.get("/api/posts")
    assert posts.status_code == 200
    assert posts.json()[0]["user"]["preferences"] == ["hiking"]


def test_update_other_profile_forbidden(client, make_user):
    alice = make_user()
    bob = make_user()
    response = client.put(f"/api/users/{bob.id}", json={"bio": "hacked"}, headers=alice.headers)
    assert response.status_code == 403


def test_update_requires_auth(client, make_user):
    alice = make_user()
    assert client.put(f"/api/users/{alice.id}", json={"bio": "x"}).status_code == 401
