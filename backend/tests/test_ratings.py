from skip2love.models.rating import Rating
from skip2love.models.user import User
from skip2love.services.ratings import rating_percentage


def rate(client, rater, rated, is_positive):
    return client.post(
        "/api/ratings",
        json={"rated_user_id": rated.id, "is_positive": is_positive},
        headers=rater.headers,
    )


def profile(client, user):
    return client.get(f"/api/users/{user.id}").json()


def test_rating_percentage_rounds_half_up():
    assert rating_percentage(0, 0) == 0
    assert rating_percentage(1, 2) == 50
    assert rating_percentage(1, 3) == 33
    assert rating_percentage(2, 3) == 67
    assert rating_percentage(1, 8) == 13
    assert rating_percentage(3, 8) == 38
    assert rating_percentage(5, 5) == 100


def test_two_positive_one_negative(client, make_user):
    alice, bob, carol, dave = make_user(), make_user(), make_user(), make_user()

    assert rate(client, bob, alice, True).status_code == 200
    assert rate(client, carol, alice, True).status_code == 200
    assert rate(client, dave, alice, False).status_code == 200

    user = profile(client, alice)
    assert user["rating"] == 67
    assert user["rating_count"] == 3


def test_rerating_overwrites_existing_row(client, make_user, db):
    alice = make_user()
    bob = make_user()

    first = rate(client, bob, alice, True).json()
    second = rate(client, bob, alice, False).json()
    assert first["id"] == second["id"]
    assert second["is_positive"] is False

    rows = db.query(Rating).filter(Rating.rater_id == bob.id, Rating.rated_user_id == alice.id).all()
    assert len(rows) == 1
    assert rows[0].is_positive is False

    user = profile(client, alice)
    assert user["rating_count"] == 1
    assert user["rating"] == 0


def test_self_rating_rejected(client, make_user, db):
    alice = make_user()
    response = rate(client, alice, alice, True)
    assert response.status_code == 400
    assert response.json()["message"] == "Cannot rate yourself"
    assert db.query(Rating).count() == 0


def test_rating_unknown_user(client, make_user):
    alice = make_user()
    response = client.post("/api/ratings", json={"rated_user_id": 999, "is_positive": True}, headers=alice.headers)
    assert response.status_code == 404


def test_rating_summary(client, make_user):
    alice = make_user()
    bob = make_user()
    rate(client, bob, alice, True)

    summary = client.get(f"/api/users/{alice.id}/rating", headers=bob.headers).json()
    assert summary == {"user_id": alice.id, "rating": 100, "rating_count": 1, "viewer_rating": True}

    anonymous = client.get(f"/api/users/{alice.id}/rating").json()
    assert anonymous["viewer_rating"] is None


def test_concurrent_first_rating_is_overwritten(client, make_user, db, commit_before_flush):
    alice = make_user()
    bob = make_user()

    def competing_rating(session, pending):
        session.add(Rating(rater_id=pending.rater_id, rated_user_id=pending.rated_user_id, is_positive=True))

    commit_before_flush(Rating, competing_rating)

    response = rate(client, bob, alice, False)
    assert response.status_code == 200
    assert response.json()["is_positive"] is False

    rows = db.query(Rating).filter(Rating.rater_id == bob.id, Rating.rated_user_id == alice.id).all()
    assert len(rows) == 1
    assert rows[0].is_positive is False

    user = profile(client, alice)
    assert user["rating"] == 0
    assert user["rating_count"] == 1


def test_incoming_rating_does_not_touch_updated_at(client, make_user, db):
    alice = make_user()
    bob = make_user()
    rate(client, bob, alice, True)

    user = db.query(User).filter(User.id == alice.id).one()
    assert user.rating_count == 1
    assert user.updated_at is None
