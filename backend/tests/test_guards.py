import pytest

from skip2love.core.exceptions import AuthorizationError
from skip2love.models.block import Block
from skip2love.services.guards import can_message, can_view, ensure_can_message, ensure_can_view


def test_guards_without_block(db, make_user):
    alice = make_user()
    bob = make_user()
    assert can_message(db, alice.id, bob.id)
    assert can_view(db, alice.id, bob.id)


def test_guards_are_symmetric(db, make_user):
    alice = make_user()
    bob = make_user()
    carol = make_user()
    db.add(Block(blocker_id=alice.id, blocked_user_id=bob.id))
    db.commit()

    for a, b in [(alice.id, bob.id), (bob.id, alice.id)]:
        assert not can_message(db, a, b)
        assert not can_view(db, a, b)
        with pytest.raises(AuthorizationError):
            ensure_can_message(db, a, b)
        with pytest.raises(AuthorizationError):
            ensure_can_view(db, a, b)

    assert can_message(db, alice.id, carol.id)
    assert can_view(db, bob.id, bob.id)
