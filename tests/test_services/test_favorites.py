# tests/test_services/test_favorites.py

import pytest
from unittest.mock import Mock
from nuggetbook.errors import AuthRequiredError, DataAccessError, NotFoundError
from nuggetbook.sa.models import Nugget
from nuggetbook.sa.repositories import NuggetRepository
from nuggetbook.services.favorites import toggle_favorite, nugget_as_dict

def test_toggle_favorite_persists(db_session, alice_identity, sample_nugget):
    repo = NuggetRepository(db_session)
    local = [nugget_as_dict(sample_nugget)]

    entry = toggle_favorite(repo, alice_identity, local, sample_nugget.id)

    assert entry["is_favorite"] is True
    assert local[0]["is_favorite"] is True
    assert repo.get_nugget(alice_identity, sample_nugget.id).is_favorite is True

def test_toggle_favorite_rolls_back_on_failure(sample_nugget, alice_identity):
    stored = nugget_as_dict(sample_nugget)
    stored["note"] = "Changed elsewhere"
    repo = Mock()
    repo.toggle_favorite.side_effect = DataAccessError("connection lost")
    repo.get_nugget.return_value = Mock(**stored)
    local = [nugget_as_dict(sample_nugget)]

    with pytest.raises(DataAccessError):
        toggle_favorite(repo, alice_identity, local, sample_nugget.id)

    repo.toggle_favorite.assert_called_once_with(alice_identity, sample_nugget.id, False)
    assert local[0]["is_favorite"] is False
    assert local[0]["note"] == "Changed elsewhere"

def test_toggle_favorite_keeps_snapshot_when_reread_fails(sample_nugget, alice_identity):
    repo = Mock()
    repo.toggle_favorite.side_effect = DataAccessError("connection lost")
    repo.get_nugget.side_effect = DataAccessError("still down")
    local = [nugget_as_dict(sample_nugget)]
    before = dict(local[0])

    with pytest.raises(DataAccessError, match="connection lost"):
        toggle_favorite(repo, alice_identity, local, sample_nugget.id)

    assert local[0] == before

def test_toggle_favorite_unknown_entry(alice_identity):
    with pytest.raises(NotFoundError):
        toggle_favorite(Mock(), alice_identity, [], 1)

def test_toggle_favorite_rolls_back_when_nugget_deleted_elsewhere(sample_nugget, alice_identity):
    repo = Mock()
    repo.toggle_favorite.side_effect = NotFoundError(f"Nugget {sample_nugget.id} not found")
    repo.get_nugget.side_effect = NotFoundError(f"Nugget {sample_nugget.id} not found")
    local = [nugget_as_dict(sample_nugget)]

    with pytest.raises(NotFoundError):
        toggle_favorite(repo, alice_identity, local, sample_nugget.id)

    assert local[0]["is_favorite"] is False

def test_toggle_favorite_rolls_back_without_identity(db_session, sample_nugget):
    repo = NuggetRepository(db_session)
    local = [nugget_as_dict(sample_nugget)]

    with pytest.raises(AuthRequiredError):
        toggle_favorite(repo, None, local, sample_nugget.id)

    assert local[0]["is_favorite"] is False
    db_session.expire_all()
    assert db_session.get(Nugget, sample_nugget.id).is_favorite is False
