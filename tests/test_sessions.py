import pytest

from cardzones.services.errors import (
    Forbidden,
    InvalidCredentials,
    InvalidInput,
    NotFound,
    Unauthenticated,
)
from cardzones.services.sessions import InMemorySessionStore


def test_first_login_sets_credential_then_verifies(players):
    manager = players.sessions
    token = manager.login("alice", "abcd")
    assert manager.resolve(token)["username"] == "alice"
    assert players.identity.get_user("alice")["passwordHash"].startswith("$2")

    with pytest.raises(InvalidCredentials):
        manager.login("alice", "wrong")
    assert manager.resolve(manager.login("alice", "abcd"))["role"] == "player"


def test_first_login_enforces_min_length(players):
    with pytest.raises(InvalidInput):
        players.sessions.login("alice", "abc")
    assert players.identity.get_user("alice")["passwordHash"] is None


def test_unknown_user_is_invalid_credentials(players):
    with pytest.raises(InvalidCredentials):
        players.sessions.login("mallory", "abcd")


def test_reset_revokes_sessions_and_allows_new_password(players):
    manager = players.sessions
    first = manager.login("alice", "abcd")
    second = manager.login("alice", "abcd")

    assert manager.reset_credential("alice") == 2
    for token in (first, second):
        with pytest.raises(Unauthenticated):
            manager.resolve(token)

    token = manager.login("alice", "newpass")
    assert manager.resolve(token)["username"] == "alice"
    with pytest.raises(InvalidCredentials):
        manager.login("alice", "abcd")


def test_reset_unknown_user(players):
    with pytest.raises(NotFound):
        players.sessions.reset_credential("mallory")


def test_resolve_evicts_token_of_deleted_user(players):
    manager = players.sessions
    token = manager.login("bob", "abcd")
    with players.store.transaction() as doc:
        doc["users"] = [u for u in doc["users"] if u["username"] != "bob"]

    with pytest.raises(Unauthenticated):
        manager.resolve(token)
    assert manager.sessions.resolve(token) is None


@pytest.mark.parametrize("token", [None, "", "not-a-token"])
def test_resolve_rejects_missing_or_unknown_token(players, token):
    with pytest.raises(Unauthenticated):
        players.sessions.resolve(token)


def test_require_role(players):
    players.sessions.require_role({"role": "admin"}, "admin")
    with pytest.raises(Forbidden):
        players.sessions.require_role({"role": "player"}, "admin")


def test_logout_revokes_only_that_token(players):
    manager = players.sessions
    kept = manager.login("alice", "abcd")
    dropped = manager.login("alice", "abcd")
    manager.logout(dropped)
    assert manager.resolve(kept)["username"] == "alice"
    with pytest.raises(Unauthenticated):
        manager.resolve(dropped)


def test_in_memory_store_tokens_are_unique():
    store = InMemorySessionStore()
    tokens = {store.create("alice") for _ in range(50)}
    assert len(tokens) == 50
    assert len(store) == 50
    assert store.revoke_by_user("alice") == 50
    assert len(store) == 0


def test_create_user_rejects_duplicates_and_bad_roles(players):
    with pytest.raises(InvalidInput):
        players.identity.create_user("alice", "player")
    with pytest.raises(InvalidInput):
        players.identity.create_user("carol", "wizard")
    assert [u["username"] for u in players.store.load()["users"]] == ["admin", "alice", "bob"]
