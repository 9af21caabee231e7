"""Tests for login and registration."""

import pytest

from studio.core.security import hash_password, verify_password
from studio.services.auth_service import find_user, login, register


@pytest.fixture
def users():
    users, _ = register([], "alice", "pw123", "client")
    users, _ = register(users, "coach", "hunter2", "trainer")
    return users


class TestRegister:

    def test_appends_user_with_hashed_password(self):
        users, result = register([], "alice", "pw123", "client")

        assert result.success
        assert result.record_id == users[0].id
        assert users[0].password == hash_password("pw123")
        assert users[0].password != "pw123"
        assert len(users[0].password) == 64

    def test_profile_defaults(self):
        users, _ = register([], "alice", "pw123")
        user = users[0]
        assert user.role == "client"
        assert user.assigned_program_id is None
        assert user.metrics == []
        assert user.joined_sessions == [] and user.joined_groups == [] and user.purchased_products == []
        assert user.water_goal == 2.0

    def test_duplicate_username_leaves_collection_unchanged(self, users):
        new_users, result = register(users, "alice", "other", "client")

        assert not result.success
        assert result.message == "Username already exists"
        assert new_users is users
        assert len(new_users) == 2

    def test_username_is_case_sensitive(self, users):
        new_users, result = register(users, "Alice", "pw", "client")
        assert result.success
        assert len(new_users) == 3

    @pytest.mark.parametrize("username,password", [("", "pw"), ("bob", ""), ("", "")])
    def test_required_fields(self, username, password):
        users, result = register([], username, password, "client")
        assert not result.success
        assert users == []

    def test_unknown_role(self):
        users, result = register([], "bob", "pw", "admin")
        assert not result.success
        assert users == []

    def test_input_not_mutated(self, users):
        before = list(users)
        register(users, "carol", "pw")
        assert users == before


class TestLogin:

    def test_success_returns_user(self, users):
        result = login(users, "alice", "pw123")
        assert result.success
        assert result.user.username == "alice"

    def test_unknown_user(self, users):
        result = login(users, "nobody", "pw123")
        assert not result.success
        assert result.message == "User not found"
        assert result.user is None

    def test_wrong_password(self, users):
        result = login(users, "alice", "wrong")
        assert not result.success
        assert result.message == "Wrong password"

    def test_plaintext_stored_value_does_not_match(self, users):
        # The stored digest itself is not accepted as a password.
        alice = find_user(users, "alice")
        assert not login(users, "alice", alice.password).success


class TestSecurity:

    def test_verify_password(self):
        digest = hash_password("pw")
        assert verify_password("pw", digest)
        assert not verify_password("pw", None)
        assert not verify_password("other", digest)
