"""Tests for the simulated sign-in in logspark/auth.py"""

import pytest

from logspark.auth import MOCK_USERS, MockSignInProvider, SessionStore


@pytest.fixture
def provider():
    return MockSignInProvider(delays={})


class TestMockSignIn:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,user_id,username",
        [
            ("github", "gh_12345", "arivera_dev"),
            ("google", "goog_67890", "alex.rivera@gmail.com"),
        ],
    )
    async def test_returns_canned_user(self, provider, name, user_id, username):
        pending = provider.begin_sign_in(name)
        session = await provider.complete_sign_in(pending)

        assert pending.provider == name
        assert session.user.id == user_id
        assert session.user.username == username
        assert session.user.provider == name
        assert session.signed_in_at >= pending.started_at

    def test_unknown_provider(self, provider):
        with pytest.raises(ValueError):
            provider.begin_sign_in("gitlab")

    def test_default_delays_match_demo(self):
        assert MockSignInProvider().delays == {"github": 2.0, "google": 1.5}


class TestSessionStore:
    def test_save_load_clear(self, tmp_path):
        store = SessionStore(tmp_path / "user.json")
        assert store.load() is None

        store.save(MOCK_USERS["github"])
        assert store.load() == MOCK_USERS["github"]

        store.clear()
        assert store.load() is None

    def test_clear_without_file(self, tmp_path):
        SessionStore(tmp_path / "missing.json").clear()

    @pytest.mark.parametrize("content", ["{not json", '{"id": "x"}'])
    def test_unreadable_file_means_signed_out(self, tmp_path, content):
        path = tmp_path / "user.json"
        path.write_text(content, encoding="utf-8")

        assert SessionStore(path).load() is None

    def test_undecodable_file_means_signed_out(self, tmp_path):
        path = tmp_path / "user.json"
        path.write_bytes(b"\xff\xfe\x00garbage")

        assert SessionStore(path).load() is None

    def test_directory_in_place_of_file_means_signed_out(self, tmp_path):
        path = tmp_path / "user.json"
        path.mkdir()

        assert SessionStore(path).load() is None
