"""Unit tests for RecipientResolver — ordering and exclusion rules."""

from __future__ import annotations

import pytest

from gitnotify.errors import ConfigurationError
from gitnotify.models.github import User
from gitnotify.routing.recipients import RecipientResolver, resolve_recipients


def _logins(users: list[User]) -> list[str]:
    return [u.login for u in users]


def _users(*logins: str) -> list[User]:
    return [User(login=login) for login in logins]


class TestRecipientResolver:
    """Owner first, assignees after, never the sender or the bot."""

    def test_owner_only(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), None, [])
        assert _logins(result) == ["alice"]

    def test_owner_then_assignees_in_order(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), None, _users("zed", "carol", "bob"))
        assert _logins(result) == ["alice", "zed", "carol", "bob"]

    def test_owner_in_assignees_listed_once(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), User(login="bob"), _users("carol", "alice"))
        assert _logins(result) == ["alice", "carol"]

    def test_duplicate_assignees_deduplicated(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), None, _users("carol", "carol", "dave", "carol"))
        assert _logins(result) == ["alice", "carol", "dave"]

    def test_sender_excluded(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), User(login="carol"), _users("carol", "dave"))
        assert _logins(result) == ["alice", "dave"]

    def test_sender_is_owner_and_only_assignee(self):
        resolver = RecipientResolver()
        alice = User(login="alice")
        assert resolver.resolve(alice, alice, [alice]) == []

    def test_absent_sender_skips_self_exclusion(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), None, _users("alice"))
        assert _logins(result) == ["alice"]

    def test_default_bot_login_excluded(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="octobot"), None, _users("octobot", "carol"))
        assert _logins(result) == ["carol"]

    def test_custom_bot_login_excluded(self):
        resolver = RecipientResolver(bot_login="release-bot")
        result = resolver.resolve(User(login="alice"), None, _users("release-bot", "octobot"))
        assert _logins(result) == ["alice", "octobot"]

    def test_login_comparison_is_case_sensitive(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), User(login="Alice"), _users("ALICE"))
        assert _logins(result) == ["alice", "ALICE"]

    def test_empty_bot_login_rejected(self):
        with pytest.raises(ConfigurationError):
            RecipientResolver(bot_login="")

    def test_accepts_any_iterable(self):
        resolver = RecipientResolver()
        result = resolver.resolve(User(login="alice"), None, (u for u in _users("carol")))
        assert _logins(result) == ["alice", "carol"]

    @pytest.mark.parametrize(
        "owner, sender, assignees",
        [
            ("octobot", None, ["octobot"]),
            ("alice", "bob", ["octobot", "bob", "alice"]),
            ("alice", None, ["carol", "octobot", "carol"]),
        ],
    )
    def test_bot_never_present(self, owner, sender, assignees):
        result = resolve_recipients(
            User(login=owner),
            User(login=sender) if sender else None,
            _users(*assignees),
        )
        assert "octobot" not in _logins(result)
        assert len(set(_logins(result))) == len(result)


class TestResolveRecipientsFunction:
    def test_matches_resolver(self):
        owner, sender = User(login="alice"), User(login="bob")
        assignees = _users("alice", "carol", "bob")
        assert resolve_recipients(owner, sender, assignees) == RecipientResolver().resolve(
            owner, sender, assignees
        )

    def test_bot_login_keyword(self):
        result = resolve_recipients(User(login="ci"), None, _users("alice"), bot_login="ci")
        assert _logins(result) == ["alice"]
