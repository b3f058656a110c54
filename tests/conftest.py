"""Shared test fixtures for gitnotify."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from gitnotify.models.github import Repo, User
from gitnotify.models.slack import SlackAttachment
from gitnotify.routing.directory import RepoConfig, StaticDirectory, UserConfig, UserInfo


class RecordingSink:
    """A sink that records every send and reports success.

    Targets listed in *failing* report failure instead; targets listed in
    *raising* raise ``RuntimeError``.
    """

    def __init__(
        self,
        failing: Sequence[str] = (),
        raising: Sequence[str] = (),
    ) -> None:
        self.sent: list[tuple[str, str, list[SlackAttachment]]] = []
        self._failing = set(failing)
        self._raising = set(raising)

    @property
    def sink_name(self) -> str:
        return "recording"

    def send(self, target: str, message: str, attachments: Sequence[SlackAttachment]) -> bool:
        if target in self._raising:
            raise RuntimeError(f"boom: {target}")
        self.sent.append((target, message, list(attachments)))
        return target not in self._failing

    @property
    def targets(self) -> list[str]:
        return [t for t, _, _ in self.sent]


@pytest.fixture
def make_user() -> Callable[..., User]:
    """Factory fixture: build a User from a login."""

    def _factory(login: str, **overrides: Any) -> User:
        return User(login=login, **overrides)

    return _factory


@pytest.fixture
def repo() -> Repo:
    return Repo(full_name="acme/widgets", html_url="https://github.com/acme/widgets")


@pytest.fixture
def attachments() -> list[SlackAttachment]:
    return [SlackAttachment(title="PR #42", title_link="https://github.com/acme/widgets/pull/42", color="good")]


@pytest.fixture
def directory() -> StaticDirectory:
    """A directory with channel #eng for acme/widgets and a few users."""
    return StaticDirectory(
        repos=RepoConfig(channels={"acme/widgets": "#eng"}),
        users=UserConfig(
            users={
                "alice": UserInfo(slack_name="alice"),
                "carol": UserInfo(slack_name="carol.s"),
                "dave": UserInfo(slack_name="dave", muted_repos=["acme/widgets"]),
            }
        ),
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_sink() -> Callable[..., RecordingSink]:
    """Factory fixture: build a RecordingSink with failing/raising targets."""

    def _factory(failing: Sequence[str] = (), raising: Sequence[str] = ()) -> RecordingSink:
        return RecordingSink(failing=failing, raising=raising)

    return _factory
