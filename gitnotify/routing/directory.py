"""Directory — maps repositories to channels and users to direct targets.

The ``Directory`` protocol is the router's only view of configuration.
``StaticDirectory`` is an in-memory implementation built from already
resolved ``RepoConfig`` / ``UserConfig`` objects.

``classify_target`` turns the reference string a directory hands back
into a ``DirectTarget`` or a ``MutedTarget``.  It is the single place the
mute marker literal is compared.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from gitnotify.config import DEFAULT_MUTE_MARKER, NotifySettings
from gitnotify.models.github import Repo
from gitnotify.models.targets import DirectTarget, MutedTarget

logger = logging.getLogger(__name__)


@runtime_checkable
class Directory(Protocol):
    """Lookup contract consumed by the Messenger.

    Both methods must be free of visible side effects and safe to call
    concurrently.
    """

    def lookup_channel(self, repo: Repo) -> str | None:
        """Return the channel for *repo*, or ``None`` when none is configured."""
        ...

    def resolve_direct_target(self, login: str, repo: Repo) -> str:
        """Return a direct-message reference for *login* in *repo*.

        Must return the mute marker (or its ``@`` mention form) when the
        user opted out for *repo*.  Never fails: an unknown user yields a
        reference derived from the login.
        """
        ...


def classify_target(
    ref: str,
    login: str,
    mute_marker: str = DEFAULT_MUTE_MARKER,
) -> DirectTarget | MutedTarget:
    """Classify a directory reference for *login*.

    The marker itself and ``"@" + marker`` both mean muted.
    """
    if ref in (mute_marker, f"@{mute_marker}"):
        return MutedTarget(login=login)
    return DirectTarget(ref=ref, login=login)


# ---------------------------------------------------------------------------
# Static, in-memory directory
# ---------------------------------------------------------------------------


class UserInfo(BaseModel):
    """Per-user delivery preferences."""

    model_config = ConfigDict(frozen=True)

    slack_name: str | None = None
    mute_all: bool = False
    muted_repos: list[str] = []  # repo full names or owning org names


class UserConfig(BaseModel):
    """All known users, keyed by source-control login."""

    model_config = ConfigDict(frozen=True)

    users: dict[str, UserInfo] = {}

    def lookup(self, login: str) -> UserInfo | None:
        return self.users.get(login)


class RepoConfig(BaseModel):
    """Repository → channel mapping.

    Keys are either a repository full name (``"acme/widgets"``) or an
    owning organisation (``"acme"``).  An exact repository entry wins
    over the organisation entry.
    """

    model_config = ConfigDict(frozen=True)

    channels: dict[str, str] = {}

    def lookup_channel(self, repo: Repo) -> str | None:
        channel = self.channels.get(repo.full_name)
        if channel is None:
            channel = self.channels.get(repo.owner_login)
        return channel or None


class StaticDirectory:
    """A ``Directory`` over in-memory repo and user configuration.

    Parameters
    ----------
    repos:
        Channel configuration.
    users:
        User configuration.
    mute_marker:
        The literal returned for a muted user.  The ``@`` mention form is
        what this directory actually hands back.
    """

    def __init__(
        self,
        repos: RepoConfig | None = None,
        users: UserConfig | None = None,
        *,
        mute_marker: str = DEFAULT_MUTE_MARKER,
    ) -> None:
        self._repos = repos or RepoConfig()
        self._users = users or UserConfig()
        self._mute_marker = mute_marker

    @classmethod
    def from_settings(
        cls,
        settings: NotifySettings,
        repos: RepoConfig | None = None,
        users: UserConfig | None = None,
    ) -> StaticDirectory:
        """Build a directory that mutes with the marker in *settings*."""
        return cls(repos, users, mute_marker=settings.mute_marker)

    @property
    def mute_marker(self) -> str:
        """The marker this directory returns for muted users."""
        return self._mute_marker

    def lookup_channel(self, repo: Repo) -> str | None:
        channel = self._repos.lookup_channel(repo)
        if channel is None:
            logger.debug("No channel configured for %s", repo.full_name)
        return channel

    def resolve_direct_target(self, login: str, repo: Repo) -> str:
        info = self._users.lookup(login)
        if info is None:
            return f"@{login}"
        if info.mute_all or self._mutes(info, repo):
            return f"@{self._mute_marker}"
        return f"@{info.slack_name or login}"

    @staticmethod
    def _mutes(info: UserInfo, repo: Repo) -> bool:
        return repo.full_name in info.muted_repos or repo.owner_login in info.muted_repos
