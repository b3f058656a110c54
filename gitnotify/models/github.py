"""Source-control identities — the users and repositories an event refers to."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A source-control account.

    ``login`` is the case-sensitive identity key.  Every routing decision
    (dedup, self-exclusion, bot-exclusion) compares logins and nothing else.
    """

    model_config = ConfigDict(frozen=True)

    login: str
    name: str | None = None  # display only
    html_url: str | None = None


class Repo(BaseModel):
    """A repository, used as a lookup key and for link rendering."""

    model_config = ConfigDict(frozen=True)

    full_name: str  # "owner/name"
    html_url: str

    @property
    def owner_login(self) -> str:
        """The organisation or user that owns the repository."""
        return self.full_name.split("/", 1)[0]

    @property
    def name(self) -> str:
        return self.full_name.split("/", 1)[-1]
