"""RecipientResolver — who gets a direct message for an event.

Pure policy, no I/O.  The ordering rules are:

1. the item owner first;
2. then each assignee that is not the owner, in assignee order;
3. minus the sender (nobody is told about their own action);
4. minus the bot account;
5. deduplicated by login, first occurrence wins.
"""

from __future__ import annotations

from collections.abc import Iterable

from gitnotify.config import DEFAULT_BOT_LOGIN
from gitnotify.errors import ConfigurationError
from gitnotify.models.github import User


class RecipientResolver:
    """Computes the ordered, deduplicated direct-message recipients.

    Parameters
    ----------
    bot_login:
        The service account's own login.  It is never a recipient.
    """

    def __init__(self, bot_login: str = DEFAULT_BOT_LOGIN) -> None:
        if not bot_login:
            raise ConfigurationError("bot_login must be a non-empty login")
        self._bot_login = bot_login

    @property
    def bot_login(self) -> str:
        return self._bot_login

    def resolve(
        self,
        owner: User,
        sender: User | None,
        assignees: Iterable[User] = (),
    ) -> list[User]:
        """Return the recipients for an event, owner first.

        An absent *sender* (automated events) skips self-exclusion.
        """
        candidates = [owner]
        candidates.extend(a for a in assignees if a.login != owner.login)

        excluded = {self._bot_login}
        if sender is not None:
            excluded.add(sender.login)

        seen: set[str] = set()
        recipients: list[User] = []
        for user in candidates:
            if user.login in excluded or user.login in seen:
                continue
            seen.add(user.login)
            recipients.append(user)
        return recipients


def resolve_recipients(
    owner: User,
    sender: User | None,
    assignees: Iterable[User] = (),
    *,
    bot_login: str = DEFAULT_BOT_LOGIN,
) -> list[User]:
    """Functional shortcut for ``RecipientResolver(bot_login).resolve(...)``."""
    return RecipientResolver(bot_login).resolve(owner, sender, assignees)
