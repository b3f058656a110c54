"""Messenger — fans one source-control event out to its delivery targets.

Every dispatch first tries the repository channel, then each direct
recipient.  Deliveries are independent: a failure for one target is
logged and recorded, and the remaining targets are still attempted.
Callers always get a result list back and never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from gitnotify.config import DEFAULT_MUTE_MARKER, NotifySettings
from gitnotify.errors import ConfigurationError
from gitnotify.models.github import Repo, User
from gitnotify.models.slack import SlackAttachment
from gitnotify.models.targets import (
    ChannelTarget,
    DeliveryOutcome,
    DeliveryResult,
    DirectTarget,
    MutedTarget,
)
from gitnotify.routing.directory import classify_target
from gitnotify.routing.recipients import RecipientResolver
from gitnotify.routing.sinks._formatting import repo_link

if TYPE_CHECKING:
    from gitnotify.routing.directory import Directory
    from gitnotify.routing.sinks import NotificationSink

logger = logging.getLogger(__name__)


class Messenger:
    """Routes event notifications to a channel and to individual users.

    Usage
    -----
    >>> messenger = Messenger(directory, sink)
    >>> messenger.send_to_all(msg, attachments, owner, sender, repo, assignees)
    """

    def __init__(
        self,
        directory: Directory,
        sink: NotificationSink,
        *,
        resolver: RecipientResolver | None = None,
        mute_marker: str = DEFAULT_MUTE_MARKER,
    ) -> None:
        if not mute_marker:
            raise ConfigurationError("mute_marker must be a non-empty string")
        directory_marker = getattr(directory, "mute_marker", mute_marker)
        if directory_marker != mute_marker:
            raise ConfigurationError(
                f"directory mute marker {directory_marker!r} does not match "
                f"messenger mute marker {mute_marker!r}"
            )
        self._directory = directory
        self._sink = sink
        self._resolver = resolver or RecipientResolver()
        self._mute_marker = mute_marker

    @classmethod
    def from_settings(
        cls,
        settings: NotifySettings,
        directory: Directory,
        sink: NotificationSink,
    ) -> Messenger:
        """Build a Messenger using the bot login and mute marker in *settings*."""
        return cls(
            directory,
            sink,
            resolver=RecipientResolver(settings.bot_login),
            mute_marker=settings.mute_marker,
        )

    # ------------------------------------------------------------------
    # Public dispatch operations
    # ------------------------------------------------------------------

    def send_to_channel(
        self,
        message: str,
        attachments: Sequence[SlackAttachment],
        repo: Repo,
    ) -> list[DeliveryResult]:
        """Send to the repository channel, if one is configured.

        The channel copy of the message gets a link to the repository
        appended.  Channels are shared, so no mute check applies.
        """
        channel = self._directory.lookup_channel(repo)
        if channel is None:
            return []

        channel_msg = f"{message} ({repo_link(repo)})"
        return [self._deliver(ChannelTarget(channel=channel), channel_msg, attachments)]

    def send_to_owner(
        self,
        message: str,
        attachments: Sequence[SlackAttachment],
        owner: User,
        repo: Repo,
    ) -> list[DeliveryResult]:
        """Send to the channel, then directly to the item owner."""
        results = self.send_to_channel(message, attachments, repo)
        results.extend(self._send_direct([owner], message, attachments, repo))
        self._warn_failures(repo, results)
        return results

    def send_to_all(
        self,
        message: str,
        attachments: Sequence[SlackAttachment],
        owner: User,
        sender: User | None,
        repo: Repo,
        assignees: Iterable[User] = (),
    ) -> list[DeliveryResult]:
        """Send to the channel, then to the owner and assignees.

        The sender and the bot account are never messaged directly.
        """
        results = self.send_to_channel(message, attachments, repo)
        recipients = self._resolver.resolve(owner, sender, assignees)
        results.extend(self._send_direct(recipients, message, attachments, repo))
        self._warn_failures(repo, results)
        return results

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _warn_failures(repo: Repo, results: list[DeliveryResult]) -> None:
        failed = [r for r in results if r.outcome is DeliveryOutcome.FAILED]
        if failed:
            logger.warning(
                "%s: %d/%d deliveries failed",
                repo.full_name,
                len(failed),
                len(results),
            )

    def _send_direct(
        self,
        users: Iterable[User],
        message: str,
        attachments: Sequence[SlackAttachment],
        repo: Repo,
    ) -> list[DeliveryResult]:
        results: list[DeliveryResult] = []
        for user in users:
            ref = self._directory.resolve_direct_target(user.login, repo)
            target = classify_target(ref, user.login, self._mute_marker)
            if isinstance(target, MutedTarget):
                logger.debug("%s muted notifications for %s", user.login, repo.full_name)
                results.append(DeliveryResult(target=target, outcome=DeliveryOutcome.MUTED))
                continue
            results.append(self._deliver(target, message, attachments))
        return results

    def _deliver(
        self,
        target: ChannelTarget | DirectTarget,
        message: str,
        attachments: Sequence[SlackAttachment],
    ) -> DeliveryResult:
        address = target.address
        try:
            ok = self._sink.send(address, message, attachments)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Sink %s raised while sending to %s: %s",
                self._sink.sink_name,
                address,
                exc,
            )
            return DeliveryResult(
                target=target, outcome=DeliveryOutcome.FAILED, error=str(exc)
            )

        if not ok:
            logger.error("Sink %s failed to deliver to %s", self._sink.sink_name, address)
            return DeliveryResult(target=target, outcome=DeliveryOutcome.FAILED)

        logger.info("Delivered to %s via %s", address, self._sink.sink_name)
        return DeliveryResult(target=target, outcome=DeliveryOutcome.SENT)
