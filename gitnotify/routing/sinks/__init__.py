"""Sink protocol for gitnotify delivery.

A sink delivers one message, with attachments, to one named target (a
channel or a direct-message reference).  Failure is reported as a
``False`` return value, never by raising.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from gitnotify.models.slack import SlackAttachment


@runtime_checkable
class NotificationSink(Protocol):
    """Protocol that every delivery sink must implement.

    Attributes
    ----------
    sink_name : str
        A short human-readable identifier used in log lines
        (e.g. ``"slack_webhook"``).
    """

    @property
    def sink_name(self) -> str:
        """Return the name of this sink."""
        ...

    def send(
        self,
        target: str,
        message: str,
        attachments: Sequence[SlackAttachment],
    ) -> bool:
        """Deliver *message* and *attachments* to *target*.

        Returns ``True`` on success.  Implementations should not raise;
        the Messenger logs and records anything that escapes as a failure.
        """
        ...
