"""Slack incoming-webhook sink.

Posts one JSON payload per ``send`` call.  The ``channel`` field routes
the message to a channel (``"#eng"``) or a user's direct messages
(``"@alice"``).  The request timeout is the only bound on a delivery;
there is no retry.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import httpx

from gitnotify.config import NotifySettings
from gitnotify.models.slack import SlackAttachment
from gitnotify.routing.sinks._formatting import build_payload

logger = logging.getLogger(__name__)


class SlackWebhookSink:
    """Delivers messages through a Slack incoming webhook.

    Parameters
    ----------
    webhook_url:
        The incoming-webhook URL.  An empty URL makes every send fail.
    username:
        Display name for posted messages.
    timeout:
        Per-request timeout in seconds.
    client:
        An ``httpx.Client`` to use instead of creating one.  The sink
        does not close a client it did not create.
    """

    def __init__(
        self,
        webhook_url: str,
        username: str = "octobot",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._username = username
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: NotifySettings) -> SlackWebhookSink:
        """Build a sink from the webhook, username and timeout in *settings*."""
        return cls(
            settings.slack_webhook_url,
            username=settings.slack_username,
            timeout=settings.send_timeout_seconds,
        )

    @property
    def sink_name(self) -> str:
        return "slack_webhook"

    def send(
        self,
        target: str,
        message: str,
        attachments: Sequence[SlackAttachment],
    ) -> bool:
        if not self._webhook_url:
            logger.warning("Slack webhook URL is not configured; dropping message to %s", target)
            return False

        payload = build_payload(target, message, attachments, self._username)
        try:
            response = self._client.post(self._webhook_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Slack delivery to %s failed: %s", target, exc)
            return False

        logger.debug("Slack delivery to %s succeeded", target)
        return True

    def close(self) -> None:
        """Release the HTTP client if this sink created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> SlackWebhookSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
