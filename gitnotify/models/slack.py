"""Slack attachment models.

Attachments are opaque to the router: they are built by the caller,
passed through every dispatch unchanged, and serialized only by the
Slack sink.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SlackAttachmentField(BaseModel):
    """A single title/value pair rendered inside an attachment."""

    model_config = ConfigDict(frozen=True)

    title: str
    value: str
    short: bool = False


class SlackAttachment(BaseModel):
    """A Slack legacy message attachment."""

    model_config = ConfigDict(frozen=True)

    text: str = ""
    title: str | None = None
    title_link: str | None = None
    color: str | None = None  # "good", "warning", "danger" or "#rrggbb"
    fields: list[SlackAttachmentField] | None = None
    mrkdwn_in: list[str] | None = None

    def to_payload(self) -> dict:
        """Return the JSON-ready dict for the webhook body."""
        return self.model_dump(exclude_none=True)
