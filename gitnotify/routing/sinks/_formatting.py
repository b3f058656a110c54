"""Slack formatting helpers shared by the Messenger and the webhook sink."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from gitnotify.models.github import Repo
from gitnotify.models.slack import SlackAttachment


def escape(text: str) -> str:
    """Escape the three characters Slack treats as control sequences.

    >>> escape("a < b & c")
    'a &lt; b &amp; c'
    """
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def make_link(url: str, text: str) -> str:
    """Render a Slack link.

    >>> make_link("https://github.com/acme/widgets", "acme/widgets")
    '<https://github.com/acme/widgets|acme/widgets>'
    """
    return f"<{url}|{escape(text)}>"


def repo_link(repo: Repo) -> str:
    """Render a link to *repo* labelled with its full name."""
    return make_link(repo.html_url, repo.full_name)


def build_payload(
    channel: str,
    text: str,
    attachments: Sequence[SlackAttachment],
    username: str = "",
) -> dict[str, Any]:
    """Build an incoming-webhook body addressed to *channel*."""
    payload: dict[str, Any] = {
        "channel": channel,
        "text": text,
        "attachments": [a.to_payload() for a in attachments],
    }
    if username:
        payload["username"] = username
    return payload
