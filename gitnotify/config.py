"""Runtime configuration — env-driven.

Settings are read from ``GITNOTIFY_*`` environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BOT_LOGIN = "octobot"
DEFAULT_MUTE_MARKER = "DO NOT DISTURB"


class NotifySettings(BaseSettings):
    """Router configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export GITNOTIFY_BOT_LOGIN=release-bot
        export GITNOTIFY_SLACK_WEBHOOK_URL=https://hooks.slack.com/services/...
        export GITNOTIFY_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GITNOTIFY_",
        env_file_encoding="utf-8",
    )

    # Logging
    log_level: str = "INFO"

    # Routing policy
    bot_login: str = DEFAULT_BOT_LOGIN  # never receives direct messages
    mute_marker: str = DEFAULT_MUTE_MARKER

    # Slack delivery
    slack_webhook_url: str = ""
    slack_username: str = DEFAULT_BOT_LOGIN
    send_timeout_seconds: float = 10.0

    @property
    def mute_mention(self) -> str:
        """The ``@``-prefixed mention form of the mute marker."""
        return f"@{self.mute_marker}"
