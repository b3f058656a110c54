"""gitnotify data models — all Pydantic v2, all frozen (immutable)."""

from gitnotify.models.github import Repo, User
from gitnotify.models.slack import SlackAttachment, SlackAttachmentField
from gitnotify.models.targets import (
    ChannelTarget,
    DeliveryOutcome,
    DeliveryResult,
    DirectTarget,
    MutedTarget,
    Target,
    TargetKind,
)

__all__ = [
    # github
    "User",
    "Repo",
    # slack
    "SlackAttachment",
    "SlackAttachmentField",
    # targets
    "TargetKind",
    "ChannelTarget",
    "DirectTarget",
    "MutedTarget",
    "Target",
    "DeliveryOutcome",
    "DeliveryResult",
]
