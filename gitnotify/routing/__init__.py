"""gitnotify event routing — turns one repository event into deliveries.

The Messenger asks a Directory where to deliver, asks the
RecipientResolver who to deliver to, drops muted users, and hands each
remaining target to a NotificationSink.  Deliveries are best-effort and
independent of each other.
"""

from gitnotify.routing.directory import (
    Directory,
    RepoConfig,
    StaticDirectory,
    UserConfig,
    UserInfo,
    classify_target,
)
from gitnotify.routing.messenger import Messenger
from gitnotify.routing.recipients import RecipientResolver, resolve_recipients
from gitnotify.routing.sinks import NotificationSink

__all__ = [
    "Directory",
    "StaticDirectory",
    "RepoConfig",
    "UserConfig",
    "UserInfo",
    "classify_target",
    "Messenger",
    "RecipientResolver",
    "resolve_recipients",
    "NotificationSink",
]
