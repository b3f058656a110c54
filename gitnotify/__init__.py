"""gitnotify: fan-out of source-control events to Slack channels and users.

  - RecipientResolver: owner + assignees, minus the sender and the bot
  - Messenger: channel first, then one independent delivery per recipient
  - Per-user mute ("DO NOT DISTURB") honoured for direct messages
  - Slack incoming-webhook sink over httpx
"""

__version__ = "0.1.0"
__description__ = "Notification fan-out router for source-control events"

from gitnotify.routing.messenger import Messenger
from gitnotify.routing.recipients import RecipientResolver

__all__ = ["Messenger", "RecipientResolver", "__version__"]
