"""Exception hierarchy for gitnotify.

Delivery problems are never raised to callers; they are reported as
``DeliveryOutcome.FAILED``.  These exceptions cover construction-time
misuse only.
"""

from __future__ import annotations


class GitNotifyError(RuntimeError):
    """Base class for gitnotify errors."""


class ConfigurationError(GitNotifyError):
    """Raised when a router component is built with unusable settings."""
