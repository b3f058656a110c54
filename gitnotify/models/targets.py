"""Delivery targets and per-target dispatch outcomes.

A resolved target is one of three variants:

* ``ChannelTarget``: the shared channel configured for a repository.
* ``DirectTarget``: a per-user direct-message reference.
* ``MutedTarget``: the user opted out; nothing may be delivered.

The variant is decided once, when the directory's reference string is
classified.  Past that point nothing compares against the mute marker.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class TargetKind(str, Enum):
    """Discriminator for the target variants."""

    CHANNEL = "channel"
    DIRECT = "direct"
    MUTED = "muted"


class ChannelTarget(BaseModel):
    """A repository-wide channel (e.g. ``"#eng"``)."""

    model_config = ConfigDict(frozen=True)

    kind: TargetKind = TargetKind.CHANNEL
    channel: str

    @property
    def address(self) -> str:
        return self.channel


class DirectTarget(BaseModel):
    """A direct-message reference for one user (e.g. ``"@alice"``)."""

    model_config = ConfigDict(frozen=True)

    kind: TargetKind = TargetKind.DIRECT
    ref: str
    login: str

    @property
    def address(self) -> str:
        return self.ref


class MutedTarget(BaseModel):
    """A user who does not want direct notifications for this repository."""

    model_config = ConfigDict(frozen=True)

    kind: TargetKind = TargetKind.MUTED
    login: str

    @property
    def address(self) -> str | None:
        return None


Target = Union[ChannelTarget, DirectTarget, MutedTarget]


class DeliveryOutcome(str, Enum):
    """What happened to a single target during a dispatch."""

    SENT = "sent"
    FAILED = "failed"
    MUTED = "muted"


class DeliveryResult(BaseModel):
    """A ``(target, outcome)`` pair reported back to the caller."""

    model_config = ConfigDict(frozen=True)

    target: Target
    outcome: DeliveryOutcome
    error: str = ""  # populated for FAILED when the sink raised

    @property
    def delivered(self) -> bool:
        return self.outcome is DeliveryOutcome.SENT
