"""Engine → presentation notifications (emitted, never persisted)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UnlockCrossed:
    """A companion joined the garden."""

    unlock_id: str
    kind: str = "unlock_crossed"


@dataclass(frozen=True)
class EndingReached:
    """The birthday ending condition was met for the first time."""

    kind: str = "ending_reached"


@dataclass(frozen=True)
class PrestigeAvailableChanged:
    """The number of hearts a rebirth would grant right now changed."""

    gain: int
    kind: str = "prestige_available_changed"


Notification = UnlockCrossed | EndingReached | PrestigeAvailableChanged


def to_dict(notification: Notification) -> dict:
    """JSON-friendly form for the web API."""
    if isinstance(notification, UnlockCrossed):
        return {"kind": notification.kind, "unlock_id": notification.unlock_id}
    if isinstance(notification, PrestigeAvailableChanged):
        return {"kind": notification.kind, "gain": notification.gain}
    return {"kind": notification.kind}
