"""Garden session — owns one garden and runs every action as a transaction.

Each action (pet, passive tick, purchase, rebirth) mutates the state, then
explicitly runs the unlock evaluator, persists the snapshot, and hands back
the notifications the presentation layer should react to.
"""

from __future__ import annotations

import logging
from typing import Callable

from cozycat.engine.economy import apply_pet_action, purchase_upgrade
from cozycat.engine.game_state import ProgressionState
from cozycat.engine.notifications import Notification, PrestigeAvailableChanged
from cozycat.engine.prestige import perform_rebirth, rebirth_gain
from cozycat.engine.save import MemoryStorage, Storage, load_garden, save_garden
from cozycat.engine.scheduler import AccrualScheduler
from cozycat.engine.unlocks import evaluate_unlocks

logger = logging.getLogger(__name__)

Listener = Callable[[list[Notification]], None]


class GardenSession:
    """The single logical owner of a ProgressionState."""

    def __init__(
        self,
        state: ProgressionState | None = None,
        storage: Storage | None = None,
        pixel_mode: bool = False,
        listener: Listener | None = None,
    ) -> None:
        self.state = state if state is not None else ProgressionState()
        self.storage: Storage = storage if storage is not None else MemoryStorage()
        self.pixel_mode = pixel_mode
        self.listener = listener
        self._last_notifications: list[Notification] = []
        self.scheduler = AccrualScheduler(self.state, on_accrued=self._commit)
        self._last_gain = rebirth_gain(self.state)

    @classmethod
    def load(cls, storage: Storage, listener: Listener | None = None) -> GardenSession:
        """Resume the garden saved in storage (or start a fresh one)."""
        state, pixel_mode = load_garden(storage)
        logger.info(
            "garden loaded: %.1f pets, %d hearts, %d rebirths",
            state.currency, state.prestige_currency, state.prestige_count,
        )
        session = cls(state=state, storage=storage, pixel_mode=pixel_mode, listener=listener)
        # A save from before a threshold rule existed may already qualify
        session._commit()
        return session

    # ── Queries ───────────────────────────────────────────

    @property
    def rebirth_gain(self) -> int:
        return rebirth_gain(self.state)

    @property
    def last_notifications(self) -> list[Notification]:
        """What the most recent transaction emitted."""
        return list(self._last_notifications)

    # ── Actions ───────────────────────────────────────────

    def pet(self) -> list[Notification]:
        apply_pet_action(self.state)
        return self._commit()

    def tick(self) -> list[Notification]:
        """One passive-loop firing. A no-op without passive income."""
        if not self.scheduler.fire():
            return []
        return list(self._last_notifications)

    def purchase(self, upgrade_id: str) -> list[Notification]:
        """Raises InsufficientFunds / UnknownUpgrade with nothing changed."""
        purchase_upgrade(self.state, upgrade_id)
        return self._commit()

    def rebirth(self) -> list[Notification]:
        """Raises NoGainAvailable with nothing changed.

        Confirmation is the caller's job; declining means never calling this.
        """
        perform_rebirth(self.state)
        return self._commit()

    def set_pixel_mode(self, enabled: bool) -> None:
        self.pixel_mode = enabled
        self.save()

    def save(self) -> bool:
        return save_garden(self.storage, self.state, self.pixel_mode)

    def shutdown(self) -> None:
        self.scheduler.stop()
        self.save()

    # ── Internals ─────────────────────────────────────────

    def _commit(self) -> list[Notification]:
        notifications = evaluate_unlocks(self.state)

        gain = rebirth_gain(self.state)
        if gain != self._last_gain:
            self._last_gain = gain
            notifications.append(PrestigeAvailableChanged(gain))

        self.save()
        self._last_notifications = notifications
        if notifications and self.listener is not None:
            self.listener(notifications)
        return notifications
