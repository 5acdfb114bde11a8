"""Game state — single source of truth for the garden."""

from __future__ import annotations

from dataclasses import dataclass, field

from cozycat.data.balance import BALANCE
from cozycat.data.upgrades import UPGRADE_ORDER
from cozycat.engine.rates import Rates


def zero_levels() -> dict[str, int]:
    """One entry per catalog upgrade, in catalog order, all unowned."""
    return {uid: 0 for uid in UPGRADE_ORDER}


@dataclass
class ProgressionState:
    """Complete mutable state of one garden (current run + permanent bits)."""

    # ── Current run ──────────────────────────────────────
    currency: float = 0.0
    peak_currency: float = 0.0   # best pets this run; drives hearts & unlocks

    # ── Rates (updated incrementally, never recomputed) ──
    click_rate: float = BALANCE.economy.base_click_rate
    passive_rate: float = BALANCE.economy.base_passive_rate

    # ── Prestige (survives rebirth) ──────────────────────
    prestige_currency: int = 0   # hearts
    prestige_count: int = 0      # rebirths

    # ── Upgrades: id → times purchased ───────────────────
    upgrade_levels: dict[str, int] = field(default_factory=zero_levels)

    # ── Companions unlocked this run ─────────────────────
    unlock_flags: set[str] = field(default_factory=set)

    # ── Ending (never cleared, not even by rebirth) ──────
    ending_reached: bool = False

    @property
    def rates(self) -> Rates:
        return Rates(click_rate=self.click_rate, passive_rate=self.passive_rate)

    @rates.setter
    def rates(self, value: Rates) -> None:
        self.click_rate = value.click_rate
        self.passive_rate = value.passive_rate

    def level_of(self, upgrade_id: str) -> int:
        return self.upgrade_levels.get(upgrade_id, 0)

    def record_peak(self) -> None:
        """Update the run's best after currency grew."""
        if self.currency > self.peak_currency:
            self.peak_currency = self.currency
