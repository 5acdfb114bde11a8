"""Rate model — pets per click and per second, and how they compose."""

from __future__ import annotations

from dataclasses import dataclass

from cozycat.data.balance import BALANCE
from cozycat.data.upgrades import UpgradeDef, apply_effect


@dataclass(frozen=True)
class Rates:
    """Effective gain rates at one instant."""

    click_rate: float = BALANCE.economy.base_click_rate
    passive_rate: float = BALANCE.economy.base_passive_rate

    def with_upgrade(self, udef: UpgradeDef) -> Rates:
        """Rates after one purchase of udef (applied on top, never recomputed)."""
        click, passive = apply_effect(udef, self.click_rate, self.passive_rate)
        return Rates(click_rate=click, passive_rate=passive)

    def scaled(self, target: str, factor: float) -> Rates:
        """Multiply one rate ("click" or "passive") by factor."""
        if target == "click":
            return Rates(self.click_rate * factor, self.passive_rate)
        if target == "passive":
            return Rates(self.click_rate, self.passive_rate * factor)
        raise ValueError(f"unknown rate target: {target!r}")


def heart_boost(hearts: int) -> float:
    """Permanent multiplier granted by hearts: +5% per heart."""
    return 1.0 + hearts * BALANCE.prestige.heart_bonus_per


def base_rates(hearts: int = 0) -> Rates:
    """Starting rates for a fresh run, boosted by hearts."""
    bal = BALANCE.economy
    boost = heart_boost(hearts)
    return Rates(
        click_rate=bal.base_click_rate * boost,
        passive_rate=bal.base_passive_rate * boost,
    )
