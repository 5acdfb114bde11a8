"""Upgrade definitions — all purchasable upgrades and their effects."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

from cozycat.engine.errors import InvalidArgument, UnknownUpgrade


class UpgradeEffect(Enum):
    """What an upgrade modifies."""

    ADD_CLICK_RATE = auto()      # +magnitude pets per pet action
    MULT_CLICK_RATE = auto()     # pets per action × (1 + magnitude)
    ADD_PASSIVE_RATE = auto()    # +magnitude pets per second
    MULT_PASSIVE_RATE = auto()   # pets per second × (1 + magnitude)
    MULT_GLOBAL_RATE = auto()    # both rates × (1 + magnitude)


@dataclass(frozen=True)
class UpgradeDef:
    """Definition of a single upgrade."""

    id: str
    name: str
    description: str
    effect: UpgradeEffect
    magnitude: float
    base_cost: float
    growth_factor: float

    def __post_init__(self) -> None:
        if self.magnitude <= 0:
            raise InvalidArgument(f"{self.id}: magnitude must be positive")
        if self.base_cost <= 0:
            raise InvalidArgument(f"{self.id}: base_cost must be positive")
        # growth > 1 keeps every level strictly pricier than the last
        if self.growth_factor <= 1:
            raise InvalidArgument(f"{self.id}: growth_factor must exceed 1")

    def cost_at_level(self, current_level: int) -> int:
        """Pet cost for the *next* purchase given current_level owned."""
        if current_level < 0:
            raise InvalidArgument(f"level must be >= 0, got {current_level}")
        return math.floor(self.base_cost * (self.growth_factor ** current_level))


def cost_at(udef: UpgradeDef, level: int) -> int:
    return udef.cost_at_level(level)


def apply_effect(udef: UpgradeDef, click_rate: float, passive_rate: float) -> tuple[float, float]:
    """Return (click_rate, passive_rate) after one level of udef."""
    e = udef.effect
    boost = 1.0 + udef.magnitude

    if e == UpgradeEffect.ADD_CLICK_RATE:
        return click_rate + udef.magnitude, passive_rate
    if e == UpgradeEffect.MULT_CLICK_RATE:
        return click_rate * boost, passive_rate
    if e == UpgradeEffect.ADD_PASSIVE_RATE:
        return click_rate, passive_rate + udef.magnitude
    if e == UpgradeEffect.MULT_PASSIVE_RATE:
        return click_rate, passive_rate * boost
    if e == UpgradeEffect.MULT_GLOBAL_RATE:
        return click_rate * boost, passive_rate * boost

    raise InvalidArgument(f"unhandled upgrade effect: {e}")


# ── The garden's upgrades (catalog order is the save-file order) ──

SOFT_PAWS = UpgradeDef(
    id="softPaws",
    name="Soft Paws",
    description="+0.50 pets per click",
    effect=UpgradeEffect.ADD_CLICK_RATE,
    magnitude=0.5,
    base_cost=15,
    growth_factor=1.35,
)

SLEEPUSHI = UpgradeDef(
    id="sleepushi",
    name="Sleepushi",
    description="+2.0 pets per click",
    effect=UpgradeEffect.ADD_CLICK_RATE,
    magnitude=2.0,
    base_cost=80,
    growth_factor=1.45,
)

BLANKET = UpgradeDef(
    id="blanket",
    name="Supa Cozy Blanket",
    description="+25% per-click pets",
    effect=UpgradeEffect.MULT_CLICK_RATE,
    magnitude=0.25,
    base_cost=150,
    growth_factor=1.55,
)

SUNBEAM = UpgradeDef(
    id="sunbeam",
    name="Sunny Window",
    description="+0.5 pets per second",
    effect=UpgradeEffect.ADD_PASSIVE_RATE,
    magnitude=0.5,
    base_cost=20,
    growth_factor=1.3,
)

AUTO_PETTER = UpgradeDef(
    id="autoPetter",
    name="Auto Petter",
    description="+2.0 pets per second",
    effect=UpgradeEffect.ADD_PASSIVE_RATE,
    magnitude=2.0,
    base_cost=120,
    growth_factor=1.5,
)

CAT_CAFE = UpgradeDef(
    id="catCafe",
    name="Cat Café",
    description="+6.0 pets per second",
    effect=UpgradeEffect.ADD_PASSIVE_RATE,
    magnitude=6.0,
    base_cost=400,
    growth_factor=1.6,
)

INFLUENCER = UpgradeDef(
    id="influencer",
    name="Little Princessushi",
    description="+25% passive pets",
    effect=UpgradeEffect.MULT_PASSIVE_RATE,
    magnitude=0.25,
    base_cost=600,
    growth_factor=1.7,
)

TREAT_BAG = UpgradeDef(
    id="treatBag",
    name="Food Stealer",
    description="+20% to ALL pets",
    effect=UpgradeEffect.MULT_GLOBAL_RATE,
    magnitude=0.2,
    base_cost=900,
    growth_factor=1.75,
)

THRONE = UpgradeDef(
    id="throne",
    name="Thronushi",
    description="+35% to ALL pets",
    effect=UpgradeEffect.MULT_GLOBAL_RATE,
    magnitude=0.35,
    base_cost=2000,
    growth_factor=1.9,
)

# ── All upgrades registry ────────────────────────────────────────

ALL_UPGRADES: dict[str, UpgradeDef] = {
    u.id: u
    for u in [
        SOFT_PAWS,
        SLEEPUSHI,
        BLANKET,
        SUNBEAM,
        AUTO_PETTER,
        CAT_CAFE,
        INFLUENCER,
        TREAT_BAG,
        THRONE,
    ]
}

UPGRADE_ORDER: list[str] = list(ALL_UPGRADES)


def get_upgrade(upgrade_id: str) -> UpgradeDef:
    try:
        return ALL_UPGRADES[upgrade_id]
    except KeyError:
        raise UnknownUpgrade(upgrade_id) from None
