"""Balance constants — all tuning knobs in one place.

Tweak these to adjust game feel and pacing.
All upgrade costs follow: floor(base_cost * (growth_factor ^ times_purchased))
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EconomyBalance:
    """Tuning for pet generation and the passive loop."""

    # Rates at the start of a fresh garden (before hearts)
    base_click_rate: float = 1.0
    base_passive_rate: float = 0.0

    # Passive loop: one firing every tick_interval_s of wall time,
    # each worth 1 / ticks_per_second of a nominal second
    tick_interval_s: float = 0.1
    ticks_per_second: int = 10

    # Large number formatting units (each step is x1000)
    suffixes: tuple[str, ...] = ("", "K", "M", "B", "T")


@dataclass(frozen=True)
class PrestigeBalance:
    """Tuning for Dreamy Rebirth."""

    # Hearts available = floor(log10(best_run / heart_threshold))
    heart_threshold: float = 1_000.0
    # Each heart: +5% to both base rates after a rebirth
    heart_bonus_per: float = 0.05


@dataclass(frozen=True)
class CompanionRule:
    """A companion joins the garden once the run's best reaches threshold."""

    id: str
    name: str
    blurb: str
    threshold: float
    target: str          # "click" | "passive"
    factor: float


@dataclass(frozen=True)
class UnlockBalance:
    """Companion unlocks, evaluated in this order."""

    companions: tuple[CompanionRule, ...] = (
        CompanionRule(
            id="zeze",
            name="Zeze",
            blurb="mysterious void",
            threshold=2_000,
            target="passive",
            factor=1.1,
        ),
        CompanionRule(
            id="bmo",
            name="BMO",
            blurb="dramatic ahh cat",
            threshold=15_000,
            target="click",
            factor=1.1,
        ),
    )


@dataclass(frozen=True)
class EndingBalance:
    """When the birthday ending triggers (either condition)."""

    hearts_required: int = 5
    peak_required: float = 200_000


@dataclass(frozen=True)
class SaveBalance:
    """Persistence slot naming."""

    slot_key: str = "inciCozyCatGardenSave"
    dir_env_var: str = "COZYCAT_HOME"
    default_dir_name: str = ".cozycat"


@dataclass(frozen=True)
class GameBalance:
    """Top-level container for all balance constants."""

    economy: EconomyBalance = field(default_factory=EconomyBalance)
    prestige: PrestigeBalance = field(default_factory=PrestigeBalance)
    unlocks: UnlockBalance = field(default_factory=UnlockBalance)
    ending: EndingBalance = field(default_factory=EndingBalance)
    save: SaveBalance = field(default_factory=SaveBalance)


# Immutable; import this everywhere
BALANCE = GameBalance()
