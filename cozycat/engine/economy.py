"""Economy engine — pet generation, spending, and number formatting."""

from __future__ import annotations

import logging

from cozycat.data.balance import BALANCE
from cozycat.data.upgrades import get_upgrade
from cozycat.engine.errors import InsufficientFunds, InvalidArgument
from cozycat.engine.game_state import ProgressionState

logger = logging.getLogger(__name__)


def apply_pet_action(state: ProgressionState) -> float:
    """Handle a single pet. Returns pets earned."""
    earned = state.click_rate
    state.currency += earned
    state.record_peak()
    return earned


def apply_passive_tick(state: ProgressionState, elapsed_fraction: float) -> float:
    """Apply passive income for a fraction of a nominal second. Returns pets earned.

    Does nothing at all when the passive rate is zero.
    """
    if elapsed_fraction < 0:
        raise InvalidArgument(f"elapsed_fraction must be >= 0, got {elapsed_fraction}")
    if state.passive_rate <= 0:
        return 0.0

    earned = state.passive_rate * elapsed_fraction
    state.currency += earned
    state.record_peak()
    return earned


def get_upgrade_cost(state: ProgressionState, upgrade_id: str) -> int:
    """Calculate the current cost of the next level of an upgrade."""
    udef = get_upgrade(upgrade_id)
    return udef.cost_at_level(state.level_of(upgrade_id))


def can_afford_upgrade(state: ProgressionState, upgrade_id: str) -> bool:
    """Check if the player can afford an upgrade."""
    return state.currency >= get_upgrade_cost(state, upgrade_id)


def purchase_upgrade(state: ProgressionState, upgrade_id: str) -> int:
    """Buy one level of an upgrade. Returns the pets spent.

    Raises InsufficientFunds (state untouched) when the player is short.
    """
    udef = get_upgrade(upgrade_id)
    current_level = state.level_of(upgrade_id)
    cost = udef.cost_at_level(current_level)

    if state.currency < cost:
        raise InsufficientFunds(upgrade_id, cost, state.currency)

    # Charge at the pre-purchase level, then apply the effect exactly once
    state.currency -= cost
    state.upgrade_levels[upgrade_id] = current_level + 1
    state.rates = state.rates.with_upgrade(udef)

    logger.debug(
        "bought %s level %d for %d (click=%.3f passive=%.3f)",
        upgrade_id, current_level + 1, cost, state.click_rate, state.passive_rate,
    )
    return cost


def format_pets(n: float) -> str:
    """Format a pet count with suffixes for readability."""
    if n < 0:
        return f"-{format_pets(-n)}"
    if n < 1000:
        return f"{n:.1f}"

    units = BALANCE.economy.suffixes
    u = 0
    value = n
    while value >= 1000 and u < len(units) - 1:
        value /= 1000
        u += 1
    return f"{value:.2f}{units[u]}"
