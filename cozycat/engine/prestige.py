"""Prestige system — Dreamy Rebirth (hearts for a full run reset)."""

from __future__ import annotations

import logging
import math

from cozycat.data.balance import BALANCE
from cozycat.engine.errors import NoGainAvailable
from cozycat.engine.game_state import ProgressionState, zero_levels
from cozycat.engine.rates import base_rates

logger = logging.getLogger(__name__)


def potential_prestige(peak_currency: float) -> int:
    """Total hearts a run with this best is worth: floor(log10(best / 1000))."""
    threshold = BALANCE.prestige.heart_threshold
    if peak_currency < threshold:
        return 0
    return max(0, math.floor(math.log10(peak_currency / threshold)))


def available_prestige_gain(peak_currency: float, current_prestige: int) -> int:
    """Hearts a rebirth would add on top of the ones already owned."""
    return max(0, potential_prestige(peak_currency) - current_prestige)


def rebirth_gain(state: ProgressionState) -> int:
    return available_prestige_gain(state.peak_currency, state.prestige_currency)


def can_rebirth(state: ProgressionState) -> bool:
    return rebirth_gain(state) > 0


def perform_rebirth(state: ProgressionState) -> int:
    """Trade the run for hearts. Returns hearts gained.

    Pets, best run, upgrades and companions reset; hearts, rebirth count and
    the ending flag persist. Base rates are boosted by the new heart total.
    """
    gain = rebirth_gain(state)
    if gain <= 0:
        raise NoGainAvailable(
            f"best run {state.peak_currency:g} grants no hearts beyond "
            f"the {state.prestige_currency} already owned"
        )

    state.prestige_currency += gain
    state.prestige_count += 1

    # Full run reset
    state.currency = 0.0
    state.peak_currency = 0.0
    state.upgrade_levels = zero_levels()
    state.unlock_flags.clear()
    state.rates = base_rates(state.prestige_currency)

    logger.info(
        "rebirth #%d: +%d hearts (total %d, click=%.3f)",
        state.prestige_count, gain, state.prestige_currency, state.click_rate,
    )
    return gain
