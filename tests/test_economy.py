"""Tests for the economy engine."""

import copy
import random

import pytest

from cozycat.engine.economy import (
    apply_passive_tick,
    apply_pet_action,
    can_afford_upgrade,
    format_pets,
    get_upgrade_cost,
    purchase_upgrade,
)
from cozycat.engine.errors import InsufficientFunds, InvalidArgument, UnknownUpgrade
from cozycat.engine.game_state import ProgressionState


def test_format_pets_small():
    assert format_pets(0) == "0.0"
    assert format_pets(12.34) == "12.3"
    assert format_pets(999) == "999.0"


def test_format_pets_thousands():
    assert format_pets(1500) == "1.50K"


def test_format_pets_millions():
    assert format_pets(2_300_000) == "2.30M"


def test_format_pets_stops_at_last_unit():
    assert format_pets(5e15).endswith("T")


def test_format_pets_negative():
    assert format_pets(-1500) == "-1.50K"


# ── Pet action / passive tick ────────────────────────────────────────────────

def test_default_state():
    state = ProgressionState()
    assert state.currency == 0
    assert state.click_rate == 1
    assert state.passive_rate == 0
    assert all(level == 0 for level in state.upgrade_levels.values())


def test_pet_action_earns_click_rate():
    state = ProgressionState()
    earned = apply_pet_action(state)
    assert earned == 1.0
    assert state.currency == 1.0
    assert state.peak_currency == 1.0


def test_passive_tick_earns_fraction():
    state = ProgressionState(passive_rate=2.0)
    earned = apply_passive_tick(state, 0.1)
    assert earned == pytest.approx(0.2)
    assert state.currency == pytest.approx(0.2)
    assert state.peak_currency == pytest.approx(0.2)


def test_passive_tick_without_rate_is_noop():
    state = ProgressionState(currency=5.0, peak_currency=8.0)
    before = copy.deepcopy(state)
    assert apply_passive_tick(state, 0.1) == 0.0
    assert state == before


def test_negative_elapsed_fraction_rejected():
    state = ProgressionState(passive_rate=1.0)
    with pytest.raises(InvalidArgument):
        apply_passive_tick(state, -0.1)


def test_peak_tracks_maximum_currency():
    """Peak never drops, even when spending lowers currency."""
    rng = random.Random(7)
    state = ProgressionState(passive_rate=3.0)
    seen_max = 0.0
    for _ in range(200):
        if rng.random() < 0.5:
            apply_pet_action(state)
        else:
            apply_passive_tick(state, 0.1)
        seen_max = max(seen_max, state.currency)
        if rng.random() < 0.1 and can_afford_upgrade(state, "softPaws"):
            previous_peak = state.peak_currency
            purchase_upgrade(state, "softPaws")
            assert state.peak_currency == previous_peak
        seen_max = max(seen_max, state.currency)
        assert state.peak_currency == pytest.approx(seen_max)


# ── Purchases ────────────────────────────────────────────────────────────────

def test_upgrade_cost_scales():
    state = ProgressionState()
    cost1 = get_upgrade_cost(state, "softPaws")
    state.upgrade_levels["softPaws"] = 1
    cost2 = get_upgrade_cost(state, "softPaws")
    assert cost2 > cost1


def test_purchase_upgrade():
    state = ProgressionState(currency=10000)
    cost = purchase_upgrade(state, "sunbeam")
    assert cost == 20
    assert state.upgrade_levels["sunbeam"] == 1
    assert state.currency == 10000 - 20
    assert state.passive_rate == 0.5
    assert state.click_rate == 1.0


def test_purchase_upgrade_insufficient_funds():
    state = ProgressionState(currency=14.5)
    before = copy.deepcopy(state)
    with pytest.raises(InsufficientFunds) as excinfo:
        purchase_upgrade(state, "softPaws")
    assert excinfo.value.cost == 15
    assert state == before


def test_purchase_unknown_upgrade():
    state = ProgressionState(currency=1e9)
    with pytest.raises(UnknownUpgrade):
        purchase_upgrade(state, "laserPointer")
    assert state.currency == 1e9


def test_purchase_exact_cost_succeeds():
    state = ProgressionState(currency=15)
    purchase_upgrade(state, "softPaws")
    assert state.currency == 0


def test_multiplier_applies_on_current_rate():
    """Effects stack incrementally in purchase order."""
    state = ProgressionState(currency=1e6)
    purchase_upgrade(state, "blanket")      # 1 * 1.25
    purchase_upgrade(state, "softPaws")     # + 0.5
    assert state.click_rate == pytest.approx(1.75)


def test_end_to_end_scenario():
    state = ProgressionState()
    for _ in range(20):
        apply_pet_action(state)
    assert state.currency == 20
    assert state.peak_currency == 20

    assert purchase_upgrade(state, "softPaws") == 15
    assert state.currency == 5
    assert state.click_rate == 1.5
    assert state.upgrade_levels["softPaws"] == 1

    assert get_upgrade_cost(state, "softPaws") == 20
    with pytest.raises(InsufficientFunds):
        purchase_upgrade(state, "softPaws")
    assert state.currency == 5
    assert state.click_rate == 1.5
    assert state.upgrade_levels["softPaws"] == 1
    assert state.peak_currency == 20
