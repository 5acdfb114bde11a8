"""Unlock evaluator — companions and the ending, checked after every change."""

from __future__ import annotations

import logging

from cozycat.data.balance import BALANCE, CompanionRule
from cozycat.engine.game_state import ProgressionState
from cozycat.engine.notifications import EndingReached, Notification, UnlockCrossed

logger = logging.getLogger(__name__)

COMPANIONS: dict[str, CompanionRule] = {c.id: c for c in BALANCE.unlocks.companions}


def ending_condition_met(state: ProgressionState) -> bool:
    bal = BALANCE.ending
    return (
        state.prestige_currency >= bal.hearts_required
        or state.peak_currency >= bal.peak_required
    )


def evaluate_unlocks(state: ProgressionState) -> list[Notification]:
    """Cross any thresholds the run's best now meets. Idempotent.

    Each companion's bonus is applied exactly once per run, when its flag is
    first set. Returns the notifications for thresholds crossed just now.
    """
    notifications: list[Notification] = []

    for rule in BALANCE.unlocks.companions:
        if rule.id in state.unlock_flags or state.peak_currency < rule.threshold:
            continue
        state.unlock_flags.add(rule.id)
        state.rates = state.rates.scaled(rule.target, rule.factor)
        logger.info("%s joined the garden (best run %.1f)", rule.name, state.peak_currency)
        notifications.append(UnlockCrossed(rule.id))

    if not state.ending_reached and ending_condition_met(state):
        state.ending_reached = True
        logger.info("ending reached")
        notifications.append(EndingReached())

    return notifications
