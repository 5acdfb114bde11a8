"""Rebirth panel — hearts, rebirths, best run and what a rebirth would give."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from cozycat.data.balance import BALANCE
from cozycat.engine.economy import format_pets
from cozycat.engine.game_state import ProgressionState
from cozycat.engine.prestige import rebirth_gain


def hearts_label(n: int) -> str:
    return f"{n} heart{'s' if n != 1 else ''}"


class RebirthPanel(Widget):
    """Shows Dreamy Rebirth availability."""

    DEFAULT_CSS = """
    RebirthPanel {
        width: 100%;
        height: auto;
        min-height: 5;
        padding: 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: ProgressionState | None = None

    def render(self) -> Text:
        text = Text()

        if self._state is None:
            return text

        state = self._state
        pct = BALANCE.prestige.heart_bonus_per * 100

        text.append("  ─── Dreamy rebirth ───\n", style="bold yellow")
        text.append(
            f"  Hearts: {state.prestige_currency} (each gives +{pct:.0f}% to all pets). "
            f"Rebirths: {state.prestige_count}.\n",
            style="dim",
        )
        text.append(f"  Best run: {format_pets(state.peak_currency)} pets.\n", style="dim")

        gain = rebirth_gain(state)
        if gain > 0:
            text.append(f"  [R] Curl up & dream → +{hearts_label(gain)}\n", style="bold yellow")
        else:
            text.append("  Earn more pets to unlock new hearts.\n", style="dim italic")

        return text

    def update_from_state(self, state: ProgressionState) -> None:
        self._state = state
        self.refresh()
