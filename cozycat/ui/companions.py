"""Companions row — Zeze and BMO, locked or unlocked."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from cozycat.data.balance import BALANCE
from cozycat.engine.game_state import ProgressionState


def _bonus_label(target: str, factor: float) -> str:
    pct = (factor - 1.0) * 100
    return f"+{pct:.0f}% {'click' if target == 'click' else 'passive'}"


class CompanionsRow(Widget):
    """Shows each companion with its unlock threshold or its bonus."""

    DEFAULT_CSS = """
    CompanionsRow {
        width: 100%;
        height: auto;
        padding: 0 1;
    }
    """

    unlocked: reactive[frozenset[str]] = reactive(frozenset())

    def render(self) -> Text:
        text = Text()
        text.append("  ─── Companions ───\n", style="bold cyan")

        for rule in BALANCE.unlocks.companions:
            if rule.id in self.unlocked:
                text.append(f"  {rule.name} ", style="bold cyan")
                text.append(f"{rule.blurb} · {_bonus_label(rule.target, rule.factor)}  ", style="cyan")
                text.append("Unlocked\n", style="bold green")
            else:
                text.append(f"  {rule.name} ", style="dim")
                text.append(f"{rule.blurb} · unlock at {rule.threshold:,.0f} pets\n", style="dim")

        return text

    def update_from_state(self, state: ProgressionState) -> None:
        self.unlocked = frozenset(state.unlock_flags)
