"""Upgrade panel — the whole catalog with level, cost and affordability."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget

from cozycat.data.upgrades import ALL_UPGRADES
from cozycat.engine.economy import format_pets, get_upgrade_cost
from cozycat.engine.game_state import ProgressionState


class UpgradePanel(Widget):
    """Displays every upgrade; number keys buy by position."""

    DEFAULT_CSS = """
    UpgradePanel {
        width: 100%;
        height: 100%;
        padding: 1;
        overflow-y: auto;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: ProgressionState | None = None

    def render(self) -> Text:
        text = Text()
        text.append("  ═══ Upgrades ═══\n\n", style="bold magenta")

        if self._state is None:
            return text

        for i, (uid, udef) in enumerate(ALL_UPGRADES.items()):
            level = self._state.level_of(uid)
            cost = get_upgrade_cost(self._state, uid)
            affordable = self._state.currency >= cost

            text.append(f"  [{i + 1}] ", style="bold")

            # Never-bought and affordable gets a highlight
            if level == 0 and affordable:
                name_style = "bold reverse green"
            else:
                name_style = "bold green" if affordable else "bold red"
            text.append(f"{udef.name} ", style=name_style)
            text.append(f"Lv.{level}\n", style="dim")

            text.append(f"      {udef.description}\n", style="dim italic")

            cost_style = "green" if affordable else "red"
            text.append(f"      Cost: {format_pets(cost)} pets\n", style=cost_style)

        return text

    def update_from_state(self, state: ProgressionState) -> None:
        """Sync panel with game state."""
        self._state = state
        self.refresh()
