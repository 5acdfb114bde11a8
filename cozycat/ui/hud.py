"""HUD widget — pets counter, rates, hearts."""

from __future__ import annotations

from rich.text import Text
from textual.widget import Widget
from textual.reactive import reactive

from cozycat.data.balance import BALANCE
from cozycat.engine.economy import format_pets
from cozycat.engine.game_state import ProgressionState


class HUD(Widget):
    """Heads-up display showing core garden stats."""

    DEFAULT_CSS = """
    HUD {
        width: 100%;
        height: auto;
        padding: 1;
    }
    """

    pets: reactive[str] = reactive("0.0")
    per_click: reactive[str] = reactive("1.00")
    per_second: reactive[str] = reactive("0.00")
    hearts: reactive[int] = reactive(0)

    def render(self) -> Text:
        text = Text()

        text.append("  Pets: ", style="dim")
        text.append(f"{self.pets}\n", style="bold magenta")

        text.append("  Per Click: ", style="dim")
        text.append(f"{self.per_click}\n", style="magenta")

        text.append("  Per Second: ", style="dim")
        text.append(f"{self.per_second}\n", style="magenta")

        text.append("  Hearts: ", style="dim")
        text.append(f"{self.hearts}\n", style="bold red")

        pct = BALANCE.prestige.heart_bonus_per * 100
        text.append(f"  Hearts give +{pct:.0f}% to all pets each run\n", style="dim italic")

        text.append("\n")
        text.append("  [Space] Pet  [1-9] Buy\n", style="dim italic")
        text.append("  [R] Rebirth  [P] Pixel mode  [Q] Quit\n", style="dim italic")

        return text

    def update_from_state(self, state: ProgressionState) -> None:
        """Sync HUD with game state."""
        self.pets = format_pets(state.currency)
        self.per_click = f"{state.click_rate:.2f}"
        self.per_second = f"{state.passive_rate:.2f}"
        self.hearts = state.prestige_currency
