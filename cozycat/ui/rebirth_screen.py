"""Rebirth confirmation — yes/no modal before the run is traded for hearts."""

from __future__ import annotations

from rich.text import Text
from textual.screen import ModalScreen
from textual.widgets import Static
from textual.containers import Vertical
from textual.binding import Binding

from cozycat.ui.rebirth_panel import hearts_label


class RebirthScreen(ModalScreen[bool]):
    """Asks before resetting; dismisses with True only on an explicit yes."""

    BINDINGS = [
        Binding("y", "confirm", "Curl up & dream", show=True),
        Binding("n", "cancel", "Not yet", show=True),
        Binding("escape", "cancel", "Not yet", show=False),
    ]

    DEFAULT_CSS = """
    RebirthScreen {
        align: center middle;
    }

    #rebirth-card {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round $warning;
        background: $surface;
    }
    """

    def __init__(self, gain: int, **kwargs) -> None:
        super().__init__(**kwargs)
        self._gain = gain

    def compose(self):
        with Vertical(id="rebirth-card"):
            yield Static(self._body())

    def _body(self) -> Text:
        t = Text()
        t.append("Curl up into a new dream?\n\n", style="bold yellow")
        t.append(f"You will gain +{hearts_label(self._gain)} and reset this run.\n\n")
        t.append("[Y] Yes   [N] Not yet\n", style="dim")
        return t

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
