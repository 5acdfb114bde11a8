"""Ending popup — shown once, the first time the ending condition is met."""

from __future__ import annotations

from rich.text import Text
from textual.screen import ModalScreen
from textual.widgets import Static
from textual.containers import Vertical
from textual.binding import Binding


class EndingScreen(ModalScreen[None]):
    BINDINGS = [
        Binding("enter", "close", "Keep playing", show=True),
        Binding("escape", "close", "Keep playing", show=False),
    ]

    DEFAULT_CSS = """
    EndingScreen {
        align: center middle;
    }

    #ending-card {
        width: 64;
        height: auto;
        padding: 1 2;
        border: double $accent;
        background: $surface;
    }
    """

    def compose(self):
        t = Text()
        t.append("✦ Happy Birthday Incushi 🎂 ✦\n\n", style="bold magenta")
        t.append(
            "You pet Zeze and BMO so much that the whole garden turned into a "
            "perfect birthday universe. No matter how many runs reset, I keep "
            "choosing you.\n\n",
        )
        t.append("[Enter] Keep playing with the babies 🐾\n", style="dim")
        with Vertical(id="ending-card"):
            yield Static(t)

    def action_close(self) -> None:
        self.dismiss(None)
