"""Cozy Cat Garden — Main Textual Application.

Wires the garden session into a playable TUI. Everything that changes the
garden goes through GardenSession; widgets only read the state.
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Header, Footer
from textual.timer import Timer

from cozycat.data.balance import BALANCE
from cozycat.data.upgrades import ALL_UPGRADES, UPGRADE_ORDER
from cozycat.engine.errors import InsufficientFunds, NoGainAvailable
from cozycat.engine.notifications import EndingReached, Notification, PrestigeAvailableChanged, UnlockCrossed
from cozycat.engine.save import JsonFileStorage, Storage
from cozycat.engine.session import GardenSession
from cozycat.engine.unlocks import COMPANIONS
from cozycat.ui.companions import CompanionsRow
from cozycat.ui.ending_screen import EndingScreen
from cozycat.ui.hud import HUD
from cozycat.ui.rebirth_panel import RebirthPanel, hearts_label
from cozycat.ui.rebirth_screen import RebirthScreen
from cozycat.ui.upgrade_panel import UpgradePanel


class CozyCatApp(App):
    """The Cozy Cat Garden TUI application."""

    TITLE = "Inci's kedushis 🐾💗"
    SUB_TITLE = "Pet. Upgrade. Dream."

    CSS = """
    #garden-container {
        height: 1fr;
    }

    #left-panel {
        width: 1fr;
        border: round $primary;
    }

    #upgrade-panel {
        width: 1fr;
        border: round $secondary;
    }

    .pixel-mode #left-panel, .pixel-mode #upgrade-panel {
        border: heavy $accent;
    }
    """

    BINDINGS = [
        Binding("space", "pet", "Pet", show=True, priority=True),
        Binding("enter", "pet", "Pet", show=False),
        Binding("r", "rebirth", "Rebirth", show=True),
        Binding("p", "toggle_pixel_mode", "Pixel mode", show=True),
        Binding("q", "quit_game", "Quit", show=True),
        *[
            Binding(str(i + 1), f"buy_upgrade({i})", f"Buy #{i + 1}", show=False)
            for i in range(min(len(UPGRADE_ORDER), 9))
        ],
    ]

    # UI refresh, independent of the accrual cadence
    _REFRESH_INTERVAL: float = 0.25

    def __init__(self, storage: Storage | None = None) -> None:
        super().__init__()
        storage = storage if storage is not None else JsonFileStorage()
        self._session = GardenSession.load(storage)
        self._session.listener = self._on_notifications
        self._refresh_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="garden-container"):
            with Vertical(id="left-panel"):
                yield HUD(id="hud-panel")
                yield CompanionsRow(id="companions")
                yield RebirthPanel(id="rebirth-panel")

            yield UpgradePanel(id="upgrade-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Start the passive loop and the UI refresh."""
        self._session.scheduler.start(self.set_interval)
        self._refresh_timer = self.set_interval(self._REFRESH_INTERVAL, self._sync_ui)
        self.screen.set_class(self._session.pixel_mode, "pixel-mode")
        self._sync_ui()
        # Crossings found while loading happened before the listener existed
        self._on_notifications(self._session.last_notifications)

    def on_unmount(self) -> None:
        self._session.shutdown()

    def _sync_ui(self) -> None:
        """Push game state to all UI widgets."""
        state = self._session.state
        self.query_one("#hud-panel", HUD).update_from_state(state)
        self.query_one("#companions", CompanionsRow).update_from_state(state)
        self.query_one("#rebirth-panel", RebirthPanel).update_from_state(state)
        self.query_one("#upgrade-panel", UpgradePanel).update_from_state(state)

    def _on_notifications(self, notifications: list[Notification]) -> None:
        for notif in notifications:
            if isinstance(notif, UnlockCrossed):
                rule = COMPANIONS[notif.unlock_id]
                self.notify(f"🐾 {rule.name} joined the garden!", severity="information", timeout=3)
            elif isinstance(notif, PrestigeAvailableChanged) and notif.gain > 0:
                self.notify(
                    f"✨ A rebirth now gives +{hearts_label(notif.gain)} [R]",
                    severity="warning", timeout=3,
                )
            elif isinstance(notif, EndingReached):
                self.push_screen(EndingScreen())

    # ── Actions ──────────────────────────────────────

    def action_pet(self) -> None:
        self._session.pet()
        self._sync_ui()

    def action_buy_upgrade(self, index: int) -> None:
        """Purchase upgrade at catalog index (0-based)."""
        if index >= len(UPGRADE_ORDER):
            return
        uid = UPGRADE_ORDER[index]
        try:
            self._session.purchase(uid)
        except InsufficientFunds:
            self.notify("Not enough pets for that yet.", severity="error", timeout=1)
            return
        self.notify(f"{ALL_UPGRADES[uid].name} upgraded!", severity="information", timeout=1)
        self._sync_ui()

    def action_rebirth(self) -> None:
        """Ask first; the rebirth only happens on an explicit yes."""
        gain = self._session.rebirth_gain
        if gain <= 0:
            self.notify("Earn more pets to unlock new hearts.", severity="error", timeout=2)
            return
        self.push_screen(RebirthScreen(gain), self._on_rebirth_confirmed)

    def _on_rebirth_confirmed(self, confirmed: bool | None) -> None:
        if not confirmed:
            return
        try:
            self._session.rebirth()
        except NoGainAvailable:
            self.notify("Earn more pets to unlock new hearts.", severity="error", timeout=2)
            return
        pct = BALANCE.prestige.heart_bonus_per * 100 * self._session.state.prestige_currency
        self.notify(f"✨ Sweet dreams! All pets +{pct:.0f}% this run.", severity="warning", timeout=4)
        self._sync_ui()

    def action_toggle_pixel_mode(self) -> None:
        enabled = not self._session.pixel_mode
        self._session.set_pixel_mode(enabled)
        self.screen.set_class(enabled, "pixel-mode")

    def action_quit_game(self) -> None:
        """Save and quit."""
        self._session.shutdown()
        self.exit()
