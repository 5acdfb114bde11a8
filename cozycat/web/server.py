"""Cozy Cat Garden Web — Flask JSON API over the garden session.

There is no background thread: each request first catches the passive loop
up on whole tick intervals elapsed since the previous request, under one
lock, so requests and ticks never interleave.
"""

from __future__ import annotations

import logging
import threading
import time

from flask import Flask, current_app, jsonify, request

from cozycat.data.upgrades import ALL_UPGRADES
from cozycat.engine.economy import format_pets, get_upgrade_cost
from cozycat.engine.errors import InsufficientFunds, NoGainAvailable, UnknownUpgrade
from cozycat.engine.notifications import Notification, to_dict
from cozycat.engine.save import JsonFileStorage, Storage
from cozycat.engine.session import GardenSession

logger = logging.getLogger(__name__)

# Cap catch-up to 60 s to avoid mega-ticks after long AFK
MAX_CATCH_UP_S = 60.0


class WebGarden:
    """One garden served over HTTP, with its lock and tick clock."""

    def __init__(self, session: GardenSession, clock=time.monotonic) -> None:
        self.session = session
        self.lock = threading.Lock()
        self._clock = clock
        self._last_tick = clock()
        self._pending: list[Notification] = []
        session.listener = self._pending.extend
        # Crossings made while loading happened before we were listening
        self._pending.extend(session.last_notifications)

    def catch_up(self) -> int:
        """Fire the passive loop for the time elapsed since the last call."""
        now = self._clock()
        elapsed = now - self._last_tick
        self._last_tick = now
        return self.session.scheduler.catch_up(elapsed, MAX_CATCH_UP_S)

    def drain(self) -> list[dict]:
        notifs = [to_dict(n) for n in self._pending]
        self._pending.clear()
        return notifs


def _garden() -> WebGarden:
    return current_app.extensions["cozycat"]


def _state_json(garden: WebGarden) -> dict:
    """Build the JSON blob sent to the frontend."""
    session = garden.session
    s = session.state

    upgrades = []
    for uid, udef in ALL_UPGRADES.items():
        cost = get_upgrade_cost(s, uid)
        upgrades.append({
            "id": uid,
            "name": udef.name,
            "description": udef.description,
            "level": s.level_of(uid),
            "cost": format_pets(cost),
            "cost_raw": cost,
            "can_afford": s.currency >= cost,
        })

    return {
        "pets": format_pets(s.currency),
        "pets_raw": s.currency,
        "best_run": format_pets(s.peak_currency),
        "best_run_raw": s.peak_currency,
        "per_click": round(s.click_rate, 2),
        "per_second": round(s.passive_rate, 2),
        "hearts": s.prestige_currency,
        "rebirths": s.prestige_count,
        "rebirth_gain": session.rebirth_gain,
        "companions": sorted(s.unlock_flags),
        "ending_reached": s.ending_reached,
        "pixel_mode": session.pixel_mode,
        "upgrades": upgrades,
        "notifications": garden.drain(),
    }


def _error(message: str, status: int):
    garden = _garden()
    data = _state_json(garden)
    data["error"] = message
    return jsonify(data), status


# ---------------------------------------------------------------------------
# App factory + routes
# ---------------------------------------------------------------------------

def create_app(storage: Storage | None = None, clock=time.monotonic) -> Flask:
    app = Flask(__name__)
    session = GardenSession.load(storage if storage is not None else JsonFileStorage())
    garden = WebGarden(session, clock=clock)
    app.extensions["cozycat"] = garden

    @app.route("/api/state")
    def api_state():
        with garden.lock:
            garden.catch_up()
            return jsonify(_state_json(garden))

    @app.route("/api/pet", methods=["POST"])
    def api_pet():
        with garden.lock:
            garden.catch_up()
            garden.session.pet()
            return jsonify(_state_json(garden))

    @app.route("/api/buy/<upgrade_id>", methods=["POST"])
    def api_buy(upgrade_id: str):
        with garden.lock:
            garden.catch_up()
            try:
                garden.session.purchase(upgrade_id)
            except UnknownUpgrade as exc:
                return _error(str(exc), 404)
            except InsufficientFunds as exc:
                return _error(str(exc), 409)
            return jsonify(_state_json(garden))

    @app.route("/api/rebirth", methods=["POST"])
    def api_rebirth():
        """The client asks the player first; this call means "yes"."""
        with garden.lock:
            garden.catch_up()
            try:
                garden.session.rebirth()
            except NoGainAvailable as exc:
                return _error(str(exc), 409)
            return jsonify(_state_json(garden))

    @app.route("/api/pixel-mode", methods=["POST"])
    def api_pixel_mode():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        with garden.lock:
            enabled = body.get("enabled")
            if not isinstance(enabled, bool):
                enabled = not garden.session.pixel_mode
            garden.session.set_pixel_mode(enabled)
            return jsonify(_state_json(garden))

    return app


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def run_server(
    host: str = "127.0.0.1",
    port: int = 5000,
    debug: bool = False,
    storage: Storage | None = None,
) -> None:
    """Start the Flask development server."""
    app = create_app(storage)
    logger.info("serving garden on http://%s:%d/", host, port)
    try:
        app.run(host=host, port=port, debug=debug, use_reloader=False)
    finally:
        _shutdown(app)


def _shutdown(app: Flask) -> None:
    garden: WebGarden = app.extensions["cozycat"]
    with garden.lock:
        garden.session.shutdown()
