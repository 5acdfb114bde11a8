"""Garden save/load — persists the snapshot between sessions.

The snapshot is a single JSON record kept under an opaque storage slot key.
Loading is forgiving: anything missing or malformed falls back to defaults,
and a record that cannot be read at all means "no prior garden".
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from cozycat.data.balance import BALANCE
from cozycat.data.upgrades import UPGRADE_ORDER
from cozycat.engine.game_state import ProgressionState, zero_levels
from cozycat.engine.unlocks import COMPANIONS

logger = logging.getLogger(__name__)

SLOT_KEY = BALANCE.save.slot_key


def default_save_dir() -> Path:
    """~/.cozycat unless COZYCAT_HOME says otherwise."""
    override = os.environ.get(BALANCE.save.dir_env_var)
    if override:
        return Path(override).expanduser()
    return Path.home() / BALANCE.save.default_dir_name


# ── Storage slots ────────────────────────────────────────────────


class Storage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Dict-backed slot storage (tests, throwaway sessions)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.slots: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value


class JsonFileStorage:
    """One ``<key>.json`` file per slot inside a directory."""

    def __init__(self, directory: Path | str | None = None) -> None:
        self.directory = Path(directory) if directory is not None else default_save_dir()

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Write-then-rename so a crash mid-write keeps the previous save
        path = self.path_for(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)


# ── Serialisation helpers ────────────────────────────────────────


def _state_to_dict(state: ProgressionState, pixel_mode: bool = False) -> dict:
    s = state
    return {
        "currency": s.currency,
        "peakCurrency": s.peak_currency,
        "clickRate": s.click_rate,
        "passiveRate": s.passive_rate,
        "prestigeCurrency": s.prestige_currency,
        "prestigeCount": s.prestige_count,
        "upgradeLevels": [s.level_of(uid) for uid in UPGRADE_ORDER],
        "unlockFlags": [cid for cid in COMPANIONS if cid in s.unlock_flags],
        "endingReached": s.ending_reached,
        "pixelMode": pixel_mode,
    }


def _number(d: dict, key: str, default: float) -> float:
    value = d.get(key, default)
    # bool is an int subclass; a stray true/false is not a pet count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value != value or value < 0:  # NaN or negative
        return default
    return float(value)


def _count(d: dict, key: str) -> int:
    value = d.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


def _flag(d: dict, key: str) -> bool:
    value = d.get(key, False)
    return value if isinstance(value, bool) else False


def _levels(raw: object) -> dict[str, int]:
    """Catalog-aligned list → id mapping; anything off is reset wholesale."""
    if not isinstance(raw, list) or len(raw) != len(UPGRADE_ORDER):
        return zero_levels()
    if not all(isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in raw):
        return zero_levels()
    return dict(zip(UPGRADE_ORDER, raw))


def _dict_to_state(d: dict) -> tuple[ProgressionState, bool]:
    bal = BALANCE.economy
    raw_flags = d.get("unlockFlags", [])
    flags = {f for f in raw_flags if f in COMPANIONS} if isinstance(raw_flags, list) else set()

    state = ProgressionState(
        currency=_number(d, "currency", 0.0),
        peak_currency=_number(d, "peakCurrency", 0.0),
        click_rate=_number(d, "clickRate", bal.base_click_rate),
        passive_rate=_number(d, "passiveRate", bal.base_passive_rate),
        prestige_currency=_count(d, "prestigeCurrency"),
        prestige_count=_count(d, "prestigeCount"),
        upgrade_levels=_levels(d.get("upgradeLevels")),
        unlock_flags=flags,
        ending_reached=_flag(d, "endingReached"),
    )
    # Best run covers whatever is in the pot
    state.peak_currency = max(state.peak_currency, state.currency)
    return state, _flag(d, "pixelMode")


# ── Public API ───────────────────────────────────────────────────


def save_garden(storage: Storage, state: ProgressionState, pixel_mode: bool = False) -> bool:
    """Persist the garden. Returns False (and logs) if the write failed."""
    try:
        storage.set(SLOT_KEY, json.dumps(_state_to_dict(state, pixel_mode)))
    except OSError as exc:
        logger.warning("could not save garden: %s", exc)
        return False
    return True


def load_garden(storage: Storage) -> tuple[ProgressionState, bool]:
    """Load (state, pixel_mode). A missing or corrupt save gives a fresh garden."""
    try:
        raw = storage.get(SLOT_KEY)
    except OSError as exc:
        logger.warning("could not read save slot: %s", exc)
        return ProgressionState(), False

    if raw is None:
        return ProgressionState(), False

    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning("save slot %r is not valid JSON, starting fresh", SLOT_KEY)
        return ProgressionState(), False

    if not isinstance(data, dict):
        logger.warning("save slot %r holds no record, starting fresh", SLOT_KEY)
        return ProgressionState(), False

    return _dict_to_state(data)
