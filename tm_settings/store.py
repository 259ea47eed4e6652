"""Cached, typed access to the Settings tab.

The whole tab is read at most once per freshness window; every successful
``set`` drops the cache so the next read sees the write. A missing tab reads
as "no settings" (getters fall back to their defaults) but fails a write.
"""
from __future__ import annotations
import logging
import threading
import time as _pytime
from typing import Callable, Dict, List, Optional

from .config import (
    SETTINGS_CACHE_TTL_SEC, VALUE_COL,
    DEFAULT_CLAUDE_MODEL, DEFAULT_CLAUDE_MAX_TOKENS,
)
from .models import (
    SettingRow, ClaudeConfig, ProfitThresholds, AutomationConfig, GeographicConfig,
)
from .sheets import SettingsTable, BackingStoreUnavailable
from .utils import number_or_default, bool_or_default, split_csv, cell_str

logger = logging.getLogger(__name__)


class SettingsStore:
    def __init__(self, table: SettingsTable, *, ttl_sec: float = SETTINGS_CACHE_TTL_SEC,
                 clock: Callable[[], float] = _pytime.monotonic):
        self.table = table
        self.ttl_sec = ttl_sec
        self._clock = clock
        self._entries: Optional[Dict[str, str]] = None
        self._loaded_at: Optional[float] = None
        self._lock = threading.RLock()

    # ---- cache ----
    def _is_fresh(self, now: float) -> bool:
        return (self._entries is not None and self._loaded_at is not None
                and (now - self._loaded_at) < self.ttl_sec)

    def _load(self) -> Dict[str, str]:
        try:
            if not self.table.exists():
                raise BackingStoreUnavailable("Settings sheet not found")
            grid = self.table.read_grid()
        except BackingStoreUnavailable:
            logger.warning("Settings sheet not found; using defaults")
            return {}
        entries: Dict[str, str] = {}
        # row 1 is the header; a later duplicate key wins
        for row in grid[1:]:
            key = row[0] if len(row) > 0 else None
            if not key:
                continue
            entries[cell_str(key)] = cell_str(row[1] if len(row) > 1 else None)
        logger.debug("loaded %d settings", len(entries))
        return entries

    def _refresh(self) -> Dict[str, str]:
        with self._lock:
            now = self._clock()
            if not self._is_fresh(now):
                self._entries = self._load()
                self._loaded_at = now
            return self._entries

    def clear_cache(self) -> None:
        with self._lock:
            self._entries = None
            self._loaded_at = None

    # ---- raw access ----
    def get(self, key: str) -> Optional[str]:
        # empty cells read as unset
        return self._refresh().get(key) or None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            if not self.table.exists():
                raise BackingStoreUnavailable("Settings sheet not found")
            grid = self.table.read_grid()
            row_idx = None
            # first matching row wins; skip header
            for i, row in enumerate(grid[1:], start=2):
                if row and row[0] == key:
                    row_idx = i
                    break
            if row_idx is not None:
                self.table.write_cell(row_idx, VALUE_COL, value)
            else:
                self.table.append_row([key, value, "", ""])
            logger.info("setting %s %s", key, "updated" if row_idx is not None else "added")
            self._entries = None

    def snapshot(self) -> Dict[str, str]:
        return dict(self._refresh())

    def rows(self) -> List[SettingRow]:
        """All data rows as stored in the tab (uncached)."""
        try:
            grid = self.table.read_grid() if self.table.exists() else []
        except BackingStoreUnavailable:
            return []
        out = []
        for row in grid[1:]:
            cells = [cell_str(c) for c in row] + [""] * (4 - len(row))
            if not cells[0]:
                continue
            out.append(SettingRow(key=cells[0], value=cells[1], description=cells[2], type=cells[3]))
        return out

    # ---- typed getters ----
    def get_number(self, key: str, default: float = 0) -> float:
        return number_or_default(self.get(key), default)

    def get_boolean(self, key: str, default: bool = False) -> bool:
        return bool_or_default(self.get(key), default)

    # ---- bundles ----
    def get_claude_config(self) -> ClaudeConfig:
        return ClaudeConfig(
            api_key=self.get("CLAUDE_API_KEY") or "",
            model=self.get("CLAUDE_MODEL") or DEFAULT_CLAUDE_MODEL,
            max_tokens=self.get_number("CLAUDE_MAX_TOKENS", DEFAULT_CLAUDE_MAX_TOKENS),
        )

    def get_profit_thresholds(self) -> ProfitThresholds:
        return ProfitThresholds(
            minimum=self.get_number("MIN_PROFIT_PERCENT", 25),
            target=self.get_number("TARGET_PROFIT_PERCENT", 50),
            exceptional=self.get_number("EXCEPTIONAL_PROFIT_PERCENT", 100),
        )

    def get_automation_config(self) -> AutomationConfig:
        return AutomationConfig(
            enable_ai=self.get_boolean("ENABLE_AI_ANALYSIS", True),
            enable_auto_messaging=self.get_boolean("ENABLE_AUTO_MESSAGING", False),
            auto_contact_threshold=self.get_number("AUTO_CONTACT_THRESHOLD", 75),
            auto_reject_blacklisted=self.get_boolean("AUTO_REJECT_BLACKLISTED", True),
            auto_reject_icloud_locked=self.get_boolean("AUTO_REJECT_ICLOUD_LOCKED", True),
        )

    def get_geographic_config(self) -> GeographicConfig:
        return GeographicConfig(
            max_radius_miles=self.get_number("MAX_RADIUS_MILES", 50),
            preferred_zips=split_csv(self.get("PREFERRED_ZIPS")),
            base_zip=self.get("BASE_ZIP") or "",
        )
