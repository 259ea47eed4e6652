"""Backing table for settings: a narrow interface plus its gspread implementation."""
from __future__ import annotations
import logging
from typing import List, Optional, Protocol

import gspread
from gspread import WorksheetNotFound
from gspread.exceptions import APIError
import gspread.utils as a1

from .config import (
    SETTINGS_SHEET, SETTINGS_HEADER, SETTINGS_SHEET_ROWS, SETTINGS_SHEET_COLS,
    DEFAULT_SETTINGS,
)
from .quotas import _retry_429

logger = logging.getLogger(__name__)


class BackingStoreUnavailable(RuntimeError):
    """The named settings tab does not exist."""


class SettingsTable(Protocol):
    def exists(self) -> bool: ...
    def forget(self) -> None: ...
    def read_grid(self) -> List[list]: ...
    def write_cell(self, row: int, col: int, value: str) -> None: ...
    def append_row(self, values: list) -> None: ...


def _sheet_gone(e: Exception) -> bool:
    """True when a gspread error means the tab itself was deleted (not a quota or 5xx hiccup)."""
    if isinstance(e, WorksheetNotFound):
        return True
    code = getattr(e, "code", None) or getattr(getattr(e, "response", None), "status_code", None)
    if code == 429 or (isinstance(code, int) and code >= 500):
        return False
    msg = str(e).lower()
    return code == 404 or "unable to parse range" in msg or "not found" in msg


class GspreadSettingsTable:
    """SettingsTable over one worksheet of a gspread Spreadsheet (rows/cols 1-based)."""

    def __init__(self, ss: gspread.Spreadsheet, title: str = SETTINGS_SHEET):
        self.ss = ss
        self.title = title
        self._ws: Optional[gspread.Worksheet] = None

    def _worksheet(self) -> Optional[gspread.Worksheet]:
        if self._ws is not None:
            return self._ws
        try:
            self._ws = _retry_429(self.ss.worksheet, self.title)
        except WorksheetNotFound:
            return None
        return self._ws

    def _require(self) -> gspread.Worksheet:
        ws = self._worksheet()
        if ws is None:
            raise BackingStoreUnavailable(f"{self.title} sheet not found")
        return ws

    def forget(self) -> None:
        # next call re-resolves the tab (e.g. after it was created or deleted)
        self._ws = None

    def exists(self) -> bool:
        return self._worksheet() is not None

    def _call(self, method: str, *args, **kwargs):
        ws = self._require()
        try:
            return _retry_429(getattr(ws, method), *args, **kwargs)
        except (WorksheetNotFound, APIError) as e:
            if not _sheet_gone(e):
                raise
            logger.warning("%s sheet went away: %s", self.title, e)
            self._ws = None
            raise BackingStoreUnavailable(f"{self.title} sheet not found") from e

    def read_grid(self) -> List[list]:
        return self._call("get_all_values")

    def write_cell(self, row: int, col: int, value: str) -> None:
        self._call("update_cell", row, col, value)

    def append_row(self, values: list) -> None:
        self._call("append_row", values, value_input_option="RAW")


def _header_range() -> str:
    return f"A1:{a1.rowcol_to_a1(1, len(SETTINGS_HEADER))}"

def get_or_create_settings_sheet(ss, title: str = SETTINGS_SHEET) -> "gspread.Worksheet":
    try:
        return _retry_429(ss.worksheet, title)
    except WorksheetNotFound:
        pass
    try:
        ws = _retry_429(ss.add_worksheet, title=title,
                        rows=SETTINGS_SHEET_ROWS, cols=SETTINGS_SHEET_COLS)
        logger.info("created sheet %r", title)
    except APIError as e:
        if "already exists" in str(e).lower():
            return _retry_429(ss.worksheet, title)
        raise
    _retry_429(ws.update, range_name=_header_range(), values=[SETTINGS_HEADER])
    return ws

def seed_default_settings(ws) -> int:
    """Write DEFAULT_SETTINGS below the header if the tab has no data rows.

    Returns the number of rows written (0 when the tab was already populated).
    """
    vals = _retry_429(ws.get_all_values)
    if len(vals) > 1:
        logger.info("settings already initialized (%d rows)", len(vals) - 1)
        return 0
    if not (vals and any(str(c).strip() for c in vals[0])):
        _retry_429(ws.update, range_name=_header_range(), values=[SETTINGS_HEADER])
    end = a1.rowcol_to_a1(1 + len(DEFAULT_SETTINGS), len(SETTINGS_HEADER))
    _retry_429(ws.update, range_name=f"A2:{end}", values=DEFAULT_SETTINGS)
    logger.info("settings initialized with %d defaults", len(DEFAULT_SETTINGS))
    return len(DEFAULT_SETTINGS)
