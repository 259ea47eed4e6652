"""Shared fixtures: an in-memory Settings tab and a hand-driven clock."""

from __future__ import annotations

import pytest

from tm_settings.config import SETTINGS_HEADER
from tm_settings.store import SettingsStore


class FakeSettingsTable:
    """In-memory SettingsTable that counts reads and records writes."""

    def __init__(self, rows: list[list] | None = None, present: bool = True) -> None:
        self.present = present
        self.grid: list[list] = [list(SETTINGS_HEADER)] + [list(r) for r in (rows or [])]
        self.reads = 0
        self.cell_writes: list[tuple[int, int, str]] = []
        self.appends: list[list] = []

    def exists(self) -> bool:
        return self.present

    def forget(self) -> None:
        """Nothing cached to drop."""

    def read_grid(self) -> list[list]:
        self.reads += 1
        return [list(r) for r in self.grid]

    def write_cell(self, row: int, col: int, value: str) -> None:
        self.cell_writes.append((row, col, value))
        target = self.grid[row - 1]
        while len(target) < col:
            target.append("")
        target[col - 1] = value

    def append_row(self, values: list) -> None:
        self.appends.append(list(values))
        self.grid.append(list(values))


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_store(clock):
    def _make(rows=None, present=True, ttl_sec=300):
        tbl = FakeSettingsTable(rows, present=present)
        return SettingsStore(tbl, ttl_sec=ttl_sec, clock=clock), tbl

    return _make
