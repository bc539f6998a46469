"""
Tests for HistoryWindow

Bounded FIFO behavior, tier lookup and display formatting.
"""

from datetime import datetime, timedelta, timezone

import pytest

from gacha.history import HistoryWindow
from gacha.models.gacha_models import HistoryRecord, Tier

BASE = datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


def ticking_clock():
    ticks = iter(BASE + timedelta(seconds=i) for i in range(1000))
    return lambda: next(ticks)


class TestHistoryWindow:

    @pytest.fixture
    def window(self):
        return HistoryWindow(capacity=3, clock=ticking_clock())

    def test_starts_empty(self, window):
        assert len(window) == 0
        assert window.export() == []
        assert not window.contains(Tier.common)

    def test_update_appends_oldest_first(self, window):
        window.update(Tier.common, "Sword")
        window.update(Tier.rare, "Gem")

        names = [r.name for r in window.export()]
        assert names == ["Sword", "Gem"]
        assert window.export()[0].timestamp < window.export()[1].timestamp

    def test_never_exceeds_capacity(self, window):
        for i in range(10):
            window.update(Tier.common, f"item-{i}")
            assert len(window) <= window.capacity

    def test_capacity_plus_one_evicts_oldest(self, window):
        for i in range(window.capacity + 1):
            window.update(Tier.common, f"item-{i}")

        names = [r.name for r in window.export()]
        assert len(window) == window.capacity
        assert "item-0" not in names
        assert names == ["item-1", "item-2", "item-3"]

    def test_contains_tracks_eviction(self, window):
        window.update(Tier.rare, "Gem")
        assert window.contains(Tier.rare)

        for _ in range(window.capacity):
            window.update(Tier.common, "Sword")

        assert not window.contains(Tier.rare)

    def test_export_is_a_copy(self, window):
        window.update(Tier.common, "Sword")
        exported = window.export()
        exported.clear()

        assert len(window) == 1

    def test_restore_keeps_newest_when_over_capacity(self):
        records = [
            HistoryRecord(timestamp=BASE + timedelta(seconds=i), tier=Tier.common, name=f"item-{i}")
            for i in range(5)
        ]

        window = HistoryWindow(capacity=2, records=records)

        assert [r.name for r in window.export()] == ["item-3", "item-4"]

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            HistoryWindow(capacity=0)

    def test_format_records(self, window):
        window.update(Tier.rare, "Gem")

        assert window.format_records() == ['2024-05-01 12:30:00 Rare "Gem"']

    def test_format_empty(self, window):
        assert window.format_records() == ["History is empty."]

    def test_default_timestamps_are_timezone_aware(self):
        window = HistoryWindow()
        record = window.update(Tier.common, "Sword")

        assert record.timestamp.tzinfo is not None
        assert window.capacity == 35
