import logging
from collections import deque
from datetime import datetime
from typing import Callable, Iterable, List, Optional

from gacha.models.gacha_models import HistoryRecord, Tier

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_CAPACITY = 35


def _local_now() -> datetime:
    return datetime.now().astimezone()


class HistoryWindow:
    """
    Bounded FIFO of the most recent draws, oldest first.

    Holds at most ``capacity`` records; once full, every update evicts
    exactly one record from the front.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_WINDOW_CAPACITY,
        records: Optional[Iterable[HistoryRecord]] = None,
        clock: Callable[[], datetime] = _local_now,
    ):
        if capacity <= 0:
            raise ValueError("History capacity must be positive")

        self._capacity = capacity
        self._clock = clock
        self._records = deque(maxlen=capacity)

        restored = list(records or [])
        if len(restored) > capacity:
            logger.warning(
                "History holds %d records but capacity is %d; keeping the newest",
                len(restored), capacity,
            )
        self._records.extend(restored)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._records)

    def update(self, tier: Tier, name: str) -> HistoryRecord:
        record = HistoryRecord(timestamp=self._clock(), tier=tier, name=name)
        # deque(maxlen) pops the oldest record once the window is full
        self._records.append(record)
        return record

    def contains(self, tier: Tier) -> bool:
        return any(record.tier == tier for record in self._records)

    def export(self) -> List[HistoryRecord]:
        return list(self._records)

    def format_records(self) -> List[str]:
        if not self._records:
            return ["History is empty."]
        return [
            f'{r.timestamp.strftime("%Y-%m-%d %H:%M:%S")} {r.tier.value} "{r.name}"'
            for r in self._records
        ]
