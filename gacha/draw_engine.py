import logging
import math
import random
from typing import Dict, Iterable, List, Optional, Tuple

from gacha.errors import EmptyCatalog, InvalidEntry, InvariantViolation, NotFound
from gacha.history import DEFAULT_WINDOW_CAPACITY, HistoryWindow
from gacha.models.gacha_models import Entry, Tier
from gacha.rng import RandomSource

logger = logging.getLogger(__name__)

DEFAULT_PITY_DENOMINATOR = 100


def partition_by_tier(entries: Iterable[Entry]) -> Tuple[List[Entry], List[Entry]]:
    common, rare = [], []
    for entry in entries:
        if entry.tier == Tier.rare:
            rare.append(entry)
        else:
            common.append(entry)
    return common, rare


def pick_weighted(entries: List[Entry], point: float) -> Entry:
    """
    Walk the cumulative weights and return the first entry whose running
    total is strictly greater than ``point``.

    A point sitting exactly on a boundary belongs to the later entry. If
    float rounding carries ``point`` up to the total, the last entry wins.
    """
    running = 0.0
    for entry in entries:
        running += entry.weight
        if running > point:
            return entry
    return entries[-1]


class Catalog:
    def __init__(
        self,
        entries: Optional[Iterable[Entry]] = None,
        history: Optional[HistoryWindow] = None,
        pity_denominator: int = DEFAULT_PITY_DENOMINATOR,
        window_capacity: int = DEFAULT_WINDOW_CAPACITY,
        rng: Optional[RandomSource] = None,
    ):
        if pity_denominator <= 0:
            raise ValueError("pity_denominator must be positive")

        self._entries: List[Entry] = []
        self._history = history if history is not None else HistoryWindow(window_capacity)
        self._pity_denominator = pity_denominator
        self._rng = rng if rng is not None else random.Random()

        for entry in entries or []:
            self.insert(entry)

    @property
    def entries(self) -> List[Entry]:
        return list(self._entries)

    @property
    def history(self) -> HistoryWindow:
        return self._history

    @property
    def pity_denominator(self) -> int:
        return self._pity_denominator

    def __len__(self) -> int:
        return len(self._entries)

    def insert(self, entry: Entry) -> None:
        if not (entry.weight > 0 and math.isfinite(entry.weight)):
            raise InvalidEntry(f"Weight of {entry.name!r} must be a finite number greater than 0")
        self._entries.append(entry)

    def remove(self, name: str) -> Entry:
        for index, entry in enumerate(self._entries):
            if entry.name == name:
                return self._entries.pop(index)
        raise NotFound(name)

    def list_by_tier(self) -> Dict[Tier, List[Entry]]:
        common, rare = partition_by_tier(self._entries)
        return {Tier.common: common, Tier.rare: rare}

    def _select_tier(
        self, common: List[Entry], rare: List[Entry], rng: RandomSource
    ) -> Tier:
        if not rare:
            return Tier.common
        if not common:
            return Tier.rare
        if rng.randrange(self._pity_denominator) == 0:
            return Tier.rare
        if not self._history.contains(Tier.rare):
            logger.info(
                "No rare draw in the last %d draws, forcing a rare", self._history.capacity
            )
            return Tier.rare
        return Tier.common

    def draw(self, rng: Optional[RandomSource] = None) -> Entry:
        """
        Draw one entry and record it in the history window.

        Rare is chosen when rare entries exist and either there are no
        commons, the 1-in-``pity_denominator`` roll hits, or the window holds
        no rare draw. The entry is then sampled by weight within its tier.
        """
        if not self._entries:
            raise EmptyCatalog()

        rng = rng if rng is not None else self._rng
        common, rare = partition_by_tier(self._entries)

        tier = self._select_tier(common, rare, rng)
        pool = rare if tier == Tier.rare else common

        total = sum(entry.weight for entry in pool)
        if not (total > 0 and math.isfinite(total)):
            raise InvariantViolation(
                f"{tier.value} entries have an unusable total weight ({total})"
            )

        entry = pick_weighted(pool, rng.random() * total)
        self._history.update(tier, entry.name)
        logger.debug("Drew %s %r (weight %s)", tier.value, entry.name, entry.weight)
        return entry.model_copy()
