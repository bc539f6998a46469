from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Tier(str, Enum):
    common = "Common"
    rare = "Rare"

    @classmethod
    def parse(cls, text: str) -> "Tier":
        """Case-insensitive lookup: "common", "RARE", "Rare" ..."""
        for tier in cls:
            if tier.value.lower() == text.strip().lower():
                return tier
        raise ValueError(f"Invalid tier: {text!r} (expected Common or Rare)")


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Name of the entry")
    tier: Tier = Field(..., description="Common or Rare")
    weight: float = Field(..., gt=0, allow_inf_nan=False, description="Relative weight within its tier")

    @classmethod
    def parse(cls, spec: str) -> "Entry":
        """
        Build an entry from its compact text form, ``name:tier:weight``.

        Example: ``"Sword:common:50"``.
        """
        parts = spec.split(":")
        if len(parts) != 3:
            raise ValueError(f"Invalid entry spec {spec!r}, expected name:tier:weight")

        name, tier, weight = parts
        try:
            weight_value = float(weight)
        except ValueError:
            raise ValueError(f"Invalid weight {weight!r}") from None

        return cls(name=name, tier=Tier.parse(tier), weight=weight_value)


class HistoryRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    tier: Tier
    name: str


class HistorySnapshot(BaseModel):
    window: List[HistoryRecord] = Field(default_factory=list, description="Oldest first")
    capacity: int = Field(35, gt=0)


class CatalogSnapshot(BaseModel):
    entries: List[Entry] = Field(default_factory=list)
    history: HistorySnapshot = Field(default_factory=HistorySnapshot)
    pity_denominator: int = Field(100, gt=0)
