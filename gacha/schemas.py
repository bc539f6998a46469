from typing import Optional

from pydantic import BaseModel, Field, field_validator

from gacha.models.gacha_models import Tier


# -----------------------------
# ENTRY CREATION
# -----------------------------

class EntryCreate(BaseModel):
    name: str = Field(min_length=1, description="Entry name, not required to be unique")
    tier: Tier = Field(description="Common or Rare")
    weight: float = Field(gt=0, allow_inf_nan=False, description="Relative weight within the tier")

    @field_validator("tier", mode="before")
    def any_case_tier(cls, v):
        if isinstance(v, str):
            return Tier.parse(v)
        return v


class EntrySpecRequest(BaseModel):
    spec: str = Field(
        description="Compact entry form name:tier:weight, e.g. Sword:common:50"
    )


# -----------------------------
# DRAWS
# -----------------------------

class DrawRequest(BaseModel):
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed for deterministic results. "
                    "Same seed and same history always produce the same draw."
    )


# -----------------------------
# SIMULATION REQUEST
# -----------------------------

class SimulationRequest(BaseModel):
    simulations: int = Field(
        default=1000,
        ge=1,
        le=100_000,
        description="Number of simulated draws. Max: 100,000"
    )
    seed: Optional[int] = Field(
        default=None,
        description="Optional RNG seed lock"
    )
