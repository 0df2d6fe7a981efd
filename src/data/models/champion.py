"""Champion data model for TFT Set 16."""

from typing import Optional

from pydantic import BaseModel, Field

from .strategy import Strategy


class Champion(BaseModel):
    """TFT Champion model."""
    id: str = Field(..., description="Stable unique identifier (e.g. tft16_lulu)")
    api_name: str = Field(default="", description="Riot API name (e.g. TFT16_Lulu)")
    name: str = Field(..., description="Display name")
    cost: int = Field(..., ge=1, le=5)
    traits: list[str] = Field(..., min_length=1, description="List of trait names")
    slot_cost: int = Field(default=1, ge=0, description="Board slots this unit takes (0 for Galio, 2 for Baron Nashor)")
    trait_count_overrides: dict[str, int] = Field(
        default_factory=dict,
        description="Trait contribution overrides (Baron Nashor counts as two Void)",
    )
    auto_anchor_for: Optional[Strategy] = Field(
        default=None,
        description="Strategy for which this unit is always seeded into the team",
    )
    unlock_level: int = Field(default=0, ge=0, description="Player level the unit unlocks at (informational)")

    model_config = {"use_enum_values": True, "frozen": True}

    def trait_contribution(self, trait: str) -> int:
        """How much this champion adds to a trait's count."""
        if trait not in self.traits:
            return 0
        return self.trait_count_overrides.get(trait, 1)

    @property
    def has_default_slot(self) -> bool:
        return self.slot_cost == 1
