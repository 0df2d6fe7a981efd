"""Trait rule model for TFT Set 16."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class TraitCategory(StrEnum):
    """Trait classification."""
    REGION = "Region"
    CLASS = "Class"
    ORIGIN = "Origin"  # Single champion traits (e.g., Heroic for Galio)


class TraitRule(BaseModel):
    """Breakpoint rule for a single trait."""
    name: str = Field(..., description="Trait name as it appears on champions")
    category: TraitCategory
    breakpoints: list[int] = Field(..., min_length=1, description="Unit counts required for each tier")
    has_emblem: bool = Field(default=False, description="Whether an emblem exists for this trait")
    is_prismatic: bool = Field(default=False, description="Whether the trait has a prismatic tier")
    is_rarity_exempt: bool = Field(
        default=False,
        description="Excluded from bronze-tier accounting (always-on traits such as Targon)",
    )

    model_config = {"use_enum_values": True, "frozen": True}

    @field_validator("breakpoints")
    @classmethod
    def _check_breakpoints(cls, value: list[int]) -> list[int]:
        if value[0] < 1:
            raise ValueError("breakpoints must be positive")
        for lower, upper in zip(value, value[1:]):
            if upper <= lower:
                raise ValueError(f"breakpoints must be strictly increasing, got {value}")
        return value

    @property
    def min_units(self) -> int:
        """Minimum units needed to activate this trait."""
        return self.breakpoints[0]

    @property
    def max_units(self) -> int:
        """Highest breakpoint for this trait."""
        return self.breakpoints[-1]

    def tier_for(self, count: int) -> int:
        """Index of the highest breakpoint met, or -1 if none is."""
        tier = -1
        for idx, threshold in enumerate(self.breakpoints):
            if count >= threshold:
                tier = idx
            else:
                break
        return tier

    def next_breakpoint(self, count: int) -> int | None:
        """Next unit count that would raise the tier."""
        for threshold in self.breakpoints:
            if count < threshold:
                return threshold
        return None
