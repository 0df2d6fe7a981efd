"""Solver strategy definitions."""

from enum import StrEnum

from .trait import TraitCategory, TraitRule


class Strategy(StrEnum):
    """Tie-break objective used by the composition solver."""
    REGION_RYZE = "RegionRyze"  # Maximize distinct active regions
    BRONZE_LIFE = "BronzeLife"  # Maximize traits sitting at their first tier

    @property
    def relevant_categories(self) -> frozenset[str]:
        """Trait categories the strategy cares about."""
        if self is Strategy.REGION_RYZE:
            return frozenset({TraitCategory.REGION})
        return frozenset({TraitCategory.REGION, TraitCategory.CLASS})

    @property
    def excludes_rarity_exempt(self) -> bool:
        """Whether rarity-exempt traits are ignored."""
        return self is Strategy.BRONZE_LIFE

    @property
    def new_trait_threshold(self) -> int:
        """Distinct unseen relevant traits a champion must bring to open a new direction."""
        return 2 if self is Strategy.REGION_RYZE else 3

    def is_relevant(self, rule: TraitRule) -> bool:
        """Whether a trait counts toward this strategy."""
        if rule.category not in self.relevant_categories:
            return False
        return not (self.excludes_rarity_exempt and rule.is_rarity_exempt)
