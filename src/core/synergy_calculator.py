"""Synergy Calculator for TFT Set 16.

Slot and trait accounting for a team: slot usage, trait counts including
emblems and per-champion overrides, and active breakpoint tiers.
"""

from typing import Iterable, Mapping, Optional
from dataclasses import dataclass

from src.data.models.trait import TraitRule
from src.data.models.champion import Champion
from src.data.loaders import load_trait_rules


@dataclass
class ActiveTrait:
    """Represents a trait present on a team with its current state."""

    rule: TraitRule
    count: int  # Champion contributions plus emblems
    tier: int  # Index of highest breakpoint met, -1 if none
    active_breakpoint: Optional[int]  # Current active threshold
    next_breakpoint: Optional[int]  # Next threshold to reach

    @property
    def is_active(self) -> bool:
        return self.tier >= 0

    @property
    def label(self) -> str:
        return f"{self.rule.name}({self.count})"

    @property
    def style(self) -> str:
        """Return visual style: bronze/silver/gold/prismatic based on tier."""
        if not self.is_active:
            return "inactive"

        total = len(self.rule.breakpoints)

        if total == 1:
            return "unique"
        elif self.tier == 0:
            return "bronze"
        elif self.tier == total - 1:
            return "prismatic" if self.rule.is_prismatic else "gold"
        elif self.tier == total - 2:
            return "gold"
        else:
            return "silver"


class SynergyCalculator:
    """
    Counts slots and traits for a list of champions.

    All methods are side-effect free; teams and emblem maps passed in are
    never modified.
    """

    def __init__(self, rules: Optional[Mapping[str, TraitRule]] = None):
        """Initialize with a trait rule table (defaults to the Set 16 table)."""
        self.rules: Mapping[str, TraitRule] = (
            rules if rules is not None else load_trait_rules()
        )

    @staticmethod
    def slot_cost(champion: Champion) -> int:
        """Board slots a champion consumes."""
        return champion.slot_cost

    def used_slots(self, team: Iterable[Champion]) -> int:
        """Total board slots consumed by a team."""
        return sum(self.slot_cost(c) for c in team)

    def count_traits(
        self,
        team: Iterable[Champion],
        emblems: Optional[Mapping[str, int]] = None,
    ) -> dict[str, int]:
        """
        Count occurrences of each trait.
        Emblems seed the counts; each champion adds its contribution
        (normally 1, or its declared override) for each of its traits.

        Args:
            team: Champions on the team
            emblems: Trait name -> emblem count

        Returns:
            Dict mapping trait name to count (only traits with count > 0)
        """
        counts: dict[str, int] = {
            trait: n for trait, n in (emblems or {}).items() if n > 0
        }

        for champion in team:
            for trait in champion.traits:
                counts[trait] = counts.get(trait, 0) + champion.trait_contribution(trait)

        return counts

    def get_tier(self, trait: str, count: int) -> int:
        """Highest breakpoint tier met for a trait, -1 if none or unknown."""
        rule = self.rules.get(trait)
        if rule is None:
            return -1
        return rule.tier_for(count)

    def calculate_synergies(
        self,
        team: Iterable[Champion],
        emblems: Optional[Mapping[str, int]] = None,
    ) -> dict[str, ActiveTrait]:
        """
        Calculate trait state for a team.

        Args:
            team: Champions on the team
            emblems: Trait name -> emblem count

        Returns:
            Dict mapping trait name to ActiveTrait (traits without a rule are skipped)
        """
        return self.synergies_from_counts(self.count_traits(team, emblems))

    def synergies_from_counts(self, counts: Mapping[str, int]) -> dict[str, ActiveTrait]:
        """Build ActiveTrait records from precomputed counts."""
        result = {}
        for trait, count in counts.items():
            rule = self.rules.get(trait)
            if rule is None:
                continue

            tier = rule.tier_for(count)
            result[trait] = ActiveTrait(
                rule=rule,
                count=count,
                tier=tier,
                active_breakpoint=rule.breakpoints[tier] if tier >= 0 else None,
                next_breakpoint=rule.next_breakpoint(count),
            )

        return result

    def active_traits(self, counts: Mapping[str, int]) -> list[ActiveTrait]:
        """Traits at or above their first breakpoint, sorted by trait name."""
        synergies = self.synergies_from_counts(counts)
        return [
            synergies[trait]
            for trait in sorted(synergies)
            if synergies[trait].is_active
        ]

    @staticmethod
    def synergy_labels(active: Iterable[ActiveTrait]) -> tuple[str, ...]:
        """``Trait(count)`` labels in the order given."""
        return tuple(state.label for state in active)

    def active_synergies(self, counts: Mapping[str, int]) -> tuple[str, ...]:
        """Labels ``Trait(count)`` for every trait at or above its first breakpoint."""
        return self.synergy_labels(self.active_traits(counts))
