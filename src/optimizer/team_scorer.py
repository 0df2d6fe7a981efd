"""Team Scorer.

Scores completed teams and ranks them:
- Difficulty: champion costs plus active tier bonuses
- Strategy value: distinct active regions or bronze traits
- Deduplication by champion set and top-N ranking
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from src.core.constants import (
    MAX_RESULTS,
    STRATEGY_WEIGHT,
    TEAM_KEY_SEPARATOR,
    TIER_WEIGHT,
)
from src.core.synergy_calculator import SynergyCalculator
from src.data.models.champion import Champion
from src.data.models.strategy import Strategy
from src.data.models.trait import TraitCategory


@dataclass(frozen=True)
class TeamComp:
    """A scored, completed team."""

    champions: Tuple[Champion, ...]
    used_slots: int
    trait_counts: Mapping[str, int]  # Read-only view
    active_synergies: Tuple[str, ...]  # "Trait(count)" per active trait
    difficulty: int  # Ranking score, strategy value dominates
    strategy_value: int
    strategy_name: str

    @property
    def champion_ids(self) -> List[str]:
        return [c.id for c in self.champions]

    @property
    def key(self) -> str:
        """Order-independent identity of the champion set."""
        return TEAM_KEY_SEPARATOR.join(sorted(self.champion_ids))

    def is_over_budget(self, max_slots: int) -> bool:
        return self.used_slots > max_slots

    def __hash__(self) -> int:
        return hash(self.key)


class TeamScorer:
    """
    Scores teams against breakpoint rules and ranks the results.

    Usage:
        scorer = TeamScorer(SynergyCalculator())
        comp = scorer.score(team, emblems, Strategy.REGION_RYZE)
    """

    def __init__(self, calculator: Optional[SynergyCalculator] = None):
        self.calculator = calculator or SynergyCalculator()

    def score(
        self,
        team: Sequence[Champion],
        emblems: Optional[Mapping[str, int]],
        strategy: Strategy,
    ) -> TeamComp:
        """
        Score a completed team.

        Args:
            team: Champions in pick order.
            emblems: Trait name -> emblem count.
            strategy: Strategy deciding the strategy value.

        Returns:
            Immutable TeamComp snapshot of the team.
        """
        counts = self.calculator.count_traits(team, emblems)
        active = self.calculator.active_traits(counts)

        difficulty = sum(c.cost for c in team)
        region_count = 0
        bronze_count = 0

        for state in active:
            difficulty += (state.tier + 1) * TIER_WEIGHT

            if state.rule.category == TraitCategory.REGION:
                region_count += 1
            if (
                strategy is Strategy.BRONZE_LIFE
                and strategy.is_relevant(state.rule)
                and state.tier == 0
            ):
                bronze_count += 1

        strategy_value = region_count if strategy is Strategy.REGION_RYZE else bronze_count
        difficulty += strategy_value * STRATEGY_WEIGHT

        return TeamComp(
            champions=tuple(team),
            used_slots=self.calculator.used_slots(team),
            trait_counts=MappingProxyType(counts),
            active_synergies=self.calculator.synergy_labels(active),
            difficulty=difficulty,
            strategy_value=strategy_value,
            strategy_name=strategy.value,
        )

    @staticmethod
    def rank(teams: Iterable[TeamComp], limit: int = MAX_RESULTS) -> List[TeamComp]:
        """
        Drop duplicate champion sets and keep the best teams.

        The first team seen for a champion set wins. Sorting is stable, so
        equal difficulties keep discovery order.
        """
        seen = set()
        unique = []
        for team in teams:
            if team.key in seen:
                continue
            seen.add(team.key)
            unique.append(team)

        unique.sort(key=lambda t: t.difficulty, reverse=True)
        return unique[:limit]
