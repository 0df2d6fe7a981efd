"""
Team solver service.
"""

import logging
from typing import Dict, List, Optional

from src.core.constants import DEFAULT_SEARCH_BUDGET
from src.data.loaders import load_champions, load_trait_rules
from src.data.models.champion import Champion
from src.data.models.strategy import Strategy
from src.optimizer import CompSolver, TeamComp

from ..schemas.solver import (
    ChampionSummarySchema,
    SolveResponse,
    StrategyEnum,
    TeamCompSchema,
)

logger = logging.getLogger(__name__)


class SolverService:
    """Team composition solver service."""

    def __init__(self, search_budget: int = DEFAULT_SEARCH_BUDGET):
        self.rules = load_trait_rules()
        self.roster: List[Champion] = load_champions()
        self._by_id: Dict[str, Champion] = {c.id: c for c in self.roster}
        self.solver = CompSolver(rules=self.rules, search_budget=search_budget)

    def solve(
        self,
        strategy: StrategyEnum,
        max_slots: int,
        emblems: Optional[Dict[str, int]] = None,
        initial_team: Optional[List[str]] = None,
    ) -> SolveResponse:
        """Recommend teams for the given selections.

        Raises:
            LookupError: Unknown champion id.
            ValueError: Unknown trait, trait without emblem, or bad counts.
        """
        emblems = emblems or {}
        self._check_emblems(emblems)
        team = self._resolve_team(initial_team or [])

        logger.info(
            "Solving %s for %d slots with %d emblem traits and %d preset champions",
            strategy.value,
            max_slots,
            len(emblems),
            len(team),
        )
        teams = self.solver.solve(
            self.roster, emblems, max_slots, Strategy(strategy.value), team
        )

        return SolveResponse(
            strategy=strategy,
            max_slots=max_slots,
            over_budget=len(teams) == 1 and teams[0].is_over_budget(max_slots),
            teams=[self._to_schema(t) for t in teams],
        )

    def _check_emblems(self, emblems: Dict[str, int]) -> None:
        for trait, count in emblems.items():
            rule = self.rules.get(trait)
            if rule is None:
                raise ValueError(f"Unknown trait: {trait}")
            if not rule.has_emblem:
                raise ValueError(f"Trait has no emblem: {trait}")
            if count < 0:
                raise ValueError(f"Emblem count for {trait} must be non-negative")

    def _resolve_team(self, champion_ids: List[str]) -> List[Champion]:
        team = []
        for champion_id in champion_ids:
            champion = self._by_id.get(champion_id)
            if champion is None:
                raise LookupError(f"Champion not found: {champion_id}")
            team.append(champion)
        return team

    @staticmethod
    def _to_schema(team: TeamComp) -> TeamCompSchema:
        return TeamCompSchema(
            champions=[
                ChampionSummarySchema(
                    id=c.id,
                    api_name=c.api_name,
                    name=c.name,
                    cost=c.cost,
                    traits=list(c.traits),
                    slot_cost=c.slot_cost,
                )
                for c in team.champions
            ],
            used_slots=team.used_slots,
            trait_counts=dict(team.trait_counts),
            active_synergies=list(team.active_synergies),
            difficulty=team.difficulty,
            strategy_value=team.strategy_value,
            strategy_name=StrategyEnum(team.strategy_name),
        )
