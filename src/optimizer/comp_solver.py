"""Composition Solver.

Builds complete teams for a slot budget with a bounded depth-first search.
Each step asks the candidate selector for the next tier of champions,
completed teams are scored, and the best distinct teams are returned.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Union

from src.core.constants import DEFAULT_SEARCH_BUDGET, MAX_RESULTS
from src.core.synergy_calculator import SynergyCalculator
from src.data.models.champion import Champion
from src.data.models.strategy import Strategy
from src.data.models.trait import TraitRule

from .candidate_selector import select_candidates
from .team_scorer import TeamComp, TeamScorer

logger = logging.getLogger(__name__)


@dataclass
class SearchState:
    """Per-solve search bookkeeping, threaded through the recursion."""

    budget: int
    steps: int = 0
    dead_ends: int = 0
    results: List[TeamComp] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.steps >= self.budget


class CompSolver:
    """
    Team composition solver.

    Usage:
        solver = CompSolver()
        teams = solver.solve(load_champions(), {"Demacia": 1}, 8, Strategy.REGION_RYZE)
    """

    def __init__(
        self,
        rules: Optional[Mapping[str, TraitRule]] = None,
        search_budget: int = DEFAULT_SEARCH_BUDGET,
        max_results: int = MAX_RESULTS,
    ):
        """
        Initialize solver.

        Args:
            rules: Trait rule table, defaults to the Set 16 table.
            search_budget: Maximum team expansions per solve.
            max_results: Number of teams returned.
        """
        self.calculator = SynergyCalculator(rules)
        self.scorer = TeamScorer(self.calculator)
        self.search_budget = search_budget
        self.max_results = max_results

    def solve(
        self,
        roster: Sequence[Champion],
        active_emblems: Optional[Mapping[str, int]],
        max_slots: int,
        strategy: Union[Strategy, str],
        initial_team: Optional[Sequence[Champion]] = None,
    ) -> List[TeamComp]:
        """
        Recommend teams filling exactly ``max_slots`` slots.

        Args:
            roster: All selectable champions (unique ids).
            active_emblems: Trait name -> emblem count.
            max_slots: Slot budget.
            strategy: Strategy or its name.
            initial_team: Champions the caller has already chosen.

        Returns:
            Up to ``max_results`` teams by difficulty, best first. If the
            initial team alone is over budget, a single team made of it.

        Raises:
            ValueError: On negative slots or emblem counts, or an unknown strategy.
        """
        strategy = Strategy(strategy)
        if max_slots < 0:
            raise ValueError(f"max_slots must be non-negative, got {max_slots}")

        emblems = dict(active_emblems or {})
        for trait, count in emblems.items():
            if count < 0:
                raise ValueError(f"Emblem count for {trait} must be non-negative, got {count}")

        team = self._unique_team(initial_team or [])

        if self.calculator.used_slots(team) > max_slots:
            logger.info(
                "Initial team uses %d slots, over budget of %d; skipping search",
                self.calculator.used_slots(team),
                max_slots,
            )
            return [self.scorer.score(team, emblems, strategy)]

        if len(roster) < max_slots:
            logger.info("Roster of %d champions cannot fill %d slots", len(roster), max_slots)
            return []

        self._seed_anchors(team, roster, strategy, max_slots)

        state = SearchState(budget=self.search_budget)
        self._search(team, roster, emblems, max_slots, strategy, state)

        if state.exhausted:
            logger.info("Search budget of %d expansions exhausted", state.budget)

        ranked = self.scorer.rank(state.results, self.max_results)
        logger.debug(
            "Solved %s for %d slots: %d steps, %d dead ends, %d teams, %d distinct returned",
            strategy.value,
            max_slots,
            state.steps,
            state.dead_ends,
            len(state.results),
            len(ranked),
        )
        return ranked

    def _search(
        self,
        team: List[Champion],
        roster: Sequence[Champion],
        emblems: Mapping[str, int],
        max_slots: int,
        strategy: Strategy,
        state: SearchState,
    ) -> None:
        """Depth-first expansion; ``team`` is pushed and popped in place."""
        used = self.calculator.used_slots(team)
        if used >= max_slots:
            state.results.append(self.scorer.score(team, emblems, strategy))
            return

        candidates = select_candidates(team, emblems, roster, strategy, self.calculator)
        if not candidates:
            state.dead_ends += 1
            return

        for candidate in candidates:
            if used + self.calculator.slot_cost(candidate) > max_slots:
                continue
            if state.exhausted:
                break

            state.steps += 1
            team.append(candidate)
            self._search(team, roster, emblems, max_slots, strategy, state)
            team.pop()

    def _seed_anchors(
        self,
        team: List[Champion],
        roster: Sequence[Champion],
        strategy: Strategy,
        max_slots: int,
    ) -> None:
        """Add roster champions anchored to the strategy when they fit."""
        team_ids = {c.id for c in team}
        for champion in roster:
            if champion.auto_anchor_for != strategy or champion.id in team_ids:
                continue
            if self.calculator.used_slots(team) + self.calculator.slot_cost(champion) > max_slots:
                logger.debug("Anchor %s does not fit in %d slots", champion.id, max_slots)
                continue
            team.append(champion)
            team_ids.add(champion.id)

    @staticmethod
    def _unique_team(initial_team: Sequence[Champion]) -> List[Champion]:
        """Copy of the initial team with repeated ids dropped."""
        seen = set()
        team = []
        for champion in initial_team:
            if champion.id in seen:
                continue
            seen.add(champion.id)
            team.append(champion)
        return team


def solve(
    roster: Sequence[Champion],
    active_emblems: Optional[Mapping[str, int]],
    max_slots: int,
    strategy: Union[Strategy, str],
    initial_team: Optional[Sequence[Champion]] = None,
    *,
    rules: Optional[Mapping[str, TraitRule]] = None,
    search_budget: int = DEFAULT_SEARCH_BUDGET,
) -> List[TeamComp]:
    """Solve with a fresh CompSolver; see CompSolver.solve."""
    return CompSolver(rules=rules, search_budget=search_budget).solve(
        roster, active_emblems, max_slots, strategy, initial_team
    )
