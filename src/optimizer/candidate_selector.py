"""Candidate Selector.

Picks the next champions worth trying for a partial team. Selection is a
priority cascade of tiers; the first tier that yields anything wins:

1. Open traits - finish strategy traits that are present but not active.
2. New traits - start several strategy traits the team does not have yet.
3. Diversify - champions sharing nothing with the current team.

Every tier is a plain function of a SelectionContext so it can be tested
without running a search.
"""

from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from src.core.synergy_calculator import SynergyCalculator
from src.data.models.champion import Champion
from src.data.models.strategy import Strategy


@dataclass(frozen=True)
class SelectionContext:
    """Snapshot of a partial team as seen by the candidate tiers."""

    team_ids: frozenset
    trait_counts: Mapping[str, int]
    roster: Sequence[Champion]
    strategy: Strategy
    calculator: SynergyCalculator
    openable: frozenset  # Relevant traits present but below first breakpoint
    opened: frozenset  # Relevant traits at tier 0 or above

    def eligible(self) -> List[Champion]:
        """Roster champions that may be auto-selected."""
        return [
            c for c in self.roster
            if c.id not in self.team_ids and c.has_default_slot
        ]


CandidateTier = Callable[[SelectionContext], List[Champion]]


def partition_traits(
    trait_counts: Mapping[str, int],
    calculator: SynergyCalculator,
    strategy: Strategy,
) -> Tuple[frozenset, frozenset]:
    """
    Split present strategy traits into openable and opened.

    Returns:
        (openable, opened) trait name sets.
    """
    openable = set()
    opened = set()
    for trait, count in trait_counts.items():
        rule = calculator.rules.get(trait)
        if rule is None or count <= 0 or not strategy.is_relevant(rule):
            continue
        if rule.tier_for(count) < 0:
            openable.add(trait)
        else:
            opened.add(trait)
    return frozenset(openable), frozenset(opened)


def _breaks_bronze(champion: Champion, ctx: SelectionContext) -> bool:
    """True if adding the champion lifts an opened bronze trait past tier 0."""
    for trait in champion.traits:
        if trait not in ctx.opened:
            continue
        rule = ctx.calculator.rules[trait]
        count = ctx.trait_counts[trait]
        if rule.tier_for(count) == 0 and rule.tier_for(count + champion.trait_contribution(trait)) > 0:
            return True
    return False


def open_trait_tier(ctx: SelectionContext) -> List[Champion]:
    """Champions that add to a present but inactive strategy trait."""
    if len(ctx.openable) == 0:
        return []

    candidates = []
    for champion in ctx.eligible():
        if ctx.openable.isdisjoint(champion.traits):
            continue
        if ctx.strategy is Strategy.BRONZE_LIFE and _breaks_bronze(champion, ctx):
            continue
        candidates.append(champion)
    return candidates


def new_trait_tier(ctx: SelectionContext) -> List[Champion]:
    """Champions bringing enough strategy traits the team does not have."""
    threshold = ctx.strategy.new_trait_threshold
    candidates = []
    for champion in ctx.eligible():
        fresh = 0
        for trait in set(champion.traits):
            rule = ctx.calculator.rules.get(trait)
            if rule is None or not ctx.strategy.is_relevant(rule):
                continue
            if ctx.trait_counts.get(trait, 0) == 0:
                fresh += 1
        if fresh >= threshold:
            candidates.append(champion)
    return candidates


def diversify_tier(ctx: SelectionContext) -> List[Champion]:
    """Champions sharing no trait with anything already counted."""
    present = {t for t, n in ctx.trait_counts.items() if n > 0}
    return [c for c in ctx.eligible() if present.isdisjoint(c.traits)]


# Evaluated in order; the first non-empty tier wins
CANDIDATE_TIERS: Tuple[CandidateTier, ...] = (
    open_trait_tier,
    new_trait_tier,
    diversify_tier,
)


def build_context(
    team: Sequence[Champion],
    emblems: Optional[Mapping[str, int]],
    roster: Sequence[Champion],
    strategy: Strategy,
    calculator: SynergyCalculator,
) -> SelectionContext:
    """Compute trait state for a partial team."""
    counts = calculator.count_traits(team, emblems)
    openable, opened = partition_traits(counts, calculator, strategy)
    return SelectionContext(
        team_ids=frozenset(c.id for c in team),
        trait_counts=counts,
        roster=roster,
        strategy=strategy,
        calculator=calculator,
        openable=openable,
        opened=opened,
    )


def select_candidates(
    team: Sequence[Champion],
    emblems: Optional[Mapping[str, int]],
    roster: Sequence[Champion],
    strategy: Strategy,
    calculator: SynergyCalculator,
    tiers: Sequence[CandidateTier] = CANDIDATE_TIERS,
) -> List[Champion]:
    """
    Next champions to try for a partial team.

    Args:
        team: Current partial team.
        emblems: Trait name -> emblem count.
        roster: Full champion roster.
        strategy: Active strategy.
        calculator: Slot/trait accounting for the rule table.
        tiers: Tier functions in priority order.

    Returns:
        Candidates ordered by cost descending then roster order, or an
        empty list if every tier came up empty.
    """
    ctx = build_context(team, emblems, roster, strategy, calculator)

    for tier in tiers:
        candidates = tier(ctx)
        if candidates:
            return sorted(candidates, key=lambda c: c.cost, reverse=True)

    return []
