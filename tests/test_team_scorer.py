"""Tests for TeamScorer."""

import pytest

from src.core.synergy_calculator import SynergyCalculator
from src.data.models import Champion, Strategy, TraitRule
from src.optimizer.team_scorer import TeamComp, TeamScorer


def champ(champion_id: str, cost: int, traits: list, **kwargs) -> Champion:
    return Champion(id=champion_id, name=champion_id.title(), cost=cost, traits=traits, **kwargs)


@pytest.fixture
def scorer():
    rules = {
        r.name: r
        for r in [
            TraitRule(name="RegionA", category="Region", breakpoints=[2, 4]),
            TraitRule(name="RegionB", category="Region", breakpoints=[1]),
            TraitRule(name="Mountain", category="Region", breakpoints=[1], is_rarity_exempt=True),
            TraitRule(name="ClassX", category="Class", breakpoints=[2, 3]),
            TraitRule(name="Lonely", category="Origin", breakpoints=[1]),
        ]
    }
    return TeamScorer(SynergyCalculator(rules))


def make_comp(ids: list, difficulty: int) -> TeamComp:
    return TeamComp(
        champions=tuple(champ(i, 1, ["RegionA"]) for i in ids),
        used_slots=len(ids),
        trait_counts={},
        active_synergies=(),
        difficulty=difficulty,
        strategy_value=0,
        strategy_name="RegionRyze",
    )


class TestScore:
    """Tests for difficulty and strategy value."""

    def test_costs_without_synergies(self, scorer):
        team = [champ("a", 3, ["RegionA"]), champ("b", 2, ["ClassX"])]
        comp = scorer.score(team, {}, Strategy.REGION_RYZE)

        assert comp.difficulty == 5
        assert comp.active_synergies == ()
        assert comp.strategy_value == 0

    def test_tier_bonus(self, scorer):
        team = [champ(i, 1, ["ClassX"]) for i in ("a", "b", "c")]
        comp = scorer.score(team, {}, Strategy.REGION_RYZE)

        # ClassX(3) sits at tier 1: (1 + 1) * 10
        assert comp.difficulty == 3 + 20
        assert comp.active_synergies == ("ClassX(3)",)

    def test_region_ryze_counts_active_regions(self, scorer):
        team = [champ("a", 1, ["RegionA"]), champ("b", 1, ["RegionA", "RegionB"]), champ("c", 1, ["Mountain"])]
        comp = scorer.score(team, {}, Strategy.REGION_RYZE)

        assert comp.strategy_value == 3
        assert comp.difficulty == 3 + 10 * 3 + 3000
        assert comp.strategy_name == "RegionRyze"

    def test_bronze_life_counts_first_tier_only(self, scorer):
        team = [
            champ("a", 1, ["RegionA", "ClassX"]),
            champ("b", 1, ["RegionA", "ClassX"]),
            champ("c", 1, ["ClassX", "Mountain"]),
            champ("d", 1, ["Lonely"]),
        ]
        comp = scorer.score(team, {}, Strategy.BRONZE_LIFE)

        # RegionA(2) bronze; ClassX(3) past bronze; Mountain exempt; Lonely an origin
        assert comp.strategy_value == 1
        assert comp.active_synergies == ("ClassX(3)", "Lonely(1)", "Mountain(1)", "RegionA(2)")
        assert comp.difficulty == 4 + (10 + 20 + 10 + 10) + 1000

    def test_emblems_count(self, scorer):
        comp = scorer.score([champ("a", 2, ["RegionA"])], {"RegionA": 1}, Strategy.REGION_RYZE)

        assert comp.trait_counts == {"RegionA": 2}
        assert comp.active_synergies == ("RegionA(2)",)
        assert comp.strategy_value == 1

    def test_used_slots(self, scorer):
        team = [champ("a", 5, ["RegionA"], slot_cost=0), champ("b", 5, ["RegionB"], slot_cost=2)]
        comp = scorer.score(team, {}, Strategy.REGION_RYZE)

        assert comp.used_slots == 2
        assert comp.is_over_budget(1)
        assert not comp.is_over_budget(2)

    def test_inputs_untouched(self, scorer):
        team = [champ("a", 1, ["RegionA"])]
        emblems = {"RegionA": 1}
        scorer.score(team, emblems, Strategy.REGION_RYZE)

        assert emblems == {"RegionA": 1}
        assert len(team) == 1


class TestTeamComp:
    """Tests for TeamComp identity."""

    def test_key_ignores_order(self):
        assert make_comp(["b", "a"], 0).key == make_comp(["a", "b"], 0).key == "a,b"

    def test_champion_ids_keep_order(self):
        assert make_comp(["b", "a"], 0).champion_ids == ["b", "a"]

    def test_scored_comp_is_read_only(self, scorer):
        comp = scorer.score([champ("a", 1, ["RegionA"]), champ("b", 1, ["RegionA"])], {}, Strategy.REGION_RYZE)

        with pytest.raises(TypeError):
            comp.trait_counts["RegionA"] = 9
        with pytest.raises(AttributeError):
            comp.active_synergies.append("RegionB(1)")
        assert comp.trait_counts == {"RegionA": 2}
        assert comp.active_synergies == ("RegionA(2)",)

    def test_hashable_by_champion_set(self, scorer):
        first = scorer.score([champ("a", 1, ["RegionA"]), champ("b", 1, ["RegionA"])], {}, Strategy.REGION_RYZE)
        second = scorer.score([champ("a", 1, ["RegionA"]), champ("b", 1, ["RegionA"])], {}, Strategy.REGION_RYZE)

        assert hash(first) == hash(second)
        assert len({first, second}) == 1


class TestRank:
    """Tests for dedup and ordering."""

    def test_sorted_by_difficulty(self):
        ranked = TeamScorer.rank([make_comp(["a"], 1), make_comp(["b"], 3), make_comp(["c"], 2)])
        assert [t.champion_ids for t in ranked] == [["b"], ["c"], ["a"]]

    def test_first_duplicate_wins(self):
        first = make_comp(["a", "b"], 5)
        second = make_comp(["b", "a"], 9)

        ranked = TeamScorer.rank([first, second])

        assert ranked == [first]

    def test_ties_keep_discovery_order(self):
        teams = [make_comp([name], 7) for name in ("c", "a", "b")]
        assert [t.champion_ids for t in TeamScorer.rank(teams)] == [["c"], ["a"], ["b"]]

    def test_truncates(self):
        teams = [make_comp([str(i)], i) for i in range(30)]

        ranked = TeamScorer.rank(teams, limit=5)

        assert [t.difficulty for t in ranked] == [29, 28, 27, 26, 25]

    def test_default_limit(self):
        teams = [make_comp([str(i)], i) for i in range(30)]
        assert len(TeamScorer.rank(teams)) == 20

    def test_empty(self):
        assert TeamScorer.rank([]) == []
