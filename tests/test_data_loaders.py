"""Tests for data loaders."""

import pytest
from pydantic import ValidationError

from src.data.loaders import (
    load_champions,
    parse_champions,
    get_champion_by_id,
    get_champion_by_name,
    get_champions_by_cost,
    get_champions_by_trait,
    load_trait_rules,
    parse_trait_rules,
    get_trait_rule,
    get_traits_by_category,
    get_emblem_traits,
)
from src.data.models import Strategy, TraitCategory, TraitRule


class TestChampionLoader:
    """Tests for champion loading functionality."""

    def test_load_champions_returns_list(self):
        champions = load_champions()
        assert isinstance(champions, list)
        assert len(champions) >= 90

    def test_champion_ids_are_unique(self):
        champions = load_champions()
        ids = [c.id for c in champions]
        assert len(ids) == len(set(ids))

    def test_get_champion_by_id_found(self):
        champion = get_champion_by_id("tft16_garen")
        assert champion is not None
        assert champion.name == "Garen"
        assert champion.cost == 4

    def test_get_champion_by_id_not_found(self):
        assert get_champion_by_id("nonexistent_champion") is None

    def test_get_champion_by_name_case_insensitive(self):
        champion = get_champion_by_name("baron nashor")
        assert champion is not None
        assert champion.id == "tft16_baronnashor"

    def test_get_champions_by_cost(self):
        one_costs = get_champions_by_cost(1)
        assert len(one_costs) > 0
        assert all(c.cost == 1 for c in one_costs)

    def test_get_champions_by_trait(self):
        demacia_champs = get_champions_by_trait("Demacia")
        assert len(demacia_champs) > 0
        assert all("Demacia" in c.traits for c in demacia_champs)

    def test_slot_exceptions(self):
        assert get_champion_by_id("tft16_galio").slot_cost == 0
        baron = get_champion_by_id("tft16_baronnashor")
        assert baron.slot_cost == 2
        assert baron.trait_contribution("Void") == 2

    def test_default_slot_cost(self):
        lulu = get_champion_by_id("tft16_lulu")
        assert lulu.slot_cost == 1
        assert lulu.trait_contribution("Yordle") == 1
        assert lulu.trait_contribution("Void") == 0

    def test_region_anchor(self):
        anchors = [c for c in load_champions() if c.auto_anchor_for is not None]
        assert [c.name for c in anchors] == ["Ryze"]
        assert anchors[0].auto_anchor_for == Strategy.REGION_RYZE

    def test_all_champion_traits_have_rules(self):
        rules = load_trait_rules()
        for champion in load_champions():
            for trait in champion.traits:
                assert trait in rules, f"{champion.name} has unknown trait {trait}"

    def test_duplicate_ids_rejected(self):
        entry = {"id": "x", "name": "X", "cost": 1, "traits": ["Void"]}
        with pytest.raises(ValueError, match="Duplicate champion id"):
            parse_champions({"champions": [entry, dict(entry, name="Other X")]})

    def test_unlock_level_parsed(self):
        entry = {"id": "x", "name": "X", "cost": 5, "traits": ["Void"], "unlock_level": 7}
        assert parse_champions({"champions": [entry]})[0].unlock_level == 7

    def test_unlock_level_defaults_to_zero(self):
        assert get_champion_by_id("tft16_lulu").unlock_level == 0
        assert all(c.unlock_level >= 0 for c in load_champions())

    def test_negative_unlock_level_rejected(self):
        entry = {"id": "x", "name": "X", "cost": 5, "traits": ["Void"], "unlock_level": -1}
        with pytest.raises(ValidationError):
            parse_champions({"champions": [entry]})


class TestTraitLoader:
    """Tests for trait rule loading functionality."""

    def test_load_trait_rules(self):
        rules = load_trait_rules()
        assert isinstance(rules, dict)
        assert len(rules) > 0
        assert all(name == rule.name for name, rule in rules.items())

    def test_get_trait_rule_found(self):
        rule = get_trait_rule("Piltover")
        assert rule is not None
        assert rule.category == TraitCategory.REGION
        assert rule.breakpoints == [2, 4, 6]

    def test_get_trait_rule_not_found(self):
        assert get_trait_rule("nonexistent_trait") is None

    def test_get_traits_by_category(self):
        classes = get_traits_by_category(TraitCategory.CLASS)
        assert len(classes) > 0
        assert all(r.category == "Class" for r in classes)

    def test_emblem_traits(self):
        emblems = get_emblem_traits()
        assert "Demacia" in emblems
        assert "Targon" not in emblems
        assert emblems == sorted(emblems)

    def test_rarity_exempt_trait(self):
        exempt = [r.name for r in load_trait_rules().values() if r.is_rarity_exempt]
        assert exempt == ["Targon"]

    def test_non_increasing_breakpoints_fail_at_load(self):
        data = {"traits": [{"name": "Broken", "category": "Class", "breakpoints": [2, 2, 4]}]}
        with pytest.raises(ValidationError):
            parse_trait_rules(data)

    def test_empty_breakpoints_rejected(self):
        with pytest.raises(ValidationError):
            TraitRule(name="Empty", category="Class", breakpoints=[])

    def test_duplicate_trait_rejected(self):
        trait = {"name": "Twice", "category": "Class", "breakpoints": [2]}
        with pytest.raises(ValueError, match="Duplicate trait rule"):
            parse_trait_rules({"traits": [trait, trait]})


class TestTraitRule:
    """Tests for breakpoint tiers."""

    @pytest.fixture
    def demacia(self):
        return TraitRule(name="Demacia", category="Region", breakpoints=[3, 5, 7, 11])

    @pytest.mark.parametrize(
        "count,tier",
        [(0, -1), (2, -1), (3, 0), (4, 0), (5, 1), (10, 2), (11, 3), (20, 3)],
    )
    def test_tier_for(self, demacia, count, tier):
        assert demacia.tier_for(count) == tier

    def test_next_breakpoint(self, demacia):
        assert demacia.next_breakpoint(0) == 3
        assert demacia.next_breakpoint(5) == 7
        assert demacia.next_breakpoint(11) is None

    def test_min_max_units(self, demacia):
        assert demacia.min_units == 3
        assert demacia.max_units == 11
