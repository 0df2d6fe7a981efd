"""Trait rule loader for TFT Set 16."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.trait import TraitCategory, TraitRule


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
TRAIT_RULES_FILE = DATA_DIR / "traits" / "trait_rules.json"


def parse_trait_rules(data: dict) -> dict[str, TraitRule]:
    """Parse trait rules from JSON data.

    Malformed breakpoints raise ``pydantic.ValidationError`` here, so a bad
    rule table fails once at load time rather than during a search.

    Args:
        data: Dictionary with a ``traits`` list.

    Returns:
        Mapping of trait name to TraitRule.
    """
    rules: dict[str, TraitRule] = {}
    for trait_data in data["traits"]:
        rule = TraitRule(**trait_data)
        if rule.name in rules:
            raise ValueError(f"Duplicate trait rule: {rule.name}")
        rules[rule.name] = rule
    return rules


@lru_cache(maxsize=1)
def load_trait_rules() -> dict[str, TraitRule]:
    """Load the trait rule table from JSON file.

    Returns:
        Mapping of trait name to TraitRule.
    """
    with open(TRAIT_RULES_FILE, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_trait_rules(data)


def get_trait_rule(name: str) -> Optional[TraitRule]:
    """Get a trait rule by trait name.

    Args:
        name: The trait name.

    Returns:
        TraitRule if found, None otherwise.
    """
    return load_trait_rules().get(name)


def get_traits_by_category(category: TraitCategory) -> list[TraitRule]:
    """Get trait rules of one category.

    Args:
        category: Region, Class or Origin.

    Returns:
        List of matching trait rules.
    """
    return [r for r in load_trait_rules().values() if r.category == category]


def get_emblem_traits() -> list[str]:
    """Get the names of all traits that have an emblem.

    Returns:
        Sorted list of trait names.
    """
    return sorted(name for name, rule in load_trait_rules().items() if rule.has_emblem)


def clear_cache() -> None:
    """Clear the trait cache. Useful for testing or hot-reloading data."""
    load_trait_rules.cache_clear()
