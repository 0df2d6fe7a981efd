# Data Loaders
from .champion_loader import (
    load_champions,
    parse_champions,
    get_champion_by_id,
    get_champion_by_name,
    get_champions_by_cost,
    get_champions_by_trait,
)
from .trait_loader import (
    load_trait_rules,
    parse_trait_rules,
    get_trait_rule,
    get_traits_by_category,
    get_emblem_traits,
)

__all__ = [
    # Champion loaders
    "load_champions",
    "parse_champions",
    "get_champion_by_id",
    "get_champion_by_name",
    "get_champions_by_cost",
    "get_champions_by_trait",
    # Trait loaders
    "load_trait_rules",
    "parse_trait_rules",
    "get_trait_rule",
    "get_traits_by_category",
    "get_emblem_traits",
]
