"""Champion data loader for TFT Set 16."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Optional

from ..models.champion import Champion


# Get the data directory path
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"
CHAMPIONS_FILE = DATA_DIR / "champions" / "set16_champions.json"


def parse_champions(data: dict) -> list[Champion]:
    """Parse the champion roster from JSON data.

    Args:
        data: Dictionary with a ``champions`` list.

    Returns:
        List of Champion objects in file order.

    Raises:
        ValueError: If two entries share an id.
    """
    champions = []
    seen: set[str] = set()
    for champ_data in data["champions"]:
        champion = Champion(**champ_data)
        if champion.id in seen:
            raise ValueError(f"Duplicate champion id: {champion.id}")
        seen.add(champion.id)
        champions.append(champion)
    return champions


@lru_cache(maxsize=1)
def load_champions() -> list[Champion]:
    """Load all champions from JSON file.

    Returns:
        List of all Champion objects.
    """
    with open(CHAMPIONS_FILE, "r", encoding="utf-8") as f:
        data = json.load(f)

    return parse_champions(data)


def get_champion_by_id(champion_id: str) -> Optional[Champion]:
    """Get a champion by their ID.

    Args:
        champion_id: The unique champion identifier.

    Returns:
        Champion object if found, None otherwise.
    """
    for champion in load_champions():
        if champion.id == champion_id:
            return champion
    return None


def get_champion_by_name(name: str) -> Optional[Champion]:
    """Get the first champion with a display name (case-insensitive)."""
    lowered = name.lower()
    for champion in load_champions():
        if champion.name.lower() == lowered:
            return champion
    return None


def get_champions_by_cost(cost: int) -> list[Champion]:
    """Get all champions of a specific cost.

    Args:
        cost: The champion cost tier (1-5).

    Returns:
        List of champions at that cost.
    """
    return [c for c in load_champions() if c.cost == cost]


def get_champions_by_trait(trait: str) -> list[Champion]:
    """Get all champions with a specific trait.

    Args:
        trait: The trait name to search for.

    Returns:
        List of champions with that trait.
    """
    return [c for c in load_champions() if trait in c.traits]


def clear_cache() -> None:
    """Clear the champion cache. Useful for testing or hot-reloading data."""
    load_champions.cache_clear()
