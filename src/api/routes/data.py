"""
Static data API routes.
"""

from fastapi import APIRouter, HTTPException
from typing import Optional, List, Dict, Any

from src.data.loaders import load_champions, load_trait_rules, get_emblem_traits
from src.data.models.trait import TraitCategory

router = APIRouter()


# === Champions ===


@router.get("/champions")
async def get_all_champions(cost: Optional[int] = None) -> List[Dict[str, Any]]:
    """Get all champions, optionally filtered by cost."""
    champions = load_champions()
    if cost is not None:
        champions = [c for c in champions if c.cost == cost]
    return [c.model_dump() for c in champions]


@router.get("/champions/{champion_id}")
async def get_champion(champion_id: str) -> Dict[str, Any]:
    """Get specific champion by ID."""
    for champ in load_champions():
        if champ.id == champion_id:
            return champ.model_dump()
    raise HTTPException(status_code=404, detail="Champion not found")


# === Traits ===


@router.get("/traits")
async def get_all_traits(category: Optional[TraitCategory] = None) -> List[Dict[str, Any]]:
    """Get all trait rules, optionally filtered by category."""
    rules = load_trait_rules().values()
    if category is not None:
        rules = [r for r in rules if r.category == category]
    return [r.model_dump() for r in rules]


@router.get("/traits/emblems")
async def get_emblems() -> List[str]:
    """Get traits that can be boosted with an emblem."""
    return get_emblem_traits()


@router.get("/traits/{trait_name}")
async def get_trait(trait_name: str) -> Dict[str, Any]:
    """Get specific trait rule by name."""
    rule = load_trait_rules().get(trait_name)
    if rule is None:
        raise HTTPException(status_code=404, detail="Trait not found")
    return rule.model_dump()
