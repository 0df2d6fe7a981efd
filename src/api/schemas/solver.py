"""
Solver-related API schemas.
"""

from pydantic import BaseModel, Field
from typing import Dict, List
from enum import Enum

from src.core.constants import DEFAULT_TEAM_SLOTS, MAX_TEAM_SLOTS, MIN_TEAM_SLOTS


class StrategyEnum(str, Enum):
    """Solver strategy enum."""

    REGION_RYZE = "RegionRyze"
    BRONZE_LIFE = "BronzeLife"


class ChampionSummarySchema(BaseModel):
    """Champion as shown in a team."""

    id: str
    api_name: str
    name: str
    cost: int
    traits: List[str]
    slot_cost: int


class TeamCompSchema(BaseModel):
    """Scored team schema."""

    champions: List[ChampionSummarySchema]
    used_slots: int
    trait_counts: Dict[str, int]
    active_synergies: List[str]
    difficulty: int
    strategy_value: int
    strategy_name: StrategyEnum


class SolveRequest(BaseModel):
    """Team solve request."""

    strategy: StrategyEnum = StrategyEnum.REGION_RYZE
    max_slots: int = Field(default=DEFAULT_TEAM_SLOTS, ge=MIN_TEAM_SLOTS, le=MAX_TEAM_SLOTS)
    emblems: Dict[str, int] = Field(default_factory=dict)
    initial_team: List[str] = Field(default_factory=list, description="Champion ids")


class SolveResponse(BaseModel):
    """Team solve response."""

    strategy: StrategyEnum
    max_slots: int
    over_budget: bool
    teams: List[TeamCompSchema]
