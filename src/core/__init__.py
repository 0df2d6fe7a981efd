# Core accounting modules
from .constants import (
    DEFAULT_SEARCH_BUDGET,
    DEFAULT_TEAM_SLOTS,
    MAX_RESULTS,
    MAX_TEAM_SLOTS,
    MIN_TEAM_SLOTS,
    STRATEGY_WEIGHT,
    TEAM_KEY_SEPARATOR,
    TIER_WEIGHT,
)
from .synergy_calculator import SynergyCalculator, ActiveTrait

__all__ = [
    "DEFAULT_SEARCH_BUDGET",
    "DEFAULT_TEAM_SLOTS",
    "MAX_RESULTS",
    "MAX_TEAM_SLOTS",
    "MIN_TEAM_SLOTS",
    "STRATEGY_WEIGHT",
    "TEAM_KEY_SEPARATOR",
    "TIER_WEIGHT",
    "SynergyCalculator",
    "ActiveTrait",
]
