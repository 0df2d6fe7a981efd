"""TFT Set 16 Solver Constants."""

from typing import Final

# =============================================================================
# TEAM SIZE
# =============================================================================
# Board slots available per player level; level 10 unlocks the tenth slot
MIN_TEAM_SLOTS: Final[int] = 0
MAX_TEAM_SLOTS: Final[int] = 10
DEFAULT_TEAM_SLOTS: Final[int] = 8

# =============================================================================
# SEARCH
# =============================================================================
# Maximum number of team expansions a single solve may perform
DEFAULT_SEARCH_BUDGET: Final[int] = 100_000

# Number of ranked teams returned to the caller
MAX_RESULTS: Final[int] = 20

# Separator for the canonical team key (sorted champion ids)
TEAM_KEY_SEPARATOR: Final[str] = ","

# =============================================================================
# SCORING
# =============================================================================
# Points per active tier: tier 0 = 10, tier 1 = 20, ...
TIER_WEIGHT: Final[int] = 10

# Multiplier for the strategy value; must dominate every other score term
STRATEGY_WEIGHT: Final[int] = 1000
