"""Optimizer module - Team composition recommendations.

This module searches for TFT team compositions:
- Tiered candidate selection for a partial team
- Bounded depth-first team building
- Breakpoint scoring and ranking per strategy
"""

from .candidate_selector import (
    CANDIDATE_TIERS,
    SelectionContext,
    select_candidates,
)
from .team_scorer import TeamComp, TeamScorer
from .comp_solver import CompSolver, SearchState, solve

__all__ = [
    # Candidate Selector
    "CANDIDATE_TIERS",
    "SelectionContext",
    "select_candidates",
    # Team Scorer
    "TeamComp",
    "TeamScorer",
    # Comp Solver
    "CompSolver",
    "SearchState",
    "solve",
]
