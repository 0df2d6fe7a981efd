"""
Dependency injection for API services.
"""

from functools import lru_cache

from .config import settings
from .services.solver_service import SolverService


@lru_cache()
def get_solver_service() -> SolverService:
    """Get SolverService singleton."""
    return SolverService(search_budget=settings.SEARCH_BUDGET)
