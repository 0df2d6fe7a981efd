"""API services."""

from .solver_service import SolverService

__all__ = [
    "SolverService",
]
