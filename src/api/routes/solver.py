"""
Team solver API routes.
"""

from fastapi import APIRouter, HTTPException, Depends
from fastapi.concurrency import run_in_threadpool
from typing import List

from src.data.models.strategy import Strategy

from ..schemas.solver import SolveRequest, SolveResponse
from ..services.solver_service import SolverService
from ..dependencies import get_solver_service

router = APIRouter()


@router.post("/solve", response_model=SolveResponse)
async def solve_team(
    request: SolveRequest,
    service: SolverService = Depends(get_solver_service),
):
    """Recommend team compositions."""
    # Search is CPU bound; keep it off the event loop
    try:
        return await run_in_threadpool(
            service.solve,
            strategy=request.strategy,
            max_slots=request.max_slots,
            emblems=request.emblems,
            initial_team=request.initial_team,
        )
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/strategies", response_model=List[str])
async def get_strategies():
    """List available strategies."""
    return [s.value for s in Strategy]
