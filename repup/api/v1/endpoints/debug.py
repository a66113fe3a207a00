"""Debug endpoints (mounted only when DEBUG_ENDPOINTS is set)."""

from fastapi import APIRouter, Depends

from repup.api.deps import get_debug_service
from repup.schemas.common import Envelope
from repup.schemas.workout import WorkoutReadWithDetails
from repup.services.debug import DebugService

router = APIRouter()


@router.get("/health")
async def debug_health(service: DebugService = Depends(get_debug_service)):
    """Status, database status and server time."""
    return {"data": await service.health()}


@router.get("/tables")
async def list_tables(service: DebugService = Depends(get_debug_service)):
    return {"data": {"tables": await service.list_tables()}}


@router.post("/workouts", response_model=Envelope[WorkoutReadWithDetails], status_code=201)
async def create_sample_workout(service: DebugService = Depends(get_debug_service)):
    """Create a sample workout from the first exercises in the catalog."""
    workout = await service.create_sample_workout()
    return {"data": WorkoutReadWithDetails.from_workout(workout)}
