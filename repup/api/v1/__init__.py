"""API v1 router aggregation."""

from fastapi import APIRouter

from repup.api.v1.endpoints import body_parts, debug, exercises, health, workouts

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(body_parts.router, prefix="/body-parts", tags=["body-parts"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])

# Mounted by create_application only when DEBUG_ENDPOINTS is set
debug_router = APIRouter()
debug_router.include_router(debug.router, prefix="/debug", tags=["debug"])
