"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from healthtrack.api.routes import (
    auth, users, workouts, calories, water, bmr, integrations
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(workouts.router)
api_router.include_router(calories.router)
api_router.include_router(water.router)
api_router.include_router(bmr.router)
api_router.include_router(integrations.router)
