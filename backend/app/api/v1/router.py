"""
API router aggregation.

WHAT: Combine all endpoint routers
WHY: Single place to register all API routes
HOW: Include routers from endpoints under the /api prefix
"""

from fastapi import APIRouter

from .endpoints import status, marketplace

# Create main router
api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    status.router,
    prefix="/api",
    tags=["status"]
)

api_router.include_router(
    marketplace.router,
    prefix="/api",
    tags=["marketplace"]
)
