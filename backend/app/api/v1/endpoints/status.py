"""
Health check endpoint.

WHAT: Liveness plus a summary of in-memory state
WHY: Quick diagnostics for the frontend and ops
HOW: Read counts from the shared MarketplaceState
"""

from fastapi import APIRouter, Depends

from ....core.config import settings
from ....core.state import MarketplaceState, get_marketplace_state

router = APIRouter()


@router.get("/health")
async def health_check(state: MarketplaceState = Depends(get_marketplace_state)):
    """
    Overall application health check.

    Returns:
        JSON with status, version and store sizes
    """
    products = state.catalog.list_all()
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "app_name": settings.APP_NAME,
        "components": {
            "users": {
                "joined": len(state.registry),
                "sellers": sum(1 for user in state.registry.list_users() if user.is_seller),
            },
            "products": {
                "total": len(products),
                "claimed": sum(1 for product in products if product.seller_id),
            },
            "messages": {
                "stored": len(state.message_log),
                "limit": state.message_log.limit,
            },
        },
    }
