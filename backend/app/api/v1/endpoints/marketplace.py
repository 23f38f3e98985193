"""
Read-only marketplace query endpoints.

WHAT: Point-in-time snapshots of chat history, users and products
WHY: A freshly loaded client needs current state before socket updates arrive
HOW: FastAPI GET endpoints reading the shared MarketplaceState
"""

from fastapi import APIRouter, Depends

from ....core.state import MarketplaceState, get_marketplace_state
from ....utils.exceptions import ProductNotFoundException, UserNotFoundException
from ....utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("/messages")
async def list_messages(state: MarketplaceState = Depends(get_marketplace_state)):
    """
    Current chat history, oldest first.

    Returns:
        JSON list of chat messages (at most MESSAGE_HISTORY_LIMIT)
    """
    return [message.to_wire() for message in state.message_log.history()]


@router.get("/users")
async def list_users(state: MarketplaceState = Depends(get_marketplace_state)):
    """Joined users in join order."""
    return [user.to_wire() for user in state.registry.list_users()]


@router.get("/users/{connection_id}")
async def get_user(connection_id: str, state: MarketplaceState = Depends(get_marketplace_state)):
    """
    Look up the user behind a connection id.

    Raises:
        UserNotFoundException: If the connection never joined or has left
    """
    user = state.registry.lookup(connection_id)
    if user is None:
        raise UserNotFoundException(connection_id)
    return user.to_wire()


@router.get("/products")
async def list_products(state: MarketplaceState = Depends(get_marketplace_state)):
    """All products with their current seller assignment."""
    return [product.to_wire() for product in state.catalog.list_all()]


@router.get("/products/{product_id}")
async def get_product(product_id: int, state: MarketplaceState = Depends(get_marketplace_state)):
    """
    Single product by id.

    Raises:
        ProductNotFoundException: If no product has this id
    """
    product = state.catalog.find(product_id)
    if product is None:
        logger.debug(f"Product lookup miss: {product_id}")
        raise ProductNotFoundException(product_id)
    return product.to_wire()
