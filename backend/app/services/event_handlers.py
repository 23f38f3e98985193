"""
Inbound event handlers.

WHAT: One function per client event, mutating state and choosing recipients
WHY: Keep routing rules independent of the socket library
HOW: Each handler runs synchronously against MarketplaceState and returns
     the ordered list of deliveries; the caller publishes them

No handler reports errors to the client. Unknown senders get the anonymous
placeholder, missing targets are dropped, and payload fields are relayed
without validation.
"""

from typing import Any, List

from pydantic_core import PydanticSerializationError

from ..core.state import MarketplaceState
from ..models.events import (
    JoinPayload,
    PrivateMessagePayload,
    ProductInquiryPayload,
    SellerResponsePayload,
)
from ..models.marketplace import ChatMessage
from ..services import broadcast
from ..services.broadcast import Delivery
from ..utils.logger import get_logger
from ..utils.timestamps import utc_timestamp

logger = get_logger(__name__)


def handle_join(state: MarketplaceState, connection_id: str, data: Any) -> List[Delivery]:
    """
    Register a connection's identity and role.

    WHAT: Add/replace the user, let a seller claim unowned products
    WHY: Everyone needs the fresh user list and product ownership
    HOW: Registry join, catalog claim, then three broadcasts
    """
    payload = JoinPayload.parse(data)
    user = state.registry.join(connection_id, payload.username, payload.role)

    if user.is_seller:
        state.catalog.on_seller_join(connection_id)

    logger.info(f"{user.username} ({user.role}) joined the chat")
    return [
        broadcast.user_list(state.registry),
        broadcast.user_joined(user),
        broadcast.products_update(state.catalog),
    ]


def handle_send_message(state: MarketplaceState, connection_id: str, data: Any) -> List[Delivery]:
    """Stamp a public chat message, keep it in history and broadcast it."""
    fields = dict(data) if isinstance(data, dict) else {}
    # Server-assigned fields override anything the client sent under the same key
    fields.update(
        id=state.ids.next_id(),
        sender=state.registry.display_name(connection_id),
        senderId=connection_id,
        timestamp=utc_timestamp(),
    )
    fields.pop("sender_id", None)
    message = ChatMessage.model_validate(fields)

    # Serialize first so only messages that can be published reach the history
    try:
        delivery = broadcast.receive_message(message)
    except (PydanticSerializationError, ValueError) as e:
        logger.debug(f"Dropping message from {connection_id}: payload not serializable ({e})")
        return []

    evicted = state.message_log.append(message)
    if evicted is not None:
        logger.debug(f"Message log full, evicted message {evicted.id}")

    return [delivery]


def handle_typing(state: MarketplaceState, connection_id: str, is_typing: Any) -> List[Delivery]:
    """Toggle a joined user's typing indicator; unjoined connections are ignored."""
    user = state.registry.lookup(connection_id)
    if user is None:
        return []

    state.typing.set_typing(connection_id, user.username, is_typing)
    return [broadcast.typing_users(state.typing)]


def handle_private_message(state: MarketplaceState, connection_id: str, data: Any) -> List[Delivery]:
    payload = PrivateMessagePayload.parse(data)
    return state.router.route_private_message(payload.to, connection_id, payload.message)


def handle_product_inquiry(state: MarketplaceState, connection_id: str, data: Any) -> List[Delivery]:
    payload = ProductInquiryPayload.parse(data)
    return state.router.route_inquiry(payload.product_id, connection_id, payload.message)


def handle_seller_response(state: MarketplaceState, connection_id: str, data: Any) -> List[Delivery]:
    payload = SellerResponsePayload.parse(data)
    return state.router.route_response(
        payload.product_id, payload.customer_id, connection_id, payload.message
    )


def handle_disconnect(state: MarketplaceState, connection_id: str) -> List[Delivery]:
    """
    Forget a connection.

    WHAT: Remove user, typing entry and product ownership
    WHY: No product may point at a connection that is gone
    HOW: Release products in this same step, before anything is published
    """
    deliveries: List[Delivery] = []
    user = state.registry.leave(connection_id)
    released = state.catalog.on_seller_leave(connection_id)
    state.typing.remove(connection_id)

    if user is not None:
        if user.is_seller or released:
            deliveries.append(broadcast.products_update(state.catalog))
        deliveries.append(broadcast.user_left(user))
        logger.info(f"{user.username} ({user.role}) left the chat")

    deliveries.append(broadcast.user_list(state.registry))
    deliveries.append(broadcast.typing_users(state.typing))
    return deliveries
