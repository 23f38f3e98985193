"""
Delivery descriptions and broadcast builders.

WHAT: Describe what to emit, to whom, without touching the transport
WHY: Handlers stay synchronous and testable; the socket layer only publishes
HOW: Frozen Delivery records; broadcasts carry full snapshots of the stores
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..models.marketplace import ChatMessage, User
from ..services.connection_registry import ConnectionRegistry
from ..services.product_catalog import ProductCatalog
from ..services.typing_indicator import TypingIndicatorSet


# Outbound event names
USER_LIST = "user_list"
USER_JOINED = "user_joined"
USER_LEFT = "user_left"
PRODUCTS_UPDATE = "products_update"
RECEIVE_MESSAGE = "receive_message"
TYPING_USERS = "typing_users"
PRIVATE_MESSAGE = "private_message"
PRODUCT_INQUIRY = "product_inquiry"
SELLER_RESPONSE = "seller_response"


@dataclass(frozen=True)
class Delivery:
    """
    One outbound emit.

    ``to`` is None for a broadcast to every connection; otherwise the target
    connection id. ``skip_sid`` excludes one connection from the emit.
    """

    event: str
    data: Any
    to: Optional[str] = None
    skip_sid: Optional[str] = None

    @property
    def is_broadcast(self) -> bool:
        return self.to is None


def user_list(registry: ConnectionRegistry) -> Delivery:
    return Delivery(USER_LIST, [u.to_wire() for u in registry.list_users()])


def user_joined(user: User) -> Delivery:
    return Delivery(USER_JOINED, user.to_wire())


def user_left(user: User) -> Delivery:
    return Delivery(USER_LEFT, user.to_wire())


def products_update(catalog: ProductCatalog) -> Delivery:
    return Delivery(PRODUCTS_UPDATE, [p.to_wire() for p in catalog.list_all()])


def typing_users(typing: TypingIndicatorSet) -> Delivery:
    return Delivery(TYPING_USERS, typing.usernames())


def receive_message(message: ChatMessage) -> Delivery:
    """Chat messages go out one at a time, not as a history snapshot."""
    return Delivery(RECEIVE_MESSAGE, message.to_wire())
