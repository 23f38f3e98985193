"""
Targeted routing for inquiries, seller replies and private messages.

WHAT: Decide which connections receive a buyer/seller exchange
WHY: These records go to two parties only, never to the whole room
HOW: Look up the product owner or named target, build the record, and
     return one delivery for the counterpart plus an echo to the sender
"""

from typing import Any, List

from ..models.marketplace import Inquiry, InquiryResponse, PrivateMessage
from ..services.broadcast import (
    Delivery,
    PRIVATE_MESSAGE,
    PRODUCT_INQUIRY,
    SELLER_RESPONSE,
)
from ..services.connection_registry import ConnectionRegistry
from ..services.product_catalog import ProductCatalog
from ..utils.logger import get_logger
from ..utils.timestamps import RecordIdGenerator, utc_timestamp

logger = get_logger(__name__)


def deliver_pair(event: str, data: Any, target: Any, sender: str) -> List[Delivery]:
    """
    Deliver to ``target`` and echo back to ``sender``.

    The target copy skips the sender so a connection addressing itself gets
    exactly one copy. A missing or non-string target is dropped rather than
    handed to the transport, where ``to=None`` would mean "everyone".
    """
    deliveries = []
    if isinstance(target, str) and target:
        deliveries.append(Delivery(event, data, to=target, skip_sid=sender))
    else:
        logger.debug(f"Dropping {event} from {sender}: no target connection ({target!r})")
    deliveries.append(Delivery(event, data, to=sender))
    return deliveries


class InquiryRouter:
    """Routes product inquiries to sellers and replies back to customers."""

    def __init__(
        self,
        registry: ConnectionRegistry,
        catalog: ProductCatalog,
        ids: RecordIdGenerator,
    ):
        self.registry = registry
        self.catalog = catalog
        self.ids = ids

    def route_inquiry(self, product_id: Any, from_connection_id: str, message: Any) -> List[Delivery]:
        """
        Send a customer's inquiry to the product's current seller.

        WHAT: Seller copy + echo to the customer
        WHY: The customer's own copy doubles as a send confirmation
        HOW: Unknown product or unowned product means nobody hears about it

        Returns:
            Deliveries to publish (empty when the inquiry is dropped)
        """
        product = self.catalog.find(product_id)
        if product is None or not product.seller_id:
            logger.debug(f"Dropping inquiry from {from_connection_id}: product {product_id!r} has no seller")
            return []

        inquiry = Inquiry(
            id=self.ids.next_id(),
            product_id=product_id,
            customer_id=from_connection_id,
            customer_name=self.registry.display_name(from_connection_id),
            message=message,
            timestamp=utc_timestamp(),
        )
        return deliver_pair(PRODUCT_INQUIRY, inquiry.to_wire(), product.seller_id, from_connection_id)

    def route_response(
        self,
        product_id: Any,
        to_customer_connection_id: Any,
        from_connection_id: str,
        message: Any,
    ) -> List[Delivery]:
        """
        Send a seller's reply back to the customer who asked.

        The sender is not checked against the product's owner: any
        connection may answer.
        """
        response = InquiryResponse(
            id=self.ids.next_id(),
            product_id=product_id,
            seller_id=from_connection_id,
            seller_name=self.registry.display_name(from_connection_id),
            message=message,
            timestamp=utc_timestamp(),
        )
        return deliver_pair(SELLER_RESPONSE, response.to_wire(), to_customer_connection_id, from_connection_id)

    def route_private_message(self, to_connection_id: Any, from_connection_id: str, message: Any) -> List[Delivery]:
        """Direct message to one connection, echoed to the sender."""
        private = PrivateMessage(
            id=self.ids.next_id(),
            sender=self.registry.display_name(from_connection_id),
            sender_id=from_connection_id,
            message=message,
            timestamp=utc_timestamp(),
        )
        return deliver_pair(PRIVATE_MESSAGE, private.to_wire(), to_connection_id, from_connection_id)
