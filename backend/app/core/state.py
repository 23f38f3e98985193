"""
Application state for the marketplace chat server.

WHAT: The in-memory stores shared by every event handler
WHY: One explicit object instead of module-level dicts scattered around
HOW: Dataclass built from settings; handlers receive it as an argument
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .config import settings
from ..models.marketplace import Product
from ..services.connection_registry import ConnectionRegistry
from ..services.inquiry_router import InquiryRouter
from ..services.message_log import MessageLog
from ..services.product_catalog import ProductCatalog
from ..services.typing_indicator import TypingIndicatorSet
from ..utils.timestamps import RecordIdGenerator


@dataclass
class MarketplaceState:
    """Registry, catalog, chat log and typing set for one server process."""

    registry: ConnectionRegistry
    catalog: ProductCatalog
    message_log: MessageLog
    typing: TypingIndicatorSet
    ids: RecordIdGenerator = field(default_factory=RecordIdGenerator)
    router: InquiryRouter = field(init=False)

    def __post_init__(self):
        self.router = InquiryRouter(self.registry, self.catalog, self.ids)

    @classmethod
    def create(
        cls,
        products: Optional[Iterable[Product]] = None,
        history_limit: Optional[int] = None,
        anonymous_name: Optional[str] = None,
    ) -> "MarketplaceState":
        """
        Build a fresh state with defaults from settings.

        Args:
            products: Catalog contents (defaults to the demo catalog)
            history_limit: Max chat messages kept (MESSAGE_HISTORY_LIMIT)
            anonymous_name: Placeholder for unjoined senders (ANONYMOUS_USERNAME)
        """
        if history_limit is None:
            history_limit = settings.MESSAGE_HISTORY_LIMIT
        if anonymous_name is None:
            anonymous_name = settings.ANONYMOUS_USERNAME
        return cls(
            registry=ConnectionRegistry(anonymous_name),
            catalog=ProductCatalog(products),
            message_log=MessageLog(history_limit),
            typing=TypingIndicatorSet(),
        )


# Process-wide instance used by the socket server and the HTTP API
marketplace_state = MarketplaceState.create()


def get_marketplace_state() -> MarketplaceState:
    """FastAPI dependency returning the process-wide state."""
    return marketplace_state
