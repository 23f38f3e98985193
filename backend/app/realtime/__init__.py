"""Socket.IO transport layer."""

from .socket_server import (
    EVENT_HANDLERS,
    MarketplaceSocketServer,
    create_sio_server,
)

__all__ = [
    "EVENT_HANDLERS",
    "MarketplaceSocketServer",
    "create_sio_server",
]
