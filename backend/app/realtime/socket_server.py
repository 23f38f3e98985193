"""
Socket.IO transport for the marketplace chat.

WHAT: Bind client events to handlers and publish the resulting deliveries
WHY: Keep the python-socketio API out of the routing logic
HOW: AsyncServer in ASGI mode; an asyncio.Lock makes each
     handle-then-publish step atomic with respect to other events
"""

import asyncio
from typing import Any, Callable, Iterable, List, Optional

import socketio

from ..core.config import settings
from ..core.state import MarketplaceState
from ..services import event_handlers
from ..services.broadcast import Delivery
from ..utils.logger import get_logger

logger = get_logger(__name__)


Handler = Callable[[MarketplaceState, str, Any], List[Delivery]]

# Inbound event name -> handler. "join" is accepted as an alias of "user_join".
EVENT_HANDLERS: dict[str, Handler] = {
    "user_join": event_handlers.handle_join,
    "join": event_handlers.handle_join,
    "send_message": event_handlers.handle_send_message,
    "typing": event_handlers.handle_typing,
    "private_message": event_handlers.handle_private_message,
    "product_inquiry": event_handlers.handle_product_inquiry,
    "seller_response": event_handlers.handle_seller_response,
}


def create_sio_server() -> socketio.AsyncServer:
    """Build the AsyncServer with CORS and heartbeat settings from config."""
    return socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins=settings.get_cors_origins_list(),
        ping_interval=settings.SOCKETIO_PING_INTERVAL,
        ping_timeout=settings.SOCKETIO_PING_TIMEOUT,
    )


class MarketplaceSocketServer:
    """
    Event dispatcher around a Socket.IO server.

    WHAT: Owns the sio server, the shared state and the publish lock
    WHY: Mutation and publish of one event must not interleave with another
    HOW: Every inbound event goes through ``dispatch``
    """

    def __init__(self, state: MarketplaceState, sio: Optional[socketio.AsyncServer] = None):
        self.state = state
        self.sio = sio if sio is not None else create_sio_server()
        self._lock = asyncio.Lock()
        self._register_handlers()

    def _register_handlers(self):
        self.sio.on("connect", self.on_connect)
        self.sio.on("disconnect", self.on_disconnect)
        for event, handler in EVENT_HANDLERS.items():
            self.sio.on(event, self._make_event_handler(handler))
        logger.info(f"Registered socket events: {sorted(EVENT_HANDLERS)}")

    def _make_event_handler(self, handler: Handler):
        async def on_event(sid, *args):
            # Extra emit arguments beyond the payload are ignored
            await self.dispatch(handler, sid, args[0] if args else None)
        on_event.__name__ = handler.__name__
        return on_event

    async def dispatch(self, handler: Handler, sid: str, data: Any = None) -> List[Delivery]:
        """
        Run one handler and publish its deliveries under the lock.

        Returns:
            The deliveries that were published
        """
        async with self._lock:
            deliveries = handler(self.state, sid, data)
            await self.publish(deliveries)
        return deliveries

    async def publish(self, deliveries: Iterable[Delivery]):
        """Emit each delivery; emitting to a vanished connection is a no-op."""
        for delivery in deliveries:
            await self.sio.emit(
                delivery.event,
                delivery.data,
                to=delivery.to,
                skip_sid=delivery.skip_sid,
            )

    async def on_connect(self, sid, environ=None, auth=None):
        logger.info(f"User connected: {sid}")

    async def on_disconnect(self, sid, *args):
        # Newer python-socketio passes a disconnect reason; older versions don't
        logger.info(f"User disconnected: {sid}")
        async with self._lock:
            deliveries = event_handlers.handle_disconnect(self.state, sid)
            await self.publish(deliveries)
        return deliveries
