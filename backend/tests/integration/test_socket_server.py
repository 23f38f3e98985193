"""
Integration tests for the Socket.IO adapter.

WHAT: Event registration, dispatch and publish through sio.emit
WHY: Deliveries must map onto the right emit targets
HOW: MarketplaceSocketServer around a mocked AsyncServer
"""

import asyncio

import pytest
from unittest.mock import call

from app.realtime import EVENT_HANDLERS, MarketplaceSocketServer
from app.services.broadcast import Delivery


@pytest.fixture
def server(state, mock_sio):
    return MarketplaceSocketServer(state, sio=mock_sio)


def registered_handlers(mock_sio):
    """Event name -> callable passed to sio.on()."""
    return {c.args[0]: c.args[1] for c in mock_sio.on.call_args_list}


@pytest.mark.integration
class TestRegistration:
    """Test event binding."""

    def test_all_events_registered(self, server, mock_sio):
        handlers = registered_handlers(mock_sio)

        assert set(handlers) == set(EVENT_HANDLERS) | {"connect", "disconnect"}

    def test_real_server_builds(self, state):
        """Test the default AsyncServer can be constructed from settings."""
        server = MarketplaceSocketServer(state)

        assert server.sio.async_mode == "asgi"


@pytest.mark.integration
class TestPublish:
    """Test mapping deliveries to emits."""

    @pytest.mark.asyncio
    async def test_broadcast_and_targeted(self, server, mock_sio):
        await server.publish([
            Delivery("user_list", []),
            Delivery("product_inquiry", {"id": 1}, to="seller", skip_sid="cust"),
        ])

        assert mock_sio.emit.await_args_list == [
            call("user_list", [], to=None, skip_sid=None),
            call("product_inquiry", {"id": 1}, to="seller", skip_sid="cust"),
        ]


@pytest.mark.integration
class TestEventFlow:
    """Test full event flows through registered handlers."""

    @pytest.mark.asyncio
    async def test_join_emits_three_broadcasts(self, server, mock_sio, state):
        on_join = registered_handlers(mock_sio)["user_join"]

        await on_join("s1", {"username": "sam", "role": "seller"})

        events = [c.args[0] for c in mock_sio.emit.await_args_list]
        assert events == ["user_list", "user_joined", "products_update"]
        assert state.registry.lookup("s1").username == "sam"

    @pytest.mark.asyncio
    async def test_join_alias(self, server, mock_sio, state):
        await registered_handlers(mock_sio)["join"]("c1", {"username": "carol", "role": "customer"})

        assert "c1" in state.registry

    @pytest.mark.asyncio
    async def test_event_without_payload(self, server, mock_sio):
        """Test an event sent with no data does not raise."""
        await registered_handlers(mock_sio)["send_message"]("c1")

        assert mock_sio.emit.await_args.args[0] == "receive_message"

    @pytest.mark.asyncio
    async def test_extra_emit_arguments_ignored(self, server, mock_sio, state):
        """Test an emit with more than one argument uses the first as payload."""
        await registered_handlers(mock_sio)["user_join"]("c1", {"username": "carol", "role": "customer"}, "extra")

        assert state.registry.lookup("c1").username == "carol"
        events = [c.args[0] for c in mock_sio.emit.await_args_list]
        assert events == ["user_list", "user_joined", "products_update"]

    @pytest.mark.asyncio
    async def test_inquiry_targets_seller(self, server, mock_sio):
        handlers = registered_handlers(mock_sio)
        await handlers["user_join"]("S", {"username": "sam", "role": "seller"})
        await handlers["user_join"]("C", {"username": "carol", "role": "customer"})
        mock_sio.emit.reset_mock()

        await handlers["product_inquiry"]("C", {"productId": 1, "message": "is this available?"})

        targets = [(c.args[0], c.kwargs["to"]) for c in mock_sio.emit.await_args_list]
        assert targets == [("product_inquiry", "S"), ("product_inquiry", "C")]

    @pytest.mark.asyncio
    async def test_disconnect_cleans_up(self, server, mock_sio, state):
        handlers = registered_handlers(mock_sio)
        await handlers["user_join"]("S", {"username": "sam", "role": "seller"})
        await handlers["typing"]("S", True)
        mock_sio.emit.reset_mock()

        await handlers["disconnect"]("S", "client disconnect")

        events = [c.args[0] for c in mock_sio.emit.await_args_list]
        assert events == ["products_update", "user_left", "user_list", "typing_users"]
        assert "S" not in state.registry
        assert state.typing.usernames() == []
        assert all(p.seller_id is None for p in state.catalog.list_all())

    @pytest.mark.asyncio
    async def test_concurrent_events_do_not_interleave(self, server, mock_sio):
        """Test each event's emits are published contiguously."""
        handlers = registered_handlers(mock_sio)

        await asyncio.gather(
            handlers["user_join"]("a", {"username": "ann", "role": "customer"}),
            handlers["user_join"]("b", {"username": "bob", "role": "customer"}),
        )

        events = [c.args[0] for c in mock_sio.emit.await_args_list]
        assert events == ["user_list", "user_joined", "products_update"] * 2
        first_joined = mock_sio.emit.await_args_list[1].args[1]["id"]
        second_list = mock_sio.emit.await_args_list[3].args[1]
        assert first_joined == "a"
        assert [u["id"] for u in second_list] == ["a", "b"]
