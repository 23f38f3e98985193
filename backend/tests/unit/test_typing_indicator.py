"""Tests for the typing indicator set."""

import pytest

from app.services.typing_indicator import TypingIndicatorSet


@pytest.mark.unit
class TestTypingIndicatorSet:
    """Test typing toggles and removal."""

    def test_typing_true_adds(self):
        typing = TypingIndicatorSet()
        typing.set_typing("sid-1", "alice", True)

        assert "sid-1" in typing
        assert typing.usernames() == ["alice"]

    def test_typing_false_removes(self):
        typing = TypingIndicatorSet()
        typing.set_typing("sid-1", "alice", True)
        typing.set_typing("sid-1", "alice", False)

        assert typing.usernames() == []

    def test_latest_event_wins(self):
        """Test membership follows the most recent event per connection."""
        typing = TypingIndicatorSet()
        typing.set_typing("a", "ann", True)
        typing.set_typing("b", "bob", True)
        typing.set_typing("a", "ann", False)
        typing.set_typing("b", "bob", True)

        assert typing.usernames() == ["bob"]

    def test_stop_without_start_is_noop(self):
        typing = TypingIndicatorSet()
        typing.set_typing("sid-1", "alice", False)

        assert typing.usernames() == []

    def test_remove(self):
        typing = TypingIndicatorSet()
        typing.set_typing("sid-1", "alice", True)

        assert typing.remove("sid-1") is True
        assert typing.remove("sid-1") is False
        assert "sid-1" not in typing
