"""
Bounded public chat history.

WHAT: Keep the most recent chat messages in arrival order
WHY: New clients fetch recent history over HTTP
HOW: deque with maxlen; the oldest message falls off first
"""

from collections import deque
from typing import Deque, List, Optional

from ..models.marketplace import ChatMessage


class MessageLog:
    """Append-only FIFO of at most ``limit`` messages."""

    def __init__(self, limit: int = 100):
        if limit < 1:
            raise ValueError("limit must be >= 1")
        self.limit = limit
        self._messages: Deque[ChatMessage] = deque(maxlen=limit)

    def append(self, message: ChatMessage) -> Optional[ChatMessage]:
        """
        Add a message at the end.

        Returns:
            The evicted oldest message when the log was full, else None
        """
        evicted = self._messages[0] if len(self._messages) == self.limit else None
        self._messages.append(message)
        return evicted

    def history(self) -> List[ChatMessage]:
        """Snapshot, oldest first."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
