"""Connections currently composing a chat message."""

from typing import Any, Dict, List


class TypingIndicatorSet:
    """connection id -> username for everyone whose last typing event was truthy."""

    def __init__(self):
        self._typing: Dict[str, Any] = {}

    def set_typing(self, connection_id: str, username: Any, is_typing: Any) -> None:
        if is_typing:
            self._typing[connection_id] = username
        else:
            self._typing.pop(connection_id, None)

    def remove(self, connection_id: str) -> bool:
        """Drop a connection; returns True if it was typing."""
        if connection_id not in self._typing:
            return False
        del self._typing[connection_id]
        return True

    def usernames(self) -> List[Any]:
        return list(self._typing.values())

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._typing
