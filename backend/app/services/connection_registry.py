"""
Connection registry.

WHAT: Map live connection ids to joined users
WHY: Every handler resolves "who sent this" through one place
HOW: Insertion-ordered dict keyed by connection id
"""

from typing import Any, Dict, List, Optional

from ..models.marketplace import User
from ..utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionRegistry:
    """Users keyed by the transport-assigned connection id."""

    def __init__(self, anonymous_name: str = "Anonymous"):
        self._users: Dict[str, User] = {}
        self.anonymous_name = anonymous_name

    def join(self, connection_id: str, username: Any, role: Any) -> User:
        """
        Register (or re-register) a connection.

        A repeated join from the same connection replaces the earlier record,
        so there is never more than one user per connection.
        """
        user = User(id=connection_id, username=username, role=role)
        if connection_id in self._users:
            logger.debug(f"Connection {connection_id} re-joined as {username} ({role})")
        self._users[connection_id] = user
        return user

    def leave(self, connection_id: str) -> Optional[User]:
        """Remove a connection's user; returns it, or None if it never joined."""
        return self._users.pop(connection_id, None)

    def lookup(self, connection_id: str) -> Optional[User]:
        return self._users.get(connection_id)

    def display_name(self, connection_id: str) -> Any:
        """Username for a connection, or the anonymous placeholder."""
        user = self._users.get(connection_id)
        if user is None or not user.username:
            return self.anonymous_name
        return user.username

    def list_users(self) -> List[User]:
        """Snapshot of joined users in join order."""
        return list(self._users.values())

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._users

    def __len__(self) -> int:
        return len(self._users)
