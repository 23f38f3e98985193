"""
Marketplace domain models.

WHAT: Users, products and the records relayed between connections
WHY: One typed shape per published record, shared by handlers and API
HOW: Pydantic v2 models serialized with camelCase aliases for the browser client
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


UserRole = Literal["customer", "seller"]


class WireModel(BaseModel):
    """Base for records sent over the socket or returned by the API."""

    # Binary attachments from Socket.IO clients are sent on as base64 text
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, ser_json_bytes="base64")

    def to_wire(self) -> dict[str, Any]:
        """Serialize with camelCase keys, as the browser client expects."""
        return self.model_dump(by_alias=True, mode="json")


class User(WireModel):
    """A joined connection. ``id`` is the transport-assigned connection id."""

    id: str
    username: Any = None
    role: Any = None

    @property
    def is_seller(self) -> bool:
        return self.role == "seller"


class Product(WireModel):
    """A sellable item, optionally owned by one seller connection."""

    id: int
    name: str
    price: float = Field(ge=0.0)
    description: str = ""
    seller_id: str | None = None


class ChatMessage(WireModel):
    """
    Public chat message.

    Whatever the client sent (``body``, ``message``, ...) is kept as extra
    fields; the server-assigned fields below always win.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: int
    sender: Any
    sender_id: str
    timestamp: str


class PrivateMessage(WireModel):
    """Direct message between two connections."""

    model_config = ConfigDict(frozen=True)

    id: int
    sender: Any
    sender_id: str
    message: Any = None
    timestamp: str
    is_private: bool = True


class Inquiry(WireModel):
    """A customer's question about a product, addressed to its seller."""

    model_config = ConfigDict(frozen=True)

    id: int
    product_id: Any = None
    customer_id: str
    customer_name: Any
    message: Any = None
    timestamp: str


class InquiryResponse(WireModel):
    """A seller's reply to an inquiry, addressed to the customer."""

    model_config = ConfigDict(frozen=True)

    id: int
    product_id: Any = None
    seller_id: str
    seller_name: Any
    message: Any = None
    timestamp: str
