"""
Inbound socket event payloads.

WHAT: Shapes of the payloads clients send with each event
WHY: Handlers read named attributes instead of raw dict lookups
HOW: Lenient pydantic models; every field optional and untyped, since
     payloads are relayed as-is rather than validated
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EventPayload(BaseModel):
    """Base payload: camelCase or snake_case keys, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @classmethod
    def parse(cls, data: Any):
        """Build the payload from whatever the client sent; non-objects count as empty."""
        if not isinstance(data, dict):
            data = {}
        return cls.model_validate(data)


class JoinPayload(EventPayload):
    username: Any = None
    role: Any = None


class PrivateMessagePayload(EventPayload):
    to: Any = None
    message: Any = None


class ProductInquiryPayload(EventPayload):
    product_id: Any = None
    message: Any = None


class SellerResponsePayload(EventPayload):
    customer_id: Any = None
    product_id: Any = None
    message: Any = None
