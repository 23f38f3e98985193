"""
Product catalog with seller assignment.

WHAT: Fixed product list and which seller connection owns each item
WHY: Inquiries are routed to whoever currently owns the product
HOW: The first seller to join claims every unowned product; a leaving
     seller releases everything it owned
"""

from typing import Any, Iterable, List, Optional

from ..models.marketplace import Product
from ..utils.logger import get_logger

logger = get_logger(__name__)


DEFAULT_PRODUCTS: List[Product] = [
    Product(id=1, name="Laptop", price=999.99, description="High-performance laptop"),
    Product(id=2, name="Smartphone", price=599.99, description="Latest smartphone"),
    Product(id=3, name="Headphones", price=99.99, description="Wireless headphones"),
]


class ProductCatalog:
    """Ordered, fixed set of products. Only ``seller_id`` ever changes."""

    def __init__(self, products: Optional[Iterable[Product]] = None):
        source = DEFAULT_PRODUCTS if products is None else products
        # Own copies so the module-level defaults are never mutated
        self._products: List[Product] = [p.model_copy() for p in source]

    def on_seller_join(self, connection_id: str) -> List[Product]:
        """
        Assign every unowned product to a newly joined seller.

        WHAT: Claim products whose seller_id is empty
        WHY: Products need an owner before inquiries can be routed
        HOW: Linear scan; a second seller finds nothing left to claim

        Returns:
            Products claimed by this seller (may be empty)
        """
        claimed = []
        for product in self._products:
            if not product.seller_id:
                product.seller_id = connection_id
                claimed.append(product)

        if claimed:
            logger.info(f"Seller {connection_id} claimed products {[p.id for p in claimed]}")
        return claimed

    def on_seller_leave(self, connection_id: str) -> List[Product]:
        """
        Release every product owned by a departing connection.

        Returns:
            Products that went back to unowned (may be empty)
        """
        released = []
        for product in self._products:
            if product.seller_id == connection_id:
                product.seller_id = None
                released.append(product)

        if released:
            logger.info(f"Seller {connection_id} released products {[p.id for p in released]}")
        return released

    def find(self, product_id: Any) -> Optional[Product]:
        """Look up a product by numeric id (``"1"`` and ``True`` do not match ``1``)."""
        if isinstance(product_id, bool) or not isinstance(product_id, (int, float)):
            return None
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def owned_by(self, connection_id: str) -> List[Product]:
        return [p.model_copy() for p in self._products if p.seller_id == connection_id]

    def list_all(self) -> List[Product]:
        """Snapshot of all products in catalog order."""
        return [p.model_copy() for p in self._products]
