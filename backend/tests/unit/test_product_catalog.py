"""
Tests for the product catalog.

WHAT: Seller assignment and release, lookup, snapshots
WHY: Inquiry routing depends on correct ownership
HOW: Drive ProductCatalog with the default and custom catalogs
"""

import pytest

from app.models.marketplace import Product
from app.services.product_catalog import DEFAULT_PRODUCTS, ProductCatalog


@pytest.mark.unit
class TestSellerAssignment:
    """Test the first-seller-claims-everything policy."""

    def test_starts_unclaimed(self):
        """Test every default product starts without a seller."""
        catalog = ProductCatalog()
        products = catalog.list_all()

        assert [p.name for p in products] == ["Laptop", "Smartphone", "Headphones"]
        assert all(p.seller_id is None for p in products)

    def test_first_seller_claims_all(self):
        """Test seller A owns all three products after joining."""
        catalog = ProductCatalog()
        claimed = catalog.on_seller_join("seller-a")

        assert len(claimed) == 3
        assert all(p.seller_id == "seller-a" for p in catalog.list_all())

    def test_second_seller_gets_nothing(self):
        """Test seller B finds nothing left to claim."""
        catalog = ProductCatalog()
        catalog.on_seller_join("seller-a")

        claimed = catalog.on_seller_join("seller-b")

        assert claimed == []
        assert catalog.owned_by("seller-b") == []
        assert len(catalog.owned_by("seller-a")) == 3

    def test_leave_releases_only_own_products(self):
        """Test a leaving seller releases its products and nothing else."""
        catalog = ProductCatalog([
            Product(id=1, name="A", price=1.0, seller_id="seller-x"),
            Product(id=2, name="B", price=2.0),
        ])
        catalog.on_seller_join("seller-a")

        released = catalog.on_seller_leave("seller-a")

        assert [p.id for p in released] == [2]
        assert catalog.find(1).seller_id == "seller-x"
        assert catalog.find(2).seller_id is None

    def test_released_products_claimed_by_next_seller(self):
        """Test products freed by one seller go to the next one to join."""
        catalog = ProductCatalog()
        catalog.on_seller_join("seller-a")
        catalog.on_seller_leave("seller-a")

        catalog.on_seller_join("seller-b")

        assert all(p.seller_id == "seller-b" for p in catalog.list_all())


@pytest.mark.unit
class TestCatalogLookup:
    """Test lookup and snapshot semantics."""

    def test_find_by_numeric_id(self):
        catalog = ProductCatalog()
        assert catalog.find(2).name == "Smartphone"

    def test_find_is_strict(self):
        """Test string, bool and unknown ids do not match."""
        catalog = ProductCatalog()

        assert catalog.find("1") is None
        assert catalog.find(True) is None
        assert catalog.find(99) is None
        assert catalog.find(None) is None

    def test_list_all_is_snapshot(self):
        """Test mutating a snapshot leaves the catalog untouched."""
        catalog = ProductCatalog()
        snapshot = catalog.list_all()
        snapshot[0].seller_id = "intruder"

        assert catalog.find(1).seller_id is None

    def test_defaults_not_mutated(self):
        """Test claiming products never touches the module defaults."""
        ProductCatalog().on_seller_join("seller-a")

        assert all(p.seller_id is None for p in DEFAULT_PRODUCTS)

    def test_wire_format_camel_case(self):
        """Test products serialize sellerId for the browser client."""
        catalog = ProductCatalog()
        catalog.on_seller_join("seller-a")

        assert catalog.list_all()[0].to_wire() == {
            "id": 1,
            "name": "Laptop",
            "price": 999.99,
            "description": "High-performance laptop",
            "sellerId": "seller-a",
        }
