"""
Tests for the Product model.
"""

import pytest
from pydantic import ValidationError

from shop.catalog import Product


class TestProductModel:
    """Tests for Product."""

    def test_display_name(self):
        """Test producer-prefixed label."""
        product = Product(id="1", name="Some Product1", producer="Some Producer1")

        assert product.display_name() == "Some Producer1 - Some Product1"

    def test_product_is_frozen(self):
        """Test products cannot be modified after creation."""
        product = Product(id="1", name="Tea", producer="Acme")

        with pytest.raises(ValidationError):
            product.name = "Coffee"

    def test_extra_fields_rejected(self):
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Product(id="1", name="Tea", producer="Acme", price=3)

    def test_missing_field_rejected(self):
        """Test all fields are required."""
        with pytest.raises(ValidationError):
            Product(id="1", name="Tea")

    def test_empty_strings_accepted(self):
        """Test empty values pass validation."""
        product = Product(id="", name="", producer="")

        assert product.id == ""
