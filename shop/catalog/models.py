"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from pydantic import BaseModel, ConfigDict, Field


# Separator between producer and product name in disambiguated labels
DISPLAY_SEPARATOR = " - "


class Product(BaseModel):
    """
    Product model for catalog items.

    Instances are frozen: the catalog hands out the same objects it
    stores, so callers only ever see immutable views.

    Attributes:
        id: Unique identifier, used as the catalog lookup key
        name: Product display name (not unique)
        producer: Producer name (not unique)

    Example:
        >>> product = Product(id="1", name="Some Product1", producer="Some Producer1")
        >>> product.display_name()
        'Some Producer1 - Some Product1'
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        extra="forbid",
    )

    id: str = Field(..., description="Unique product identifier")
    name: str = Field(..., description="Product display name")
    producer: str = Field(..., description="Producer name")

    def display_name(self) -> str:
        """Get the name prefixed with the producer."""
        return f"{self.producer}{DISPLAY_SEPARATOR}{self.name}"
