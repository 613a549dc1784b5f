# =============================================================================
# core/models/favorite.py - Favorite Schemas
# =============================================================================
# A favorite links one identity to one product.
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, field_validator

from .product import Product


class Favorite(BaseModel):
    """A row from the `favorites` table."""

    id: str
    product_id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("id", "product_id", "owner_id", mode="before")
    @classmethod
    def stringify_ids(cls, value: Any) -> str:
        return str(value)


class FavoriteWithProduct(Favorite):
    """
    A favorite joined with its product.

    Returned by the user's favorites listing.
    """

    product: Product
