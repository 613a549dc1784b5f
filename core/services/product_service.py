# =============================================================================
# core/services/product_service.py - Product Data Access
# =============================================================================
# Handles product queries and mutations against the `products` table.
# Authorization happens in the action handlers, not here.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ProductNotFoundError
from core.models.product import Product
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)

TABLE = "products"

# Characters PostgREST treats as syntax inside an or=(...) filter
_RESERVED = set(',.:()"\\')


def _like_escape(search: str) -> str:
    """
    Make `search` match literally inside a LIKE pattern.

    Backslash is the default LIKE escape character. PostgREST reads every `*`
    as `%` and offers no escape for it, so `*` becomes the single-character
    wildcard; list_products narrows those matches afterwards.
    """
    escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


def _ilike_pattern(search: str) -> str:
    """Build a substring pattern safe to embed in an or_() filter."""
    pattern = f"%{_like_escape(search)}%"
    if any(char in _RESERVED for char in pattern):
        quoted = pattern.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{quoted}"'
    return pattern


def _contains(product: Product, search: str) -> bool:
    needle = search.lower()
    return needle in product.name.lower() or needle in product.company.lower()


class ProductService:
    """
    Service for product management operations.

    Provides a clean interface between action handlers and the database.
    """

    @staticmethod
    def list_featured() -> list[Product]:
        """Products flagged as featured."""
        client = SupabaseClient.get_client()
        response = (
            client.table(TABLE)
            .select("*")
            .eq("featured", True)
            .execute()
        )
        return [Product.model_validate(row) for row in response.data or []]

    @staticmethod
    def list_products(search: str = "") -> list[Product]:
        """
        List products, newest first.

        Args:
            search: Case-insensitive substring matched against name OR company.
                Empty means no filter.
        """
        client = SupabaseClient.get_client()
        query = client.table(TABLE).select("*")

        if search:
            pattern = _ilike_pattern(search)
            query = query.or_(f"name.ilike.{pattern},company.ilike.{pattern}")

        response = query.order("created_at", desc=True).execute()
        products = [Product.model_validate(row) for row in response.data or []]
        if "*" in search:
            products = [p for p in products if _contains(p, search)]
        logger.debug(f"Listed {len(products)} products (search={search!r})")
        return products

    @staticmethod
    def get_product(product_id: str) -> Product | None:
        """Fetch one product, or None if it doesn't exist."""
        row = SupabaseClient.fetch_row(TABLE, product_id)
        return Product.model_validate(row) if row else None

    @staticmethod
    def create_product(data: dict[str, Any]) -> Product:
        """
        Insert a product.

        Args:
            data: Column values (validated fields, image URL, owner_id)

        Returns:
            The created product
        """
        row = SupabaseClient.insert_row(TABLE, data)
        logger.info(f"Created product: {row['id']} ({data.get('name')})")
        return Product.model_validate(row)

    @staticmethod
    def update_product(product_id: str, changes: dict[str, Any]) -> Product:
        """
        Update columns of a product.

        Raises:
            ProductNotFoundError: If no row matched
        """
        client = SupabaseClient.get_client()
        response = (
            client.table(TABLE)
            .update(changes)
            .eq("id", product_id)
            .execute()
        )

        if not response.data:
            raise ProductNotFoundError(product_id)

        logger.info(f"Updated product {product_id}: {sorted(changes)}")
        return Product.model_validate(response.data[0])

    @staticmethod
    def delete_product(product_id: str) -> Product:
        """
        Delete a product and return the deleted row.

        Favorites referencing it are removed by the foreign key cascade.

        Raises:
            ProductNotFoundError: If no row matched
        """
        client = SupabaseClient.get_client()
        response = (
            client.table(TABLE)
            .delete()
            .eq("id", product_id)
            .execute()
        )

        if not response.data:
            raise ProductNotFoundError(product_id)

        logger.info(f"Deleted product: {product_id}")
        return Product.model_validate(response.data[0])
