# =============================================================================
# core/services/favorite_service.py - Favorite Data Access
# =============================================================================
# Handles the `favorites` table. Every query is scoped to one owner.
# =============================================================================

import logging

from app.exceptions import FavoriteNotFoundError
from core.models.favorite import Favorite, FavoriteWithProduct
from lib.supabase_client import SupabaseClient, is_missing_row_error

logger = logging.getLogger(__name__)

TABLE = "favorites"


class FavoriteService:
    """Service for favorite operations."""

    @staticmethod
    def find_favorite_id(product_id: str, owner_id: str) -> str | None:
        """Id of the owner's favorite for a product, or None."""
        client = SupabaseClient.get_client()
        try:
            response = (
                client.table(TABLE)
                .select("id")
                .eq("product_id", product_id)
                .eq("owner_id", owner_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            if is_missing_row_error(e):
                return None
            raise
        rows = response.data or []
        return str(rows[0]["id"]) if rows else None

    @staticmethod
    def create_favorite(product_id: str, owner_id: str) -> Favorite:
        """
        Favorite a product for an owner.

        If the pair is already favorited, the existing row is returned and
        nothing is inserted.
        """
        existing_id = FavoriteService.find_favorite_id(product_id, owner_id)
        if existing_id:
            logger.info(f"Product {product_id} already favorited by {owner_id}")
            row = SupabaseClient.fetch_row(TABLE, existing_id)
            if row:
                return Favorite.model_validate(row)

        row = SupabaseClient.insert_row(
            TABLE,
            {"product_id": product_id, "owner_id": owner_id},
        )
        logger.info(f"Created favorite {row['id']} for product {product_id}")
        return Favorite.model_validate(row)

    @staticmethod
    def delete_favorite(favorite_id: str, owner_id: str) -> None:
        """
        Delete one of the owner's favorites.

        Raises:
            FavoriteNotFoundError: If it doesn't exist or isn't the owner's
        """
        client = SupabaseClient.get_client()
        response = (
            client.table(TABLE)
            .delete()
            .eq("id", favorite_id)
            .eq("owner_id", owner_id)
            .execute()
        )

        if not response.data:
            raise FavoriteNotFoundError(favorite_id)

        logger.info(f"Deleted favorite: {favorite_id}")

    @staticmethod
    def list_user_favorites(owner_id: str) -> list[FavoriteWithProduct]:
        """The owner's favorites joined with their products, newest first."""
        client = SupabaseClient.get_client()
        response = (
            client.table(TABLE)
            .select("*, product:products(*)")
            .eq("owner_id", owner_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [
            FavoriteWithProduct.model_validate(row)
            for row in response.data or []
            if row.get("product")
        ]
