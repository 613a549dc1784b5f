# =============================================================================
# core/actions.py - Storefront Action Handlers
# =============================================================================
# Each handler is one request/response step:
#   gate -> validate -> storage -> data store -> result
#
# Identity is resolved by the caller and passed in explicitly. Mutating
# handlers never raise: every failure is logged and reduced to ActionError.
# Read handlers that find nothing return a Redirect to their listing.
# =============================================================================

import logging
from typing import Any, Mapping

from app.auth.models import AuthUser
from core.authorization import require_admin, require_authenticated
from core.models.favorite import FavoriteWithProduct
from core.models.image import ImageInput
from core.models.product import Product, ProductInput
from core.models.result import (
    ADMIN_PRODUCTS_ROUTE,
    PRODUCTS_ROUTE,
    ActionError,
    ActionResult,
    ActionSuccess,
    Redirect,
    admin_edit_route,
)
from core.services.favorite_service import FavoriteService
from core.services.product_service import ProductService
from core.services.storage_service import StorageService
from core.validation import validate_with_schema

logger = logging.getLogger(__name__)


def render_error(error: Exception) -> ActionError:
    """Log a handler failure and reduce it to a user-facing message."""
    logger.error(f"Action failed: {error!r}")
    message = getattr(error, "message", None) or str(error) or "an error occurred"
    return ActionError(message=message)


def _discard_image(url: str) -> None:
    """Best-effort image removal; failures are logged, never raised."""
    try:
        StorageService.delete_image(url)
    except Exception as e:
        logger.warning(f"Could not remove image {url}: {e}")


# =============================================================================
# Public Catalog
# =============================================================================

def fetch_featured_products() -> list[Product]:
    """Products shown on the home page."""
    return ProductService.list_featured()


def fetch_all_products(search: str = "") -> list[Product]:
    """All products whose name or company contains `search`, newest first."""
    return ProductService.list_products(search=search)


def fetch_single_product(product_id: str) -> Product | Redirect:
    """One product, or a redirect to the product listing if it's gone."""
    product = ProductService.get_product(product_id)
    if product is None:
        return Redirect(location=PRODUCTS_ROUTE)
    return product


# =============================================================================
# Admin Products
# =============================================================================

def create_product_action(
    user: AuthUser | None,
    form_data: Mapping[str, Any],
) -> ActionResult:
    """
    Create a product from a submitted form.

    Form fields: name, company, price, description, featured, image.
    On success the caller is sent to the admin listing.
    """
    gate = require_authenticated(user)
    if isinstance(gate, Redirect):
        return gate

    try:
        fields = validate_with_schema(ProductInput, form_data)
        validated = validate_with_schema(ImageInput, {"image": form_data.get("image")})
        image_url = StorageService.upload_image(validated.image)

        try:
            ProductService.create_product({
                **fields.model_dump(),
                "image": image_url,
                "owner_id": gate.id,
            })
        except Exception:
            _discard_image(image_url)
            raise

    except Exception as e:
        return render_error(e)

    return Redirect(location=ADMIN_PRODUCTS_ROUTE)


def fetch_admin_products(user: AuthUser | None) -> list[Product] | Redirect:
    """Every product, newest first (admin only)."""
    gate = require_admin(user)
    if isinstance(gate, Redirect):
        return gate

    return ProductService.list_products()


def delete_product(user: AuthUser | None, product_id: str) -> ActionResult:
    """Delete a product and, best-effort, its image (admin only)."""
    gate = require_admin(user)
    if isinstance(gate, Redirect):
        return gate

    try:
        product = ProductService.delete_product(product_id)
        _discard_image(product.image)
        return ActionSuccess(message="product removed", revalidate=[ADMIN_PRODUCTS_ROUTE])
    except Exception as e:
        return render_error(e)


def fetch_admin_product_details(
    user: AuthUser | None,
    product_id: str,
) -> Product | Redirect:
    """One product for the edit page, or back to the admin listing."""
    gate = require_admin(user)
    if isinstance(gate, Redirect):
        return gate

    product = ProductService.get_product(product_id)
    if product is None:
        return Redirect(location=ADMIN_PRODUCTS_ROUTE)
    return product


def update_product_action(
    user: AuthUser | None,
    form_data: Mapping[str, Any],
) -> ActionResult:
    """
    Update a product's fields (not its image).

    Form fields: id plus the product schema fields.
    """
    gate = require_admin(user)
    if isinstance(gate, Redirect):
        return gate

    try:
        product_id = str(form_data.get("id") or "")
        fields = validate_with_schema(ProductInput, form_data)
        ProductService.update_product(product_id, fields.model_dump())
        return ActionSuccess(
            message="Product updated successfully",
            revalidate=[admin_edit_route(product_id)],
        )
    except Exception as e:
        return render_error(e)


def update_product_image_action(
    user: AuthUser | None,
    form_data: Mapping[str, Any],
) -> ActionResult:
    """
    Replace a product's image.

    Form fields: id, url (the current image URL), image (the new file).
    The old image is removed, best-effort, only once the row points at the
    new one.
    """
    gate = require_admin(user)
    if isinstance(gate, Redirect):
        return gate

    try:
        product_id = str(form_data.get("id") or "")
        old_image_url = str(form_data.get("url") or "")
        validated = validate_with_schema(ImageInput, {"image": form_data.get("image")})
        image_url = StorageService.upload_image(validated.image)

        try:
            ProductService.update_product(product_id, {"image": image_url})
        except Exception:
            _discard_image(image_url)
            raise

        if old_image_url:
            _discard_image(old_image_url)

        return ActionSuccess(
            message="Product image updated successfully",
            revalidate=[admin_edit_route(product_id)],
        )
    except Exception as e:
        return render_error(e)


# =============================================================================
# Favorites
# =============================================================================

def toggle_favorite_action(
    user: AuthUser | None,
    product_id: str,
    favorite_id: str | None,
    pathname: str,
) -> ActionResult:
    """
    Add or remove a favorite.

    With a favorite_id the favorite is removed; without one, the product is
    favorited for the caller. `pathname` is the page to revalidate.
    """
    gate = require_authenticated(user)
    if isinstance(gate, Redirect):
        return gate

    try:
        if favorite_id:
            FavoriteService.delete_favorite(favorite_id, owner_id=gate.id)
            message = "removed from favorites"
        else:
            FavoriteService.create_favorite(product_id, owner_id=gate.id)
            message = "added to favorites"
        return ActionSuccess(message=message, revalidate=[pathname] if pathname else [])
    except Exception as e:
        return render_error(e)


def fetch_favorite_id(user: AuthUser | None, product_id: str) -> str | None | Redirect:
    """The caller's favorite id for a product, or None."""
    gate = require_authenticated(user)
    if isinstance(gate, Redirect):
        return gate

    return FavoriteService.find_favorite_id(product_id, owner_id=gate.id)


def fetch_user_favorites(user: AuthUser | None) -> list[FavoriteWithProduct] | Redirect:
    """The caller's favorites with their products."""
    gate = require_authenticated(user)
    if isinstance(gate, Redirect):
        return gate

    return FavoriteService.list_user_favorites(owner_id=gate.id)
