# =============================================================================
# app/routers/products.py - Public Catalog Endpoints
# =============================================================================
# Browsing needs no authentication; the favorite lookup does.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Query

from app.dependencies import OptionalUser
from app.responses import read_response
from core import actions

router = APIRouter()


@router.get("/featured")
async def list_featured_products():
    """Products flagged as featured (home page)."""
    return actions.fetch_featured_products()


@router.get("")
async def list_products(
    search: Annotated[str, Query(description="Match name or company (case-insensitive)")] = "",
):
    """
    List products, newest first.

    `search` filters on a case-insensitive substring of name or company.
    """
    return actions.fetch_all_products(search=search)


@router.get("/{product_id}")
async def get_product(
    product_id: Annotated[str, Path(description="Product UUID")],
):
    """Product details. Redirects to /products if it doesn't exist."""
    return read_response(actions.fetch_single_product(product_id))


@router.get("/{product_id}/favorite")
async def get_favorite_id(
    product_id: Annotated[str, Path(description="Product UUID")],
    user: OptionalUser,
):
    """
    The caller's favorite id for this product (null if not favorited).

    Redirects home when not signed in.
    """
    result = actions.fetch_favorite_id(user, product_id)
    if isinstance(result, str) or result is None:
        return {"favorite_id": result}
    return read_response(result)
