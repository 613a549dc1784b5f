# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas:
# - product.py: Product validation schema and product rows
# - image.py: Uploaded image file and its validation schema
# - favorite.py: Favorite rows (optionally joined with products)
# - result.py: Typed action results (success / error / redirect)
#
# These models define the "contract" between action handlers and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Product Models
# -----------------------------------------------------------------------------
from .product import Product, ProductInput, count_words

# -----------------------------------------------------------------------------
# Image Models
# -----------------------------------------------------------------------------
from .image import ImageFile, ImageInput

# -----------------------------------------------------------------------------
# Favorite Models
# -----------------------------------------------------------------------------
from .favorite import Favorite, FavoriteWithProduct

# -----------------------------------------------------------------------------
# Result Models
# -----------------------------------------------------------------------------
from .result import (
    ADMIN_PRODUCTS_ROUTE,
    HOME_ROUTE,
    PRODUCTS_ROUTE,
    ActionError,
    ActionResult,
    ActionSuccess,
    Redirect,
    admin_edit_route,
)

__all__ = [
    # Product
    "Product",
    "ProductInput",
    "count_words",
    # Image
    "ImageFile",
    "ImageInput",
    # Favorite
    "Favorite",
    "FavoriteWithProduct",
    # Result
    "ADMIN_PRODUCTS_ROUTE",
    "HOME_ROUTE",
    "PRODUCTS_ROUTE",
    "ActionError",
    "ActionResult",
    "ActionSuccess",
    "Redirect",
    "admin_edit_route",
]
