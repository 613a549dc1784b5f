# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import ProductService
from .favorite_service import FavoriteService
from .storage_service import StorageService

__all__ = [
    "ProductService",
    "FavoriteService",
    "StorageService",
]
