# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - products.py: Public catalog (featured, search, details, favorite lookup)
# - admin.py: Admin product CRUD and image replacement
# - favorites.py: Favorite listing and toggling
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import products
from . import admin
from . import favorites

__all__ = [
    "health",
    "products",
    "admin",
    "favorites",
]
