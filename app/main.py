# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Storefront API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import StorefrontException, storefront_exception_handler
from app.routers import admin, favorites, health, products
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(f"Starting Storefront API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    if not settings.ADMIN_USER_ID:
        logger.warning("ADMIN_USER_ID is not set - admin endpoints will redirect everyone")

    yield

    logger.info("Shutting down Storefront API")


# Create FastAPI application
app = FastAPI(
    title="Storefront API",
    description="""
## Storefront API

Product browsing, favorites, and an admin panel for product management.

- **Products** - featured products, search by name or company, details
- **Favorites** - signed-in users can favorite products
- **Admin** - the configured administrator creates, edits and deletes
  products and replaces their images

Mutations answer `{"message": ...}` or redirect (303). Successful mutations
list stale pages in the `X-Revalidate-Paths` header.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Current identity"},
        {"name": "Products", "description": "Public product catalog"},
        {"name": "Favorites", "description": "Signed-in user's favorites"},
        {"name": "Admin", "description": "Product management (administrator only)"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Revalidate-Paths"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(StorefrontException)
async def handle_storefront_exception(request: Request, exc: StorefrontException):
    """Handle custom storefront exceptions."""
    return await storefront_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

app.include_router(
    products.router,
    prefix="/api/v1/products",
    tags=["Products"]
)

app.include_router(
    favorites.router,
    prefix="/api/v1/favorites",
    tags=["Favorites"]
)

app.include_router(
    admin.router,
    prefix="/api/v1/admin/products",
    tags=["Admin"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """Root endpoint - returns API info."""
    return {
        "name": "Storefront API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
