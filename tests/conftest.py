# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Swaps the Supabase singleton for an in-memory fake
# - Provides identities, valid form data and image files
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-for-storefront")
os.environ.setdefault("ADMIN_USER_ID", "admin-user-id")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from app.auth.models import AuthUser
from core.models.image import ImageFile
from lib.supabase_client import SupabaseClient
from tests.fakes import TEN_WORDS, FakeSupabase


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase(monkeypatch):
    """In-memory Supabase client installed as the singleton."""
    fake = FakeSupabase(os.environ["SUPABASE_URL"])
    monkeypatch.setattr(SupabaseClient, "_instance", fake)
    return fake


@pytest.fixture
def admin_user():
    """The configured administrator."""
    return AuthUser(id="admin-user-id", email="admin@example.com")


@pytest.fixture
def shopper():
    """A signed-in user who is not the administrator."""
    return AuthUser(id="shopper-id", email="shopper@example.com")


@pytest.fixture
def make_image():
    """Factory for uploaded image files."""
    def _make(
        filename: str = "chair.png",
        content_type: str = "image/png",
        size: int = 2048,
    ) -> ImageFile:
        return ImageFile(filename=filename, content_type=content_type, content=b"\x89" * size)
    return _make


@pytest.fixture
def product_form():
    """Raw form fields for a valid product, as a browser would submit them."""
    return {
        "name": "Walnut Chair",
        "company": "Oak & Co",
        "price": "120",
        "featured": "on",
        "description": TEN_WORDS,
    }
