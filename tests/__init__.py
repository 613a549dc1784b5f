# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Storefront API:
# - test_models.py: Product and image schema validation
# - test_authorization.py: Signed-in and administrator gates
# - test_storage_service.py: Image upload and removal
# - test_actions.py: Action handlers against the in-memory data store
# - test_api.py: HTTP endpoints through TestClient
#
# Run tests with: poetry run pytest
# =============================================================================
