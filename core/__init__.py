# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for validation, rows and action results
# - validation.py: Generic schema validation entry point
# - authorization.py: Authenticated / admin gates
# - services/: Data store and object storage operations
# - actions.py: Action handlers composing all of the above
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
