# =============================================================================
# core/models/result.py - Action Results
# =============================================================================
# Action handlers never raise to their caller. They return one of:
# - ActionSuccess: the mutation happened; `revalidate` lists stale routes
# - ActionError: the mutation failed; `message` is safe to show the user
# - Redirect: the caller must navigate elsewhere (unauthorized / not found /
#   post-create)
#
# The HTTP layer decides how each variant becomes a response.
# =============================================================================

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

HOME_ROUTE = "/"
PRODUCTS_ROUTE = "/products"
ADMIN_PRODUCTS_ROUTE = "/admin/products"


def admin_edit_route(product_id: str) -> str:
    """Route of the admin edit page for one product."""
    return f"{ADMIN_PRODUCTS_ROUTE}/{product_id}/edit"


class ActionSuccess(BaseModel):
    """A completed mutation."""

    model_config = ConfigDict(frozen=True)

    message: str
    revalidate: list[str] = Field(default_factory=list)


class ActionError(BaseModel):
    """A failed mutation, reduced to a single user-facing message."""

    model_config = ConfigDict(frozen=True)

    message: str


class Redirect(BaseModel):
    """Navigate the caller to `location` instead of returning a value."""

    model_config = ConfigDict(frozen=True)

    location: str


ActionResult = Union[ActionSuccess, ActionError, Redirect]
