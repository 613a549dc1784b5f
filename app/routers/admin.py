# =============================================================================
# app/routers/admin.py - Admin Product Endpoints
# =============================================================================
# Product CRUD. Mutations take multipart/form-data so the same form can
# carry fields and an image. Gates live in the action handlers; a failed
# gate comes back here as a redirect home.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import FormData, OptionalUser
from app.responses import action_response, read_response
from core import actions

router = APIRouter()


@router.get("")
async def list_admin_products(user: OptionalUser):
    """All products, newest first."""
    return read_response(actions.fetch_admin_products(user))


@router.post("")
async def create_product(user: OptionalUser, form_data: FormData):
    """
    Create a product.

    Form fields: name, company, price, description, featured, image.
    Redirects to the admin listing on success; returns {"message"} on failure.
    """
    return action_response(actions.create_product_action(user, form_data))


@router.get("/{product_id}")
async def get_admin_product(
    product_id: Annotated[str, Path(description="Product UUID")],
    user: OptionalUser,
):
    """Product for the edit page. Redirects to the admin listing if missing."""
    return read_response(actions.fetch_admin_product_details(user, product_id))


@router.post("/{product_id}")
async def update_product(
    product_id: Annotated[str, Path(description="Product UUID")],
    user: OptionalUser,
    form_data: FormData,
):
    """Update product fields (name, company, price, description, featured)."""
    form_data["id"] = product_id
    return action_response(actions.update_product_action(user, form_data))


@router.post("/{product_id}/image")
async def update_product_image(
    product_id: Annotated[str, Path(description="Product UUID")],
    user: OptionalUser,
    form_data: FormData,
):
    """
    Replace the product image.

    Form fields: image (new file), url (current image URL).
    """
    form_data["id"] = product_id
    return action_response(actions.update_product_image_action(user, form_data))


@router.delete("/{product_id}")
async def delete_product(
    product_id: Annotated[str, Path(description="Product UUID")],
    user: OptionalUser,
):
    """Delete a product and its image."""
    return action_response(actions.delete_product(user, product_id))
