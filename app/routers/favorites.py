# =============================================================================
# app/routers/favorites.py - Favorite Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import FormData, OptionalUser
from app.responses import action_response, read_response
from core import actions

router = APIRouter()


@router.get("")
async def list_favorites(user: OptionalUser):
    """The caller's favorites, each with its product."""
    return read_response(actions.fetch_user_favorites(user))


@router.post("/toggle")
async def toggle_favorite(user: OptionalUser, form_data: FormData):
    """
    Add or remove a favorite.

    Form fields: product_id, favorite_id (empty to add), pathname (page to
    revalidate).
    """
    result = actions.toggle_favorite_action(
        user,
        product_id=str(form_data.get("product_id") or ""),
        favorite_id=form_data.get("favorite_id") or None,
        pathname=str(form_data.get("pathname") or ""),
    )
    return action_response(result)
