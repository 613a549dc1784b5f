# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Signup/login is handled by Supabase Auth client-side.
# These routes only report who the current token belongs to.
# =============================================================================

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, UserResponse
from core.authorization import is_admin

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current authenticated identity.

    The client uses `is_admin` to decide whether to show the admin panel.

    Raises:
        401: If not authenticated
    """
    return UserResponse(id=user.id, email=user.email, is_admin=is_admin(user))
