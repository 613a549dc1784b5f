# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Optional

from pydantic import BaseModel


class AuthUser(BaseModel):
    """
    Authenticated identity extracted from a Supabase JWT.

    The id is the token's `sub` claim, treated as an opaque string. It is
    stored as `owner_id` on products and favorites and compared against
    ADMIN_USER_ID for admin access.
    """
    id: str
    email: Optional[str] = None

    class Config:
        frozen = True  # Make immutable


class UserResponse(BaseModel):
    """Identity info returned by GET /auth/me."""
    id: str
    email: Optional[str] = None
    is_admin: bool = False


class TokenPayload(BaseModel):
    """
    Decoded JWT token payload from Supabase.

    Supabase tokens include standard JWT claims plus custom claims.
    """
    sub: str  # User ID
    email: Optional[str] = None
    aud: str  # Audience (should be "authenticated")
    exp: int  # Expiration timestamp
    iat: int  # Issued at timestamp
    role: Optional[str] = None  # User role
