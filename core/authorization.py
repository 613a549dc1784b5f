# =============================================================================
# core/authorization.py - Authorization Gates
# =============================================================================
# Two gates over an identity that was resolved once per request:
# - require_authenticated: someone is signed in
# - require_admin: the signed-in identity is the configured administrator
#
# A failed gate returns Redirect(HOME_ROUTE). Callers must return that
# redirect immediately and perform no side effect.
#
# Usage:
#   gate = require_admin(user)
#   if isinstance(gate, Redirect):
#       return gate
# =============================================================================

import logging

from app.auth.models import AuthUser
from app.config import settings
from core.models.result import HOME_ROUTE, Redirect

logger = logging.getLogger(__name__)


def is_admin(user: AuthUser | None) -> bool:
    """Check whether the identity is the configured administrator."""
    return bool(user and settings.ADMIN_USER_ID and user.id == settings.ADMIN_USER_ID)


def require_authenticated(user: AuthUser | None) -> AuthUser | Redirect:
    """Return the user, or a redirect home if nobody is signed in."""
    if user is None:
        logger.debug("Unauthenticated caller redirected home")
        return Redirect(location=HOME_ROUTE)
    return user


def require_admin(user: AuthUser | None) -> AuthUser | Redirect:
    """Return the user if they are the administrator, else a redirect home."""
    gate = require_authenticated(user)
    if isinstance(gate, Redirect):
        return gate

    if not is_admin(gate):
        logger.warning(f"Non-admin user {gate.id} denied admin action")
        return Redirect(location=HOME_ROUTE)

    return gate
