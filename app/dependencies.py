# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared request values.
# These are injected into route handlers using Depends().
# =============================================================================

import logging
from typing import Annotated, Any, Optional

from fastapi import Depends, Request
from starlette.datastructures import UploadFile

from app.auth import AuthUser, get_current_user_optional
from core.models.image import ImageFile

logger = logging.getLogger(__name__)


async def get_form_data(request: Request) -> dict[str, Any]:
    """
    Read a submitted form into a plain dict.

    Uploaded files become ImageFile values; an empty file input becomes
    None. Repeated keys keep the last value. Schema validation happens in
    the action handlers, not here.
    """
    form = await request.form()
    data: dict[str, Any] = {}

    for key, value in form.multi_items():
        if isinstance(value, UploadFile):
            if value.filename:
                data[key] = ImageFile(
                    filename=value.filename,
                    content_type=value.content_type or "",
                    content=await value.read(),
                )
            else:
                data[key] = None
        else:
            data[key] = value

    logger.debug(f"Parsed form fields: {sorted(data)}")
    return data


# Type aliases for dependency injection
FormData = Annotated[dict[str, Any], Depends(get_form_data)]
OptionalUser = Annotated[Optional[AuthUser], Depends(get_current_user_optional)]
