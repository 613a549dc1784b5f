# =============================================================================
# app/responses.py - Action Result to HTTP Response
# =============================================================================
# The boundary layer decides navigation:
# - Redirect      -> 303 See Other with Location
# - ActionError   -> 400 {"message": ...}
# - ActionSuccess -> 200 {"message": ...} + X-Revalidate-Paths header
# =============================================================================

from typing import Any

from fastapi import status
from fastapi.responses import JSONResponse, RedirectResponse

from core.models.result import ActionError, ActionResult, Redirect

REVALIDATE_HEADER = "X-Revalidate-Paths"


def redirect_response(redirect: Redirect) -> RedirectResponse:
    return RedirectResponse(redirect.location, status_code=status.HTTP_303_SEE_OTHER)


def action_response(result: ActionResult) -> JSONResponse | RedirectResponse:
    """Convert a mutating handler's result into a response."""
    if isinstance(result, Redirect):
        return redirect_response(result)

    if isinstance(result, ActionError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": result.message},
        )

    response = JSONResponse(content={"message": result.message})
    if result.revalidate:
        response.headers[REVALIDATE_HEADER] = ",".join(result.revalidate)
    return response


def read_response(value: Any) -> Any:
    """Pass read results through, turning a Redirect into a real redirect."""
    if isinstance(value, Redirect):
        return redirect_response(value)
    return value
