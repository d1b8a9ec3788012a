"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from betagate.domain.error import BetaAccessError, ValidationError


def beta_access_error_response(error: BetaAccessError) -> JSONResponse:
    """Render a rejection as ``{"code", "message"}`` with status 403."""
    return JSONResponse(
        status_code=status.HTTP_403_FORBIDDEN,
        content={"code": error.kind, "message": error.message},
    )


async def handle_beta_access_error(
    request: Request, exc: BetaAccessError
) -> JSONResponse:
    logfire.info(
        "Beta access rejected",
        path=request.url.path,
        code=exc.kind,
    )
    return beta_access_error_response(exc)


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logfire.info("Invite validation failed", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": "VALIDATION_ERROR", "message": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to HTTP responses.

    Storage and registration transport errors are not mapped; they surface
    as 500 so the request session rolls back.
    """
    app.add_exception_handler(BetaAccessError, handle_beta_access_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
