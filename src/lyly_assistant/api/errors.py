"""Centralized conversion of pipeline failures into ``{"error": ...}`` responses."""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from lyly_assistant.errors import InvalidPlanError, PlanMismatchError

_STATUS_BY_ERROR = {
    InvalidPlanError: status.HTTP_400_BAD_REQUEST,
    PlanMismatchError: status.HTTP_502_BAD_GATEWAY,
}


def failure(exc: Exception, context: str) -> HTTPException:
    """Log ``exc`` with its context and stage, then build the HTTP error to raise."""
    stage = getattr(exc, "stage", "unexpected")
    code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if code >= 500:
        logger.opt(exception=exc).error("Error in {} ({} stage): {}", context, stage, exc)
    else:
        logger.warning("Rejected {} request ({} stage): {}", context, stage, exc)
    message = str(exc) or "An unknown error occurred."
    return HTTPException(status_code=code, detail=f"Failed during {context}. {message}")


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)}, headers=exc.headers)


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}" for err in exc.errors()
    )
    logger.warning("Invalid request to {}: {}", request.url.path, problems)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request. {problems}"},
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
