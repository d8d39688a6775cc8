from typing import Optional, Dict, Any
import uuid

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.logging import console_logger


def _request_id(request: Request) -> str:
    request_id: Optional[str] = getattr(getattr(request, "state", None), "request_id", None)
    if not request_id:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
    return request_id


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Last line of defence: any unhandled exception becomes a 500 JSON body."""

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id(request)
        try:
            return await call_next(request)

        except Exception as exc:
            logger = console_logger.bind(
                request_id=request_id,
                method=request.method,
                path=str(request.url.path),
            )
            logger.error("unhandled_exception", exc_info=True)

            payload: Dict[str, Any] = {"error": "Internal Server Error", "request_id": request_id}
            if self.debug:
                payload.update({
                    "error": str(exc),
                    "error_type": exc.__class__.__name__,
                })
            return JSONResponse(status_code=500, content=payload, headers={"X-Request-ID": request_id})


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    request_id = _request_id(request)
    console_logger.bind(
        request_id=request_id,
        method=request.method,
        path=str(request.url.path),
        status_code=exc.status_code,
    ).warning("http_exception", detail=exc.detail)

    if isinstance(exc.detail, dict):
        payload: Dict[str, Any] = dict(exc.detail)
    else:
        payload = {"error": exc.detail}
    headers = dict(exc.headers or {})
    headers["X-Request-ID"] = request_id
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(payload), headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    request_id = _request_id(request)
    console_logger.bind(request_id=request_id, path=str(request.url.path)).info("validation_error", errors=len(exc.errors()))
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"error": "Invalid request", "details": exc.errors(), "request_id": request_id}),
        headers={"X-Request-ID": request_id},
    )


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    request_id = _request_id(request)
    console_logger.bind(
        request_id=request_id,
        method=request.method,
        path=str(request.url.path),
    ).error("database_error", error=str(exc))
    return JSONResponse(
        status_code=500,
        content={"error": str(getattr(exc, "orig", None) or exc), "request_id": request_id},
        headers={"X-Request-ID": request_id},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
