from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from models.errors import ApiError
from ops.metrics import Timer
from ops.structured_logger import setup_logging
from utils.request_context import reset_request_id, set_request_id

from app.body_limit import JsonBodyLimitMiddleware
from app.routers.auth import router as auth_router
from app.routers.categories import router as categories_router
from app.routers.flash import router as flash_router
from app.routers.health import router as health_router
from app.routers.resources import router as resources_router
from app.routers.uploads import router as upload_router
from app.routers.uploads import static_router as uploads_static_router

setup_logging()

app = FastAPI(title="Storefront Admin API", version="1.0.0")
log = logging.getLogger("storefront.api")

# Innermost middleware: the endpoint reads the body through its counting receive.
app.add_middleware(JsonBodyLimitMiddleware, max_bytes=lambda: settings.MAX_JSON_BODY_BYTES)


def _get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id") or ""


def _error(status_code: int, message, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    request.state.request_id = rid
    token = set_request_id(rid)
    timer = Timer()
    try:
        response = await call_next(request)
        log.info(
            "request_completed",
            extra={
                "extra": {
                    "event": "request_completed",
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "latency_ms": timer.ms(),
                }
            },
        )
    finally:
        reset_request_id(token)
    response.headers["X-Request-Id"] = rid
    return response


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    log.info(
        "api_error",
        extra={
            "extra": {
                "event": "api_error",
                "error_type": type(exc).__name__,
                "status_code": exc.status_code,
                "detail": exc.message,
                "path": request.url.path,
                "method": request.method,
                "request_id": _get_request_id(request),
            }
        },
    )
    return _error(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    log.warning(
        "http_exception",
        extra={
            "extra": {
                "event": "http_exception",
                "status_code": exc.status_code,
                "detail": exc.detail,
                "path": request.url.path,
                "method": request.method,
                "request_id": _get_request_id(request),
            }
        },
    )
    return _error(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    log.warning(
        "validation_error",
        extra={
            "extra": {
                "event": "validation_error",
                "path": request.url.path,
                "method": request.method,
                "request_id": _get_request_id(request),
            }
        },
    )
    return _error(400, "invalid request body")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    log.error(
        "internal_unhandled_exception",
        extra={
            "extra": {
                "event": "internal_unhandled_exception",
                "error_type": type(exc).__name__,
                "message": str(exc),
                "path": request.url.path,
                "method": request.method,
                "request_id": _get_request_id(request),
            }
        },
        exc_info=True,
    )
    return _error(500, "internal_server_error")


# Production narrows origins to CORS_ORIGINS; development allows any origin.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(health_router, prefix="/api", tags=["health"])
app.include_router(upload_router, prefix="/api", tags=["uploads"])
app.include_router(categories_router, prefix="/api", tags=["categories"])
app.include_router(flash_router, prefix="/api", tags=["flash"])
app.include_router(auth_router, prefix="/api", tags=["auth"])
app.include_router(resources_router, prefix="/api", tags=["resources"])
app.include_router(uploads_static_router, tags=["uploads"])


if __name__ == "__main__":
    import uvicorn

    log.info("api_listening", extra={"extra": {"event": "api_listening", "port": settings.PORT}})
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, proxy_headers=True, forwarded_allow_ips="*")
