"""FeeFlow API application"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.api.deps import ResultError
from app.api.v1.router import api_router
from app.config import settings
from app.core.logging import get_logger, setup_logging
from app.core.middleware import RequestIDMiddleware, RequestTimingMiddleware, SecurityHeadersMiddleware
from app.schemas.responses import ErrorDetail, ErrorResponse
from app.store.factory import build_store

setup_logging()
logger = get_logger(__name__)

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)


def _correlation_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def _error(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(code=code, message=message))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the record store for the app's lifetime."""
    logger.info(
        f"Starting {settings.APP_NAME}",
        extra={"environment": settings.ENVIRONMENT, "store_backend": settings.STORE_BACKEND},
    )
    app.state.store = await build_store(settings)
    try:
        yield
    finally:
        logger.info("Closing record store")
        await app.state.store.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Clients, fees and payments with reconciled client balances",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=settings.ALLOWED_METHODS,
    allow_headers=[settings.ALLOWED_HEADERS],
    allow_credentials=True,
    expose_headers=["X-Request-ID", "X-Process-Time"],
)
# Last added runs first: request id is assigned before timing logs it
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestTimingMiddleware)
app.add_middleware(RequestIDMiddleware)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "store_backend": settings.STORE_BACKEND,
    }


@app.get("/", tags=["Root"])
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api": settings.API_V1_PREFIX,
        "docs": app.docs_url,
        "health": "/health",
    }


@app.exception_handler(ResultError)
async def result_error_handler(request: Request, exc: ResultError):
    """Failed service result -> error envelope with the mapped status code"""
    logger.info(
        f"Request failed ({exc.failure.kind.value}): {exc.failure.detail}",
        extra={
            "path": request.url.path,
            "error_kind": exc.failure.kind.value,
            "correlation_id": _correlation_id(request),
        },
    )
    return _error(exc.status_code, exc.failure.kind.value, exc.failure.detail)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        f"Rejected request body for {request.url.path}",
        extra={"path": request.url.path, "errors": errors, "correlation_id": _correlation_id(request)},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "error": {"code": "validation_error", "message": "Request validation failed"},
            "detail": errors,
        },
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        extra={"path": request.url.path, "correlation_id": _correlation_id(request)},
        exc_info=True,
    )
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "internal_error", "Internal server error")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
