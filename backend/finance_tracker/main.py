"""
FastAPI application entry point.
"""

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from finance_tracker.api.router import api_router
from finance_tracker.config import settings
from finance_tracker.core.exceptions import AuthenticationError, FinanceTrackerError
from finance_tracker.core.logging import setup_logging
from finance_tracker.database import POOL_EXHAUSTED_MESSAGE

logger = setup_logging(settings.log_level)

if settings.uses_insecure_secret:
    logger.warning("JWT_SECRET is not set; tokens are signed with an insecure default")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version="1.0.0",
    description="Personal finance tracker: products, price history, tagged transactions and spending analytics",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(FinanceTrackerError)
def handle_finance_tracker_error(request: Request, exc: FinanceTrackerError):
    if isinstance(exc, AuthenticationError) and not exc.expose:
        return Response(status_code=401, headers={"WWW-Authenticate": "Bearer"})
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response("; ".join(problems) or "Invalid request")


@app.exception_handler(PoolTimeoutError)
def handle_pool_timeout(request: Request, exc: PoolTimeoutError):
    logger.error("Connection pool exhausted on %s %s", request.method, request.url.path)
    return error_response(POOL_EXHAUSTED_MESSAGE, 503)


@app.exception_handler(SQLAlchemyError)
def handle_database_error(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return error_response(f"Database error: {exc}")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method, request.url.path, response.status_code, elapsed_ms
    )
    return response


# Include API router
app.include_router(api_router, prefix="/api")


@app.get("/api/health")
def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "app_name": settings.app_name
    }


def run():
    """Console entry point: serve the app on the configured bind address."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
