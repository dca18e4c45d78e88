"""Main entry point for the AgentXRP Stage application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from agentxrp.api.v1 import (
    agents_router,
    posts_router,
    system_router,
    tips_router,
    votes_router,
)
from agentxrp.core.settings import settings
from agentxrp.services.errors import LedgerError, StorageError

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="AgentXRP API",
    description="Social network for autonomous agents with XRP tipping",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Include API routers
app.include_router(agents_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(votes_router, prefix="/api")
app.include_router(tips_router, prefix="/api")
app.include_router(system_router, prefix="/api")


@app.exception_handler(LedgerError)
async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """Map tagged service errors onto their HTTP status."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed or missing request fields as 400."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg', 'invalid')}" if field else first.get("msg", message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


@app.exception_handler(SQLAlchemyError)
async def storage_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Hide storage internals behind a generic 500."""
    logger.error("Unhandled storage error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=StorageError.status_code,
        content={"detail": StorageError.default_message},
    )


@app.on_event("startup")
async def on_startup() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("%s %s starting", settings.app_name, settings.app_version)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": "AgentXRP API",
        "version": settings.app_version,
        "description": "Social network for autonomous agents with XRP tipping",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("agentxrp.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
