"""Main FastAPI application for the Document Indexer."""

import json
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    documents_router,
    query_router,
    health_router,
    metrics_router,
)
from .config import get_settings
from .engine_instance import index_engine
from .logging_config import configure_logging
from .models.response import ErrorResponse

settings = get_settings()
configure_logging(settings)

logger = structlog.get_logger()


def load_seed_documents(path: str) -> Dict[str, str]:
    """
    Read a JSON object of document name to content.

    Raises:
        ValueError: if the file does not hold an object of strings
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict) or not all(
        isinstance(name, str) and isinstance(content, str)
        for name, content in data.items()
    ):
        raise ValueError(f"{path} must contain a JSON object mapping names to strings")

    return data


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Document Indexer service", version=settings.app_version)

    if settings.seed_documents_path:
        try:
            documents = load_seed_documents(settings.seed_documents_path)
        except (OSError, ValueError) as e:
            logger.error(
                "Failed to load seed documents",
                path=settings.seed_documents_path,
                error=str(e)
            )
            raise

        index_engine.load_documents(documents)
        logger.info("Seed documents loaded", total_documents=len(documents))

    yield

    # Shutdown
    logger.info("Shutting down Document Indexer service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="In-memory full-text lookup of words across named documents",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all HTTP requests."""
    start_time = time.time()

    logger.info(
        "Request started",
        method=request.method,
        url=str(request.url),
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent")
    )

    response = await call_next(request)

    process_time = time.time() - start_time
    logger.info(
        "Request completed",
        method=request.method,
        url=str(request.url),
        status_code=response.status_code,
        process_time_ms=round(process_time * 1000, 2)
    )

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(documents_router)
app.include_router(query_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "In-memory full-text lookup of words across named documents",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "status": "running"
    }


# API info endpoint
@app.get("/api", summary="API information", description="Get detailed API information")
async def api_info() -> dict:
    """Get detailed API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "In-memory full-text lookup of words across named documents",
        "endpoints": {
            "register": "/api/v1/documents",
            "document": "/api/v1/documents/{name}",
            "batch": "/api/v1/documents/batch",
            "query": "/api/v1/query/{word}",
            "health": "/api/v1/health",
            "metrics": "/api/v1/metrics"
        },
        "features": [
            "Incremental register, replace and remove",
            "Case-insensitive lookups with full Unicode case folding",
            "Letters and digits of any script form words",
            "Punctuation, symbols and emoji act as separators",
        ],
        "limits": {
            "max_query_length": settings.max_query_length,
            "max_content_length": settings.max_content_length,
            "max_batch_size": settings.max_batch_size
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "document_indexer.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
