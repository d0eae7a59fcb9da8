"""
CookBook FastAPI Application

Main entry point for the CookBook progress updates API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.database import MongoDB
from common.utils import success_response, error_response

# App-specific imports
from cookbook.config import settings
from cookbook.dependencies import init_all_services, ensure_all_indexes
from cookbook.routers import progress_updates_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect MongoDB and wire services before serving; disconnect after."""
    logger.info("Starting CookBook API...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
    )

    init_all_services(db=main_db.db, settings=settings)
    await ensure_all_indexes()
    logger.info("CookBook API started successfully")

    yield

    logger.info("Shutting down CookBook API...")
    await main_db.disconnect()
    logger.info("CookBook API shut down complete")


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="CookBook API",
    description="Progress updates for CookBook App learning plans",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error Handlers
# =============================================================================
@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and params as 400 Bad Request."""
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        errors.append({"field": field or "body", "message": err.get("msg", "Invalid value")})

    first = errors[0] if errors else {"field": "body", "message": "Invalid request"}
    logger.debug(f"Rejected request to {request.url.path}: {errors}")

    return JSONResponse(
        status_code=400,
        content=error_response(
            f"{first['field']}: {first['message']}",
            code="VALIDATION_ERROR",
            errors=errors,
        ),
    )


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(progress_updates_router, prefix=API_PREFIX, tags=["Progress Updates"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """Liveness plus a MongoDB ping."""
    return success_response({
        "status": "ok",
        "version": "1.0.0",
        "database": main_db.is_connected and await main_db.ping(),
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
