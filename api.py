"""
Luma Events Admin API

Main entry point. Wires Firebase, Firestore and the admin routers into a
FastAPI application.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.auth import FirebaseAuth, get_firebase_app
from common.database import Firestore
from common.utils import ok_response, error_response

# App-specific imports
from luma_admin import __version__
from luma_admin.config import settings
from luma_admin.dependencies import init_all_services
from luma_admin.routers import settings_router, admin_router


logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Database Instance
# =============================================================================
firestore_db = Firestore()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Initializes Firebase, opens the Firestore client and builds services.
    """
    logger.info("Starting Luma Events admin API...")
    settings.validate_required()

    firebase_app = get_firebase_app(
        credentials_path=settings.FIREBASE_CREDENTIALS_PATH,
        credentials_dict=settings.get_service_account_info(),
        project_id=settings.FIREBASE_PROJECT_ID,
    )
    firestore_db.connect(app=firebase_app)

    init_all_services(
        db=firestore_db.client,
        auth_provider=FirebaseAuth(
            app=firebase_app,
            check_revoked=settings.FIREBASE_CHECK_REVOKED,
        ),
    )
    logger.info("All services initialized")

    yield

    logger.info("Shutting down Luma Events admin API...")
    firestore_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="Luma Events Admin API",
    description="Administrative API for the Luma Events marketplace",
    version=__version__,
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
# Exception Handlers
# =============================================================================
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies and out-of-range values as 400."""
    errors = jsonable_encoder(exc.errors())
    logger.info(f"Rejected {request.method} {request.url.path}: {len(errors)} validation error(s)")
    return JSONResponse(
        status_code=400,
        content=error_response(
            "Invalid request",
            code="VALIDATION_ERROR",
            errors=errors,
        ),
    )


# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(settings_router, prefix=API_PREFIX, tags=["Settings"])
app.include_router(admin_router, prefix=API_PREFIX, tags=["Admin"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/healthz", tags=["Health"])
async def healthz():
    """Liveness check."""
    return ok_response()


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
