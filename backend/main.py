"""
FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from backend.app.api.v1 import auth
from backend.app.api.v1.activity import routes as activity
from backend.app.api.v1.analytics import routes as analytics
from backend.app.core.config import ROOT_GREETING, settings
from backend.app.core.exceptions import (
    AppError,
    app_error_handler,
    request_validation_error_handler,
)
from backend.app.core.logging_config import setup_logging
from backend.app.db.base import Base
from backend.app.db import session as db_session
from backend.app.utils import cache

# Import models so they register with Base.metadata
import backend.app.models  # noqa: F401

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        Base.metadata.create_all(bind=db_session.engine)
    except Exception as e:
        logger.error("Database error: %s", e)
    await cache.connect()
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield
    await cache.close()


# Initialize FastAPI app
app = FastAPI(
    title="ActionTrack API",
    description="Company signup/signin and page action tracking",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# Include routers
app.include_router(activity.router)
app.include_router(auth.router, tags=["authentication"])
app.include_router(analytics.router)


@app.get("/", response_class=PlainTextResponse)
def read_root():
    """Root endpoint"""
    return ROOT_GREETING


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
