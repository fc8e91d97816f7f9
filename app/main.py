from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.api.router import api_router
from app.db.async_session import startup_async_database, shutdown_async_database
from app.services.async_error_handler import register_exception_handlers
from app.utils.logger import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize and release the database on application startup and shutdown."""
    logger.info("Starting up FitPlan API...")
    await startup_async_database()
    logger.info("FitPlan API startup completed successfully")
    yield
    logger.info("Shutting down FitPlan API...")
    await shutdown_async_database()
    logger.info("FitPlan API shutdown completed successfully")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_DESCRIPTION,
    version=settings.VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    redirect_slashes=False,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix=settings.API_PREFIX)

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Welcome to FitPlan API"}
