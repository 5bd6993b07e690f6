from dotenv import load_dotenv

load_dotenv()

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .api import dashboard, health
from .models.db.database import engine, Base
from .models.db import job as job_model  # noqa: F401  registers the jobs table
from .utils.logging_config import setup_logging, get_logger
from .config.settings import get_settings

# Initialize settings
settings = get_settings()

# Setup logging configuration
setup_logging(
    level=settings.log_level,
    log_file=settings.log_file,
    sql_echo=settings.database_echo,
    access_log=settings.debug,
)
logger = get_logger(__name__)

# Validate configuration on startup
missing_settings = settings.validate_required_settings()
if missing_settings:
    for setting in missing_settings:
        logger.error("Configuration error: %s", setting)
    if settings.is_production():
        raise RuntimeError("Invalid configuration for production environment")

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    docs_url="/docs" if settings.api_docs_enabled else None,
    redoc_url="/redoc" if settings.api_docs_enabled else None,
)
app.state.job_table = None

if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Routers
app.include_router(health.router, prefix="/api", tags=["Health Check"])
app.include_router(dashboard.router, tags=["Dashboard"])


@app.on_event("startup")
def on_startup():
    """Create the jobs table when backed by SQL and log application startup."""
    logger.info("Starting %s (%s backend)...", settings.app_name, settings.table_backend)
    if settings.table_backend == "sql":
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized successfully")


if __name__ == "__main__":
    uvicorn.run("job_tracker_app.backend.main:app", host="127.0.0.1", port=8000, reload=settings.debug)
