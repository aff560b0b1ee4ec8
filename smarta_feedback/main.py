import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import feedback, health
from .config.settings import settings
from .core.errors import PersistenceFailure
from .core.logging import setup_logging
from .models.database import SessionLocal
from .services.store import SQLAlchemyFeedbackStore

logger = logging.getLogger(__name__)


def migrate():
    db = SessionLocal()
    try:
        SQLAlchemyFeedbackStore(db).migrate()
    except PersistenceFailure as e:
        logger.error(e.message, extra={"error_code": e.error_code, "details": e.details})
        raise
    finally:
        db.close()
    logger.info("Database schema is up to date")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and bring the database schema up before serving."""
    setup_logging(settings.LOG_LEVEL)
    if settings.MIGRATE_ON_STARTUP:
        migrate()
    logger.info("Application startup complete")
    yield


app = FastAPI(
    title="Feedback Service",
    description="Collects user outage reports, comments and service condition notes",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(feedback.router, prefix="/v1", tags=["Feedback"])
app.include_router(health.router, prefix="/v1", tags=["Health Check"])
