import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from kanjiten.config import Settings, get_settings
from kanjiten.database import DatabaseSession
from kanjiten.infrastructure.common.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(
    db: DatabaseSession, settings: Annotated[Settings, Depends(get_settings)]
) -> HealthResponse:
    """
    Report process liveness and database connectivity.

    This is a public endpoint that doesn't require authentication. It always
    answers 200; a failing database is reported in the body.
    """
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check database query failed: {e!s}")
        database = "disconnected"

    return HealthResponse(
        timestamp=datetime.now(UTC),
        database=database,
        environment=settings.ENVIRONMENT,
        version=settings.VERSION,
    )
