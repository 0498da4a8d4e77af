"""FastAPI dependencies for the learning routers."""

from datetime import date, datetime
from typing import Annotated

from fastapi import Depends

from kanjiten.config import Settings, get_settings


def get_review_date(settings: Annotated[Settings, Depends(get_settings)]) -> date:
    """Current calendar date in the configured streak time zone."""
    return datetime.now(settings.streak_zone).date()


ReviewDate = Annotated[date, Depends(get_review_date)]
