# studyhub/api/endpoints/stats.py
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studyhub.api.deps import get_db
from studyhub.schemas.stats import StatsPublic
from studyhub.services import stats_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsPublic)
def get_stats(db: Session = Depends(get_db)):
    try:
        return stats_service.get_stats(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch stats")
        raise HTTPException(status_code=500, detail="Failed to fetch stats")
