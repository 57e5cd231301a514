"""Health check and utility routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from app.config import settings
from api.responses import HealthResponse
from domain.models import get_db_session

router = APIRouter(tags=["Health"])
logger = logging.getLogger("pawnder.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(status="ok", service=settings.app_name, version=settings.app_version)


@router.get("/health-check/db")
def database_status(db: Session = Depends(get_db_session)):
    """Report whether the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
        return {"database": "ok"}
    except SQLAlchemyError as e:
        logger.exception("Database health check failed")
        return {"database": "unavailable", "error": str(e)}
