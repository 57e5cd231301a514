"""User matching preference routes"""

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session
from typing import List

from api.responses import ERROR_RESPONSES
from domain.models import get_db_session
from domain.schemas.preference_schemas import (
    UserPreferenceUpsert,
    UserPreferenceBatchRequest,
    UserPreferenceResponse,
    BatchUpsertResult,
)
from services.preference_service import UserPreferenceService

router = APIRouter(prefix="/users", tags=["User Preferences"], responses=ERROR_RESPONSES)


@router.get("/{user_id}/preferences", response_model=List[UserPreferenceResponse])
def get_preferences(user_id: int = Path(..., ge=1), db: Session = Depends(get_db_session)):
    """All preferences of a user ordered by attribute id"""
    return UserPreferenceService.get_preferences(db, user_id)


@router.put("/{user_id}/preferences", response_model=BatchUpsertResult)
def upsert_preferences(
    payload: UserPreferenceBatchRequest,
    user_id: int = Path(..., ge=1),
    db: Session = Depends(get_db_session),
):
    """
    Replace the user's full preference set.

    Attributes missing from the payload are removed; an empty list clears all.
    """
    return UserPreferenceService.upsert_batch(db, user_id, payload)


@router.put(
    "/{user_id}/preferences/{attribute_id}", response_model=UserPreferenceResponse
)
def upsert_preference(
    payload: UserPreferenceUpsert,
    user_id: int = Path(..., ge=1),
    attribute_id: int = Path(...),
    db: Session = Depends(get_db_session),
):
    """Create or replace the preference for one attribute"""
    return UserPreferenceService.upsert_preference(db, user_id, attribute_id, payload)


@router.delete("/{user_id}/preferences")
def clear_preferences(user_id: int = Path(..., ge=1), db: Session = Depends(get_db_session)):
    count = UserPreferenceService.clear_preferences(db, user_id)
    return {"status": "ok", "deleted": count}


@router.delete("/{user_id}/preferences/{attribute_id}")
def delete_preference(
    user_id: int = Path(..., ge=1),
    attribute_id: int = Path(...),
    db: Session = Depends(get_db_session),
):
    """Clear a single filter"""
    if not UserPreferenceService.delete_preference(db, user_id, attribute_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No preference for attribute {attribute_id}",
        )
    return {"status": "ok", "removed": attribute_id}
