"""Attribute option routes"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from api.responses import ERROR_RESPONSES
from domain.models import get_db_session
from domain.schemas.attribute_schemas import OptionCreate, OptionUpdate, OptionResponse
from services.attribute_option_service import AttributeOptionService

router = APIRouter(tags=["Attribute Options"], responses=ERROR_RESPONSES)


@router.get("/attributes/{attribute_id}/options", response_model=List[OptionResponse])
def get_options(attribute_id: int, db: Session = Depends(get_db_session)):
    """Live options of a live attribute"""
    return AttributeOptionService.get_options(db, attribute_id)


@router.post(
    "/attributes/{attribute_id}/options",
    response_model=OptionResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_option(
    attribute_id: int, payload: OptionCreate, db: Session = Depends(get_db_session)
):
    return AttributeOptionService.create_option(db, attribute_id, payload.name)


@router.put("/options/{option_id}", response_model=OptionResponse)
def update_option(option_id: int, payload: OptionUpdate, db: Session = Depends(get_db_session)):
    return AttributeOptionService.update_option(db, option_id, payload.name)


@router.delete("/options/{option_id}")
def delete_option(option_id: int, db: Session = Depends(get_db_session)):
    success = AttributeOptionService.delete_option(db, option_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Option {option_id} not found",
        )
    return {"status": "ok", "removed": option_id}
