"""Pet characteristic routes"""

from fastapi import APIRouter, Depends, HTTPException, status, Path
from sqlalchemy.orm import Session
from typing import List

from api.responses import ERROR_RESPONSES
from domain.models import get_db_session
from domain.schemas.preference_schemas import (
    PetCharacteristicUpsert,
    PetCharacteristicResponse,
)
from services.characteristic_service import PetCharacteristicService

router = APIRouter(prefix="/pets", tags=["Pet Characteristics"], responses=ERROR_RESPONSES)


@router.get("/{pet_id}/characteristics", response_model=List[PetCharacteristicResponse])
def get_characteristics(pet_id: int = Path(..., ge=1), db: Session = Depends(get_db_session)):
    return PetCharacteristicService.get_characteristics(db, pet_id)


@router.put(
    "/{pet_id}/characteristics/{attribute_id}",
    response_model=PetCharacteristicResponse,
)
def upsert_characteristic(
    payload: PetCharacteristicUpsert,
    pet_id: int = Path(..., ge=1),
    attribute_id: int = Path(...),
    db: Session = Depends(get_db_session),
):
    """Create or replace a pet's value for one attribute"""
    return PetCharacteristicService.upsert_characteristic(db, pet_id, attribute_id, payload)


@router.delete("/{pet_id}/characteristics/{attribute_id}")
def delete_characteristic(
    pet_id: int = Path(..., ge=1),
    attribute_id: int = Path(...),
    db: Session = Depends(get_db_session),
):
    if not PetCharacteristicService.delete_characteristic(db, pet_id, attribute_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Pet {pet_id} has no value for attribute {attribute_id}",
        )
    return {"status": "ok", "removed": attribute_id}
