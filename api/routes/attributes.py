"""Attribute catalog routes"""

from fastapi import APIRouter, Depends, HTTPException, status, Query, Path
from sqlalchemy.orm import Session
from typing import Optional

from app.config import settings
from api.responses import (
    APIResponse,
    ERROR_RESPONSES,
    PaginatedResponse,
    page_response,
    success_response,
)
from domain.models import get_db_session
from domain.schemas.attribute_schemas import (
    AttributeCreate,
    AttributeUpdate,
    AttributeResponse,
    FilterSuggestionResponse,
)
from services.attribute_service import AttributeService
from services.filter_suggestion_service import FilterSuggestionService

router = APIRouter(prefix="/attributes", tags=["Attributes"], responses=ERROR_RESPONSES)


@router.get("", response_model=PaginatedResponse[AttributeResponse])
def list_attributes(
    search: Optional[str] = Query(None, description="Matches name, unit or type"),
    page: int = Query(1, description="1-based page number"),
    page_size: int = Query(
        settings.default_page_size,
        le=settings.max_page_size,
        description=f"Rows per page (at most {settings.max_page_size})",
    ),
    include_deleted: bool = Query(False, description="Include soft-deleted attributes"),
    db: Session = Depends(get_db_session),
):
    """
    Search and page through the attribute catalog.

    Results are ordered by attribute id. ``page`` and ``page_size`` below 1
    are rejected with 400.
    """
    result = AttributeService.list_attributes(
        db, search=search, page=page, page_size=page_size, include_deleted=include_deleted
    )
    return page_response(result)


@router.get("/for-filter", response_model=FilterSuggestionResponse)
def get_attributes_for_filter(db: Session = Depends(get_db_session)):
    """
    Live attributes with their options, plus the most impactful filters.

    The suggestion lists up to three attributes with the highest weight and
    their combined weight rounded to one decimal.
    """
    return FilterSuggestionService.build_suggestion(db)


@router.get("/{attribute_id}", response_model=AttributeResponse)
def get_attribute(attribute_id: int = Path(...), db: Session = Depends(get_db_session)):
    """Get a live attribute by id"""
    attribute = AttributeService.get_attribute(db, attribute_id)
    if attribute is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Attribute {attribute_id} not found",
        )
    return attribute


@router.post("", response_model=AttributeResponse, status_code=status.HTTP_201_CREATED)
def create_attribute(payload: AttributeCreate, db: Session = Depends(get_db_session)):
    """Create an attribute; 409 when a live attribute already has the name"""
    return AttributeService.create_attribute(db, payload)


@router.put("/{attribute_id}", response_model=APIResponse[AttributeResponse])
def update_attribute(
    payload: AttributeUpdate,
    attribute_id: int = Path(...),
    db: Session = Depends(get_db_session),
):
    """
    Partially update an attribute.

    Omitted fields are kept. A blank name keeps the current name; an empty
    unit clears the unit.
    """
    AttributeService.update_attribute(db, attribute_id, payload)
    return success_response(
        data=AttributeService.get_attribute(db, attribute_id),
        message="Attribute updated",
    )


@router.delete("/{attribute_id}", response_model=APIResponse[dict])
def delete_attribute(
    attribute_id: int = Path(...),
    hard: bool = Query(False, description="Physically remove instead of soft delete"),
    db: Session = Depends(get_db_session),
):
    """Soft delete (default) or permanently delete an attribute"""
    AttributeService.delete_attribute(db, attribute_id, hard=hard)
    return success_response(
        data={"attribute_id": attribute_id, "hard": hard},
        message="Attribute permanently deleted" if hard else "Attribute soft-deleted",
    )
