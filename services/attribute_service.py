from typing import Optional
from sqlalchemy.orm import Session
import logging

from domain.schemas.attribute_schemas import (
    AttributeCreate,
    AttributeUpdate,
    AttributeResponse,
)
from repositories import AttributeRepository, Page, validate_paging
from app.exceptions import ServiceValidationError

logger = logging.getLogger("pawnder.attributes")


class AttributeService:
    """Business logic for the attribute catalog"""

    @staticmethod
    def list_attributes(
        db: Session,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
        include_deleted: bool = False,
    ) -> Page[AttributeResponse]:
        """
        Search and page through the catalog.

        Raises:
            ServiceValidationError: If page or page_size is below 1
        """
        validate_paging(page, page_size)

        result = AttributeRepository(db).list_attributes(
            search=search,
            page=page,
            page_size=page_size,
            include_deleted=include_deleted,
        )
        logger.info(
            f"attributes_listed search={search!r} page={page} page_size={page_size} "
            f"include_deleted={include_deleted} total={result.total}"
        )
        return Page(
            items=[
                AttributeResponse.from_entity(a, include_deleted_options=include_deleted)
                for a in result.items
            ],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
        )

    @staticmethod
    def get_attribute(db: Session, attribute_id: int) -> Optional[AttributeResponse]:
        """Return a live attribute, or None for missing and soft-deleted ids"""
        attribute = AttributeRepository(db).get_by_id(attribute_id)
        if attribute is None:
            logger.warning(f"attribute_not_found attribute_id={attribute_id}")
            return None
        return AttributeResponse.from_entity(attribute)

    @staticmethod
    def create_attribute(db: Session, data: AttributeCreate) -> AttributeResponse:
        """
        Create a catalog attribute.

        Raises:
            ServiceValidationError: If the name is blank
            ConflictError: If a live attribute already uses the name
        """
        name = (data.name or "").strip()
        if not name:
            raise ServiceValidationError("Attribute name must not be empty")

        unit = data.unit.strip() if data.unit else None
        attribute = AttributeRepository(db).create_attribute(
            name=name,
            type_value=data.type_value.value,
            unit=unit or None,
            percent=data.percent,
        )
        logger.info(
            f"attribute_created attribute_id={attribute.attribute_id} name={attribute.name!r} "
            f"type_value={attribute.type_value} percent={attribute.percent}"
        )
        return AttributeResponse.from_entity(attribute)

    @staticmethod
    def update_attribute(db: Session, attribute_id: int, data: AttributeUpdate) -> bool:
        """
        Partially update a live attribute. A blank name keeps the current name.

        Raises:
            NotFoundError: If no live attribute has this id
            ConflictError: If the new name belongs to another live attribute
        """
        AttributeRepository(db).update_attribute(
            attribute_id,
            name=data.name,
            type_value=data.type_value.value if data.type_value else None,
            unit=data.unit,
            percent=data.percent,
        )
        logger.info(
            f"attribute_updated attribute_id={attribute_id} "
            f"fields={sorted(data.model_dump(exclude_unset=True))}"
        )
        return True

    @staticmethod
    def soft_delete_attribute(db: Session, attribute_id: int) -> bool:
        """
        Raises:
            NotFoundError: If the attribute does not exist
            ConflictError: If it is already soft-deleted
        """
        AttributeRepository(db).soft_delete(attribute_id)
        logger.info(f"attribute_soft_deleted attribute_id={attribute_id}")
        return True

    @staticmethod
    def hard_delete_attribute(db: Session, attribute_id: int) -> bool:
        """Remove the attribute row and everything that references it"""
        AttributeRepository(db).hard_delete(attribute_id)
        logger.info(f"attribute_hard_deleted attribute_id={attribute_id}")
        return True

    @staticmethod
    def delete_attribute(db: Session, attribute_id: int, hard: bool = False) -> bool:
        if hard:
            return AttributeService.hard_delete_attribute(db, attribute_id)
        return AttributeService.soft_delete_attribute(db, attribute_id)
