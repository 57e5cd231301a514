from typing import List
from sqlalchemy.orm import Session
import logging

from domain.schemas.attribute_schemas import OptionResponse
from repositories import AttributeOptionRepository
from services.value_rules import require_live_attribute
from app.exceptions import ServiceValidationError

logger = logging.getLogger("pawnder.options")


class AttributeOptionService:
    """Business logic for categorical attribute options"""

    @staticmethod
    def get_options(db: Session, attribute_id: int) -> List[OptionResponse]:
        require_live_attribute(db, attribute_id)
        options = AttributeOptionRepository(db).list_by_attribute(attribute_id)
        return [OptionResponse.model_validate(o) for o in options]

    @staticmethod
    def create_option(db: Session, attribute_id: int, name: str) -> OptionResponse:
        """
        Add an option to a live attribute.

        Raises:
            ServiceValidationError: If the name is blank
            NotFoundError: If the attribute is missing or soft-deleted
        """
        if not name or not name.strip():
            raise ServiceValidationError("Option name must not be empty")
        require_live_attribute(db, attribute_id)

        option = AttributeOptionRepository(db).create_option(attribute_id, name)
        logger.info(
            f"option_created option_id={option.option_id} attribute_id={attribute_id} name={option.name!r}"
        )
        return OptionResponse.model_validate(option)

    @staticmethod
    def update_option(db: Session, option_id: int, name: str) -> OptionResponse:
        if not name or not name.strip():
            raise ServiceValidationError("Option name must not be empty")

        option = AttributeOptionRepository(db).update_option(option_id, name)
        logger.info(f"option_updated option_id={option_id} name={option.name!r}")
        return OptionResponse.model_validate(option)

    @staticmethod
    def delete_option(db: Session, option_id: int) -> bool:
        removed = AttributeOptionRepository(db).soft_delete(option_id)
        if removed:
            logger.info(f"option_soft_deleted option_id={option_id}")
        else:
            logger.warning(f"option_delete_skipped option_id={option_id} reason=not_found")
        return removed
