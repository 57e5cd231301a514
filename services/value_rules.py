"""
Shared checks for values stored against catalog attributes.

Preferences and pet characteristics use the same shape: categorical
attributes carry an option, numeric attributes carry numbers.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError
from domain.constants import lookup_range
from domain.enums import AttributeType
from domain.models import Attribute, AttributeOption
from repositories import AttributeRepository, AttributeOptionRepository

logger = logging.getLogger("pawnder.value_rules")


def require_live_attribute(db: Session, attribute_id: int) -> Attribute:
    """Resolve a non-deleted attribute or raise NotFoundError"""
    attribute = AttributeRepository(db).get_by_id(attribute_id)
    if attribute is None:
        logger.warning(f"attribute_not_found attribute_id={attribute_id}")
        raise NotFoundError(f"Attribute {attribute_id} not found")
    return attribute


def is_categorical(attribute: Attribute) -> bool:
    return AttributeType(attribute.type_value).is_categorical


def require_option_of(db: Session, attribute: Attribute, option_id: Optional[int]) -> AttributeOption:
    """Resolve a live option that belongs to ``attribute``"""
    if option_id is None:
        raise ServiceValidationError(
            f"Attribute '{attribute.name}' is categorical; option_id is required",
            details={"attribute_id": attribute.attribute_id},
        )
    option = AttributeOptionRepository(db).get_active(option_id)
    if option is None or option.attribute_id != attribute.attribute_id:
        raise NotFoundError(
            f"Option {option_id} not found for attribute {attribute.attribute_id}"
        )
    return option


def reject_option_for_numeric(attribute: Attribute, option_id: Optional[int]) -> None:
    if option_id is not None:
        raise ServiceValidationError(
            f"Attribute '{attribute.name}' is numeric; option_id is not accepted",
            details={"attribute_id": attribute.attribute_id},
        )


def check_number(attribute: Attribute, label: str, value: Optional[float], ranges: dict) -> None:
    """Non-negative and, for known attributes, inside the product range"""
    if value is None:
        return
    if value < 0:
        raise ServiceValidationError(
            f"{label} of {attribute.name} must not be negative",
            details={"attribute_id": attribute.attribute_id, "value": value},
        )
    allowed = lookup_range(ranges, attribute.name)
    if allowed and not (allowed.min <= value <= allowed.max):
        raise ServiceValidationError(
            f"{label} of {attribute.name} must be between {allowed.min:g} and {allowed.max:g} {allowed.unit}",
            details={"attribute_id": attribute.attribute_id, "value": value},
        )
