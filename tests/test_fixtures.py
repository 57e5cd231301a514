"""
Shared test helpers for the Pawnder test suite.

Factories write through the repositories so rows look exactly like the ones
the service creates.
"""

from decimal import Decimal
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from domain.models import Attribute
from repositories import AttributeRepository, AttributeOptionRepository


def make_attribute(
    db: Session,
    name: str = "Color",
    type_value: str = "string",
    unit: Optional[str] = None,
    percent=0,
    options: Iterable[str] = (),
) -> Attribute:
    """
    Create a committed attribute, optionally with options.

    Args:
        db: Session bound to the test database
        name: Attribute name (must be unique among live attributes)
        type_value: "string" or "float"
        unit: Optional display unit
        percent: Suggestion weight, converted to Decimal
        options: Option names to attach

    Example:
        >>> breed = make_attribute(db, "Breed", options=["Corgi", "Poodle"])
        >>> [o.name for o in breed.options]
        ['Corgi', 'Poodle']
    """
    attribute = AttributeRepository(db).create_attribute(
        name=name,
        type_value=type_value,
        unit=unit,
        percent=Decimal(str(percent)),
    )
    option_repo = AttributeOptionRepository(db)
    for option_name in options:
        option_repo.create_option(attribute.attribute_id, option_name)
    db.refresh(attribute)
    return attribute


def make_catalog_attribute(db: Session, entry: dict) -> Attribute:
    """Create an attribute from one of the dicts in test_constants"""
    return make_attribute(
        db,
        name=entry["name"],
        type_value=entry["type_value"],
        unit=entry.get("unit"),
        percent=entry.get("percent", 0),
        options=entry.get("options", ()),
    )


def option_id_of(attribute: Attribute, name: str) -> int:
    return next(o.option_id for o in attribute.options if o.name == name)
