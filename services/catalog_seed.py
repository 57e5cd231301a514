"""
Default attribute catalog for a fresh database.

Seeding is idempotent: attributes whose name is already taken by a live
attribute are left untouched, options included.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from repositories import AttributeRepository, AttributeOptionRepository

logger = logging.getLogger("pawnder.seed")

DEFAULT_CATALOG = (
    {
        "name": "Giống loài",
        "type_value": "string",
        "unit": None,
        "options": ("Chó Phốc Sóc", "Chó Husky", "Chó Corgi"),
    },
    {"name": "Cân nặng", "type_value": "float", "unit": "kg", "options": ()},
    {"name": "Chiều cao", "type_value": "float", "unit": "cm", "options": ()},
    {"name": "Tuổi", "type_value": "float", "unit": "năm", "options": ()},
    {
        "name": "Màu lông",
        "type_value": "string",
        "unit": None,
        "options": ("Trắng", "Đen"),
    },
)


def seed_default_catalog(db: Session, catalog=DEFAULT_CATALOG) -> List[str]:
    """
    Create the catalog attributes that do not exist yet.

    Returns:
        Names of the attributes that were created
    """
    attributes = AttributeRepository(db)
    options = AttributeOptionRepository(db)
    created = []

    for entry in catalog:
        if attributes.name_exists(entry["name"]):
            logger.info(f"seed_skipped name={entry['name']!r} reason=exists")
            continue
        attribute = attributes.create_attribute(
            name=entry["name"], type_value=entry["type_value"], unit=entry["unit"]
        )
        for option_name in entry["options"]:
            options.create_option(attribute.attribute_id, option_name)
        created.append(attribute.name)
        logger.info(
            f"seed_created attribute_id={attribute.attribute_id} name={attribute.name!r} "
            f"options={len(entry['options'])}"
        )

    return created
