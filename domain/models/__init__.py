"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.attribute import Attribute, AttributeOption
from domain.models.preference import UserPreference, PetCharacteristic

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Catalog models
    "Attribute",
    "AttributeOption",
    # Matching models
    "UserPreference",
    "PetCharacteristic",
]
