"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository, Page, validate_paging
from repositories.attribute_repository import AttributeRepository
from repositories.attribute_option_repository import AttributeOptionRepository
from repositories.preference_repository import PreferenceRepository
from repositories.characteristic_repository import CharacteristicRepository

__all__ = [
    "BaseRepository",
    "Page",
    "validate_paging",
    "AttributeRepository",
    "AttributeOptionRepository",
    "PreferenceRepository",
    "CharacteristicRepository",
]
