"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.attribute_schemas import (
    AttributeCreate,
    AttributeUpdate,
    AttributeResponse,
    AttributeFilterItem,
    OptionCreate,
    OptionUpdate,
    OptionResponse,
    OptionBrief,
    FilterSuggestion,
    FilterSuggestionResponse,
)
from domain.schemas.preference_schemas import (
    UserPreferenceUpsert,
    UserPreferenceBatchItem,
    UserPreferenceBatchRequest,
    UserPreferenceResponse,
    BatchUpsertResult,
    PetCharacteristicUpsert,
    PetCharacteristicResponse,
)

__all__ = [
    # Attribute schemas
    "AttributeCreate",
    "AttributeUpdate",
    "AttributeResponse",
    "AttributeFilterItem",
    "OptionCreate",
    "OptionUpdate",
    "OptionResponse",
    "OptionBrief",
    "FilterSuggestion",
    "FilterSuggestionResponse",
    # Preference schemas
    "UserPreferenceUpsert",
    "UserPreferenceBatchItem",
    "UserPreferenceBatchRequest",
    "UserPreferenceResponse",
    "BatchUpsertResult",
    "PetCharacteristicUpsert",
    "PetCharacteristicResponse",
]
