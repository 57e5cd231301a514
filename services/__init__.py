"""Services package - Business logic layer"""

from services.attribute_service import AttributeService
from services.attribute_option_service import AttributeOptionService
from services.preference_service import UserPreferenceService
from services.characteristic_service import PetCharacteristicService
from services.filter_suggestion_service import FilterSuggestionService

__all__ = [
    "AttributeService",
    "AttributeOptionService",
    "UserPreferenceService",
    "PetCharacteristicService",
    "FilterSuggestionService",
]
