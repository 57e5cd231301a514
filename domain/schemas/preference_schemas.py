from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class UserPreferenceUpsert(BaseModel):
    """
    Desired value for one attribute.

    Categorical attributes take ``option_id``; numeric attributes take an
    inclusive ``min_value``/``max_value`` range (either bound may be open).
    """

    option_id: Optional[int] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None


class UserPreferenceBatchItem(UserPreferenceUpsert):
    attribute_id: int


class UserPreferenceBatchRequest(BaseModel):
    """Full set of a user's preferences; attributes left out are removed"""

    preferences: List[UserPreferenceBatchItem] = Field(default_factory=list)


class UserPreferenceResponse(BaseModel):
    user_id: int
    attribute_id: int
    attribute_name: Optional[str] = None
    type_value: Optional[str] = None
    unit: Optional[str] = None
    option_id: Optional[int] = None
    option_name: Optional[str] = None
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, preference) -> "UserPreferenceResponse":
        attribute = preference.attribute
        option = preference.option
        return cls(
            user_id=preference.user_id,
            attribute_id=preference.attribute_id,
            attribute_name=attribute.name if attribute else None,
            type_value=attribute.type_value if attribute else None,
            unit=attribute.unit if attribute else None,
            option_id=preference.option_id,
            option_name=option.name if option else None,
            min_value=preference.min_value,
            max_value=preference.max_value,
            created_at=preference.created_at,
            updated_at=preference.updated_at,
        )


class BatchUpsertResult(BaseModel):
    message: str
    created: int
    updated: int
    deleted: int


class PetCharacteristicUpsert(BaseModel):
    """A pet's value for one attribute: ``option_id`` or numeric ``value``"""

    option_id: Optional[int] = None
    value: Optional[float] = None


class PetCharacteristicResponse(BaseModel):
    pet_id: int
    attribute_id: int
    name: Optional[str] = None
    type_value: Optional[str] = None
    unit: Optional[str] = None
    option_id: Optional[int] = None
    option_value: Optional[str] = None
    value: Optional[float] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, characteristic) -> "PetCharacteristicResponse":
        attribute = characteristic.attribute
        option = characteristic.option
        return cls(
            pet_id=characteristic.pet_id,
            attribute_id=characteristic.attribute_id,
            name=attribute.name if attribute else None,
            type_value=attribute.type_value if attribute else None,
            unit=attribute.unit if attribute else None,
            option_id=characteristic.option_id,
            option_value=option.name if option else None,
            value=characteristic.value,
            updated_at=characteristic.updated_at,
        )
