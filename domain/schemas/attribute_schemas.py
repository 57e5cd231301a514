from pydantic import BaseModel, Field, field_serializer
from typing import Optional, List
from datetime import datetime
from decimal import Decimal

from domain.constants import (
    MAX_ATTRIBUTE_NAME_LENGTH,
    MAX_OPTION_NAME_LENGTH,
    MAX_UNIT_LENGTH,
)
from domain.enums import AttributeType


class AttributeCreate(BaseModel):
    """Schema for creating a catalog attribute"""

    name: str = Field(..., max_length=MAX_ATTRIBUTE_NAME_LENGTH, description="Attribute name, unique among live attributes")
    type_value: AttributeType = Field(..., description="'string' (categorical) or 'float' (numeric)")
    unit: Optional[str] = Field(None, max_length=MAX_UNIT_LENGTH, description="Display unit for numeric attributes (e.g. 'cm', 'kg')")
    percent: Decimal = Field(
        default=Decimal("0"), ge=0, le=100, description="Suggestion weight; 0 disables suggestion"
    )


class AttributeUpdate(BaseModel):
    """Partial update; absent fields are left unchanged and a blank name is ignored"""

    name: Optional[str] = Field(None, max_length=MAX_ATTRIBUTE_NAME_LENGTH)
    type_value: Optional[AttributeType] = None
    unit: Optional[str] = Field(
        None, max_length=MAX_UNIT_LENGTH, description="Empty string clears the unit"
    )
    percent: Optional[Decimal] = Field(None, ge=0, le=100)


class OptionCreate(BaseModel):
    name: str = Field(..., max_length=MAX_OPTION_NAME_LENGTH)


class OptionUpdate(BaseModel):
    name: str = Field(..., max_length=MAX_OPTION_NAME_LENGTH)


class OptionResponse(BaseModel):
    option_id: int
    attribute_id: int
    name: str
    is_deleted: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class OptionBrief(BaseModel):
    """Option as shown inside the filter projection"""

    option_id: int
    name: str

    model_config = {"from_attributes": True}


class AttributeResponse(BaseModel):
    """Schema for attribute response"""

    attribute_id: int
    name: str
    type_value: AttributeType
    unit: Optional[str]
    percent: Decimal
    is_deleted: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    options: List[OptionResponse] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    @field_serializer("percent", when_used="json")
    def serialize_percent(self, value: Decimal) -> float:
        """Weights go over the wire as JSON numbers."""
        return float(value)

    @classmethod
    def from_entity(cls, attribute, include_deleted_options: bool = False) -> "AttributeResponse":
        options = attribute.options if include_deleted_options else attribute.active_options
        return cls(
            attribute_id=attribute.attribute_id,
            name=attribute.name,
            type_value=attribute.type_value,
            unit=attribute.unit,
            percent=attribute.percent,
            is_deleted=attribute.is_deleted,
            created_at=attribute.created_at,
            updated_at=attribute.updated_at,
            options=[OptionResponse.model_validate(o) for o in options],
        )


class AttributeFilterItem(BaseModel):
    """Attribute with its live options, as used by filter screens"""

    attribute_id: int
    name: str
    type_value: AttributeType
    unit: Optional[str] = None
    percent: Decimal = Decimal("0")
    options: List[OptionBrief] = Field(default_factory=list)

    @field_serializer("percent", when_used="json")
    def serialize_percent(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_entity(cls, attribute) -> "AttributeFilterItem":
        return cls(
            attribute_id=attribute.attribute_id,
            name=attribute.name,
            type_value=attribute.type_value,
            unit=attribute.unit,
            percent=attribute.percent if attribute.percent is not None else Decimal("0"),
            options=[OptionBrief.model_validate(o) for o in attribute.active_options],
        )


class FilterSuggestion(BaseModel):
    """The most impactful filters and their combined weight"""

    top_attributes: List[AttributeFilterItem]
    total_percent: Decimal
    message: Optional[str] = None

    @field_serializer("total_percent", when_used="json")
    def serialize_total_percent(self, value: Decimal) -> float:
        return float(value)


class FilterSuggestionResponse(BaseModel):
    message: str
    data: List[AttributeFilterItem]
    suggestion: FilterSuggestion
