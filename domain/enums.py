"""
Domain enums for the attribute taxonomy.
Contains all enumeration types used across the domain models.
"""

import enum


class AttributeType(str, enum.Enum):
    """How an attribute's values are expressed"""

    STRING = "string"  # categorical, resolved through AttributeOption rows
    FLOAT = "float"  # numeric, preferences hold a min/max range

    @property
    def is_categorical(self) -> bool:
        return self is AttributeType.STRING
