"""
Product constants shared by services.

Numeric ranges are keyed by attribute name and looked up case-insensitively.
Preference bounds for weight are stored in grams, characteristic values in kg.
"""

import unicodedata
from decimal import Decimal
from typing import NamedTuple, Optional

# Number of attributes surfaced by the filter suggestion
TOP_ATTRIBUTE_LIMIT = 3

# One decimal place for the suggestion's total weight
PERCENT_QUANTUM = Decimal("0.1")

MAX_ATTRIBUTE_NAME_LENGTH = 100
MAX_UNIT_LENGTH = 20
MAX_OPTION_NAME_LENGTH = 100


class ValueRange(NamedTuple):
    min: float
    max: float
    unit: str


PREFERENCE_RANGES = {
    "cân nặng": ValueRange(500, 12000, "gram"),
    "chiều cao": ValueRange(15, 40, "cm"),
    "tuổi": ValueRange(0, 25, "năm"),
    "khoảng cách": ValueRange(0, 100, "km"),
}

CHARACTERISTIC_RANGES = {
    "cân nặng": ValueRange(0.5, 15, "kg"),
    "chiều cao": ValueRange(15, 45, "cm"),
    "tuổi": ValueRange(0, 25, "năm"),
    "khoảng cách": ValueRange(0, 100, "km"),
}


def lookup_range(ranges: dict, attribute_name: Optional[str]) -> Optional[ValueRange]:
    if not attribute_name:
        return None
    return ranges.get(unicodedata.normalize("NFC", attribute_name.strip().lower()))
