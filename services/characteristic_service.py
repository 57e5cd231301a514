from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.constants import CHARACTERISTIC_RANGES
from domain.schemas.preference_schemas import (
    PetCharacteristicUpsert,
    PetCharacteristicResponse,
)
from repositories import CharacteristicRepository
from services.value_rules import (
    check_number,
    is_categorical,
    reject_option_for_numeric,
    require_live_attribute,
    require_option_of,
)
from app.exceptions import ServiceValidationError

logger = logging.getLogger("pawnder.pet_characteristics")


class PetCharacteristicService:
    """Business logic for a pet's attribute values"""

    @staticmethod
    def get_characteristics(db: Session, pet_id: int) -> List[PetCharacteristicResponse]:
        rows = CharacteristicRepository(db).list_by_owner(pet_id)
        return [PetCharacteristicResponse.from_entity(c) for c in rows]

    @staticmethod
    def get_characteristic(
        db: Session, pet_id: int, attribute_id: int
    ) -> Optional[PetCharacteristicResponse]:
        row = CharacteristicRepository(db).get(pet_id, attribute_id)
        return PetCharacteristicResponse.from_entity(row) if row else None

    @staticmethod
    def upsert_characteristic(
        db: Session, pet_id: int, attribute_id: int, data: PetCharacteristicUpsert
    ) -> PetCharacteristicResponse:
        """
        Create or replace a pet's value for one attribute.

        Raises:
            NotFoundError: If the attribute or option does not exist
            ServiceValidationError: If the value does not fit the attribute
        """
        attribute = require_live_attribute(db, attribute_id)

        if is_categorical(attribute):
            if data.value is not None:
                raise ServiceValidationError(
                    f"Attribute '{attribute.name}' is categorical; value is not accepted",
                    details={"attribute_id": attribute_id},
                )
            require_option_of(db, attribute, data.option_id)
        else:
            reject_option_for_numeric(attribute, data.option_id)
            if data.value is None:
                raise ServiceValidationError(
                    f"Attribute '{attribute.name}' is numeric; value is required",
                    details={"attribute_id": attribute_id},
                )
            check_number(attribute, "Value", data.value, CHARACTERISTIC_RANGES)

        row = CharacteristicRepository(db).upsert(
            pet_id, attribute_id, option_id=data.option_id, value=data.value
        )
        logger.info(
            f"pet_characteristic_upserted pet_id={pet_id} attribute_id={attribute_id} "
            f"option_id={data.option_id} value={data.value}"
        )
        return PetCharacteristicResponse.from_entity(row)

    @staticmethod
    def delete_characteristic(db: Session, pet_id: int, attribute_id: int) -> bool:
        removed = CharacteristicRepository(db).delete_one(pet_id, attribute_id)
        logger.info(
            f"pet_characteristic_deleted pet_id={pet_id} attribute_id={attribute_id} removed={removed}"
        )
        return removed
