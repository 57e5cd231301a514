"""
Characteristic Repository - Data access layer for per-pet attribute values
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import PetCharacteristic


class CharacteristicRepository(BaseRepository[PetCharacteristic]):
    """Repository for pet characteristics, one row per (pet, attribute)"""

    def __init__(self, db: Session):
        super().__init__(db, PetCharacteristic)

    def get(self, pet_id: int, attribute_id: int) -> Optional[PetCharacteristic]:
        return (
            self.db.query(PetCharacteristic)
            .filter(
                PetCharacteristic.pet_id == pet_id,
                PetCharacteristic.attribute_id == attribute_id,
            )
            .first()
        )

    def exists(self, pet_id: int, attribute_id: int) -> bool:
        return self.get(pet_id, attribute_id) is not None

    def list_by_owner(self, pet_id: int) -> List[PetCharacteristic]:
        """Get all characteristics of a pet ordered by attribute_id"""
        return (
            self.db.query(PetCharacteristic)
            .options(
                joinedload(PetCharacteristic.attribute),
                joinedload(PetCharacteristic.option),
            )
            .filter(PetCharacteristic.pet_id == pet_id)
            .order_by(PetCharacteristic.attribute_id)
            .all()
        )

    def upsert(
        self,
        pet_id: int,
        attribute_id: int,
        option_id: Optional[int] = None,
        value: Optional[float] = None,
    ) -> PetCharacteristic:
        """Create or replace the characteristic for a (pet, attribute) pair"""
        characteristic = self.get(pet_id, attribute_id)
        if characteristic is None:
            characteristic = PetCharacteristic(pet_id=pet_id, attribute_id=attribute_id)
            self.db.add(characteristic)
        self._assign(characteristic, option_id, value)

        try:
            self.db.commit()
        except IntegrityError:
            # Race condition - the pair was inserted concurrently
            self.db.rollback()
            characteristic = self.get(pet_id, attribute_id)
            if characteristic is None:
                raise
            self._assign(characteristic, option_id, value)
            self.db.commit()

        self.db.refresh(characteristic)
        return characteristic

    def delete_one(self, pet_id: int, attribute_id: int) -> bool:
        count = (
            self.db.query(PetCharacteristic)
            .filter(
                PetCharacteristic.pet_id == pet_id,
                PetCharacteristic.attribute_id == attribute_id,
            )
            .delete()
        )
        self.db.commit()
        return count > 0

    @staticmethod
    def _assign(characteristic: PetCharacteristic, option_id, value) -> None:
        characteristic.option_id = option_id
        characteristic.value = value
        characteristic.updated_at = func.now()
