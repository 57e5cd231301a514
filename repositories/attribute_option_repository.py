"""
Attribute Option Repository - Data access layer for categorical attribute values
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import AttributeOption
from app.exceptions import NotFoundError


class AttributeOptionRepository(BaseRepository[AttributeOption]):
    """Repository for attribute options"""

    primary_key = "option_id"
    soft_delete_column = "is_deleted"
    search_fields = ("name",)

    def __init__(self, db: Session):
        super().__init__(db, AttributeOption)

    def get_active(self, option_id: int) -> Optional[AttributeOption]:
        """Get a non-deleted option by ID"""
        if not option_id:
            return None
        return (
            self.db.query(AttributeOption)
            .filter(
                AttributeOption.option_id == option_id,
                AttributeOption.is_deleted.is_(False),
            )
            .first()
        )

    def list_by_attribute(self, attribute_id: int) -> List[AttributeOption]:
        """Get live options of an attribute ordered by option_id"""
        return (
            self.db.query(AttributeOption)
            .filter(
                AttributeOption.attribute_id == attribute_id,
                AttributeOption.is_deleted.is_(False),
            )
            .order_by(AttributeOption.option_id)
            .all()
        )

    def create_option(self, attribute_id: int, name: str) -> AttributeOption:
        """Create a new option for an attribute"""
        option = AttributeOption(attribute_id=attribute_id, name=name.strip(), is_deleted=False)
        return self.create(option)

    def update_option(self, option_id: int, name: str) -> AttributeOption:
        """Rename a live option"""
        option = self.get_active(option_id)
        if option is None:
            raise NotFoundError(f"Option {option_id} not found")
        option.name = name.strip()
        return self.update(option)

    def soft_delete(self, option_id: int) -> bool:
        """Flag an option as deleted; returns False when there is nothing to delete"""
        option = self.get_active(option_id)
        if option is None:
            return False
        option.is_deleted = True
        option.updated_at = func.now()
        self.db.commit()
        return True
