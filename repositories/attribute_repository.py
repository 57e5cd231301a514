"""
Attribute Repository - Data access layer for the attribute catalog
"""

from decimal import Decimal
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository, Page
from domain.models import Attribute
from app.exceptions import ConflictError, NotFoundError

ACTIVE_NAME_INDEX = "uq_attribute_active_name"


class AttributeRepository(BaseRepository[Attribute]):
    """
    Repository for catalog attributes.

    Name uniqueness among live attributes is checked up front and enforced by
    the ``uq_attribute_active_name`` index; a violation caught at commit is
    reported as the same ConflictError.
    """

    primary_key = "attribute_id"
    soft_delete_column = "is_deleted"
    search_fields = ("name", "unit", "type_value")

    def __init__(self, db: Session):
        super().__init__(db, Attribute)

    def get_by_id(self, attribute_id: int) -> Optional[Attribute]:
        """Get a live attribute by ID; soft-deleted rows are not returned"""
        if not attribute_id:
            return None
        return (
            self.db.query(Attribute)
            .filter(Attribute.attribute_id == attribute_id, Attribute.is_deleted.is_(False))
            .first()
        )

    def get_any(self, attribute_id: int) -> Optional[Attribute]:
        """Get attribute by ID regardless of soft-delete state"""
        if not attribute_id:
            return None
        return self.db.query(Attribute).filter(Attribute.attribute_id == attribute_id).first()

    def name_exists(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a live attribute already uses this name (case-insensitive)"""
        normalized = (name or "").strip().lower()
        query = self.db.query(Attribute.attribute_id).filter(
            Attribute.is_deleted.is_(False),
            func.lower(Attribute.name) == normalized,
        )
        if exclude_id is not None:
            query = query.filter(Attribute.attribute_id != exclude_id)
        return query.first() is not None

    def create_attribute(
        self,
        name: str,
        type_value: str,
        unit: Optional[str] = None,
        percent: Optional[Decimal] = None,
    ) -> Attribute:
        """Create a new attribute"""
        name = name.strip()
        if self.name_exists(name):
            raise ConflictError(
                f"Attribute name '{name}' already exists", code="ATTRIBUTE_NAME_TAKEN"
            )

        attribute = Attribute(
            name=name,
            type_value=type_value,
            unit=unit,
            percent=percent if percent is not None else Decimal("0"),
            is_deleted=False,
        )
        self.db.add(attribute)
        self._commit_or_conflict(name)
        self.db.refresh(attribute)
        return attribute

    def update_attribute(
        self,
        attribute_id: int,
        name: Optional[str] = None,
        type_value: Optional[str] = None,
        unit: Optional[str] = None,
        percent: Optional[Decimal] = None,
    ) -> bool:
        """
        Apply a partial update to a live attribute.

        ``None`` leaves a field unchanged and a blank name is ignored. An empty
        ``unit`` clears the unit.
        """
        attribute = self.get_by_id(attribute_id)
        if attribute is None:
            raise NotFoundError(f"Attribute {attribute_id} not found")

        new_name = name.strip() if name else ""
        if new_name and self.name_exists(new_name, exclude_id=attribute.attribute_id):
            raise ConflictError(
                f"Attribute name '{new_name}' already exists", code="ATTRIBUTE_NAME_TAKEN"
            )

        if new_name:
            attribute.name = new_name
        if type_value is not None:
            attribute.type_value = type_value
        if unit is not None:
            attribute.unit = unit.strip() or None
        if percent is not None:
            attribute.percent = percent
        attribute.updated_at = func.now()

        self._commit_or_conflict(new_name or attribute.name)
        return True

    def soft_delete(self, attribute_id: int) -> bool:
        """Flag an attribute as deleted; the row is kept"""
        attribute = self.get_any(attribute_id)
        if attribute is None:
            raise NotFoundError(f"Attribute {attribute_id} not found")
        if attribute.is_deleted:
            raise ConflictError(
                f"Attribute {attribute_id} is already soft-deleted",
                code="ATTRIBUTE_ALREADY_DELETED",
            )

        attribute.is_deleted = True
        attribute.updated_at = func.now()
        self.db.commit()
        return True

    def hard_delete(self, attribute_id: int) -> bool:
        """Physically remove an attribute with its options, preferences and characteristics"""
        attribute = self.get_any(attribute_id)
        if attribute is None:
            raise NotFoundError(f"Attribute {attribute_id} not found")

        self.db.delete(attribute)
        self.db.commit()
        return True

    def list_attributes(
        self,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
        include_deleted: bool = False,
    ) -> Page[Attribute]:
        """Search and page through the catalog, ordered by attribute_id"""
        query = self.db.query(Attribute).options(selectinload(Attribute.options))
        return self.paginate(
            query,
            search=search,
            page=page,
            page_size=page_size,
            include_deleted=include_deleted,
        )

    def list_for_filter(self) -> List[Attribute]:
        """All live attributes ordered by attribute_id, options preloaded.

        Callers read ``Attribute.active_options`` to skip deleted options.
        """
        return (
            self.db.query(Attribute)
            .filter(Attribute.is_deleted.is_(False))
            .options(selectinload(Attribute.options))
            .order_by(Attribute.attribute_id)
            .all()
        )

    def _commit_or_conflict(self, name: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            # PostgreSQL and SQLite both name the violated index in the driver message
            if ACTIVE_NAME_INDEX not in str(e.orig):
                raise
            raise ConflictError(
                f"Attribute name '{name}' already exists",
                code="ATTRIBUTE_NAME_TAKEN",
            ) from e
