"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Optional, List, Type, Sequence
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, Query
from abc import ABC

from app.exceptions import ServiceValidationError

ModelType = TypeVar("ModelType")


@dataclass
class Page(Generic[ModelType]):
    """One window of a filtered, ordered result set"""

    items: List[ModelType] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 20


def validate_paging(page: int, page_size: int) -> None:
    """Reject non-positive paging arguments before any query is built"""
    if page is None or page < 1 or page_size is None or page_size < 1:
        raise ServiceValidationError(
            "Invalid pagination parameters",
            details={"page": page, "page_size": page_size},
            code="INVALID_PAGINATION",
        )


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.

    Subclasses that support soft delete and search set ``soft_delete_column``
    and ``search_fields`` (column attributes matched case-insensitively).
    """

    primary_key: str = "id"
    soft_delete_column: Optional[str] = None
    search_fields: Sequence[str] = ()

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by primary key, or None"""
        if not entity_id:
            return None
        return self.db.get(self.model, entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def paginate(
        self,
        query: Optional[Query] = None,
        search: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
        include_deleted: bool = False,
    ) -> Page[ModelType]:
        """
        Filter, search and window a query.

        Order of operations: soft-delete filter, search, count, order by
        primary key, offset/limit. Paging arguments are validated first so an
        invalid request never reaches the database.

        Args:
            query: Base query (defaults to all rows of the model)
            search: Case-insensitive substring matched against ``search_fields``
            page: 1-based page number
            page_size: Rows per page
            include_deleted: Keep soft-deleted rows

        Returns:
            Page with the windowed items and the filtered total
        """
        validate_paging(page, page_size)

        q = query if query is not None else self.db.query(self.model)

        if not include_deleted and self.soft_delete_column:
            q = q.filter(getattr(self.model, self.soft_delete_column).is_(False))

        keyword = (search or "").strip()
        if keyword and self.search_fields:
            keyword = keyword.lower()
            q = q.filter(
                or_(
                    *[
                        func.lower(getattr(self.model, name)).contains(
                            keyword, autoescape=True
                        )
                        for name in self.search_fields
                    ]
                )
            )

        total = q.order_by(None).count()
        items = (
            q.order_by(getattr(self.model, self.primary_key))
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return Page(items=items, total=total, page=page, page_size=page_size)
