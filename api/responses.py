"""
Response envelopes shared by the routers and the error handlers.
"""

from typing import Generic, TypeVar, Optional, Any, List
from pydantic import BaseModel, Field
from datetime import datetime, timezone

from repositories.base import Page

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class APIResponse(BaseModel, Generic[T]):
    """Envelope for mutations that return the affected resource"""

    success: bool = Field(..., description="True when the mutation was applied")
    message: Optional[str] = Field(None, description="Short summary for the client")
    data: Optional[T] = Field(None, description="Affected resource")
    timestamp: datetime = Field(default_factory=_utcnow)


class PaginatedResponse(BaseModel, Generic[T]):
    """One page of a catalog listing"""

    items: List[T] = Field(..., description="Rows on this page, ordered by id")
    total: int = Field(..., description="Rows matching the filters across all pages")
    page: int = Field(..., description="1-based page number")
    page_size: int = Field(..., description="Requested rows per page")
    total_pages: int = Field(..., description="Number of pages for this page size")
    has_next: bool
    has_prev: bool


class ErrorDetail(BaseModel):
    code: str = Field(..., description="Machine-readable error code, e.g. NOT_FOUND")
    message: str = Field(..., description="Human-readable explanation")
    details: Optional[dict] = Field(None, description="Offending values or field errors")


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response"""

    success: bool = Field(False)
    error: ErrorDetail
    timestamp: datetime = Field(default_factory=_utcnow)


class HealthResponse(BaseModel):
    status: str = Field(..., description="'ok' when the process is serving")
    service: str
    version: Optional[str] = None
    timestamp: datetime = Field(default_factory=_utcnow)


# Documented error bodies for route decorators
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid argument"},
    404: {"model": ErrorResponse, "description": "Unknown or deleted resource"},
    409: {"model": ErrorResponse, "description": "Name taken or already deleted"},
}


def success_response(data: Any = None, message: Optional[str] = None) -> dict:
    return {"success": True, "message": message, "data": data, "timestamp": _utcnow()}


def error_response(code: str, message: str, details: Optional[dict] = None) -> dict:
    """Build the ErrorResponse body; ``details`` is omitted when empty"""
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"success": False, "error": error, "timestamp": _utcnow()}


def page_response(page: Page) -> dict:
    """Render a repository/service Page with navigation flags"""
    total_pages = -(-page.total // page.page_size) if page.total else 0
    return {
        "items": page.items,
        "total": page.total,
        "page": page.page,
        "page_size": page.page_size,
        "total_pages": total_pages,
        "has_next": page.page < total_pages,
        "has_prev": page.page > 1,
    }
