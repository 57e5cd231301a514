"""
Filter suggestion: which catalog attributes matter most when filtering matches.

The suggestion is computed from attribute weights (``percent``) only and
performs no writes, so it is safe to call concurrently.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
import logging

from domain.constants import PERCENT_QUANTUM, TOP_ATTRIBUTE_LIMIT
from domain.schemas.attribute_schemas import (
    AttributeFilterItem,
    FilterSuggestion,
    FilterSuggestionResponse,
)
from repositories import AttributeRepository

logger = logging.getLogger("pawnder.filter_suggestion")

FILTER_LIST_MESSAGE = "Attributes for filtering retrieved successfully."


def round_percent(value) -> Decimal:
    """Round to one decimal place, halves away from zero"""
    return Decimal(str(value)).quantize(PERCENT_QUANTUM, rounding=ROUND_HALF_UP)


def select_top_attributes(
    items: Sequence[AttributeFilterItem], limit: int = TOP_ATTRIBUTE_LIMIT
) -> List[AttributeFilterItem]:
    """
    Highest-weighted attributes first.

    Attributes with ``percent <= 0`` are never selected. Equal weights are
    ordered by attribute_id ascending so the result is reproducible.
    """
    candidates = [item for item in items if item.percent is not None and item.percent > 0]
    candidates.sort(key=lambda item: (-item.percent, item.attribute_id))
    return candidates[:limit]


def suggestion_message(top: Sequence[AttributeFilterItem]) -> Optional[str]:
    if not top:
        return None
    names = ", ".join(item.name for item in top)
    return f"Filter by {names} to find better matches!"


class FilterSuggestionService:
    """Builds the filter screen payload with its weighted suggestion"""

    @staticmethod
    def summarize(items: Sequence[AttributeFilterItem]) -> FilterSuggestionResponse:
        """
        Compute the suggestion for an already loaded catalog.

        Args:
            items: Live attributes with their live options

        Returns:
            FilterSuggestionResponse with the catalog as ``data`` and at most
            TOP_ATTRIBUTE_LIMIT suggested attributes
        """
        top = select_top_attributes(items)
        total = round_percent(sum((item.percent for item in top), Decimal("0")))
        return FilterSuggestionResponse(
            message=FILTER_LIST_MESSAGE,
            data=list(items),
            suggestion=FilterSuggestion(
                top_attributes=top,
                total_percent=total,
                message=suggestion_message(top),
            ),
        )

    @staticmethod
    def build_suggestion(db: Session) -> FilterSuggestionResponse:
        attributes = AttributeRepository(db).list_for_filter()
        items = [AttributeFilterItem.from_entity(a) for a in attributes]
        response = FilterSuggestionService.summarize(items)
        logger.info(
            f"filter_suggestion_built attributes={len(items)} "
            f"top={[a.attribute_id for a in response.suggestion.top_attributes]} "
            f"total_percent={response.suggestion.total_percent}"
        )
        return response
