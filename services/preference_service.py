from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.constants import PREFERENCE_RANGES
from domain.models import Attribute
from domain.schemas.preference_schemas import (
    UserPreferenceUpsert,
    UserPreferenceBatchRequest,
    UserPreferenceResponse,
    BatchUpsertResult,
)
from repositories import PreferenceRepository
from services.value_rules import (
    check_number,
    is_categorical,
    reject_option_for_numeric,
    require_live_attribute,
    require_option_of,
)
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("pawnder.user_prefs")


class UserPreferenceService:
    """Handles reading, upserting and clearing a user's matching preferences."""

    @staticmethod
    def validate_preference(
        db: Session, attribute: Attribute, data: UserPreferenceUpsert
    ) -> None:
        """
        Check that the populated fields match the attribute's type.

        Categorical attributes need a live option of the same attribute and no
        range. Numeric attributes need at least one bound, no option, bounds
        that are non-negative, ordered and inside the product range.

        Raises:
            ServiceValidationError: If the shape or values are invalid
            NotFoundError: If the option does not exist for this attribute
        """
        if is_categorical(attribute):
            if data.min_value is not None or data.max_value is not None:
                raise ServiceValidationError(
                    f"Attribute '{attribute.name}' is categorical; min/max are not accepted",
                    details={"attribute_id": attribute.attribute_id},
                )
            require_option_of(db, attribute, data.option_id)
            return

        reject_option_for_numeric(attribute, data.option_id)
        if data.min_value is None and data.max_value is None:
            raise ServiceValidationError(
                f"Attribute '{attribute.name}' is numeric; min_value or max_value is required",
                details={"attribute_id": attribute.attribute_id},
            )
        check_number(attribute, "Minimum", data.min_value, PREFERENCE_RANGES)
        check_number(attribute, "Maximum", data.max_value, PREFERENCE_RANGES)
        if (
            data.min_value is not None
            and data.max_value is not None
            and data.min_value > data.max_value
        ):
            raise ServiceValidationError(
                f"Minimum ({data.min_value:g}) must be less than or equal to maximum ({data.max_value:g})",
                details={"attribute_id": attribute.attribute_id},
            )

    @staticmethod
    def get_preferences(db: Session, user_id: int) -> List[UserPreferenceResponse]:
        """Get a user's preferences ordered by attribute_id"""
        prefs = PreferenceRepository(db).list_by_owner(user_id)
        logger.info(f"preferences_fetched user_id={user_id} count={len(prefs)}")
        return [UserPreferenceResponse.from_entity(p) for p in prefs]

    @staticmethod
    def get_preference(
        db: Session, user_id: int, attribute_id: int
    ) -> Optional[UserPreferenceResponse]:
        pref = PreferenceRepository(db).get(user_id, attribute_id)
        return UserPreferenceResponse.from_entity(pref) if pref else None

    @staticmethod
    def upsert_preference(
        db: Session, user_id: int, attribute_id: int, data: UserPreferenceUpsert
    ) -> UserPreferenceResponse:
        """
        Create or replace the preference for one attribute.

        Raises:
            NotFoundError: If the attribute or option does not exist
            ServiceValidationError: If the values do not fit the attribute
        """
        attribute = require_live_attribute(db, attribute_id)
        UserPreferenceService.validate_preference(db, attribute, data)

        pref = PreferenceRepository(db).upsert(
            user_id,
            attribute_id,
            option_id=data.option_id,
            min_value=data.min_value,
            max_value=data.max_value,
        )
        logger.info(
            f"preference_upserted user_id={user_id} attribute_id={attribute_id} "
            f"option_id={data.option_id} min={data.min_value} max={data.max_value}"
        )
        return UserPreferenceResponse.from_entity(pref)

    @staticmethod
    def upsert_batch(
        db: Session, user_id: int, request: UserPreferenceBatchRequest
    ) -> BatchUpsertResult:
        """
        Replace a user's whole preference set.

        Every item is validated before anything is written; attributes missing
        from the request are removed. An empty request clears all preferences.

        Raises:
            ServiceValidationError: If an attribute repeats, is unknown or deleted,
                or a value does not fit its attribute
        """
        items = request.preferences
        attribute_ids = [p.attribute_id for p in items]
        if len(set(attribute_ids)) != len(attribute_ids):
            raise ServiceValidationError(
                "Each attribute may appear only once in a preference batch"
            )

        for item in items:
            try:
                attribute = require_live_attribute(db, item.attribute_id)
            except NotFoundError as e:
                raise ServiceValidationError(
                    "Batch references an unknown or deleted attribute",
                    details={"attribute_id": item.attribute_id},
                ) from e
            UserPreferenceService.validate_preference(db, attribute, item)

        created, updated, deleted = PreferenceRepository(db).replace_all(
            user_id, [item.model_dump() for item in items]
        )
        logger.info(
            f"preferences_batch_saved user_id={user_id} created={created} "
            f"updated={updated} deleted={deleted}"
        )
        return BatchUpsertResult(
            message=f"Preferences saved. Created: {created}, updated: {updated}, deleted: {deleted}",
            created=created,
            updated=updated,
            deleted=deleted,
        )

    @staticmethod
    def delete_preference(db: Session, user_id: int, attribute_id: int) -> bool:
        """Clear one filter; returns False when the user had none for this attribute"""
        removed = PreferenceRepository(db).delete_one(user_id, attribute_id)
        logger.info(
            f"preference_deleted user_id={user_id} attribute_id={attribute_id} removed={removed}"
        )
        return removed

    @staticmethod
    def clear_preferences(db: Session, user_id: int) -> int:
        count = PreferenceRepository(db).delete_by_user_id(user_id)
        logger.info(f"preferences_cleared user_id={user_id} count={count}")
        return count
