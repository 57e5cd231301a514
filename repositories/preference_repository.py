"""
Preference Repository - Data access layer for per-user matching preferences
"""

from typing import List, Optional, Tuple
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import UserPreference


class PreferenceRepository(BaseRepository[UserPreference]):
    """
    Repository for user preferences.

    A user holds at most one row per attribute; the composite primary key is
    the authority when two upserts race on the same pair.
    """

    def __init__(self, db: Session):
        super().__init__(db, UserPreference)

    def get(self, user_id: int, attribute_id: int) -> Optional[UserPreference]:
        """Get the preference for a (user, attribute) pair"""
        return (
            self.db.query(UserPreference)
            .filter(
                UserPreference.user_id == user_id,
                UserPreference.attribute_id == attribute_id,
            )
            .first()
        )

    def exists(self, user_id: int, attribute_id: int) -> bool:
        return self.get(user_id, attribute_id) is not None

    def list_by_owner(self, user_id: int) -> List[UserPreference]:
        """Get all preferences for a user ordered by attribute_id"""
        return (
            self.db.query(UserPreference)
            .options(
                joinedload(UserPreference.attribute), joinedload(UserPreference.option)
            )
            .filter(UserPreference.user_id == user_id)
            .order_by(UserPreference.attribute_id)
            .all()
        )

    def upsert(
        self,
        user_id: int,
        attribute_id: int,
        option_id: Optional[int] = None,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
    ) -> UserPreference:
        """Create or replace the preference for a (user, attribute) pair"""
        preference = self.get(user_id, attribute_id)
        if preference is None:
            preference = UserPreference(user_id=user_id, attribute_id=attribute_id)
            self.db.add(preference)
        self._assign(preference, option_id, min_value, max_value)

        try:
            self.db.commit()
        except IntegrityError:
            # Race condition - another request inserted the same pair
            self.db.rollback()
            preference = self.get(user_id, attribute_id)
            if preference is None:
                raise
            self._assign(preference, option_id, min_value, max_value)
            self.db.commit()

        self.db.refresh(preference)
        return preference

    def delete_one(self, user_id: int, attribute_id: int) -> bool:
        """Delete a single preference (user cleared that filter)"""
        count = (
            self.db.query(UserPreference)
            .filter(
                UserPreference.user_id == user_id,
                UserPreference.attribute_id == attribute_id,
            )
            .delete()
        )
        self.db.commit()
        return count > 0

    def delete_by_user_id(self, user_id: int) -> int:
        """Delete all preferences for a user"""
        count = (
            self.db.query(UserPreference)
            .filter(UserPreference.user_id == user_id)
            .delete()
        )
        self.db.commit()
        return count

    def replace_all(self, user_id: int, preferences: List[dict]) -> Tuple[int, int, int]:
        """Replace all preferences for a user (diff-based update).

        - Deletes preferences whose attribute is no longer in the list
        - Updates values for existing preferences
        - Adds new preferences

        Returns:
            (created, updated, deleted) counts
        """
        existing = self.db.query(UserPreference).filter(UserPreference.user_id == user_id).all()
        existing_map = {p.attribute_id: p for p in existing}
        incoming_ids = {p["attribute_id"] for p in preferences}

        deleted = 0
        for attribute_id, obj in existing_map.items():
            if attribute_id not in incoming_ids:
                self.db.delete(obj)
                deleted += 1

        created = updated = 0
        for pref_data in preferences:
            obj = existing_map.get(pref_data["attribute_id"])
            if obj is not None:
                updated += 1
            else:
                obj = UserPreference(user_id=user_id, attribute_id=pref_data["attribute_id"])
                self.db.add(obj)
                created += 1
            self._assign(
                obj,
                pref_data.get("option_id"),
                pref_data.get("min_value"),
                pref_data.get("max_value"),
            )

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        return created, updated, deleted

    @staticmethod
    def _assign(preference: UserPreference, option_id, min_value, max_value) -> None:
        preference.option_id = option_id
        preference.min_value = min_value
        preference.max_value = max_value
        preference.updated_at = func.now()
