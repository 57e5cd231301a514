"""
Tests for UserPreferenceService and PetCharacteristicService.

Categorical attributes take an option of the same attribute; numeric
attributes take numbers checked against the product ranges.
"""

import pytest
from sqlalchemy.orm import Session

from test_constants import BREED, HEIGHT, WEIGHT, USER_ID, OTHER_USER_ID, PET_ID
from test_fixtures import make_attribute, make_catalog_attribute, option_id_of
from services.preference_service import UserPreferenceService
from services.characteristic_service import PetCharacteristicService
from services.attribute_service import AttributeService
from domain.models import UserPreference, PetCharacteristic
from domain.schemas.preference_schemas import (
    UserPreferenceUpsert,
    UserPreferenceBatchItem,
    UserPreferenceBatchRequest,
    PetCharacteristicUpsert,
)
from app.exceptions import NotFoundError, ServiceValidationError


# =============================================================================
# SINGLE PREFERENCE UPSERT
# =============================================================================


def test_categorical_preference_upsert(db_session: Session):
    breed = make_catalog_attribute(db_session, BREED)
    corgi = option_id_of(breed, "Corgi")

    pref = UserPreferenceService.upsert_preference(
        db_session, USER_ID, breed.attribute_id, UserPreferenceUpsert(option_id=corgi)
    )

    assert pref.option_id == corgi
    assert pref.option_name == "Corgi"
    assert pref.attribute_name == "Giống loài"
    assert pref.min_value is None and pref.max_value is None


def test_upsert_twice_updates_same_row(db_session: Session):
    breed = make_catalog_attribute(db_session, BREED)

    UserPreferenceService.upsert_preference(
        db_session, USER_ID, breed.attribute_id,
        UserPreferenceUpsert(option_id=option_id_of(breed, "Corgi")),
    )
    pref = UserPreferenceService.upsert_preference(
        db_session, USER_ID, breed.attribute_id,
        UserPreferenceUpsert(option_id=option_id_of(breed, "Poodle")),
    )

    assert pref.option_name == "Poodle"
    assert db_session.query(UserPreference).count() == 1


def test_numeric_preference_range(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)

    pref = UserPreferenceService.upsert_preference(
        db_session, USER_ID, height.attribute_id,
        UserPreferenceUpsert(min_value=20, max_value=35),
    )

    assert (pref.min_value, pref.max_value) == (20, 35)
    assert pref.unit == "cm"


@pytest.mark.parametrize(
    "payload",
    [
        UserPreferenceUpsert(min_value=30, max_value=20),
        UserPreferenceUpsert(min_value=-1),
        UserPreferenceUpsert(min_value=10),
        UserPreferenceUpsert(max_value=41),
        UserPreferenceUpsert(),
        UserPreferenceUpsert(option_id=1, min_value=20),
    ],
)
def test_numeric_preference_rejections(db_session: Session, payload):
    height = make_catalog_attribute(db_session, HEIGHT)

    with pytest.raises(ServiceValidationError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, height.attribute_id, payload
        )
    assert db_session.query(UserPreference).count() == 0


def test_weight_preference_uses_grams(db_session: Session):
    weight = make_catalog_attribute(db_session, WEIGHT)

    pref = UserPreferenceService.upsert_preference(
        db_session, USER_ID, weight.attribute_id,
        UserPreferenceUpsert(min_value=2000, max_value=8000),
    )
    assert pref.max_value == 8000

    with pytest.raises(ServiceValidationError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, weight.attribute_id, UserPreferenceUpsert(min_value=100)
        )


def test_unknown_attribute_has_no_range(db_session: Session):
    energy = make_attribute(db_session, "Energy", type_value="float")

    pref = UserPreferenceService.upsert_preference(
        db_session, USER_ID, energy.attribute_id, UserPreferenceUpsert(max_value=9999)
    )
    assert pref.max_value == 9999


def test_categorical_preference_rejections(db_session: Session):
    breed = make_catalog_attribute(db_session, BREED)
    color = make_attribute(db_session, "Color", options=["Red"])

    with pytest.raises(ServiceValidationError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, breed.attribute_id, UserPreferenceUpsert()
        )
    with pytest.raises(ServiceValidationError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, breed.attribute_id,
            UserPreferenceUpsert(option_id=option_id_of(breed, "Corgi"), min_value=1),
        )
    with pytest.raises(NotFoundError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, breed.attribute_id,
            UserPreferenceUpsert(option_id=option_id_of(color, "Red")),
        )


def test_preference_on_missing_or_deleted_attribute(db_session: Session):
    breed = make_catalog_attribute(db_session, BREED)
    corgi = option_id_of(breed, "Corgi")
    AttributeService.delete_attribute(db_session, breed.attribute_id)

    with pytest.raises(NotFoundError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, breed.attribute_id, UserPreferenceUpsert(option_id=corgi)
        )
    with pytest.raises(NotFoundError):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, 999, UserPreferenceUpsert(option_id=corgi)
        )


# =============================================================================
# LISTING / DELETING
# =============================================================================


def test_get_preferences_ordered_and_scoped(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)
    breed = make_catalog_attribute(db_session, BREED)
    weight = make_catalog_attribute(db_session, WEIGHT)

    UserPreferenceService.upsert_preference(
        db_session, USER_ID, weight.attribute_id, UserPreferenceUpsert(min_value=1000)
    )
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, height.attribute_id, UserPreferenceUpsert(max_value=30)
    )
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, breed.attribute_id,
        UserPreferenceUpsert(option_id=option_id_of(breed, "Poodle")),
    )
    UserPreferenceService.upsert_preference(
        db_session, OTHER_USER_ID, height.attribute_id, UserPreferenceUpsert(max_value=20)
    )

    prefs = UserPreferenceService.get_preferences(db_session, USER_ID)

    assert [p.attribute_id for p in prefs] == [
        height.attribute_id,
        breed.attribute_id,
        weight.attribute_id,
    ]
    assert UserPreferenceService.get_preferences(db_session, 999) == []


def test_delete_and_clear_preferences(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)
    weight = make_catalog_attribute(db_session, WEIGHT)
    for attribute in (height, weight):
        UserPreferenceService.upsert_preference(
            db_session, USER_ID, attribute.attribute_id, UserPreferenceUpsert(min_value=500 if attribute is weight else 20)
        )

    assert UserPreferenceService.delete_preference(db_session, USER_ID, height.attribute_id)
    assert not UserPreferenceService.delete_preference(db_session, USER_ID, height.attribute_id)
    assert UserPreferenceService.get_preference(db_session, USER_ID, height.attribute_id) is None
    assert UserPreferenceService.clear_preferences(db_session, USER_ID) == 1


# =============================================================================
# BATCH UPSERT
# =============================================================================


def test_batch_upsert_reports_counts(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)
    weight = make_catalog_attribute(db_session, WEIGHT)
    breed = make_catalog_attribute(db_session, BREED)
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, height.attribute_id, UserPreferenceUpsert(max_value=30)
    )
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, weight.attribute_id, UserPreferenceUpsert(max_value=5000)
    )

    result = UserPreferenceService.upsert_batch(
        db_session,
        USER_ID,
        UserPreferenceBatchRequest(
            preferences=[
                UserPreferenceBatchItem(attribute_id=weight.attribute_id, min_value=1000, max_value=4000),
                UserPreferenceBatchItem(attribute_id=breed.attribute_id, option_id=option_id_of(breed, "Shiba Inu")),
            ]
        ),
    )

    assert (result.created, result.updated, result.deleted) == (1, 1, 1)
    prefs = UserPreferenceService.get_preferences(db_session, USER_ID)
    assert {p.attribute_id for p in prefs} == {weight.attribute_id, breed.attribute_id}


def test_batch_upsert_validates_everything_first(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, height.attribute_id, UserPreferenceUpsert(max_value=30)
    )

    bad_batches = [
        [
            UserPreferenceBatchItem(attribute_id=height.attribute_id, max_value=25),
            UserPreferenceBatchItem(attribute_id=height.attribute_id, max_value=26),
        ],
        [UserPreferenceBatchItem(attribute_id=999, max_value=1)],
        [UserPreferenceBatchItem(attribute_id=height.attribute_id, min_value=39, max_value=16)],
    ]
    for items in bad_batches:
        with pytest.raises(ServiceValidationError):
            UserPreferenceService.upsert_batch(
                db_session, USER_ID, UserPreferenceBatchRequest(preferences=items)
            )

    prefs = UserPreferenceService.get_preferences(db_session, USER_ID)
    assert [(p.attribute_id, p.max_value) for p in prefs] == [(height.attribute_id, 30)]


def test_empty_batch_clears_all(db_session: Session):
    height = make_catalog_attribute(db_session, HEIGHT)
    UserPreferenceService.upsert_preference(
        db_session, USER_ID, height.attribute_id, UserPreferenceUpsert(max_value=30)
    )

    result = UserPreferenceService.upsert_batch(
        db_session, USER_ID, UserPreferenceBatchRequest(preferences=[])
    )

    assert (result.created, result.updated, result.deleted) == (0, 0, 1)
    assert UserPreferenceService.get_preferences(db_session, USER_ID) == []


# =============================================================================
# PET CHARACTERISTICS
# =============================================================================


def test_characteristic_numeric_value(db_session: Session):
    weight = make_catalog_attribute(db_session, WEIGHT)

    row = PetCharacteristicService.upsert_characteristic(
        db_session, PET_ID, weight.attribute_id, PetCharacteristicUpsert(value=4.5)
    )
    row = PetCharacteristicService.upsert_characteristic(
        db_session, PET_ID, weight.attribute_id, PetCharacteristicUpsert(value=5.0)
    )

    assert row.value == 5.0
    assert row.name == "Cân nặng"
    assert row.unit == "kg"
    assert db_session.query(PetCharacteristic).count() == 1


def test_characteristic_categorical_value(db_session: Session):
    breed = make_catalog_attribute(db_session, BREED)

    row = PetCharacteristicService.upsert_characteristic(
        db_session, PET_ID, breed.attribute_id,
        PetCharacteristicUpsert(option_id=option_id_of(breed, "Corgi")),
    )

    assert row.option_value == "Corgi"
    assert row.value is None


def test_characteristic_rejections(db_session: Session):
    weight = make_catalog_attribute(db_session, WEIGHT)
    breed = make_catalog_attribute(db_session, BREED)

    with pytest.raises(ServiceValidationError):
        PetCharacteristicService.upsert_characteristic(
            db_session, PET_ID, weight.attribute_id, PetCharacteristicUpsert(value=20)
        )
    with pytest.raises(ServiceValidationError):
        PetCharacteristicService.upsert_characteristic(
            db_session, PET_ID, weight.attribute_id, PetCharacteristicUpsert()
        )
    with pytest.raises(ServiceValidationError):
        PetCharacteristicService.upsert_characteristic(
            db_session, PET_ID, breed.attribute_id, PetCharacteristicUpsert(value=1)
        )
    with pytest.raises(NotFoundError):
        PetCharacteristicService.upsert_characteristic(
            db_session, PET_ID, breed.attribute_id, PetCharacteristicUpsert(option_id=999)
        )
    with pytest.raises(NotFoundError):
        PetCharacteristicService.upsert_characteristic(
            db_session, PET_ID, 999, PetCharacteristicUpsert(value=1)
        )
    assert db_session.query(PetCharacteristic).count() == 0


def test_characteristics_listed_in_attribute_order(db_session: Session):
    weight = make_catalog_attribute(db_session, WEIGHT)
    height = make_catalog_attribute(db_session, HEIGHT)

    PetCharacteristicService.upsert_characteristic(
        db_session, PET_ID, height.attribute_id, PetCharacteristicUpsert(value=30)
    )
    PetCharacteristicService.upsert_characteristic(
        db_session, PET_ID, weight.attribute_id, PetCharacteristicUpsert(value=3)
    )

    rows = PetCharacteristicService.get_characteristics(db_session, PET_ID)
    assert [r.attribute_id for r in rows] == [weight.attribute_id, height.attribute_id]
    assert PetCharacteristicService.delete_characteristic(db_session, PET_ID, weight.attribute_id)
    assert PetCharacteristicService.get_characteristic(db_session, PET_ID, weight.attribute_id) is None
