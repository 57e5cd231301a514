"""
Tests for the default catalog seed.
"""

from sqlalchemy.orm import Session

from test_fixtures import make_attribute
from services.catalog_seed import DEFAULT_CATALOG, seed_default_catalog
from domain.models import Attribute, AttributeOption


def test_seed_creates_catalog_once(db_session: Session):
    first = seed_default_catalog(db_session)
    second = seed_default_catalog(db_session)

    assert first == [entry["name"] for entry in DEFAULT_CATALOG]
    assert second == []
    assert db_session.query(Attribute).count() == len(DEFAULT_CATALOG)
    assert db_session.query(AttributeOption).count() == 5


def test_seed_skips_existing_names(db_session: Session):
    make_attribute(db_session, "Tuổi", type_value="float", unit="tháng")

    created = seed_default_catalog(db_session)

    assert "Tuổi" not in created
    age = db_session.query(Attribute).filter(Attribute.name == "Tuổi").one()
    assert age.unit == "tháng"
