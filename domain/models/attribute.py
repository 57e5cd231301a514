"""
Attribute catalog models.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Boolean,
    Numeric,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    Index,
    text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Attribute(Base):
    """
    Comparable trait used to describe pets and to express matching preferences.

    ``percent`` is the trait's weight in the filter suggestion; 0 means the
    attribute is never suggested.
    """

    __tablename__ = "attribute"

    attribute_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    type_value = Column(String(50), nullable=False)
    unit = Column(String(20))
    percent = Column(Numeric(5, 2), nullable=False, default=0, server_default="0")
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    options = relationship(
        "AttributeOption",
        back_populates="attribute",
        cascade="all, delete-orphan",
        order_by="AttributeOption.option_id",
    )
    user_preferences = relationship(
        "UserPreference", back_populates="attribute", cascade="all, delete-orphan"
    )
    pet_characteristics = relationship(
        "PetCharacteristic", back_populates="attribute", cascade="all, delete-orphan"
    )

    __table_args__ = (
        CheckConstraint(
            "type_value IN ('string', 'float')", name="ck_attribute_type_value"
        ),
        CheckConstraint(
            "percent >= 0 AND percent <= 100", name="ck_attribute_percent_range"
        ),
    )

    @property
    def active_options(self):
        return [o for o in self.options if not o.is_deleted]

    def __repr__(self):
        return f"<Attribute(id={self.attribute_id}, name='{self.name}', percent={self.percent})>"


# Authoritative guard for name uniqueness among live attributes
Index(
    "uq_attribute_active_name",
    func.lower(Attribute.name),
    unique=True,
    postgresql_where=text("is_deleted = false"),
    sqlite_where=text("is_deleted = 0"),
)


class AttributeOption(Base):
    """Categorical value belonging to a single attribute"""

    __tablename__ = "attribute_option"

    option_id = Column(Integer, primary_key=True, autoincrement=True)
    attribute_id = Column(
        Integer,
        ForeignKey("attribute.attribute_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False, server_default=text("false"))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    attribute = relationship("Attribute", back_populates="options")

    def __repr__(self):
        return f"<AttributeOption(id={self.option_id}, attribute_id={self.attribute_id}, name='{self.name}')>"
