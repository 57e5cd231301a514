"""
Per-user preference and per-pet characteristic models.

Both tables are keyed by (owner, attribute) so an owner holds at most one
row per attribute. Users and pets live outside this service; their ids are
stored as plain integers.
"""

from sqlalchemy import Column, Integer, Float, TIMESTAMP, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class UserPreference(Base):
    """A user's desired value for one attribute"""

    __tablename__ = "user_preference"

    user_id = Column(Integer, primary_key=True)
    attribute_id = Column(
        Integer,
        ForeignKey("attribute.attribute_id", ondelete="CASCADE"),
        primary_key=True,
    )
    option_id = Column(
        Integer, ForeignKey("attribute_option.option_id", ondelete="SET NULL")
    )
    min_value = Column(Float)
    max_value = Column(Float)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    attribute = relationship("Attribute", back_populates="user_preferences")
    option = relationship("AttributeOption")

    def __repr__(self):
        return f"<UserPreference(user_id={self.user_id}, attribute_id={self.attribute_id})>"


class PetCharacteristic(Base):
    """A pet's measured or chosen value for one attribute"""

    __tablename__ = "pet_characteristic"

    pet_id = Column(Integer, primary_key=True)
    attribute_id = Column(
        Integer,
        ForeignKey("attribute.attribute_id", ondelete="CASCADE"),
        primary_key=True,
    )
    option_id = Column(
        Integer, ForeignKey("attribute_option.option_id", ondelete="SET NULL")
    )
    value = Column(Float)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    attribute = relationship("Attribute", back_populates="pet_characteristics")
    option = relationship("AttributeOption")

    def __repr__(self):
        return f"<PetCharacteristic(pet_id={self.pet_id}, attribute_id={self.attribute_id})>"
