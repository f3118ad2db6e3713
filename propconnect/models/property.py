"""Property models: general listings, rentals and homes for sale."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from propconnect.database import Base
from propconnect.models.mixins import PropertyFieldsMixin, TimestampMixin


class Property(Base, TimestampMixin, PropertyFieldsMixin):
    """General property advertisement, owned by the user who posted it."""

    __tablename__ = "properties"

    id = Column(Integer, primary_key=True, index=True)
    featured = Column(Boolean, nullable=False, default=False, index=True)
    status = Column(String(20), nullable=False)  # 'forSale', 'forRent', 'both'
    agent_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    posted_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    agent = relationship("User", foreign_keys=[agent_id])
    poster = relationship("User", foreign_keys=[posted_by])


class RentalProperty(Base, TimestampMixin, PropertyFieldsMixin):
    """Property offered for rent by an agent."""

    __tablename__ = "rental_properties"

    id = Column(Integer, primary_key=True, index=True)
    available_from = Column(DateTime(timezone=True), nullable=False)
    minimum_lease = Column(Integer, nullable=False)  # months
    deposit = Column(Float, nullable=False)
    pets_allowed = Column(Boolean, nullable=False, default=False)
    furnished = Column(Boolean, nullable=False, default=False)
    utilities = Column(JSON, nullable=False, default=list)
    agent_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    agent = relationship("User")


class BuyProperty(Base, TimestampMixin, PropertyFieldsMixin):
    """Property offered for sale by an agent."""

    __tablename__ = "buy_properties"

    id = Column(Integer, primary_key=True, index=True)
    year_built = Column(Integer, nullable=True)
    parking_spaces = Column(Integer, nullable=False, default=0)
    property_tax = Column(Float, nullable=True)
    # 'ready', 'underConstruction', 'preConstruction'
    construction_status = Column(String(30), nullable=False)
    possession = Column(DateTime(timezone=True), nullable=True)
    builder = Column(String(255), nullable=True)
    rera_id = Column(String(100), nullable=True)
    floor_plan = Column(JSON, nullable=False, default=list)
    agent_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    agent = relationship("User")
