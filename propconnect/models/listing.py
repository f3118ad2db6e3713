"""Listing model for owner-submitted properties."""

from sqlalchemy import JSON, Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from propconnect.database import Base


class ListingProperty(Base):
    """A property a user lists for sale or rent."""

    __tablename__ = "listing_properties"

    id = Column(Integer, primary_key=True, index=True)
    list_for = Column(String(10), nullable=False)  # 'Sale' or 'Rent'
    property_type = Column(String(100), nullable=False)
    asking_price = Column(Float, nullable=False)
    address = Column(JSON, nullable=False)  # streetAddress, city, state, zipCode
    property_details = Column(JSON, nullable=False)  # bedrooms, bathrooms, area
    description = Column(Text, nullable=False)
    images = Column(JSON, nullable=False)
    posted_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    posted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    poster = relationship("User")
