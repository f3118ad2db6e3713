"""Tour booking model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from propconnect.database import Base
from propconnect.models.mixins import TimestampMixin


class TourBooking(Base, TimestampMixin):
    """A user's request to tour a rental or for-sale property."""

    __tablename__ = "tour_bookings"

    id = Column(Integer, primary_key=True, index=True)
    # Points at rental_properties or buy_properties depending on property_type
    property_id = Column(Integer, nullable=False)
    property_type = Column(String(10), nullable=False)  # 'rental' or 'buy'
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    tour_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # 'pending', 'confirmed', 'cancelled'

    user = relationship("User", backref="tour_bookings")
