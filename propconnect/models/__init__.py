"""SQLAlchemy models."""

from propconnect.models.agent_application import AgentApplication
from propconnect.models.listing import ListingProperty
from propconnect.models.property import BuyProperty, Property, RentalProperty
from propconnect.models.tour_booking import TourBooking
from propconnect.models.user import User

__all__ = [
    "User",
    "Property",
    "RentalProperty",
    "BuyProperty",
    "ListingProperty",
    "TourBooking",
    "AgentApplication",
]
