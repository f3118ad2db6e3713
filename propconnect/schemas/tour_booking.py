"""Tour booking schemas."""

from datetime import datetime
from typing import Literal

from propconnect.schemas.base import ApiModel


class TourBookingCreate(ApiModel):
    """Book a tour of a rental or for-sale property."""

    property_id: int
    property_type: Literal["rental", "buy"]
    tour_date: datetime


class TourBookingResponse(ApiModel):
    id: int
    property_id: int
    property_type: str
    user_id: int
    tour_date: datetime
    status: str
    created_at: datetime
    updated_at: datetime


class BookedPropertySummary(ApiModel):
    id: int
    title: str
    location: str
    images: list[str]


class TourBookingWithProperty(TourBookingResponse):
    """Booking plus a summary of the property, or null if it is gone."""

    property: BookedPropertySummary | None = None
