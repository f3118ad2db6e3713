"""Tour booking API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from propconnect.api.dependencies import CurrentIdentity
from propconnect.database import get_db
from propconnect.models.property import BuyProperty, RentalProperty
from propconnect.models.tour_booking import TourBooking
from propconnect.schemas.tour_booking import (
    BookedPropertySummary,
    TourBookingCreate,
    TourBookingResponse,
    TourBookingWithProperty,
)
from propconnect.services.ownership import save_owned

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tour-bookings", tags=["tour-bookings"])

PROPERTY_MODELS = {"rental": RentalProperty, "buy": BuyProperty}


@router.post("", response_model=TourBookingResponse, status_code=status.HTTP_201_CREATED)
def create_tour_booking(
    booking_data: TourBookingCreate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Book a tour for the current user."""
    booking = TourBooking(
        property_id=booking_data.property_id,
        property_type=booking_data.property_type,
        user_id=int(identity.id),
        tour_date=booking_data.tour_date,
        status="pending",
    )
    save_owned(db, booking)
    logger.info(f"User {identity.id} booked tour {booking.id} of {booking.property_type} {booking.property_id}")
    return booking


@router.get("/user", response_model=list[TourBookingWithProperty])
def get_user_tour_bookings(
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Get the current user's bookings, newest first, with property summaries."""
    bookings = (
        db.query(TourBooking)
        .filter(TourBooking.user_id == int(identity.id))
        .order_by(TourBooking.created_at.desc(), TourBooking.id.desc())
        .all()
    )

    result = []
    for booking in bookings:
        entry = TourBookingWithProperty.model_validate(booking)
        model = PROPERTY_MODELS.get(booking.property_type)
        prop = db.get(model, booking.property_id) if model else None
        if prop is not None:
            entry.property = BookedPropertySummary.model_validate(prop)
        result.append(entry)
    return result
