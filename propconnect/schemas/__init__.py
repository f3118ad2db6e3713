"""Pydantic schemas for API requests and responses."""

from propconnect.schemas.agent_application import AgentApplicationCreate, AgentApplicationResponse
from propconnect.schemas.auth import AuthResponse, CurrentUserResponse, UserLogin, UserRegister, UserResponse
from propconnect.schemas.listing import ListingCreate, ListingResponse
from propconnect.schemas.property import (
    BuyPropertyCreate,
    BuyPropertyResponse,
    BuyPropertyUpdate,
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
    RentalPropertyCreate,
    RentalPropertyResponse,
    RentalPropertyUpdate,
)
from propconnect.schemas.tour_booking import TourBookingCreate, TourBookingResponse, TourBookingWithProperty
from propconnect.schemas.upload import UploadResponse

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "CurrentUserResponse",
    "PropertyCreate",
    "PropertyUpdate",
    "PropertyResponse",
    "RentalPropertyCreate",
    "RentalPropertyUpdate",
    "RentalPropertyResponse",
    "BuyPropertyCreate",
    "BuyPropertyUpdate",
    "BuyPropertyResponse",
    "ListingCreate",
    "ListingResponse",
    "TourBookingCreate",
    "TourBookingResponse",
    "TourBookingWithProperty",
    "AgentApplicationCreate",
    "AgentApplicationResponse",
    "UploadResponse",
]
