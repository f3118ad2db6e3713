"""Listing schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from propconnect.schemas.base import ApiModel


class ListingAddress(ApiModel):
    street_address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip_code: str = Field(..., min_length=1)


class ListingDetails(ApiModel):
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    area: float = Field(..., ge=0)


class ListingCreate(ApiModel):
    """List a property for sale or rent."""

    list_for: Literal["Sale", "Rent"]
    property_type: str = Field(..., min_length=1, max_length=100)
    asking_price: float = Field(..., gt=0)
    address: ListingAddress
    property_details: ListingDetails
    description: str = Field(..., min_length=1)
    images: list[str] = Field(..., min_length=1)


class ListingResponse(ListingCreate):
    id: int
    posted_by: int
    posted_at: datetime


class ListingCreatedResponse(ApiModel):
    message: str
    listing: ListingResponse
