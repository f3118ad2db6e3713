"""Property schemas for general, rental and for-sale properties."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from propconnect.schemas.base import ApiModel

PropertyStatus = Literal["forSale", "forRent", "both"]
ConstructionStatus = Literal["ready", "underConstruction", "preConstruction"]


class PropertyFields(ApiModel):
    """Fields every property advertisement carries."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    location: str = Field(..., min_length=1, max_length=255)
    bedrooms: int = Field(..., ge=0)
    bathrooms: int = Field(..., ge=0)
    area: float = Field(..., ge=0)
    property_type: str = Field(..., min_length=1, max_length=100)
    images: list[str] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)


class PropertyFieldsUpdate(ApiModel):
    """Partial update of the shared fields. Owner fields are not accepted."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    price: float | None = Field(None, ge=0)
    location: str | None = Field(None, min_length=1, max_length=255)
    bedrooms: int | None = Field(None, ge=0)
    bathrooms: int | None = Field(None, ge=0)
    area: float | None = Field(None, ge=0)
    property_type: str | None = Field(None, min_length=1, max_length=100)
    images: list[str] | None = None
    amenities: list[str] | None = None


class PropertyCreate(PropertyFields):
    """Create a general property. The poster comes from the token."""

    featured: bool = False
    status: PropertyStatus


class PropertyUpdate(PropertyFieldsUpdate):
    featured: bool | None = None
    status: PropertyStatus | None = None


class PropertyResponse(PropertyFields):
    """General property response."""

    id: int
    featured: bool
    status: str
    agent_id: int
    posted_by: int
    created_at: datetime
    updated_at: datetime


class RentalPropertyCreate(PropertyFields):
    """Create a rental property. The agent comes from the token."""

    available_from: datetime
    minimum_lease: int = Field(..., ge=0)
    deposit: float = Field(..., ge=0)
    pets_allowed: bool = False
    furnished: bool = False
    utilities: list[str] = Field(default_factory=list)


class RentalPropertyUpdate(PropertyFieldsUpdate):
    available_from: datetime | None = None
    minimum_lease: int | None = Field(None, ge=0)
    deposit: float | None = Field(None, ge=0)
    pets_allowed: bool | None = None
    furnished: bool | None = None
    utilities: list[str] | None = None


class AgentSummary(ApiModel):
    id: int
    name: str
    email: str


class RentalPropertyResponse(RentalPropertyCreate):
    """Rental property response with the agent's public details."""

    id: int
    agent_id: int
    agent: AgentSummary | None = None
    created_at: datetime
    updated_at: datetime


class BuyPropertyCreate(PropertyFields):
    """Create a property for sale. The agent comes from the token."""

    year_built: int | None = None
    parking_spaces: int = Field(0, ge=0)
    property_tax: float | None = Field(None, ge=0)
    construction_status: ConstructionStatus
    possession: datetime | None = None
    builder: str | None = Field(None, max_length=255)
    rera_id: str | None = Field(None, max_length=100)
    floor_plan: list[str] = Field(default_factory=list)


class BuyPropertyUpdate(PropertyFieldsUpdate):
    year_built: int | None = None
    parking_spaces: int | None = Field(None, ge=0)
    property_tax: float | None = Field(None, ge=0)
    construction_status: ConstructionStatus | None = None
    possession: datetime | None = None
    builder: str | None = Field(None, max_length=255)
    rera_id: str | None = Field(None, max_length=100)
    floor_plan: list[str] | None = None


class BuyPropertyResponse(BuyPropertyCreate):
    """For-sale property response."""

    id: int
    agent_id: int
    created_at: datetime
    updated_at: datetime
