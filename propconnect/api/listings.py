"""Listing API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from propconnect.api.dependencies import CurrentIdentity
from propconnect.database import get_db
from propconnect.models.listing import ListingProperty
from propconnect.schemas.listing import ListingCreate, ListingCreatedResponse, ListingResponse
from propconnect.services.ownership import OwnershipGuard, save_owned

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/listing-properties", tags=["listings"])

listing_guard = OwnershipGuard(ListingProperty, owner_field="posted_by", label="Listing")


@router.post("", response_model=ListingCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_listing(
    listing_data: ListingCreate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """List a property for sale or rent as the current user."""
    listing = ListingProperty(
        list_for=listing_data.list_for,
        property_type=listing_data.property_type,
        asking_price=listing_data.asking_price,
        address=listing_data.address.model_dump(by_alias=True),
        property_details=listing_data.property_details.model_dump(by_alias=True),
        description=listing_data.description,
        images=listing_data.images,
        posted_by=int(identity.id),
    )
    save_owned(db, listing)
    logger.info(f"User {identity.id} created listing {listing.id}")

    return ListingCreatedResponse(
        message="Property listed successfully!",
        listing=ListingResponse.model_validate(listing),
    )


@router.get("/{listing_id}", response_model=ListingResponse)
def get_listing(listing_id: int, db: Annotated[Session, Depends(get_db)]):
    """Get a specific listing."""
    return listing_guard.load(db, listing_id)


@router.delete("/{listing_id}")
def delete_listing(
    listing_id: int,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Withdraw a listing (poster only)."""
    listing = listing_guard.authorize(db, listing_id, identity, action="delete")
    db.delete(listing)
    db.commit()
    return {"message": "Listing deleted successfully"}
