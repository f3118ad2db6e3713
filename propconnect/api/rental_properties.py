"""Rental property API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from propconnect.api.dependencies import CurrentIdentity
from propconnect.database import get_db
from propconnect.models.property import RentalProperty
from propconnect.schemas.property import (
    RentalPropertyCreate,
    RentalPropertyResponse,
    RentalPropertyUpdate,
)
from propconnect.services.ownership import OwnershipGuard, save_owned

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/rental-properties", tags=["rental-properties"])

rental_guard = OwnershipGuard(RentalProperty, owner_field="agent_id", label="Rental property")

NEWLY_ADDED_LIMIT = 4


@router.get("/newly-added", response_model=list[RentalPropertyResponse])
def get_newly_added(db: Annotated[Session, Depends(get_db)]):
    """Get the most recently added rentals."""
    return (
        db.query(RentalProperty)
        .order_by(RentalProperty.created_at.desc(), RentalProperty.id.desc())
        .limit(NEWLY_ADDED_LIMIT)
        .all()
    )


@router.get("", response_model=list[RentalPropertyResponse])
def get_rental_properties(db: Annotated[Session, Depends(get_db)]):
    """Get all rental properties."""
    return db.query(RentalProperty).order_by(RentalProperty.id).all()


@router.get("/{property_id}", response_model=RentalPropertyResponse)
def get_rental_property(property_id: int, db: Annotated[Session, Depends(get_db)]):
    """Get a single rental property."""
    return rental_guard.load(db, property_id)


@router.post("", response_model=RentalPropertyResponse, status_code=status.HTTP_201_CREATED)
def create_rental_property(
    property_data: RentalPropertyCreate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a rental property managed by the current user."""
    rental = RentalProperty(**property_data.model_dump(), agent_id=int(identity.id))
    save_owned(db, rental)
    logger.info(f"User {identity.id} created rental property {rental.id}")
    return rental


@router.put("/{property_id}", response_model=RentalPropertyResponse)
def update_rental_property(
    property_id: int,
    property_data: RentalPropertyUpdate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a rental property (agent only)."""
    rental = rental_guard.authorize(db, property_id, identity, action="update")

    for field, value in property_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(rental, field, value)

    db.commit()
    db.refresh(rental)
    return rental


@router.delete("/{property_id}")
def delete_rental_property(
    property_id: int,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a rental property (agent only)."""
    rental = rental_guard.authorize(db, property_id, identity, action="delete")
    db.delete(rental)
    db.commit()
    logger.info(f"User {identity.id} deleted rental property {property_id}")
    return {"message": "Rental property deleted successfully"}
