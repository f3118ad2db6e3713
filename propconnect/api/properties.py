"""General property API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from propconnect.api.dependencies import CurrentIdentity
from propconnect.database import get_db
from propconnect.models.property import Property
from propconnect.schemas.property import PropertyCreate, PropertyResponse, PropertyUpdate
from propconnect.services.ownership import OwnershipGuard, save_owned

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties", tags=["properties"])

property_guard = OwnershipGuard(Property, owner_field="posted_by", label="Property")

FEATURED_LIMIT = 6


@router.get("", response_model=list[PropertyResponse])
def get_properties(db: Annotated[Session, Depends(get_db)]):
    """Get all properties, newest first. An empty result is an empty list."""
    return db.query(Property).order_by(Property.created_at.desc(), Property.id.desc()).all()


@router.get("/featured", response_model=list[PropertyResponse])
def get_featured_properties(db: Annotated[Session, Depends(get_db)]):
    """Get the newest featured properties."""
    return (
        db.query(Property)
        .filter(Property.featured == True)  # noqa: E712
        .order_by(Property.created_at.desc(), Property.id.desc())
        .limit(FEATURED_LIMIT)
        .all()
    )


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: int, db: Annotated[Session, Depends(get_db)]):
    """Get a specific property."""
    return property_guard.load(db, property_id)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    property_data: PropertyCreate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a property posted by the current user."""
    prop = Property(
        **property_data.model_dump(),
        agent_id=int(identity.id),
        posted_by=int(identity.id),
    )
    save_owned(db, prop)
    logger.info(f"User {identity.id} created property {prop.id}")
    return prop


@router.put("/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: int,
    property_data: PropertyUpdate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a property (poster only)."""
    prop = property_guard.authorize(db, property_id, identity, action="update")

    for field, value in property_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(prop, field, value)

    db.commit()
    db.refresh(prop)
    return prop


@router.delete("/{property_id}")
def delete_property(
    property_id: int,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a property (poster only)."""
    prop = property_guard.authorize(db, property_id, identity, action="delete")
    deleted = PropertyResponse.model_validate(prop).model_dump(mode="json", by_alias=True)

    db.delete(prop)
    db.commit()
    logger.info(f"User {identity.id} deleted property {property_id}")
    return {"message": "Property deleted successfully.", "property": deleted}
