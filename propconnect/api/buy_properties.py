"""For-sale property API endpoints, including search."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import or_
from sqlalchemy.orm import Session

from propconnect.api.dependencies import CurrentIdentity
from propconnect.database import get_db
from propconnect.errors import NotFound
from propconnect.models.property import BuyProperty
from propconnect.schemas.property import BuyPropertyCreate, BuyPropertyResponse, BuyPropertyUpdate
from propconnect.services.ownership import OwnershipGuard, save_owned

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/properties/buy", tags=["buy-properties"])

buy_guard = OwnershipGuard(BuyProperty, owner_field="agent_id", label="Buy property")


def _contains(column, term: str):
    return column.ilike(f"%{term}%")


@router.get("", response_model=list[BuyPropertyResponse])
def search_buy_properties(
    db: Annotated[Session, Depends(get_db)],
    search: Annotated[str | None, Query()] = None,
    city: Annotated[str | None, Query()] = None,
    property_type: Annotated[str | None, Query(alias="type")] = None,
):
    """Search properties for sale, newest first.

    Unlike the other list endpoints, no matches is a 404.
    """
    query = db.query(BuyProperty)
    if search:
        query = query.filter(
            or_(
                _contains(BuyProperty.location, search),
                _contains(BuyProperty.title, search),
                _contains(BuyProperty.description, search),
                _contains(BuyProperty.property_type, search),
            )
        )
    if city:
        query = query.filter(_contains(BuyProperty.location, city))
    if property_type:
        query = query.filter(_contains(BuyProperty.property_type, property_type))

    properties = query.order_by(BuyProperty.created_at.desc(), BuyProperty.id.desc()).all()
    logger.debug(f"Buy search search={search!r} city={city!r} type={property_type!r}: {len(properties)}")
    if not properties:
        raise NotFound("No properties found")
    return properties


@router.get("/{property_id}", response_model=BuyPropertyResponse)
def get_buy_property(property_id: int, db: Annotated[Session, Depends(get_db)]):
    """Get a single property for sale."""
    return buy_guard.load(db, property_id)


@router.post("", response_model=BuyPropertyResponse, status_code=status.HTTP_201_CREATED)
def create_buy_property(
    property_data: BuyPropertyCreate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Create a property for sale managed by the current user."""
    prop = BuyProperty(**property_data.model_dump(), agent_id=int(identity.id))
    save_owned(db, prop)
    logger.info(f"User {identity.id} created buy property {prop.id}")
    return prop


@router.put("/{property_id}", response_model=BuyPropertyResponse)
def update_buy_property(
    property_id: int,
    property_data: BuyPropertyUpdate,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Update a property for sale (agent only)."""
    prop = buy_guard.authorize(db, property_id, identity, action="update")

    for field, value in property_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(prop, field, value)

    db.commit()
    db.refresh(prop)
    return prop


@router.delete("/{property_id}")
def delete_buy_property(
    property_id: int,
    identity: CurrentIdentity,
    db: Annotated[Session, Depends(get_db)],
):
    """Delete a property for sale (agent only)."""
    prop = buy_guard.authorize(db, property_id, identity, action="delete")
    db.delete(prop)
    db.commit()
    logger.info(f"User {identity.id} deleted buy property {property_id}")
    return {"message": "Buy property deleted successfully"}
