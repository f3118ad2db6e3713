"""Resource ownership checks for update and delete routes."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from propconnect.errors import Forbidden, NotFound
from propconnect.services.tokens import TokenIdentity


class OwnershipGuard:
    """Loads a resource and refuses mutation unless the caller owns it.

    ``owner_field`` names the column holding the owner's user id. It is set
    from the authenticated identity when the resource is created and never
    changes afterwards.

    The check and the following write are not one transaction: a resource
    deleted in between surfaces as a failed write, not as a 404.
    """

    def __init__(self, model: Any, owner_field: str, label: str, logger: logging.Logger | None = None):
        self.model = model
        self.owner_field = owner_field
        self.label = label
        self.logger = logger or logging.getLogger(__name__)

    def load(self, db: Session, resource_id: int) -> Any:
        """Get the resource or raise NotFound."""
        resource = db.get(self.model, resource_id)
        if resource is None:
            raise NotFound(f"{self.label} not found")
        return resource

    def is_owner(self, resource: Any, identity: TokenIdentity) -> bool:
        owner_id = getattr(resource, self.owner_field)
        return owner_id is not None and str(owner_id) == str(identity.id)

    def authorize(self, db: Session, resource_id: int, identity: TokenIdentity, action: str = "modify") -> Any:
        """Return the resource if ``identity`` owns it."""
        resource = self.load(db, resource_id)
        if not self.is_owner(resource, identity):
            self.logger.warning(
                f"User {identity.id} denied {action} on {self.model.__tablename__} {resource_id}"
            )
            raise Forbidden(f"Not authorized to {action} this {self.label.lower()}")
        return resource


def save_owned(db: Session, resource: Any) -> Any:
    """Insert a resource whose owner id came from a token.

    A token can outlive its user; the owner foreign key then fails and the
    caller gets the same 404 as ``/api/auth/me``.
    """
    db.add(resource)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise NotFound("User not found") from None
    db.refresh(resource)
    return resource
