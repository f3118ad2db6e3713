"""Agent application API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from propconnect.database import get_db
from propconnect.models.agent_application import AgentApplication
from propconnect.schemas.agent_application import (
    AgentApplicationCreate,
    AgentApplicationResponse,
    AgentApplicationSubmitted,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/becomeagent", tags=["agents"])


@router.post("", response_model=AgentApplicationSubmitted, status_code=status.HTTP_201_CREATED)
def submit_agent_application(
    application_data: AgentApplicationCreate,
    db: Annotated[Session, Depends(get_db)],
):
    """Submit an application to become an agent."""
    application = AgentApplication(**application_data.model_dump(), status="pending")
    db.add(application)
    db.commit()
    db.refresh(application)
    logger.info(f"Agent application {application.id} submitted")

    return AgentApplicationSubmitted(
        message="Agent application submitted successfully",
        application=AgentApplicationResponse.model_validate(application),
    )
