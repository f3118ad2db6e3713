"""Agent application schemas."""

from datetime import datetime

from pydantic import EmailStr, Field

from propconnect.schemas.base import ApiModel


class AgentApplicationCreate(ApiModel):
    """Apply to become an agent."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr = Field(..., max_length=255)
    phone: str = Field(..., min_length=1, max_length=50)
    experience: float = Field(..., ge=0)
    license_number: str = Field(..., min_length=1, max_length=100)
    about: str | None = Field(None, max_length=5000)


class AgentApplicationResponse(ApiModel):
    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    experience: float
    license_number: str
    about: str | None
    status: str
    submitted_at: datetime


class AgentApplicationSubmitted(ApiModel):
    message: str
    application: AgentApplicationResponse
