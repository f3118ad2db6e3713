"""Agent application model."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from propconnect.database import Base


class AgentApplication(Base):
    """Application submitted by someone who wants to become an agent."""

    __tablename__ = "agent_applications"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    experience = Column(Float, nullable=False)  # years
    license_number = Column(String(100), nullable=False)
    about = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="pending")  # 'pending', 'approved', 'rejected'
    submitted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
