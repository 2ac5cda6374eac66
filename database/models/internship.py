import uuid

from sqlalchemy import Column, Text, Boolean, Integer, JSON, TIMESTAMP, Uuid, ForeignKey, func, Index
from sqlalchemy.orm import relationship

from .base import Base


class Internship(Base):
    __tablename__ = 'internship'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    company_id = Column(Uuid, ForeignKey('company.id', ondelete='CASCADE'), nullable=False)

    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default='')
    requirements = Column(Text)
    skills = Column(JSON, default=list)
    location = Column(Text)

    status = Column(Text, nullable=False, default='active')  # draft|active|closed|filled
    is_active = Column(Boolean, nullable=False, default=True)
    applications_count = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    company = relationship("Company", back_populates="internships")
    applications = relationship("Application", back_populates="internship", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_internship_company_status', 'company_id', 'status'),
    )
