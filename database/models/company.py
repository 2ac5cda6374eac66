import uuid

from sqlalchemy import Column, Text, Boolean, TIMESTAMP, Uuid, ForeignKey, func
from sqlalchemy.orm import relationship

from .base import Base


class Company(Base):
    __tablename__ = 'company'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True)
    company_name = Column(Text, nullable=False)
    industry = Column(Text)
    verified = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    internships = relationship("Internship", back_populates="company", cascade="all, delete-orphan")
