import uuid

from sqlalchemy import Column, Text, Boolean, Integer, JSON, TIMESTAMP, Uuid, func, Index
from sqlalchemy.orm import relationship

from .base import Base


class User(Base):
    """
    User account. Students carry their profile inline.

    education is a JSON list of entries shaped like
    {"institution", "degree", "fieldOfStudy", "startDate", "endDate", "cgpa", "current"}.
    """
    __tablename__ = 'users'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    role = Column(Text, nullable=False)  # student|company|admin
    is_active = Column(Boolean, nullable=False, default=True)

    # Student profile
    name = Column(Text)
    university = Column(Text)
    major = Column(Text)
    graduation_year = Column(Integer)
    skills = Column(JSON, default=list)
    education = Column(JSON, default=list)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    applications = relationship("Application", back_populates="student")

    __table_args__ = (
        Index('idx_users_role', 'role'),
    )
