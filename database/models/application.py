import uuid

from sqlalchemy import Column, Text, TIMESTAMP, Uuid, ForeignKey, UniqueConstraint, Index, func
from sqlalchemy.orm import relationship

from .base import Base


class Application(Base):
    """A student's application to one internship."""
    __tablename__ = 'application'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    internship_id = Column(Uuid, ForeignKey('internship.id', ondelete='CASCADE'), nullable=False)
    student_id = Column(Uuid, ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    company_id = Column(Uuid, ForeignKey('company.id', ondelete='CASCADE'), nullable=False)

    # pending|reviewed|shortlisted|rejected|accepted|withdrawn
    status = Column(Text, nullable=False, default='pending')
    cover_letter = Column(Text)
    resume_filename = Column(Text)
    resume_path = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, server_default=func.now())

    internship = relationship("Internship", back_populates="applications")
    student = relationship("User", back_populates="applications")

    __table_args__ = (
        UniqueConstraint('internship_id', 'student_id', name='uq_application_internship_student'),
        Index('idx_application_internship_status', 'internship_id', 'status'),
        Index('idx_application_company_status', 'company_id', 'status'),
    )
