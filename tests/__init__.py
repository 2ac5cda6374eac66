#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Database tests run against an in-memory SQLite engine, so no external
database is needed.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

BASE_TIME = datetime(2026, 3, 1, 9, 0, 0, tzinfo=timezone.utc)


def create_test_session() -> Session:
    """Create a Session bound to a fresh in-memory SQLite database with all tables."""
    from database.models import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)()


def add_company(db: Session, name: str = "Acme Labs"):
    from database.models import Company, User

    owner = User(email=f"{uuid.uuid4().hex[:8]}@acme.example", role="company")
    db.add(owner)
    db.flush()

    company = Company(user_id=owner.id, company_name=name)
    db.add(company)
    db.flush()
    return company


def add_student(
    db: Session,
    name: str = "Ada Lovelace",
    skills: Optional[List[str]] = None,
    education: Optional[List[Dict[str, Any]]] = None,
    university: Optional[str] = "State University",
    major: Optional[str] = "Computer Science",
    graduation_year: Optional[int] = 2027
):
    from database.models import User

    student = User(
        email=f"{name.split()[0].lower()}.{uuid.uuid4().hex[:6]}@example.edu",
        role="student",
        name=name,
        skills=skills or [],
        education=education or [],
        university=university,
        major=major,
        graduation_year=graduation_year,
    )
    db.add(student)
    db.flush()
    return student


def add_internship(
    db: Session,
    company,
    title: str = "Frontend Intern",
    skills: Optional[List[str]] = None,
    requirements: str = "",
    status: str = "active",
    is_active: bool = True,
    offset_minutes: int = 0
):
    from database.models import Internship

    internship = Internship(
        company_id=company.id,
        title=title,
        description=f"{title} description",
        requirements=requirements,
        skills=skills or [],
        status=status,
        is_active=is_active,
        created_at=BASE_TIME + timedelta(minutes=offset_minutes),
    )
    db.add(internship)
    db.flush()
    return internship


def add_application(
    db: Session,
    internship,
    student,
    status: str = "pending",
    cover_letter: Optional[str] = None,
    offset_minutes: int = 0
):
    from database.models import Application

    application = Application(
        internship_id=internship.id,
        student_id=student.id if student is not None else None,
        company_id=internship.company_id,
        status=status,
        cover_letter=cover_letter,
        resume_filename="resume.pdf",
        resume_path=f"uploads/resumes/{uuid.uuid4().hex}.pdf",
        created_at=BASE_TIME + timedelta(minutes=offset_minutes),
    )
    db.add(application)
    db.flush()
    return application
