#!/usr/bin/env python3
"""
FastAPI dependencies: database sessions and scoring configuration.
"""

from functools import lru_cache
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from core.config_loader import RecommendationConfig
from .config import get_config


@lru_cache()
def get_session_factory() -> sessionmaker:
    """Build the engine on first use from the configured database URL."""
    engine = create_engine(get_config().database.url, pool_pre_ping=True)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Yield a request-scoped session, closed when the request finishes.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


def get_recommendation_config() -> RecommendationConfig:
    return get_config().recommendation
