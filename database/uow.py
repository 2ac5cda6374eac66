import contextlib
import logging
from typing import Optional

from sqlalchemy.orm import sessionmaker

from database.database import SessionLocal
from database.repository import RecommendationRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def recommendation_uow(session_factory: Optional[sessionmaker] = None):
    """Per-unit-of-work transaction scope.

    Yields a RecommendationRepository bound to a fresh Session from
    session_factory (the DATABASE_URL default when omitted). Commits on
    success, rolls back on exception, always closes.

    Usage:
        with recommendation_uow() as repo:
            internships = repo.get_open_internships(company_id, ['active'])
    """
    session = (session_factory or SessionLocal)()
    try:
        yield RecommendationRepository(session)
        session.commit()
    except Exception:
        logger.warning("Rolling back recommendation unit of work")
        session.rollback()
        raise
    finally:
        session.close()
