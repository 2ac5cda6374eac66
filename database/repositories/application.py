import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from database.models import Application
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_by_internships(
        self,
        internship_ids: List[Any],
        statuses: List[str]
    ) -> Dict[Any, List[Application]]:
        """
        Fetch applications for many internships in one query.

        Returns a dict keyed by internship id; each list is newest first.
        Internships without matching applications map to an empty list.
        """
        grouped: Dict[Any, List[Application]] = {iid: [] for iid in internship_ids}
        if not internship_ids:
            return grouped

        stmt = (
            select(Application)
            .options(selectinload(Application.student))
            .where(
                Application.internship_id.in_(internship_ids),
                Application.status.in_(statuses)
            )
            .order_by(Application.created_at.desc(), Application.id)
        )
        rows = self._all(stmt)

        for app in rows:
            grouped.setdefault(app.internship_id, []).append(app)

        logger.debug(f"Fetched {len(rows)} applications for {len(internship_ids)} internships")
        return grouped

    def get_for_company(self, application_id: Any, company_id: Any) -> Optional[Application]:
        """Return the application with student and internship loaded, if owned by the company."""
        stmt = (
            select(Application)
            .options(joinedload(Application.student), joinedload(Application.internship))
            .where(
                Application.id == application_id,
                Application.company_id == company_id
            )
        )
        return self._one_or_none(stmt)
