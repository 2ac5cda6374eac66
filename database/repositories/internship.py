from typing import Any, List, Optional
from sqlalchemy import select

from database.models import Internship
from database.repositories.base import BaseRepository


class InternshipRepository(BaseRepository):
    def get_open_for_company(
        self,
        company_id: Any,
        statuses: List[str]
    ) -> List[Internship]:
        stmt = select(Internship).where(
            Internship.company_id == company_id,
            Internship.status.in_(statuses),
            Internship.is_active.is_(True)
        ).order_by(Internship.created_at, Internship.id)
        return self._all(stmt)

    def get_for_company(self, internship_id: Any, company_id: Any) -> Optional[Internship]:
        """Return the internship only if it belongs to the company."""
        stmt = select(Internship).where(
            Internship.id == internship_id,
            Internship.company_id == company_id
        )
        return self._one_or_none(stmt)
