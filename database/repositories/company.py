from typing import Any, Optional
from sqlalchemy import select

from database.models import Company
from database.repositories.base import BaseRepository


class CompanyRepository(BaseRepository):
    def get_by_id(self, company_id: Any) -> Optional[Company]:
        return self._one_or_none(select(Company).where(Company.id == company_id))
