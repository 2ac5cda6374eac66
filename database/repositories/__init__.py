from database.repositories.base import BaseRepository
from database.repositories.company import CompanyRepository
from database.repositories.internship import InternshipRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'CompanyRepository',
    'InternshipRepository',
    'ApplicationRepository',
]
