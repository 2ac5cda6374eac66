from .base import Base
from .user import User
from .company import Company
from .internship import Internship
from .application import Application

__all__ = [
    'Base',
    'User',
    'Company',
    'Internship',
    'Application',
]
