# nuggetbook/sa/__init__.py
from .database import Database, get_database, set_database, get_db
from .models import (
    Base, User, UserSession, Book, Nugget, ShareLink
)

__all__ = [
    'Database',
    'get_database',
    'set_database',
    'get_db',
    'Base',
    'User',
    'UserSession',
    'Book',
    'Nugget',
    'ShareLink'
]
