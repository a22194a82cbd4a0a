# nuggetbook/sa/models/__init__.py
from .base import Base, TimestampMixin
from .user import User, UserSession
from .book import Book, BOOK_STATUSES
from .nugget import Nugget
from .share import ShareLink

__all__ = [
    'Base',
    'TimestampMixin',
    'User',
    'UserSession',
    'Book',
    'BOOK_STATUSES',
    'Nugget',
    'ShareLink'
]
