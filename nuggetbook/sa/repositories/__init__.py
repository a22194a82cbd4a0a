# nuggetbook/sa/repositories/__init__.py
from .book import BookRepository
from .nugget import NuggetRepository
from .share import ShareRepository
from .user import UserRepository

__all__ = ['BookRepository', 'NuggetRepository', 'ShareRepository', 'UserRepository']
