# nuggetbook/api/schemas/__init__.py
from .book import BookSchema, BookCreate, BookUpdate
from .nugget import NuggetSchema, NuggetWithBook, NuggetCreate, NuggetUpdate, FavoriteToggle
from .share import ShareLinkSchema, SaveSharedResponse
from .user import SignUpRequest, SignInRequest, AuthResponse, MeResponse, LibraryStats

__all__ = [
    'BookSchema', 'BookCreate', 'BookUpdate',
    'NuggetSchema', 'NuggetWithBook', 'NuggetCreate', 'NuggetUpdate', 'FavoriteToggle',
    'ShareLinkSchema', 'SaveSharedResponse',
    'SignUpRequest', 'SignInRequest', 'AuthResponse', 'MeResponse', 'LibraryStats',
]
