# nuggetbook/sa/repositories/user.py
from typing import Optional, Dict
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nuggetbook.errors import DuplicateError
from nuggetbook.identity import Identity, require_identity
from nuggetbook.models.book import ReadingStatus
from ..models import User, Book, Nugget, ShareLink
from .base import store_errors

class UserRepository:
    """Repository for managing User entities and the views derived from a user's library."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def create_user(self, email: str, password_hash: str, display_name: Optional[str] = None) -> User:
        """Create a new user.
        
        Args:
            email: Normalized email address
            password_hash: Already hashed password
            display_name: Optional name shown in the UI
            
        Returns:
            The created User object
            
        Raises:
            DuplicateError: If a user with the given email already exists
        """
        if self.get_by_email(email) is not None:
            raise DuplicateError(f"User with email '{email}' already exists")

        user = User(email=email, password_hash=password_hash, display_name=display_name)
        with store_errors(self.session):
            try:
                self.session.add(user)
                self.session.commit()
            except IntegrityError:
                self.session.rollback()
                raise DuplicateError(f"User with email '{email}' already exists")
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        with store_errors(self.session):
            return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        with store_errors(self.session):
            return self.session.query(User).filter(User.email == email).first()

    def get_library_stats(self, identity: Optional[Identity]) -> Dict[str, int]:
        """Counts describing the identity's library.

        Returns:
            Dictionary with total_books, one count per reading status,
            total_nuggets, favorite_nuggets, total_shares and total_share_views
        """
        identity = require_identity(identity)
        user_id = identity.user_id
        with store_errors(self.session):
            status_rows = (
                self.session.query(Book.status, func.count(Book.id))
                .filter(Book.user_id == user_id)
                .group_by(Book.status)
                .all()
            )
            total_nuggets = (
                self.session.query(func.count(Nugget.id))
                .filter(Nugget.user_id == user_id)
                .scalar()
            )
            favorite_nuggets = (
                self.session.query(func.count(Nugget.id))
                .filter(Nugget.user_id == user_id, Nugget.is_favorite.is_(True))
                .scalar()
            )
            total_shares, total_views = (
                self.session.query(func.count(ShareLink.id), func.coalesce(func.sum(ShareLink.view_count), 0))
                .filter(ShareLink.created_by == user_id)
                .one()
            )

        by_status = {status.value: 0 for status in ReadingStatus}
        for status, count in status_rows:
            by_status[status] = count

        return {
            'total_books': sum(by_status.values()),
            **by_status,
            'total_nuggets': total_nuggets or 0,
            'favorite_nuggets': favorite_nuggets or 0,
            'total_shares': total_shares or 0,
            'total_share_views': int(total_views or 0),
        }
