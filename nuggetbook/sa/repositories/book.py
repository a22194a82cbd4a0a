# nuggetbook/sa/repositories/book.py
from typing import Optional, List, Dict, Any
from sqlalchemy import desc, or_
from sqlalchemy.orm import Session

from nuggetbook.errors import NotFoundError
from nuggetbook.identity import Identity, require_identity
from ..models import Book
from .base import store_errors, check_fields, check_not_null, finish

BOOK_FIELDS = (
    'title', 'author', 'publisher', 'published_date', 'isbn',
    'total_pages', 'current_page', 'status', 'cover_url'
)
NOT_NULL_BOOK_FIELDS = ('title', 'current_page', 'status')

class BookRepository:
    """Books owned by the acting identity.

    Every query is scoped to ``identity.user_id``; a book owned by someone else
    behaves exactly like a missing one.
    """

    def __init__(self, session: Session):
        self.session = session

    def _owned(self, identity: Optional[Identity]):
        identity = require_identity(identity)
        return self.session.query(Book).filter(Book.user_id == identity.user_id)

    def list_books(self, identity: Optional[Identity]) -> List[Book]:
        """All books of the user, newest first"""
        with store_errors(self.session):
            return self._owned(identity).order_by(desc(Book.created_at), desc(Book.id)).all()

    def list_books_by_status(self, identity: Optional[Identity], status: str) -> List[Book]:
        """Books with the given status (toread, reading, finished), newest first"""
        with store_errors(self.session):
            return (
                self._owned(identity)
                .filter(Book.status == status)
                .order_by(desc(Book.created_at), desc(Book.id))
                .all()
            )

    def get_book(self, identity: Optional[Identity], book_id: int) -> Book:
        """Get a single book.

        Raises:
            NotFoundError: If the book does not exist or belongs to another user
        """
        with store_errors(self.session):
            book = self._owned(identity).filter(Book.id == book_id).first()
        if book is None:
            raise NotFoundError(f"Book {book_id} not found")
        return book

    def create_book(self, identity: Optional[Identity], data: Dict[str, Any], commit: bool = True) -> Book:
        """Create a book owned by the identity.

        Args:
            identity: Acting user
            data: Book fields; reading progress defaults to page 0 and status 'toread'
            commit: Flush only, leaving the transaction to the caller, when False

        Returns:
            The created Book
        """
        identity = require_identity(identity)
        check_fields(data, BOOK_FIELDS, 'book')
        check_not_null(data, NOT_NULL_BOOK_FIELDS, 'book')
        if not data.get('title'):
            raise ValueError("Book title is required")

        book = Book(user_id=identity.user_id, **data)
        with store_errors(self.session):
            self.session.add(book)
            finish(self.session, commit)
        return book

    def update_book(self, identity: Optional[Identity], book_id: int, updates: Dict[str, Any]) -> Book:
        check_fields(updates, BOOK_FIELDS, 'book')
        check_not_null(updates, NOT_NULL_BOOK_FIELDS, 'book')
        if 'title' in updates and not updates['title'].strip():
            raise ValueError("Book title is required")
        book = self.get_book(identity, book_id)
        with store_errors(self.session):
            for field, value in updates.items():
                setattr(book, field, value)
            self.session.commit()
        return book

    def delete_book(self, identity: Optional[Identity], book_id: int) -> None:
        """Delete a book; its nuggets and their share links go with it"""
        book = self.get_book(identity, book_id)
        with store_errors(self.session):
            self.session.delete(book)
            self.session.commit()

    def search_books(self, identity: Optional[Identity], query: Optional[str]) -> List[Book]:
        """Case-insensitive substring search over title or author"""
        if not query or not query.strip():
            return self.list_books(identity)
        pattern = f"%{query.strip()}%"
        with store_errors(self.session):
            return (
                self._owned(identity)
                .filter(or_(Book.title.ilike(pattern), Book.author.ilike(pattern)))
                .order_by(desc(Book.created_at), desc(Book.id))
                .all()
            )

    def find_by_isbn(self, identity: Optional[Identity], isbn: str) -> Optional[Book]:
        with store_errors(self.session):
            return self._owned(identity).filter(Book.isbn == isbn).order_by(Book.id).first()

    def find_by_title_author(self, identity: Optional[Identity], title: str, author: Optional[str]) -> Optional[Book]:
        """Exact (title, author) match; a missing author only matches a missing author"""
        with store_errors(self.session):
            query = self._owned(identity).filter(Book.title == title)
            if author is None:
                query = query.filter(Book.author.is_(None))
            else:
                query = query.filter(Book.author == author)
            return query.order_by(Book.id).first()
