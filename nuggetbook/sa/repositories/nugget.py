# nuggetbook/sa/repositories/nugget.py
from typing import Optional, List, Dict, Any
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from nuggetbook.errors import NotFoundError, DuplicateError
from nuggetbook.identity import Identity, require_identity
from nuggetbook.models.share import SharedBook, SharedNuggetContent
from nuggetbook.utils.tags import parse_tags
from ..models import Book, Nugget
from .base import store_errors, store_message, check_fields, check_not_null, finish

NUGGET_FIELDS = ('book_id', 'content', 'page_number', 'note', 'tags', 'is_favorite')
NOT_NULL_NUGGET_FIELDS = ('book_id', 'content', 'tags', 'is_favorite')

DUPLICATE_NUGGET_CONSTRAINT = 'uix_nugget_user_book_content'

DUPLICATE_NUGGET_MESSAGE = "You already have this nugget in your library"

def is_duplicate_nugget(error: IntegrityError) -> bool:
    """Whether an IntegrityError is the (user, book, content) uniqueness violation"""
    message = store_message(error)
    # Postgres names the constraint, SQLite lists its columns
    return (
        DUPLICATE_NUGGET_CONSTRAINT in message
        or "nugget.user_id, nugget.book_id, nugget.content" in message
    )

class NuggetRepository:
    def __init__(self, session: Session):
        self.session = session

    def _owned(self, identity: Optional[Identity]):
        identity = require_identity(identity)
        return self.session.query(Nugget).filter(Nugget.user_id == identity.user_id)

    def _owned_book(self, identity: Identity, book_id: int) -> Book:
        with store_errors(self.session):
            book = (
                self.session.query(Book)
                .filter(Book.id == book_id, Book.user_id == identity.user_id)
                .first()
            )
        if book is None:
            raise NotFoundError(f"Book {book_id} not found")
        return book

    def list_nuggets(self, identity: Optional[Identity]) -> List[Nugget]:
        """All nuggets of the user with their book loaded, newest first"""
        with store_errors(self.session):
            return (
                self._owned(identity)
                .options(joinedload(Nugget.book))
                .order_by(desc(Nugget.created_at), desc(Nugget.id))
                .all()
            )

    def list_by_book(self, identity: Optional[Identity], book_id: int) -> List[Nugget]:
        with store_errors(self.session):
            return (
                self._owned(identity)
                .filter(Nugget.book_id == book_id)
                .order_by(desc(Nugget.created_at), desc(Nugget.id))
                .all()
            )

    def list_favorites(self, identity: Optional[Identity]) -> List[Nugget]:
        with store_errors(self.session):
            return (
                self._owned(identity)
                .filter(Nugget.is_favorite.is_(True))
                .options(joinedload(Nugget.book))
                .order_by(desc(Nugget.created_at), desc(Nugget.id))
                .all()
            )

    def get_nugget(self, identity: Optional[Identity], nugget_id: int) -> Nugget:
        with store_errors(self.session):
            nugget = (
                self._owned(identity)
                .filter(Nugget.id == nugget_id)
                .options(joinedload(Nugget.book))
                .first()
            )
        if nugget is None:
            raise NotFoundError(f"Nugget {nugget_id} not found")
        return nugget

    def create_nugget(self, identity: Optional[Identity], data: Dict[str, Any], commit: bool = True) -> Nugget:
        """Create a nugget under one of the identity's books.

        Args:
            identity: Acting user
            data: Nugget fields; book_id and content are required
            commit: Flush only, leaving the transaction to the caller, when False

        Returns:
            The created Nugget

        Raises:
            NotFoundError: If the book is not owned by the identity
            DuplicateError: If the same content already exists under the book
        """
        identity = require_identity(identity)
        check_fields(data, NUGGET_FIELDS, 'nugget')
        check_not_null(data, ('is_favorite',), 'nugget')
        content = data.get('content')
        if not content or not content.strip():
            raise ValueError("Nugget content is required")
        if data.get('book_id') is None:
            raise ValueError("Nugget book_id is required")

        self._owned_book(identity, data['book_id'])

        values = dict(data)
        values['tags'] = parse_tags(values.get('tags'))
        nugget = Nugget(user_id=identity.user_id, **values)
        with store_errors(self.session):
            try:
                self.session.add(nugget)
                finish(self.session, commit)
            except IntegrityError as e:
                if not is_duplicate_nugget(e):
                    raise
                self.session.rollback()
                raise DuplicateError(DUPLICATE_NUGGET_MESSAGE)
        return nugget

    def update_nugget(self, identity: Optional[Identity], nugget_id: int, updates: Dict[str, Any]) -> Nugget:
        check_fields(updates, NUGGET_FIELDS, 'nugget')
        check_not_null(updates, NOT_NULL_NUGGET_FIELDS, 'nugget')
        if 'content' in updates and not updates['content'].strip():
            raise ValueError("Nugget content is required")
        nugget = self.get_nugget(identity, nugget_id)
        values = dict(updates)
        if 'book_id' in values:
            self._owned_book(require_identity(identity), values['book_id'])
        if 'tags' in values:
            values['tags'] = parse_tags(values['tags'])
        with store_errors(self.session):
            try:
                for field, value in values.items():
                    setattr(nugget, field, value)
                self.session.commit()
            except IntegrityError as e:
                if not is_duplicate_nugget(e):
                    raise
                self.session.rollback()
                raise DuplicateError(DUPLICATE_NUGGET_MESSAGE)
        return nugget

    def toggle_favorite(self, identity: Optional[Identity], nugget_id: int, current_status: bool) -> Nugget:
        """Set the favorite flag to the opposite of current_status"""
        return self.update_nugget(identity, nugget_id, {'is_favorite': not current_status})

    def delete_nugget(self, identity: Optional[Identity], nugget_id: int) -> None:
        nugget = self.get_nugget(identity, nugget_id)
        with store_errors(self.session):
            self.session.delete(nugget)
            self.session.commit()

    def find_by_content(self, identity: Optional[Identity], book_id: int, content: str) -> Optional[Nugget]:
        with store_errors(self.session):
            return (
                self._owned(identity)
                .filter(Nugget.book_id == book_id, Nugget.content == content)
                .first()
            )

    def get_shared_nugget_data(self, nugget_id: int) -> Optional[tuple[SharedNuggetContent, SharedBook]]:
        """Privileged lookup behind a share link.

        Not scoped to any identity. Only public-safe fields of the nugget and its
        book leave this method.

        Returns:
            (nugget content, book) or None if the nugget no longer exists
        """
        with store_errors(self.session):
            nugget = (
                self.session.query(Nugget)
                .filter(Nugget.id == nugget_id)
                .options(joinedload(Nugget.book))
                .first()
            )
        if nugget is None:
            return None
        return (
            SharedNuggetContent.model_validate(nugget),
            SharedBook.model_validate(nugget.book),
        )
