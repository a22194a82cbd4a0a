# nuggetbook/services/share_service.py
import logging
import secrets
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session

from nuggetbook import config
from nuggetbook.errors import DataAccessError, DuplicateError, NotFoundError
from nuggetbook.identity import Identity, require_identity
from nuggetbook.models.share import SharedNugget
from nuggetbook.sa.models import Book, Nugget, ShareLink
from nuggetbook.sa.repositories import BookRepository, NuggetRepository, ShareRepository
from nuggetbook.sa.repositories.base import store_errors
from nuggetbook.sa.repositories.nugget import DUPLICATE_NUGGET_MESSAGE

logger = logging.getLogger(__name__)

# URL-safe alphabet used for share tokens
SHARE_ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"


def generate_share_id(length: Optional[int] = None) -> str:
    length = length or config.share_id_length()
    return ''.join(secrets.choice(SHARE_ID_ALPHABET) for _ in range(length))


def share_path(share_id: str) -> str:
    return f"/share/{share_id}"


def share_url(share_id: str) -> str:
    """Public URL of a share link"""
    return config.public_origin() + share_path(share_id)


@dataclass
class SaveResult:
    book: Book
    nugget: Nugget
    book_created: bool


class ShareService:
    """Share links for nuggets and saving a shared nugget into another library."""

    def __init__(self, session: Session):
        self.session = session
        self.books = BookRepository(session)
        self.nuggets = NuggetRepository(session)
        self.shares = ShareRepository(session)

    def create_share_link(self, identity: Optional[Identity], nugget_id: int) -> ShareLink:
        """Create a public link for one of the identity's nuggets"""
        link = self.shares.create_share_link(identity, nugget_id, generate_share_id())
        logger.info("Created share link %s for nugget %s", link.share_id, nugget_id)
        return link

    def get_shared_nugget(self, share_id: str) -> SharedNugget:
        """Resolve a share token for public viewing.

        Counts the view. A failure to count is logged and does not fail the read.

        Raises:
            NotFoundError: If the token is unknown or its nugget is gone
        """
        link = self.shares.get_by_share_id(share_id)
        if link is None:
            raise NotFoundError("Share link not found")
        nugget_id = link.nugget_id
        view_count = link.view_count

        try:
            self.shares.increment_view_count(share_id)
            view_count += 1
        except DataAccessError as e:
            logger.warning("Could not count view of share %s: %s", share_id, e)

        data = self.nuggets.get_shared_nugget_data(nugget_id)
        if data is None:
            raise NotFoundError("Shared nugget not found")
        nugget, book = data
        return SharedNugget(share_id=share_id, view_count=view_count, nugget=nugget, book=book)

    def find_equivalent_book(self, identity: Identity, isbn: Optional[str], title: str,
                             author: Optional[str]) -> Optional[Book]:
        """The identity's copy of a book: by ISBN first, then by exact title and author"""
        book = None
        if isbn:
            book = self.books.find_by_isbn(identity, isbn)
        if book is None:
            book = self.books.find_by_title_author(identity, title, author)
        return book

    def save_shared_nugget(self, identity: Optional[Identity], share_id: str) -> SaveResult:
        """Copy a shared nugget, and its book if needed, into the identity's library.

        The book lookup-or-create and the nugget insert commit together; the
        store's unique (user, book, content) constraint catches a concurrent save.

        Raises:
            AuthRequiredError: Without an identity; return_to points back at the share
            NotFoundError: If the token is unknown
            DuplicateError: If the identity already has this nugget under that book
        """
        identity = require_identity(identity, "Must be logged in to save", return_to=share_path(share_id))
        shared = self.get_shared_nugget(share_id)
        source_book = shared.book
        source_nugget = shared.nugget

        book_created = False
        try:
            book = self.find_equivalent_book(identity, source_book.isbn, source_book.title, source_book.author)
            if book is None:
                book = self.books.create_book(identity, {
                    'title': source_book.title,
                    'author': source_book.author,
                    'cover_url': source_book.cover_url,
                    'publisher': source_book.publisher,
                    'published_date': source_book.published_date,
                    'isbn': source_book.isbn,
                    'total_pages': source_book.total_pages,
                }, commit=False)
                book_created = True

            if self.nuggets.find_by_content(identity, book.id, source_nugget.content) is not None:
                raise DuplicateError(DUPLICATE_NUGGET_MESSAGE)

            nugget = self.nuggets.create_nugget(identity, {
                'book_id': book.id,
                'content': source_nugget.content,
                'page_number': source_nugget.page_number,
                'tags': list(source_nugget.tags),
                'note': source_nugget.note,
            }, commit=False)

            with store_errors(self.session):
                self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        logger.info(
            "User %s saved shared nugget %s into book %s%s",
            identity.user_id, share_id, book.id, " (new book)" if book_created else ""
        )
        return SaveResult(book=book, nugget=nugget, book_created=book_created)

    def delete_share_link(self, identity: Optional[Identity], share_id: str) -> None:
        self.shares.delete_share_link(identity, share_id)

    def get_user_shares(self, identity: Optional[Identity]) -> List[ShareLink]:
        return self.shares.list_user_shares(identity)
