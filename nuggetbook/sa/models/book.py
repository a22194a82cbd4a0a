# nuggetbook/sa/models/book.py
from sqlalchemy import String, Integer, Text, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin
from nuggetbook.models.book import ReadingStatus
from nuggetbook.utils.reading_progress import reading_progress

BOOK_STATUSES = tuple(status.value for status in ReadingStatus)

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str | None] = mapped_column(String(500), nullable=True)
    publisher: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Free-form: Google Books returns "2016", "2016-01" or "2016-01-05"
    published_date: Mapped[str | None] = mapped_column(String(20), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    total_pages: Mapped[int | None] = mapped_column(Integer, nullable=True)
    current_page: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ReadingStatus.TO_READ.value)
    cover_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    user = relationship('User', back_populates='books')
    nuggets = relationship('Nugget', back_populates='book', cascade='all, delete-orphan')

    __table_args__ = (
        CheckConstraint(
            "status IN ({})".format(", ".join(f"'{s}'" for s in BOOK_STATUSES)),
            name='ck_book_status'
        ),
        Index('idx_book_user_isbn', 'user_id', 'isbn'),
        Index('idx_book_user_title_author', 'user_id', 'title', 'author'),
        Index('idx_book_user_status', 'user_id', 'status'),
    )

    @property
    def progress(self) -> int:
        """Reading progress as a whole percentage"""
        return reading_progress(self.current_page, self.total_pages)
