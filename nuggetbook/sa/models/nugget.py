# nuggetbook/sa/models/nugget.py
from sqlalchemy import Integer, Text, Boolean, ForeignKey, JSON, UniqueConstraint, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Nugget(Base, TimestampMixin):
    """An excerpt captured from a book"""
    __tablename__ = 'nugget'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)
    book_id: Mapped[int] = mapped_column(ForeignKey('book.id', ondelete='CASCADE'), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    page_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_favorite: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    user = relationship('User', back_populates='nuggets')
    book = relationship('Book', back_populates='nuggets')
    share_links = relationship('ShareLink', back_populates='nugget', cascade='all, delete-orphan')

    __table_args__ = (
        UniqueConstraint('user_id', 'book_id', 'content', name='uix_nugget_user_book_content'),
        Index('idx_nugget_user_favorite', 'user_id', 'is_favorite'),
        Index('idx_nugget_book_id', 'book_id'),
    )
