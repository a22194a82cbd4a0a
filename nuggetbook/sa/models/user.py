# nuggetbook/sa/models/user.py
from datetime import datetime, UTC
from sqlalchemy import Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Relationships
    books = relationship('Book', back_populates='user', cascade='all, delete-orphan')
    nuggets = relationship('Nugget', back_populates='user', viewonly=True)
    sessions = relationship('UserSession', back_populates='user', cascade='all, delete-orphan')

class UserSession(Base):
    """Bearer token issued on sign-in"""
    __tablename__ = 'user_session'

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))

    user = relationship('User', back_populates='sessions')
