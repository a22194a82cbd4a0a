# nuggetbook/sa/models/share.py
from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class ShareLink(Base, TimestampMixin):
    """Maps a public token to a private nugget"""
    __tablename__ = 'shared_nugget'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    share_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    nugget_id: Mapped[int] = mapped_column(ForeignKey('nugget.id', ondelete='CASCADE'), nullable=False)
    created_by: Mapped[int] = mapped_column(ForeignKey('user.id', ondelete='CASCADE'), nullable=False)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Relationships
    nugget = relationship('Nugget', back_populates='share_links')
    creator = relationship('User')

    __table_args__ = (
        Index('idx_shared_nugget_created_by', 'created_by'),
    )
