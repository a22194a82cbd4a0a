# nuggetbook/api/schemas/book.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from nuggetbook.models.book import ReadingStatus

class BookBase(BaseModel):
    title: str = Field(min_length=1)
    author: Optional[str] = None
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    isbn: Optional[str] = None
    total_pages: Optional[int] = Field(default=None, ge=0)
    cover_url: Optional[str] = None

class BookCreate(BookBase):
    current_page: int = Field(default=0, ge=0)
    status: ReadingStatus = ReadingStatus.TO_READ

class BookUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    author: Optional[str] = None
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    isbn: Optional[str] = None
    total_pages: Optional[int] = Field(default=None, ge=0)
    current_page: Optional[int] = Field(default=None, ge=0)
    status: Optional[ReadingStatus] = None
    cover_url: Optional[str] = None

class BookSchema(BookBase):
    id: int
    current_page: int
    status: ReadingStatus
    progress: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class BookSummary(BaseModel):
    id: int
    title: str
    author: Optional[str] = None
    cover_url: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
