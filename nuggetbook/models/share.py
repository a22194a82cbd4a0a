# nuggetbook/models/share.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List

class SharedBook(BaseModel):
    """Public-safe fields of the book behind a shared nugget"""
    title: str
    author: Optional[str] = None
    cover_url: Optional[str] = None
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    isbn: Optional[str] = None
    total_pages: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

class SharedNuggetContent(BaseModel):
    content: str
    page_number: Optional[int] = None
    note: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

class SharedNugget(BaseModel):
    share_id: str
    view_count: int
    nugget: SharedNuggetContent
    book: SharedBook
