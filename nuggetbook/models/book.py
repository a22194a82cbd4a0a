# nuggetbook/models/book.py

from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from enum import Enum

class ReadingStatus(str, Enum):
    TO_READ = "toread"
    READING = "reading"
    FINISHED = "finished"

class BookMetadata(BaseModel):
    """A volume from the metadata API, normalized to a fixed shape"""
    google_books_id: Optional[str] = None
    title: str = "Unknown Title"
    subtitle: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    author: str = "Unknown Author"
    publisher: Optional[str] = None
    published_date: Optional[str] = None
    description: Optional[str] = None
    page_count: Optional[int] = None
    categories: List[str] = Field(default_factory=list)
    average_rating: Optional[float] = None
    ratings_count: Optional[int] = None
    image_links: Dict[str, str] = Field(default_factory=dict)
    cover_url: Optional[str] = None
    language: str = "en"
    preview_link: Optional[str] = None
    info_link: Optional[str] = None
    isbn: Optional[str] = None
    isbn13: Optional[str] = None
    isbn10: Optional[str] = None

    def to_book_data(self) -> Dict[str, Any]:
        """Fields accepted by BookRepository.create_book"""
        return {
            "title": self.title,
            "author": self.author,
            "publisher": self.publisher,
            "published_date": self.published_date,
            "isbn": self.isbn,
            "total_pages": self.page_count,
            "cover_url": self.cover_url,
        }
