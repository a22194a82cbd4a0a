# nuggetbook/api/schemas/nugget.py
from datetime import datetime
from typing import Optional, List, Union
from pydantic import BaseModel, ConfigDict, Field

from .book import BookSummary

class NuggetCreate(BaseModel):
    book_id: int
    content: str = Field(min_length=1)
    page_number: Optional[int] = Field(default=None, ge=0)
    note: Optional[str] = None
    # "a, b" as typed in a form, or a list
    tags: Union[str, List[str], None] = None
    is_favorite: bool = False

class NuggetUpdate(BaseModel):
    book_id: Optional[int] = None
    content: Optional[str] = Field(default=None, min_length=1)
    page_number: Optional[int] = Field(default=None, ge=0)
    note: Optional[str] = None
    tags: Union[str, List[str], None] = None
    is_favorite: Optional[bool] = None

class FavoriteToggle(BaseModel):
    current_status: bool

class NuggetSchema(BaseModel):
    id: int
    book_id: int
    content: str
    page_number: Optional[int] = None
    note: Optional[str] = None
    tags: List[str] = []
    is_favorite: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class NuggetWithBook(NuggetSchema):
    book: BookSummary
