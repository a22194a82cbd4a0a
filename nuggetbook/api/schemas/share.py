# nuggetbook/api/schemas/share.py
from datetime import datetime
from pydantic import BaseModel, ConfigDict

from .book import BookSchema
from .nugget import NuggetSchema

class ShareLinkSchema(BaseModel):
    share_id: str
    nugget_id: int
    view_count: int
    created_at: datetime
    url: str

    model_config = ConfigDict(from_attributes=True)

class SaveSharedResponse(BaseModel):
    book: BookSchema
    nugget: NuggetSchema
    book_created: bool
