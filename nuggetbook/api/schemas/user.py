# nuggetbook/api/schemas/user.py
from typing import Optional
from pydantic import BaseModel, Field

class SignUpRequest(BaseModel):
    email: str
    password: str = Field(min_length=1)
    display_name: Optional[str] = None

class SignInRequest(BaseModel):
    email: str
    password: str
    # Where the client should resume, e.g. the share it was about to save
    return_to: Optional[str] = None

class AuthResponse(BaseModel):
    user_id: int
    email: Optional[str] = None
    display_name: Optional[str] = None
    access_token: str
    token_type: str = "bearer"
    return_to: Optional[str] = None

class MeResponse(BaseModel):
    user_id: int
    email: Optional[str] = None

class LibraryStats(BaseModel):
    total_books: int
    toread: int
    reading: int
    finished: int
    total_nuggets: int
    favorite_nuggets: int
    total_shares: int
    total_share_views: int
