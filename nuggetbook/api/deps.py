# nuggetbook/api/deps.py
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from nuggetbook.errors import AuthRequiredError
from nuggetbook.identity import Identity
from nuggetbook.sa.database import get_db
from nuggetbook.services.auth_service import AuthService
from nuggetbook.utils.google_books import GoogleBooksClient

def bearer_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()

def get_identity(
    token: Optional[str] = Depends(bearer_token),
    db: Session = Depends(get_db)
) -> Optional[Identity]:
    """Identity of the caller, or None for anonymous requests"""
    return AuthService(db).get_identity(token)

def require_identity(identity: Optional[Identity] = Depends(get_identity)) -> Identity:
    if identity is None:
        raise AuthRequiredError()
    return identity

def get_books_client() -> GoogleBooksClient:
    return GoogleBooksClient()
