# nuggetbook/services/auth_service.py
import logging
import secrets
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash, check_password_hash

from nuggetbook.errors import AuthRequiredError
from nuggetbook.identity import Identity
from nuggetbook.sa.models import User, UserSession
from nuggetbook.sa.repositories import UserRepository
from nuggetbook.sa.repositories.base import store_errors

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


@dataclass
class AuthResult:
    identity: Identity
    access_token: str
    display_name: Optional[str] = None


def normalize_email(email: str) -> str:
    return (email or '').strip().lower()


class AuthService:
    """Sign-up, sign-in, sign-out and bearer-token identity lookup."""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)

    def _issue_token(self, user: User) -> AuthResult:
        token = secrets.token_urlsafe(32)
        with store_errors(self.session):
            self.session.add(UserSession(token=token, user_id=user.id))
            self.session.commit()
        return AuthResult(
            identity=Identity(user_id=user.id, email=user.email),
            access_token=token,
            display_name=user.display_name,
        )

    def sign_up(self, email: str, password: str, display_name: Optional[str] = None) -> AuthResult:
        """Register a user and sign them in.

        Raises:
            ValueError: On a missing email or a too short password
            DuplicateError: If the email is already registered
        """
        email = normalize_email(email)
        if not email or '@' not in email:
            raise ValueError("A valid email is required")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        user = self.users.create_user(email, generate_password_hash(password), display_name)
        logger.info("Registered user %s", user.id)
        return self._issue_token(user)

    def sign_in(self, email: str, password: str) -> AuthResult:
        user = self.users.get_by_email(normalize_email(email))
        if user is None or not check_password_hash(user.password_hash, password or ''):
            raise AuthRequiredError("Invalid email or password")
        return self._issue_token(user)

    def sign_out(self, token: Optional[str]) -> None:
        if not token:
            return
        with store_errors(self.session):
            self.session.query(UserSession).filter(UserSession.token == token).delete()
            self.session.commit()

    def get_identity(self, token: Optional[str]) -> Optional[Identity]:
        """The identity behind a bearer token, or None when anonymous or unknown"""
        if not token:
            return None
        with store_errors(self.session):
            row = (
                self.session.query(UserSession, User)
                .join(User, User.id == UserSession.user_id)
                .filter(UserSession.token == token)
                .first()
            )
        if row is None:
            return None
        _, user = row
        return Identity(user_id=user.id, email=user.email)
