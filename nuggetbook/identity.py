# nuggetbook/identity.py
from dataclasses import dataclass
from typing import Optional

from nuggetbook.errors import AuthRequiredError


@dataclass(frozen=True)
class Identity:
    """The authenticated user an operation acts on behalf of."""
    user_id: int
    email: Optional[str] = None


def require_identity(identity: Optional[Identity], message: str = "Must be logged in",
                     return_to: Optional[str] = None) -> Identity:
    if identity is None:
        raise AuthRequiredError(message, return_to=return_to)
    return identity
