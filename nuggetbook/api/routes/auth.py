# nuggetbook/api/routes/auth.py

from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from nuggetbook.identity import Identity
from nuggetbook.sa.database import get_db
from nuggetbook.services.auth_service import AuthService, AuthResult
from nuggetbook.api.deps import bearer_token, require_identity
from nuggetbook.api.schemas.user import SignUpRequest, SignInRequest, AuthResponse, MeResponse

router = APIRouter(prefix="/auth", tags=["auth"])

def _auth_response(result: AuthResult, return_to: Optional[str] = None) -> AuthResponse:
    return AuthResponse(
        user_id=result.identity.user_id,
        email=result.identity.email,
        display_name=result.display_name,
        access_token=result.access_token,
        return_to=return_to
    )

@router.post("/sign-up", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(body: SignUpRequest, db: Session = Depends(get_db)):
    result = AuthService(db).sign_up(body.email, body.password, body.display_name)
    return _auth_response(result)

@router.post("/sign-in", response_model=AuthResponse)
def sign_in(body: SignInRequest, db: Session = Depends(get_db)):
    """
    Sign in and get a bearer token.

    A return_to sent by the client (for example the share link it was about to
    save) is echoed back so it can resume there.
    """
    result = AuthService(db).sign_in(body.email, body.password)
    return _auth_response(result, body.return_to)

@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(token: Optional[str] = Depends(bearer_token), db: Session = Depends(get_db)):
    AuthService(db).sign_out(token)

@router.get("/me", response_model=MeResponse)
def me(identity: Identity = Depends(require_identity)):
    return MeResponse(user_id=identity.user_id, email=identity.email)
