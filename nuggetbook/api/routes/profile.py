# nuggetbook/api/routes/profile.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nuggetbook.identity import Identity
from nuggetbook.sa.database import get_db
from nuggetbook.sa.repositories import UserRepository
from nuggetbook.api.deps import require_identity
from nuggetbook.api.schemas.user import LibraryStats

router = APIRouter(prefix="/profile", tags=["profile"])

@router.get("/stats", response_model=LibraryStats)
def get_stats(identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    return LibraryStats(**UserRepository(db).get_library_stats(identity))
