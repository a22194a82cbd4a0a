# nuggetbook/api/routes/nuggets.py

from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from nuggetbook.identity import Identity
from nuggetbook.sa.database import get_db
from nuggetbook.sa.repositories import NuggetRepository
from nuggetbook.services.share_service import ShareService, share_url
from nuggetbook.api.deps import require_identity
from nuggetbook.api.schemas.nugget import NuggetSchema, NuggetWithBook, NuggetCreate, NuggetUpdate, FavoriteToggle
from nuggetbook.api.schemas.share import ShareLinkSchema

router = APIRouter(prefix="/nuggets", tags=["nuggets"])

@router.get("", response_model=List[NuggetWithBook])
def get_nuggets(
    favorites: bool = Query(False, description="Only favorite nuggets"),
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db)
):
    repo = NuggetRepository(db)
    if favorites:
        return repo.list_favorites(identity)
    return repo.list_nuggets(identity)

@router.post("", response_model=NuggetSchema, status_code=status.HTTP_201_CREATED)
def create_nugget(body: NuggetCreate, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    return NuggetRepository(db).create_nugget(identity, body.model_dump(exclude_unset=True))

@router.patch("/{nugget_id}", response_model=NuggetSchema)
def update_nugget(nugget_id: int, body: NuggetUpdate, identity: Identity = Depends(require_identity),
                  db: Session = Depends(get_db)):
    return NuggetRepository(db).update_nugget(identity, nugget_id, body.model_dump(exclude_unset=True))

@router.post("/{nugget_id}/favorite", response_model=NuggetSchema)
def toggle_favorite(nugget_id: int, body: FavoriteToggle, identity: Identity = Depends(require_identity),
                    db: Session = Depends(get_db)):
    return NuggetRepository(db).toggle_favorite(identity, nugget_id, body.current_status)

@router.delete("/{nugget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_nugget(nugget_id: int, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    NuggetRepository(db).delete_nugget(identity, nugget_id)

@router.post("/{nugget_id}/share", response_model=ShareLinkSchema, status_code=status.HTTP_201_CREATED)
def share_nugget(nugget_id: int, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    link = ShareService(db).create_share_link(identity, nugget_id)
    return ShareLinkSchema(
        share_id=link.share_id,
        nugget_id=link.nugget_id,
        view_count=link.view_count,
        created_at=link.created_at,
        url=share_url(link.share_id)
    )
