# nuggetbook/api/routes/shares.py

from typing import List, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from nuggetbook.identity import Identity
from nuggetbook.models.share import SharedNugget
from nuggetbook.sa.database import get_db
from nuggetbook.services.share_service import ShareService, share_url
from nuggetbook.api.deps import get_identity, require_identity
from nuggetbook.api.schemas.book import BookSchema
from nuggetbook.api.schemas.nugget import NuggetSchema
from nuggetbook.api.schemas.share import ShareLinkSchema, SaveSharedResponse

router = APIRouter(tags=["shares"])

@router.get("/share/{share_id}", response_model=SharedNugget)
def get_shared_nugget(share_id: str, db: Session = Depends(get_db)):
    """Public view of a shared nugget; no authentication needed."""
    return ShareService(db).get_shared_nugget(share_id)

@router.post("/share/{share_id}/save", response_model=SaveSharedResponse, status_code=status.HTTP_201_CREATED)
def save_shared_nugget(share_id: str, identity: Optional[Identity] = Depends(get_identity),
                       db: Session = Depends(get_db)):
    """
    Save a shared nugget into the caller's library.

    Anonymous callers get a 401 whose return_to points back at the share.
    """
    result = ShareService(db).save_shared_nugget(identity, share_id)
    return SaveSharedResponse(
        book=BookSchema.model_validate(result.book),
        nugget=NuggetSchema.model_validate(result.nugget),
        book_created=result.book_created
    )

@router.get("/shares", response_model=List[ShareLinkSchema])
def get_user_shares(identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    return [
        ShareLinkSchema(
            share_id=link.share_id,
            nugget_id=link.nugget_id,
            view_count=link.view_count,
            created_at=link.created_at,
            url=share_url(link.share_id)
        )
        for link in ShareService(db).get_user_shares(identity)
    ]

@router.delete("/shares/{share_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_share(share_id: str, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    ShareService(db).delete_share_link(identity, share_id)
