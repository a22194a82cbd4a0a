# nuggetbook/sa/repositories/share.py
from typing import Optional, List
from sqlalchemy import desc, update
from sqlalchemy.orm import Session

from nuggetbook.errors import NotFoundError
from nuggetbook.identity import Identity, require_identity
from ..models import Nugget, ShareLink
from .base import store_errors

class ShareRepository:
    """Share links. Lookups by token are public; everything else is scoped to the creator."""

    def __init__(self, session: Session):
        self.session = session

    def create_share_link(self, identity: Optional[Identity], nugget_id: int, share_id: str) -> ShareLink:
        """Create a share link for one of the identity's nuggets.

        Raises:
            NotFoundError: If the nugget does not exist or is not owned by the identity
        """
        identity = require_identity(identity, "Must be logged in to share")
        with store_errors(self.session):
            owned = (
                self.session.query(Nugget.id)
                .filter(Nugget.id == nugget_id, Nugget.user_id == identity.user_id)
                .first()
            )
        if owned is None:
            raise NotFoundError(f"Nugget {nugget_id} not found")

        link = ShareLink(share_id=share_id, nugget_id=nugget_id, created_by=identity.user_id, view_count=0)
        with store_errors(self.session):
            self.session.add(link)
            self.session.commit()
        return link

    def get_by_share_id(self, share_id: str) -> Optional[ShareLink]:
        with store_errors(self.session):
            return (
                self.session.query(ShareLink)
                .filter(ShareLink.share_id == share_id)
                .populate_existing()
                .first()
            )

    def increment_view_count(self, share_id: str) -> None:
        """Atomically add one view"""
        with store_errors(self.session):
            self.session.execute(
                update(ShareLink)
                .where(ShareLink.share_id == share_id)
                .values(view_count=ShareLink.view_count + 1)
                .execution_options(synchronize_session=False)
            )
            self.session.commit()

    def delete_share_link(self, identity: Optional[Identity], share_id: str) -> None:
        identity = require_identity(identity)
        with store_errors(self.session):
            link = (
                self.session.query(ShareLink)
                .filter(ShareLink.share_id == share_id, ShareLink.created_by == identity.user_id)
                .first()
            )
        if link is None:
            raise NotFoundError("Share link not found")
        with store_errors(self.session):
            self.session.delete(link)
            self.session.commit()

    def list_user_shares(self, identity: Optional[Identity]) -> List[ShareLink]:
        identity = require_identity(identity)
        with store_errors(self.session):
            return (
                self.session.query(ShareLink)
                .filter(ShareLink.created_by == identity.user_id)
                .order_by(desc(ShareLink.created_at), desc(ShareLink.id))
                .all()
            )
