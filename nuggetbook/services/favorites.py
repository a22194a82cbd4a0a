# nuggetbook/services/favorites.py
import logging
from typing import Any, Dict, List, Optional

from nuggetbook.errors import NotFoundError, NuggetbookError
from nuggetbook.identity import Identity
from nuggetbook.sa.models import Nugget
from nuggetbook.sa.repositories import NuggetRepository

logger = logging.getLogger(__name__)


def nugget_as_dict(nugget: Nugget) -> Dict[str, Any]:
    return {
        'id': nugget.id,
        'book_id': nugget.book_id,
        'content': nugget.content,
        'page_number': nugget.page_number,
        'note': nugget.note,
        'tags': list(nugget.tags or []),
        'is_favorite': nugget.is_favorite,
    }


def toggle_favorite(repository: NuggetRepository, identity: Optional[Identity],
                    nuggets: List[Dict[str, Any]], nugget_id: int) -> Dict[str, Any]:
    """Flip a nugget's favorite flag in a local list, then persist it.

    The local entry changes first. If the update fails for any reason, the entry
    is restored to its pre-toggle state, refreshed from one authoritative
    read when that read succeeds, and the error is re-raised.

    Args:
        repository: Nugget repository bound to a session
        identity: Acting user
        nuggets: Local list of nugget dicts, mutated in place
        nugget_id: Nugget to toggle

    Returns:
        The entry as stored after the update
    """
    index = next((i for i, entry in enumerate(nuggets) if entry['id'] == nugget_id), None)
    if index is None:
        raise NotFoundError(f"Nugget {nugget_id} not found")

    snapshot = dict(nuggets[index])
    nuggets[index] = {**snapshot, 'is_favorite': not snapshot['is_favorite']}

    try:
        updated = repository.toggle_favorite(identity, nugget_id, snapshot['is_favorite'])
    except Exception:
        nuggets[index] = snapshot
        try:
            nuggets[index] = nugget_as_dict(repository.get_nugget(identity, nugget_id))
        except NuggetbookError as e:
            logger.warning("Could not re-read nugget %s after failed toggle: %s", nugget_id, e)
        raise

    nuggets[index] = nugget_as_dict(updated)
    return nuggets[index]
