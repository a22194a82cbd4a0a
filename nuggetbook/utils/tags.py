# nuggetbook/utils/tags.py
from typing import Iterable, List, Optional, Union


def parse_tags(value: Optional[Union[str, Iterable[str]]]) -> List[str]:
    """Normalize tags into a list of unique, trimmed, non-empty strings.

    Accepts the comma separated form typed into a form field ("focus, habits")
    or any iterable of strings. Order of first appearance is kept.
    """
    if value is None:
        return []
    if isinstance(value, str):
        candidates = value.split(',')
    else:
        candidates = list(value)

    tags: List[str] = []
    for candidate in candidates:
        if candidate is None:
            continue
        tag = str(candidate).strip()
        if tag and tag not in tags:
            tags.append(tag)
    return tags
