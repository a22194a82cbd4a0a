# nuggetbook/utils/google_books.py
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from nuggetbook import config
from nuggetbook.errors import MetadataLookupError
from nuggetbook.models.book import BookMetadata

logger = logging.getLogger(__name__)

# Highest resolution first
COVER_PREFERENCE = ('extraLarge', 'large', 'medium', 'small', 'thumbnail', 'smallThumbnail')


def secure_url(url: Optional[str]) -> Optional[str]:
    if url and url.startswith('http://'):
        return 'https://' + url[len('http://'):]
    return url


def best_cover_image(image_links: Optional[Dict[str, str]]) -> Optional[str]:
    """Pick the highest resolution cover available and force https"""
    if not image_links:
        return None
    for key in COVER_PREFERENCE:
        url = image_links.get(key)
        if url:
            return secure_url(url)
    return None


def _identifier_of_type(identifiers: Optional[List[Dict[str, str]]], id_type: str) -> Optional[str]:
    for identifier in identifiers or []:
        if identifier.get('type') == id_type:
            return identifier.get('identifier') or None
    return None


def get_isbn13(identifiers: Optional[List[Dict[str, str]]]) -> Optional[str]:
    return _identifier_of_type(identifiers, 'ISBN_13')


def get_isbn10(identifiers: Optional[List[Dict[str, str]]]) -> Optional[str]:
    return _identifier_of_type(identifiers, 'ISBN_10')


def get_isbn(identifiers: Optional[List[Dict[str, str]]]) -> Optional[str]:
    """ISBN-13 if present, then ISBN-10, then whatever identifier comes first"""
    if not identifiers:
        return None
    return (
        get_isbn13(identifiers)
        or get_isbn10(identifiers)
        or identifiers[0].get('identifier')
        or None
    )


def format_volume(item: Dict[str, Any]) -> BookMetadata:
    """Normalize a raw volume resource into BookMetadata"""
    info = item.get('volumeInfo') or {}
    authors = info.get('authors') or []
    identifiers = info.get('industryIdentifiers')
    image_links = info.get('imageLinks') or {}

    return BookMetadata(
        google_books_id=item.get('id'),
        title=info.get('title') or 'Unknown Title',
        subtitle=info.get('subtitle'),
        authors=authors,
        author=authors[0] if authors else 'Unknown Author',
        publisher=info.get('publisher'),
        published_date=info.get('publishedDate'),
        description=info.get('description'),
        page_count=info.get('pageCount') or None,
        categories=info.get('categories') or [],
        average_rating=info.get('averageRating'),
        ratings_count=info.get('ratingsCount'),
        image_links=image_links,
        cover_url=best_cover_image(image_links),
        language=info.get('language') or 'en',
        preview_link=info.get('previewLink'),
        info_link=info.get('infoLink'),
        isbn=get_isbn(identifiers),
        isbn13=get_isbn13(identifiers),
        isbn10=get_isbn10(identifiers),
    )


class GoogleBooksClient:
    """Read-only client for the Google Books volumes API.

    One call issues exactly one GET. There is no retry and no rate limiting;
    failures surface as MetadataLookupError.
    """

    def __init__(self, http: Optional[requests.Session] = None, api_base: Optional[str] = None,
                 api_key: Optional[str] = None, timeout: Optional[float] = None):
        self.http = http or requests.Session()
        self.api_base = (api_base or config.google_books_api_base()).rstrip('/')
        self.api_key = api_key if api_key is not None else config.google_books_api_key()
        self.timeout = timeout if timeout is not None else config.google_books_timeout()

    def _url(self, path: str = '', query: Optional[str] = None, **params: Any) -> str:
        url = self.api_base + path
        parts = []
        if query is not None:
            parts.append(f"q={query}")
        parts.extend(f"{key}={value}" for key, value in params.items())
        if self.api_key:
            parts.append(f"key={quote(self.api_key, safe='')}")
        if parts:
            url += '?' + '&'.join(parts)
        return url

    def _get(self, url: str) -> Dict[str, Any]:
        logger.debug("GET %s", url)
        try:
            response = self.http.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Google Books request failed: %s", e)
            raise MetadataLookupError(f"Google Books request failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise MetadataLookupError(
                f"Google Books API error: {response.status_code}",
                status_code=response.status_code
            )
        try:
            return response.json()
        except ValueError as e:
            raise MetadataLookupError("Google Books API returned invalid JSON") from e

    def search(self, query: Optional[str], max_results: int = 10) -> List[BookMetadata]:
        """Free-text search ordered by relevance.

        Args:
            query: Title, author, ISBN or any free text
            max_results: Maximum number of results to request

        Returns:
            Normalized results; empty for a blank query, which makes no request
        """
        if not query or not query.strip():
            return []
        url = self._url(query=quote(query, safe=''), maxResults=max_results, orderBy='relevance')
        data = self._get(url)
        return [format_volume(item) for item in data.get('items') or []]

    def search_by_isbn(self, isbn: Optional[str]) -> Optional[BookMetadata]:
        """First volume matching an ISBN-10 or ISBN-13, or None"""
        if not isbn or not isbn.strip():
            return None
        url = self._url(query='isbn:' + quote(isbn.strip(), safe=''))
        items = self._get(url).get('items') or []
        return format_volume(items[0]) if items else None

    def get_volume(self, volume_id: str) -> BookMetadata:
        """Details of a single volume by its Google Books id"""
        if not volume_id or not volume_id.strip():
            raise ValueError("volume_id is required")
        url = self._url(path='/' + quote(volume_id.strip(), safe=''))
        return format_volume(self._get(url))
