# nuggetbook/services/search_service.py
import logging
import threading
from typing import Any, Callable, List, Optional

from nuggetbook import config
from nuggetbook.errors import MetadataLookupError
from nuggetbook.models.book import BookMetadata
from nuggetbook.utils.debounce import Debouncer
from nuggetbook.utils.google_books import GoogleBooksClient

logger = logging.getLogger(__name__)


class RequestGenerations:
    """Numbers outgoing lookups so only the latest one's result is applied."""

    def __init__(self):
        self._lock = threading.Lock()
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def issue(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_current(self, generation: int) -> bool:
        with self._lock:
            return generation == self._latest


class DebouncedBookSearch:
    """Search-as-you-type over the metadata API.

    Input is debounced, and a response is applied only if no newer lookup was
    issued after it, so a slow earlier response never replaces a newer result.
    In-flight requests are not aborted; their results are dropped.
    """

    def __init__(self, client: GoogleBooksClient, delay: Optional[float] = None,
                 on_results: Optional[Callable[[str, List[BookMetadata]], Any]] = None,
                 max_results: int = 10, timer_factory: Callable[..., Any] = threading.Timer):
        self.client = client
        self.on_results = on_results
        self.max_results = max_results
        self.generations = RequestGenerations()
        self.query: Optional[str] = None
        self.results: List[BookMetadata] = []
        self.error: Optional[MetadataLookupError] = None
        self.debouncer: Debouncer[str] = Debouncer(
            callback=self.lookup,
            delay=config.search_debounce_seconds() if delay is None else delay,
            timer_factory=timer_factory,
        )

    def on_input(self, query: str) -> None:
        """Feed the current value of the search box"""
        self.debouncer.update(query)

    def lookup(self, query: str) -> None:
        generation = self.generations.issue()
        try:
            results = self.client.search(query, max_results=self.max_results)
        except MetadataLookupError as e:
            if self.generations.is_current(generation):
                self.error = e
                self.results = []
            logger.warning("Book search for %r failed: %s", query, e)
            return

        if not self.generations.is_current(generation):
            logger.debug("Dropping stale results for %r", query)
            return
        self.query = query
        self.results = results
        self.error = None
        if self.on_results is not None:
            self.on_results(query, results)

    def close(self) -> None:
        self.debouncer.cancel()
