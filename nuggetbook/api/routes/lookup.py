# nuggetbook/api/routes/lookup.py

from typing import List
from fastapi import APIRouter, Depends, Query

from nuggetbook.errors import NotFoundError
from nuggetbook.models.book import BookMetadata
from nuggetbook.utils.google_books import GoogleBooksClient
from nuggetbook.api.deps import get_books_client

router = APIRouter(prefix="/lookup", tags=["lookup"])

@router.get("/search", response_model=List[BookMetadata])
def search_metadata(
    q: str = Query("", description="Title, author or ISBN"),
    limit: int = Query(10, ge=1, le=40, description="Maximum number of results"),
    client: GoogleBooksClient = Depends(get_books_client)
):
    return client.search(q, max_results=limit)

@router.get("/isbn/{isbn}", response_model=BookMetadata)
def lookup_isbn(isbn: str, client: GoogleBooksClient = Depends(get_books_client)):
    result = client.search_by_isbn(isbn)
    if result is None:
        raise NotFoundError(f"No book found for ISBN {isbn}")
    return result

@router.get("/volumes/{volume_id}", response_model=BookMetadata)
def lookup_volume(volume_id: str, client: GoogleBooksClient = Depends(get_books_client)):
    return client.get_volume(volume_id)
