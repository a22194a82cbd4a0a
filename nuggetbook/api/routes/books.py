# nuggetbook/api/routes/books.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from nuggetbook.identity import Identity
from nuggetbook.models.book import ReadingStatus
from nuggetbook.sa.database import get_db
from nuggetbook.sa.repositories import BookRepository, NuggetRepository
from nuggetbook.api.deps import require_identity
from nuggetbook.api.schemas.book import BookSchema, BookCreate, BookUpdate
from nuggetbook.api.schemas.nugget import NuggetSchema

router = APIRouter(prefix="/books", tags=["books"])

@router.get("", response_model=List[BookSchema])
def get_books(
    status_filter: Optional[ReadingStatus] = Query(None, alias="status", description="Filter by reading status"),
    query: Optional[str] = Query(None, description="Search books by title or author"),
    identity: Identity = Depends(require_identity),
    db: Session = Depends(get_db)
):
    """
    List the caller's books, newest first.

    Args:
        status_filter: Optional reading status (toread, reading, finished)
        query: Optional substring matched against title or author
    """
    repo = BookRepository(db)
    if query:
        books = repo.search_books(identity, query)
        if status_filter:
            books = [b for b in books if b.status == status_filter.value]
        return books
    if status_filter:
        return repo.list_books_by_status(identity, status_filter.value)
    return repo.list_books(identity)

@router.post("", response_model=BookSchema, status_code=status.HTTP_201_CREATED)
def create_book(body: BookCreate, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    data = body.model_dump(exclude_unset=True, mode="json")
    return BookRepository(db).create_book(identity, data)

@router.get("/{book_id}", response_model=BookSchema)
def get_book(book_id: int, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    return BookRepository(db).get_book(identity, book_id)

@router.patch("/{book_id}", response_model=BookSchema)
def update_book(book_id: int, body: BookUpdate, identity: Identity = Depends(require_identity),
                db: Session = Depends(get_db)):
    updates = body.model_dump(exclude_unset=True, mode="json")
    return BookRepository(db).update_book(identity, book_id, updates)

@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: int, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    BookRepository(db).delete_book(identity, book_id)

@router.get("/{book_id}/nuggets", response_model=List[NuggetSchema])
def get_book_nuggets(book_id: int, identity: Identity = Depends(require_identity), db: Session = Depends(get_db)):
    BookRepository(db).get_book(identity, book_id)
    return NuggetRepository(db).list_by_book(identity, book_id)
