"""
Book endpoints.

CRUD routes over the book collection, keyed by isbn.  Mutating routes
answer with a confirmation message and the affected record.  Error
responses (400, 404, 409) are produced by the exception handlers
registered in ``core.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from book_directory_api.app.schemas.book import BookCreate, BookMessage, BookRead, BookUpdate
from book_directory_api.app.services.book_service import BookService

router = APIRouter()


def get_book_service(request: Request) -> BookService:
    """Return the service bound to the running application."""
    return request.app.state.book_service


@router.get("", response_model=List[BookRead])
async def list_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    """Return every book, in insertion order."""
    return await service.list_books()


@router.get("/{isbn}", response_model=BookRead)
async def get_book(isbn: str, service: BookService = Depends(get_book_service)) -> BookRead:
    """Retrieve a single book by isbn.

    Returns HTTP 404 if no book has that isbn.
    """
    return await service.get_book(isbn)


@router.post("", response_model=BookMessage, status_code=status.HTTP_201_CREATED)
async def create_book(
    book_in: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookMessage:
    """Add a new book.

    All five fields are required and the isbn must be numeric (400);
    an isbn already in the collection is rejected with 409.
    """
    book = await service.create_book(book_in)
    return {"message": "Book added", "book": book}


@router.put("/{isbn}", response_model=BookMessage)
async def update_book(
    isbn: str,
    book_in: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> BookMessage:
    """Replace the title, author, publisher and publishedDate of a book."""
    book = await service.update_book(isbn, book_in)
    return {"message": "Book updated", "book": book}


@router.delete("/{isbn}", response_model=BookMessage)
async def delete_book(isbn: str, service: BookService = Depends(get_book_service)) -> BookMessage:
    book = await service.delete_book(isbn)
    return {"message": "Book deleted", "book": book}
