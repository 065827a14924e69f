"""
Service layer for book records.

``BookService`` implements the five CRUD operations over a
``BookStorage`` handle passed in at construction.  Each call loads the
whole collection from disk, works on the in-memory list with a linear
scan and, for mutations, writes the whole list back.  Nothing is
cached between calls.

Failures are reported by raising ``InvalidInputError``,
``ConflictError`` or ``NotFoundError``; the API layer turns them into
JSON responses.  Validation always runs before the file is touched.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.errors import ConflictError, InvalidInputError, NotFoundError
from ..core.storage import BookStorage
from ..schemas.book import BOOK_FIELDS, MUTABLE_FIELDS, BookCreate, BookUpdate, is_numeric_isbn

logger = logging.getLogger(__name__)


def _find_index(books: List[Dict[str, Any]], isbn: str) -> Optional[int]:
    for index, book in enumerate(books):
        if book.get("isbn") == isbn:
            return index
    return None


def _require_fields(data: Dict[str, Any], fields) -> None:
    if not all(data.get(name) for name in fields):
        raise InvalidInputError("All fields are required")


class BookService:
    """CRUD operations on the book collection."""

    def __init__(self, storage: BookStorage) -> None:
        self.storage = storage

    async def list_books(self) -> List[Dict[str, Any]]:
        """Return every book in insertion order."""
        return self.storage.read_books()

    async def get_book(self, isbn: str) -> Dict[str, Any]:
        books = self.storage.read_books()
        index = _find_index(books, isbn)
        if index is None:
            raise NotFoundError("Book not found")
        return books[index]

    async def create_book(self, data: BookCreate) -> Dict[str, Any]:
        """Append a new book and persist the collection.

        Raises ``InvalidInputError`` when a field is missing or empty or
        when the isbn is not numeric, and ``ConflictError`` when the
        isbn is already taken.
        """
        candidate = data.dict()
        _require_fields(candidate, BOOK_FIELDS)
        if not is_numeric_isbn(candidate["isbn"]):
            raise InvalidInputError("ISBN must be a valid number")

        new_book = {name: candidate[name] for name in BOOK_FIELDS}
        with self.storage.transaction() as books:
            if _find_index(books, new_book["isbn"]) is not None:
                raise ConflictError("ISBN already exists")
            books.append(new_book)
        logger.info("Created book %s", new_book["isbn"])
        return new_book

    async def update_book(self, isbn: str, data: BookUpdate) -> Dict[str, Any]:
        """Replace title, author, publisher and publishedDate of a book.

        The isbn cannot be changed.  Keys stored alongside the book
        fields are kept.
        """
        changes = data.dict()
        _require_fields(changes, MUTABLE_FIELDS)

        with self.storage.transaction() as books:
            index = _find_index(books, isbn)
            if index is None:
                raise NotFoundError("Book not found")
            updated = dict(books[index])
            updated.update({name: changes[name] for name in MUTABLE_FIELDS})
            books[index] = updated
        logger.info("Updated book %s", isbn)
        return updated

    async def delete_book(self, isbn: str) -> Dict[str, Any]:
        with self.storage.transaction() as books:
            index = _find_index(books, isbn)
            if index is None:
                raise NotFoundError("Book not found")
            removed = books.pop(index)
        logger.info("Deleted book %s", isbn)
        return removed
