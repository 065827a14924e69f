"""
Pydantic schemas for book records.

Every field is a string.  Request models declare the fields as
optional so that a missing field reaches the service and is answered
with the usual ``{"message": "All fields are required"}`` body instead
of a framework validation error.  ``BookRead`` is the shape returned
to clients; ``BookMessage`` wraps a record with a confirmation
message for mutating endpoints.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

# Optionally signed ASCII decimal number with optional fraction and
# exponent.  Hex literals, "Infinity" and blank strings are rejected on
# purpose.
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)

BOOK_FIELDS = ("title", "author", "publisher", "publishedDate", "isbn")
MUTABLE_FIELDS = ("title", "author", "publisher", "publishedDate")


def is_numeric_isbn(value: str) -> bool:
    """Return True if ``value`` reads as a number.

    The value itself is never converted; leading zeros and the exact
    text submitted are what gets stored.
    """
    return bool(_NUMERIC_RE.match(value))


class BookUpdate(BaseModel):
    """Schema for replacing the mutable fields of a book."""

    title: Optional[str] = Field(None, description="Book title")
    author: Optional[str] = Field(None, description="Author name")
    publisher: Optional[str] = Field(None, description="Publisher name")
    publishedDate: Optional[str] = Field(None, description="Publication date, free form")


class BookCreate(BookUpdate):
    """Schema for adding a new book."""

    isbn: Optional[str] = Field(None, description="Numeric ISBN, unique in the collection")


class BookRead(BaseModel):
    """Schema for reading a book."""

    title: str
    author: str
    publisher: str
    publishedDate: str
    isbn: str


class BookMessage(BaseModel):
    """Confirmation returned by create, update and delete."""

    message: str
    book: BookRead
