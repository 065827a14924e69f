"""
Top-level API router.

Aggregates domain routers under their prefixes.  The application
includes this router without a prefix, so books are served at
``/books``.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
