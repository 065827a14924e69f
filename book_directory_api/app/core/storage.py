"""
Flat-file persistence for the book collection.

The whole collection lives in one UTF-8 JSON array.  ``BookStorage``
is the only thing that touches the file: it is opened, fully read or
fully rewritten, and closed within each call, so no handle is held
across requests.  Writes go to a temporary file in the same directory
which then replaces the target, so a reader never sees half a file.

Mutating callers should use ``transaction()``, which loads the
collection, hands it to the caller and writes it back on success.
With ``use_lock`` enabled the whole sequence runs under a
``threading.Lock``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

from ..schemas.book import BOOK_FIELDS
from .errors import StorageError

logger = logging.getLogger(__name__)

# Project root, i.e. the directory containing the ``book_directory_api`` package.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_data_path(data_file: Union[str, Path]) -> Path:
    """Return an absolute path for the collection file.

    Absolute paths are returned as is; relative ones are resolved
    against the project root.
    """
    path = Path(data_file)
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


class BookStorage:
    """Handle on the JSON file that stores the book collection."""

    def __init__(self, path: Union[str, Path], use_lock: bool = True) -> None:
        self.path = resolve_data_path(path)
        self.use_lock = use_lock
        self._lock = threading.Lock()

    def initialize(self) -> None:
        """Create the file holding an empty array if it does not exist yet."""
        if self.path.exists():
            logger.info("Using book collection at %s", self.path)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.write_books([])
        logger.info("Created empty book collection at %s", self.path)

    def read_books(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise StorageError("Book collection could not be read") from exc
        if not isinstance(data, list):
            raise StorageError("Book collection is not a JSON array")
        for record in data:
            if not isinstance(record, dict) or not all(
                isinstance(record.get(name), str) for name in BOOK_FIELDS
            ):
                raise StorageError("Book collection holds a malformed record")
        return data

    def write_books(self, books: List[Dict[str, Any]]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(books, f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @contextmanager
    def transaction(self) -> Iterator[List[Dict[str, Any]]]:
        """Yield the loaded collection and persist it if the block succeeds.

        If the block raises, nothing is written and the exception
        propagates to the caller.
        """
        if not self.use_lock:
            books = self.read_books()
            yield books
            self.write_books(books)
            return
        with self._lock:
            books = self.read_books()
            yield books
            self.write_books(books)
