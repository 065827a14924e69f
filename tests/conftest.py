import os
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Importing the app module builds a default app; keep its data file out of the repo.
os.environ.setdefault("BOOKS_DATA_FILE", str(Path(tempfile.mkdtemp()) / "books.json"))

from fastapi.testclient import TestClient  # noqa: E402

from book_directory_api.app.core.config import Settings  # noqa: E402
from book_directory_api.app.core.storage import BookStorage  # noqa: E402
from book_directory_api.app.main import create_app  # noqa: E402


@pytest.fixture
def data_file(tmp_path) -> Path:
    return tmp_path / "books.json"


@pytest.fixture
def settings(data_file) -> Settings:
    return Settings(data_file=str(data_file))


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def storage(data_file) -> BookStorage:
    store = BookStorage(data_file)
    store.initialize()
    return store


@pytest.fixture
def dune() -> dict:
    return {
        "title": "Dune",
        "author": "Herbert",
        "publisher": "Chilton",
        "publishedDate": "1965",
        "isbn": "9780441013593",
    }
