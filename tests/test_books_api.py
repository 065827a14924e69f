import json

import pytest


def _post(client, book):
    return client.post("/books", json=book)


def test_list_starts_empty(client):
    resp = client.get("/books")
    assert resp.status_code == 200
    assert resp.json() == []


def test_dune_lifecycle(client, dune):
    resp = _post(client, dune)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Book added", "book": dune}

    resp = client.get(f"/books/{dune['isbn']}")
    assert resp.status_code == 200
    assert resp.json() == dune

    resp = client.delete(f"/books/{dune['isbn']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Book deleted", "book": dune}

    resp = client.get(f"/books/{dune['isbn']}")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_create_adds_exactly_one_record(client, dune):
    before = client.get("/books").json()
    book = dict(dune, isbn="0012345678")
    _post(client, book)
    after = client.get("/books").json()
    assert len(after) == len(before) + 1
    assert after[-1] == book
    assert after[-1]["isbn"] == "0012345678"


def test_duplicate_isbn_conflicts(client, dune):
    assert _post(client, dune).status_code == 201
    resp = _post(client, dict(dune, title="Dune Messiah"))
    assert resp.status_code == 409
    assert resp.json() == {"message": "ISBN already exists"}
    books = client.get("/books").json()
    assert len(books) == 1
    assert books[0]["title"] == "Dune"


@pytest.mark.parametrize("field", ["title", "author", "publisher", "publishedDate", "isbn"])
def test_create_requires_every_field(client, dune, field):
    book = dict(dune)
    del book[field]
    resp = _post(client, book)
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}


def test_create_rejects_empty_field(client, dune):
    resp = _post(client, dict(dune, author=""))
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}


def test_create_rejects_non_numeric_isbn(client, dune):
    resp = _post(client, dict(dune, isbn="978-0441013593"))
    assert resp.status_code == 400
    assert resp.json() == {"message": "ISBN must be a valid number"}
    assert client.get("/books").json() == []


def test_create_rejects_wrongly_typed_body(client, dune):
    resp = _post(client, dict(dune, title=["Dune"]))
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid request body"}


def test_extra_fields_are_not_stored(client, dune):
    _post(client, dict(dune, rating=5))
    assert client.get(f"/books/{dune['isbn']}").json() == dune


def test_update_replaces_mutable_fields(client, dune):
    _post(client, dune)
    changes = {
        "title": "Dune (40th Anniversary)",
        "author": "Frank Herbert",
        "publisher": "Ace",
        "publishedDate": "2005",
        "isbn": "1111111111",
    }
    resp = client.put(f"/books/{dune['isbn']}", json=changes)
    assert resp.status_code == 200
    expected = dict(changes, isbn=dune["isbn"])
    assert resp.json() == {"message": "Book updated", "book": expected}
    assert client.get(f"/books/{dune['isbn']}").json() == expected
    assert client.get("/books/1111111111").status_code == 404


def test_update_missing_field(client, dune):
    _post(client, dune)
    resp = client.put(f"/books/{dune['isbn']}", json={"title": "Only a title"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}
    assert client.get(f"/books/{dune['isbn']}").json() == dune


def test_update_unknown_isbn(client, dune):
    _post(client, dune)
    body = {k: v for k, v in dune.items() if k != "isbn"}
    resp = client.put("/books/123", json=body)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}
    assert client.get("/books").json() == [dune]


def test_delete_unknown_isbn(client):
    resp = client.delete("/books/123")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_delete_keeps_order_of_remaining(client, dune):
    isbns = ["1", "2", "3"]
    for isbn in isbns:
        _post(client, dict(dune, isbn=isbn))
    client.delete("/books/2")
    assert [b["isbn"] for b in client.get("/books").json()] == ["1", "3"]


def test_mutations_are_persisted(client, dune, data_file):
    _post(client, dune)
    raw = data_file.read_text(encoding="utf-8")
    assert json.loads(raw) == [dune]
    assert raw.startswith("[\n  {\n    \"title\"")


def test_startup_creates_empty_collection(client, data_file):
    assert json.loads(data_file.read_text(encoding="utf-8")) == []


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_run_serves_the_module_app():
    import run
    from book_directory_api.app import main

    assert run.app is main.app
