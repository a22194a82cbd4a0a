# tests/test_api/test_library_routes.py
import pytest

@pytest.fixture
def book(client, alice_headers):
    response = client.post("/books", headers=alice_headers, json={
        "title": "Atomic Habits", "author": "James Clear", "total_pages": 320
    })
    assert response.status_code == 201, response.text
    return response.json()

def test_create_book_defaults(book):
    assert book["status"] == "toread"
    assert book["current_page"] == 0
    assert book["progress"] == 0

def test_create_book_requires_title(client, alice_headers):
    response = client.post("/books", headers=alice_headers, json={"title": "", "author": "Nobody"})
    assert response.status_code == 422

def test_update_progress(client, alice_headers, book):
    response = client.patch(f"/books/{book['id']}", headers=alice_headers,
                            json={"current_page": 160, "status": "reading"})
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "reading"
    assert body["progress"] == 50
    assert body["title"] == "Atomic Habits"

def test_list_books_filters(client, alice_headers, book):
    client.post("/books", headers=alice_headers, json={"title": "Deep Work", "author": "Cal Newport"})

    all_books = client.get("/books", headers=alice_headers).json()
    assert [b["title"] for b in all_books] == ["Deep Work", "Atomic Habits"]

    client.patch(f"/books/{book['id']}", headers=alice_headers, json={"status": "finished"})
    finished = client.get("/books", params={"status": "finished"}, headers=alice_headers).json()
    assert [b["title"] for b in finished] == ["Atomic Habits"]

    found = client.get("/books", params={"query": "newport"}, headers=alice_headers).json()
    assert [b["title"] for b in found] == ["Deep Work"]

def test_books_are_private(client, alice_headers, bob_headers, book):
    assert client.get("/books", headers=bob_headers).json() == []
    assert client.get(f"/books/{book['id']}", headers=bob_headers).status_code == 404
    assert client.delete(f"/books/{book['id']}", headers=bob_headers).status_code == 404
    assert client.get(f"/books/{book['id']}", headers=alice_headers).status_code == 200

def test_nugget_lifecycle(client, alice_headers, book):
    response = client.post("/nuggets", headers=alice_headers, json={
        "book_id": book["id"],
        "content": "You do not rise to the level of your goals.",
        "page_number": 27,
        "tags": "habits, systems"
    })
    assert response.status_code == 201, response.text
    nugget = response.json()
    assert nugget["tags"] == ["habits", "systems"]
    assert nugget["is_favorite"] is False

    listed = client.get("/nuggets", headers=alice_headers).json()
    assert listed[0]["book"]["title"] == "Atomic Habits"

    toggled = client.post(f"/nuggets/{nugget['id']}/favorite", headers=alice_headers,
                          json={"current_status": False})
    assert toggled.json()["is_favorite"] is True
    favorites = client.get("/nuggets", params={"favorites": True}, headers=alice_headers).json()
    assert [n["id"] for n in favorites] == [nugget["id"]]

    by_book = client.get(f"/books/{book['id']}/nuggets", headers=alice_headers).json()
    assert [n["id"] for n in by_book] == [nugget["id"]]

    assert client.delete(f"/nuggets/{nugget['id']}", headers=alice_headers).status_code == 204
    assert client.get("/nuggets", headers=alice_headers).json() == []

def test_duplicate_nugget_conflict(client, alice_headers, book):
    payload = {"book_id": book["id"], "content": "Habits are the compound interest of self-improvement."}
    assert client.post("/nuggets", headers=alice_headers, json=payload).status_code == 201
    response = client.post("/nuggets", headers=alice_headers, json=payload)
    assert response.status_code == 409
    assert response.json()["detail"] == "You already have this nugget in your library"

def test_nugget_on_foreign_book(client, bob_headers, book):
    response = client.post("/nuggets", headers=bob_headers, json={"book_id": book["id"], "content": "Mine now"})
    assert response.status_code == 404

def test_deleting_book_removes_nuggets(client, alice_headers, book):
    client.post("/nuggets", headers=alice_headers, json={"book_id": book["id"], "content": "Gone soon"})
    assert client.delete(f"/books/{book['id']}", headers=alice_headers).status_code == 204
    assert client.get("/nuggets", headers=alice_headers).json() == []

def test_profile_stats(client, alice_headers, book):
    client.post("/nuggets", headers=alice_headers,
                json={"book_id": book["id"], "content": "One", "is_favorite": True})
    client.post("/nuggets", headers=alice_headers, json={"book_id": book["id"], "content": "Two"})

    stats = client.get("/profile/stats", headers=alice_headers).json()
    assert stats["total_books"] == 1
    assert stats["toread"] == 1
    assert stats["total_nuggets"] == 2
    assert stats["favorite_nuggets"] == 1
    assert stats["total_shares"] == 0

@pytest.mark.parametrize("payload", [{"title": None}, {"current_page": None}, {"status": None}])
def test_update_book_null_field_is_bad_request(client, alice_headers, book, payload):
    response = client.patch(f"/books/{book['id']}", headers=alice_headers, json=payload)
    assert response.status_code == 400
    assert "cannot be null" in response.json()["detail"]
    assert client.get(f"/books/{book['id']}", headers=alice_headers).json()["title"] == "Atomic Habits"

def test_update_nugget_null_content_is_bad_request(client, alice_headers, book):
    nugget = client.post("/nuggets", headers=alice_headers,
                         json={"book_id": book["id"], "content": "Keep me"}).json()

    response = client.patch(f"/nuggets/{nugget['id']}", headers=alice_headers, json={"content": None})

    assert response.status_code == 400
    assert "code" not in response.json()
    assert "cannot be null: content" in response.json()["detail"]
    listed = client.get("/nuggets", headers=alice_headers).json()
    assert listed[0]["content"] == "Keep me"
