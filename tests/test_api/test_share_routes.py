# tests/test_api/test_share_routes.py
import pytest

CONTENT = "Clarity about what matters provides clarity about what does not."

@pytest.fixture
def shared(client, alice_headers):
    book = client.post("/books", headers=alice_headers, json={
        "title": "Deep Work", "author": "Cal Newport", "isbn": "9781455586691", "total_pages": 304
    }).json()
    nugget = client.post("/nuggets", headers=alice_headers, json={
        "book_id": book["id"], "content": CONTENT, "page_number": 42, "tags": ["focus"],
        "note": "Private thought"
    }).json()
    response = client.post(f"/nuggets/{nugget['id']}/share", headers=alice_headers)
    assert response.status_code == 201, response.text
    return response.json()

def test_share_link_shape(shared):
    assert len(shared["share_id"]) == 10
    assert shared["url"].endswith(f"/share/{shared['share_id']}")
    assert shared["view_count"] == 0

def test_public_view_counts(client, shared):
    first = client.get(f"/share/{shared['share_id']}")
    assert first.status_code == 200
    body = first.json()
    assert body["nugget"]["content"] == CONTENT
    assert body["nugget"]["tags"] == ["focus"]
    assert body["book"]["title"] == "Deep Work"
    assert body["view_count"] == 1
    assert "user_id" not in body["book"]

    second = client.get(f"/share/{shared['share_id']}").json()
    assert second["view_count"] == 2

def test_unknown_share(client):
    response = client.get("/share/doesnotexist")
    assert response.status_code == 404
    assert response.json()["detail"] == "Share link not found"

def test_anonymous_save_requires_login(client, shared):
    response = client.post(f"/share/{shared['share_id']}/save")
    assert response.status_code == 401
    assert response.json()["return_to"] == f"/share/{shared['share_id']}"

def test_save_then_duplicate(client, bob_headers, shared):
    response = client.post(f"/share/{shared['share_id']}/save", headers=bob_headers)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["book_created"] is True
    assert body["book"]["title"] == "Deep Work"
    assert body["book"]["status"] == "toread"
    assert body["nugget"]["content"] == CONTENT
    assert body["nugget"]["is_favorite"] is False

    again = client.post(f"/share/{shared['share_id']}/save", headers=bob_headers)
    assert again.status_code == 409
    assert again.json()["detail"] == "You already have this nugget in your library"

    books = client.get("/books", headers=bob_headers).json()
    assert len(books) == 1

def test_save_reuses_existing_book(client, bob_headers, shared):
    client.post("/books", headers=bob_headers, json={"title": "My copy", "isbn": "9781455586691"})
    body = client.post(f"/share/{shared['share_id']}/save", headers=bob_headers).json()
    assert body["book_created"] is False
    assert body["book"]["title"] == "My copy"

def test_list_and_delete_shares(client, alice_headers, bob_headers, shared):
    links = client.get("/shares", headers=alice_headers).json()
    assert [link["share_id"] for link in links] == [shared["share_id"]]
    assert client.get("/shares", headers=bob_headers).json() == []

    assert client.delete(f"/shares/{shared['share_id']}", headers=bob_headers).status_code == 404
    assert client.delete(f"/shares/{shared['share_id']}", headers=alice_headers).status_code == 204
    assert client.get(f"/share/{shared['share_id']}").status_code == 404

def test_cannot_share_foreign_nugget(client, bob_headers, shared):
    response = client.post(f"/nuggets/{shared['nugget_id']}/share", headers=bob_headers)
    assert response.status_code == 404
