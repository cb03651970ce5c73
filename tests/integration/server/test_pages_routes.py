"""HTTP tests for the pages resource"""

import pytest
from fastapi.testclient import TestClient

from pagesmith.crud.blobs import MemoryBlobStore
from pagesmith.server.app import create_app


PAGES = "/.netlify/functions/pages"


@pytest.mark.parametrize("method", ["put", "post"])
def test_save_and_fetch_page(client, method):
    response = getattr(client, method)(PAGES, json={"id": "about", "title": "About", "content": "Hello"})
    assert response.status_code == 200
    assert response.json() == {"message": "Page saved", "id": "about"}

    response = client.get(PAGES, params={"id": "about"})
    assert response.status_code == 200
    assert response.json() == {"id": "about", "content": "# About\n\nHello"}


def test_save_generates_id(client):
    saved = client.put(PAGES, json={"content": "x"}).json()
    assert saved["id"].startswith("page-")
    assert client.get(PAGES, params={"id": saved["id"]}).json()["content"] == "x"


def test_list_pages(client):
    client.put(PAGES, json={"id": "b", "content": "B"})
    client.put(PAGES, json={"id": "a", "content": "A"})
    pages = client.get(PAGES).json()
    assert [p["id"] for p in pages] == ["a", "b"]
    assert all("etag" in p for p in pages)


def test_missing_page_404(client):
    response = client.get(PAGES, params={"id": "ghost"})
    assert response.status_code == 404
    assert response.json() == {"error": "Page not found"}


def test_page_html_preview(client):
    client.put(PAGES, json={"id": "md", "title": "Doc", "content": "Some **bold**"})
    body = client.get(PAGES, params={"id": "md", "format": "html"}).json()
    assert "<h1>Doc</h1>" in body["html"]
    assert "<strong>bold</strong>" in body["html"]


def test_delete_page(client):
    client.put(PAGES, json={"id": "gone", "content": "x"})
    response = client.delete(PAGES, params={"id": "gone"})
    assert response.json() == {"message": "Page deleted"}
    assert client.get(PAGES, params={"id": "gone"}).status_code == 404


def test_delete_requires_id(client):
    response = client.delete(PAGES)
    assert response.status_code == 400
    assert response.json() == {"error": "No id provided"}


def test_malformed_body(client):
    response = client.put(PAGES, content=b"[oops", headers={"content-type": "application/json"})
    assert response.status_code == 400


def test_unsupported_method(client):
    response = client.patch(PAGES, json={})
    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_api_alias_with_path_id(client):
    """/api/pages/{id} reads, updates, and deletes the same store."""
    client.post("/api/pages", json={"id": "home", "content": "v1"})
    assert client.get("/api/pages/home").json()["content"] == "v1"
    assert client.put("/api/pages/home", json={"content": "v2"}).json()["id"] == "home"
    assert client.get(PAGES, params={"id": "home"}).json()["content"] == "v2"
    client.delete("/api/pages/home")
    assert client.get("/api/pages/home").status_code == 404


class BrokenStore(MemoryBlobStore):
    def list(self, prefix: str = ""):
        raise RuntimeError("disk on fire")


def test_unexpected_error_is_generic_500(settings):
    app = create_app(settings, pages_store=BrokenStore(), leads_store=MemoryBlobStore())
    with TestClient(app) as c:
        response = c.get(PAGES)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert "disk on fire" not in response.text
