"""Markdown page CRUD, served under /.netlify/functions/pages and /api/pages"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pagesmith.config import Settings
from pagesmith.crud.blobs import BlobStore
from pagesmith.crud.pages import delete_page, get_page, list_pages, render_markdown, save_page
from pagesmith.server.deps import get_pages_store, get_settings
from pagesmith.server.errors import error_response, guarded


router = APIRouter(tags=["pages"])


class PageBody(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None


def _show(store: BlobStore, page_id: str, fmt: Optional[str], preset: str):
    content = get_page(store, page_id)
    if content is None:
        return error_response(404, "Page not found")
    result = {"id": page_id, "content": content}
    if fmt == "html":
        result["html"] = render_markdown(content, preset)
    return result


def _save(store: BlobStore, page_id: Optional[str], body: PageBody):
    saved = save_page(store, page_id or body.id, body.title, body.content)
    return {"message": "Page saved", "id": saved}


def _delete(store: BlobStore, page_id: Optional[str]):
    if not page_id:
        return error_response(400, "No id provided")
    delete_page(store, page_id)
    return {"message": "Page deleted"}


@router.get("")
@guarded
def read_pages(
    id: Optional[str] = None,
    format: Optional[str] = None,
    store: BlobStore = Depends(get_pages_store),
    settings: Settings = Depends(get_settings),
    ):
    """Fetch one page by id, or list every page as [{id, etag}]."""
    if id:
        return _show(store, id, format, settings.markdown_preset)
    return list_pages(store)


@router.api_route("", methods=["PUT", "POST"])
@guarded
def write_page(body: PageBody, store: BlobStore = Depends(get_pages_store)):
    return _save(store, None, body)


@router.delete("")
@guarded
def remove_page(id: Optional[str] = None, store: BlobStore = Depends(get_pages_store)):
    return _delete(store, id)


@router.get("/{page_id}")
@guarded
def read_page(
    page_id: str,
    format: Optional[str] = None,
    store: BlobStore = Depends(get_pages_store),
    settings: Settings = Depends(get_settings),
    ):
    return _show(store, page_id, format, settings.markdown_preset)


@router.put("/{page_id}")
@guarded
def update_page(page_id: str, body: PageBody, store: BlobStore = Depends(get_pages_store)):
    return _save(store, page_id, body)


@router.delete("/{page_id}")
@guarded
def remove_page_by_path(page_id: str, store: BlobStore = Depends(get_pages_store)):
    return _delete(store, page_id)
