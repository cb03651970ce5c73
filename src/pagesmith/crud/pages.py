"""Markdown pages stored as `page/{id}.md` blobs"""

from typing import Optional

from markdown_it import MarkdownIt

from pagesmith.auth.tokens import now_ms
from pagesmith.crud.blobs import BlobStore


PAGE_PREFIX = "page/"
PAGE_SUFFIX = ".md"


def page_key(page_id: str) -> str:
    return f"{PAGE_PREFIX}{page_id}{PAGE_SUFFIX}"


def _page_id(key: str) -> str:
    return key[len(PAGE_PREFIX):len(key) - len(PAGE_SUFFIX)]


def list_pages(store: BlobStore) -> list[dict[str, str]]:
    """Return [{id, etag}] for every stored page."""
    return [
        {"id": _page_id(entry.key), "etag": entry.etag}
        for entry in store.list(prefix=PAGE_PREFIX)
        if entry.key.endswith(PAGE_SUFFIX)
    ]


def get_page(store: BlobStore, page_id: str) -> Optional[str]:
    """Return page markdown, or None when the page does not exist (or is empty)."""
    return store.get(page_key(page_id)) or None


def save_page(
    store: BlobStore,
    page_id: Optional[str] = None,
    title: Optional[str] = None,
    content: Optional[str] = None,
    now: Optional[int] = None,
    ) -> str:
    """Store a page, prefixing `# title` when a title is given. Returns the page id."""
    page_id = page_id or f"page-{now_ms() if now is None else now}"
    title = title or ""
    content = content or ""
    markdown = f"# {title}\n\n{content}" if title else content
    store.set(page_key(page_id), markdown, metadata={"title": title})
    return page_id


def delete_page(store: BlobStore, page_id: str) -> None:
    store.delete(page_key(page_id))


def render_markdown(text: str, preset: str = "commonmark") -> str:
    """Render page markdown to HTML for previews."""
    return MarkdownIt(preset).render(text)
