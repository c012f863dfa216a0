from typing import Any

from data.enums import PageKind
from data.refs import Page, PageRef, SystemRef


def next_page_ref(meta: dict[str, Any] | None, kind: PageKind, page: int, limit: int | None, parent: SystemRef | None = None) -> PageRef | None:
    """
    Reference to the following page, or None when total <= page * limit.
    page/limit come from the response meta, falling back to what was requested.
    """
    meta = meta or {}
    total = meta.get("total")
    current = meta.get("page") or page
    per_page = meta.get("limit") or limit
    if total is None or per_page is None:
        return None
    if total <= current * per_page:
        return None
    return PageRef(kind=kind, page=page + 1, limit=limit, parent=parent)


def build_page(payload: dict[str, Any], kind: PageKind, page: int | None, limit: int | None, parent: SystemRef | None = None) -> Page:
    page = page or 1
    items = payload.get("data", []) if isinstance(payload, dict) else []
    meta = payload.get("meta") if isinstance(payload, dict) else None
    return Page(items=list(items or []), next=next_page_ref(meta, kind, page, limit, parent))
