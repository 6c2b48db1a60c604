from __future__ import annotations

import logging
from urllib.parse import urlencode

from fastapi import FastAPI, Query, Request

from .catalog.store import get_catalog
from .engine.session import DirectorySession
from .urlsync.history import History
from .views import DirectoryView, FacetsResponse, ToggleRequest, build_view

logger = logging.getLogger(__name__)

app = FastAPI(title="Filterable Directory API", version="1.0.0")

_DIRECTORY_PATH = "/directory"


def _open_session(query: str) -> DirectorySession:
    """Restore a session from a query string; the URL is the only state."""
    query = query.lstrip("?")
    url = f"{_DIRECTORY_PATH}?{query}" if query else _DIRECTORY_PATH
    session = DirectorySession(get_catalog().fresh_copy(), history=History(url))
    session.start()
    return session


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/facets", response_model=FacetsResponse)
def facets() -> FacetsResponse:
    catalog = get_catalog()
    return FacetsResponse(
        regions=list(catalog.regions),
        categories=list(catalog.categories),
        total_items=len(catalog),
    )


@app.get("/directory", response_model=DirectoryView)
def directory(
    request: Request,
    more: int = Query(default=0, ge=0, le=100),
) -> DirectoryView:
    # Forward the raw query so legacy and unrelated params are handled
    # the same way a browser URL would be.
    params = [(k, v) for k, v in request.query_params.multi_items() if k != "more"]
    query = urlencode(params)
    session = _open_session(query)
    for _ in range(more):
        session.load_more()
    return build_view(session)


@app.post("/directory/toggle", response_model=DirectoryView)
def toggle(body: ToggleRequest) -> DirectoryView:
    session = _open_session(body.query)
    if body.facet == "region":
        session.toggle_region(body.slug)
    else:
        session.toggle_category(body.slug)
    logger.debug("Toggled %s=%s -> %s", body.facet, body.slug, session.history.url)
    return build_view(session)
