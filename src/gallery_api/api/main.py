"""Gallery API — FastAPI Application.

This module is the single entry point for the web application.  It defines
the :func:`create_app` factory, the module-level ``app`` instance built from
the global configuration, all REST API routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
- **Records** live in a :class:`~gallery_api.api.gallery_store.GalleryStore`
  attached to ``app.state``.  Nothing is persisted; a restart brings back
  the three seed items.
- **Identifiers** from the path or the ``id`` query parameter go through
  :func:`~gallery_api.api.identifiers.parse_item_id`.
- **Static images** are served by FastAPI's ``StaticFiles`` under
  ``/images`` (configurable).
- **CORS** headers are added to every response by
  :class:`~gallery_api.api.cors.PermissiveCORSMiddleware`, which also
  answers every ``OPTIONS`` request.

Route handlers are plain ``def`` functions, so uvicorn runs them in its
thread pool; the store serialises access with its own lock.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/api/gallery``              All items (or one, with ``?id=``)
GET       ``/api/gallery/{id}``         Single gallery item
POST      ``/api/gallery``              Create an item (201)
PUT       ``/api/gallery/{id}``         Replace name/image/detail
DELETE    ``/api/gallery/{id}``         Delete an item
GET       ``/images/{filename}``        Raw image file
OPTIONS   any                           CORS preflight, empty 200
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    gallery-api

Direct invocation::

    python -m gallery_api.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from gallery_api import __version__
from gallery_api.api.cors import PermissiveCORSMiddleware
from gallery_api.api.gallery_store import GalleryItemNotFoundError, GalleryStore
from gallery_api.api.identifiers import InvalidItemIdError, parse_item_id
from gallery_api.api.models import DeleteResponse, GalleryItem, GalleryItemPayload
from gallery_api.core.config import GalleryConfig, config
from gallery_api.core.logging_config import configure_logging

logger = logging.getLogger(__name__)

NOT_FOUND_DETAIL = "Gallery item not found"
INVALID_ID_DETAIL = "Invalid ID"
INVALID_JSON_DETAIL = "Invalid JSON"


# ---------------------------------------------------------------------------
# Request helpers.
# ---------------------------------------------------------------------------


def get_store(request: Request) -> GalleryStore:
    """Return the gallery store attached to the running application."""
    return request.app.state.gallery_store


def _require_item_id(raw: str) -> int:
    """Parse a path identifier, mapping bad input to a 400.

    Raises:
        HTTPException: 400 if *raw* is not an integer.
    """
    try:
        item_id = parse_item_id(raw)
    except InvalidItemIdError:
        logger.warning(f"Rejected malformed gallery item id {raw!r}")
        raise HTTPException(status_code=400, detail=INVALID_ID_DETAIL) from None
    return item_id


def _not_found(item_id: int) -> HTTPException:
    logger.debug(f"Gallery item {item_id} not found")
    return HTTPException(status_code=404, detail=NOT_FOUND_DETAIL)


async def _invalid_json_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report any request body that fails to decode as a 400.

    FastAPI answers decoding failures with 422 by default; this API treats
    malformed JSON and wrongly-typed fields alike as "Invalid JSON".
    """
    logger.warning(f"{request.method} {request.url.path}: undecodable body ({len(exc.errors())} errors)")
    return JSONResponse(status_code=400, content={"detail": INVALID_JSON_DETAIL})


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------

router = APIRouter(prefix="/api/gallery", tags=["Gallery"])


@router.get("", response_model=list[GalleryItem] | GalleryItem)
def list_gallery(
    raw_id: str | None = Query(default=None, alias="id"),
    store: GalleryStore = Depends(get_store),
):
    """Return every gallery item, or a single one when ``?id=`` is given.

    An empty ``id`` parameter behaves like no parameter at all.

    Args:
        raw_id: Optional identifier text from the ``id`` query parameter.
        store: The application's gallery store.

    Returns:
        The list of all items in insertion order, or the matching item.

    Raises:
        HTTPException: 400 for a malformed id, 404 for an unknown one.
    """
    try:
        item_id = parse_item_id(raw_id)
    except InvalidItemIdError:
        logger.warning(f"Rejected malformed gallery item id {raw_id!r}")
        raise HTTPException(status_code=400, detail=INVALID_ID_DETAIL) from None

    if item_id is None:
        return store.list_all()

    try:
        return store.get_by_id(item_id)
    except GalleryItemNotFoundError:
        raise _not_found(item_id) from None


@router.get("/{raw_id}", response_model=GalleryItem)
def get_gallery_item(raw_id: str, store: GalleryStore = Depends(get_store)) -> GalleryItem:
    """Return a single gallery item by id.

    Raises:
        HTTPException: 400 for a malformed id, 404 for an unknown one.
    """
    item_id = _require_item_id(raw_id)
    try:
        return store.get_by_id(item_id)
    except GalleryItemNotFoundError:
        raise _not_found(item_id) from None


@router.post("", response_model=GalleryItem, status_code=status.HTTP_201_CREATED)
def create_gallery_item(
    payload: GalleryItemPayload,
    store: GalleryStore = Depends(get_store),
) -> GalleryItem:
    """Add a gallery item.  The id is assigned by the store.

    Returns:
        The stored item, including its new id.
    """
    return store.insert(payload)


@router.put("/{raw_id}", response_model=GalleryItem)
def update_gallery_item(
    raw_id: str,
    payload: GalleryItemPayload,
    store: GalleryStore = Depends(get_store),
) -> GalleryItem:
    """Replace the name, image and detail of an existing item.

    Raises:
        HTTPException: 400 for a malformed id, 404 for an unknown one.
    """
    item_id = _require_item_id(raw_id)
    try:
        return store.update_by_id(item_id, payload)
    except GalleryItemNotFoundError:
        raise _not_found(item_id) from None


@router.delete("/{raw_id}", response_model=DeleteResponse)
def delete_gallery_item(raw_id: str, store: GalleryStore = Depends(get_store)) -> DeleteResponse:
    """Remove a gallery item.

    Raises:
        HTTPException: 400 for a malformed id, 404 for an unknown one.
    """
    item_id = _require_item_id(raw_id)
    try:
        removed = store.delete_by_id(item_id)
    except GalleryItemNotFoundError:
        raise _not_found(item_id) from None
    return DeleteResponse(id=removed.id)


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log start-up and shutdown.  The store itself needs no teardown."""
    settings: GalleryConfig = app.state.settings
    logger.info(
        f"Gallery API ready: {len(app.state.gallery_store)} items, "
        f"images from {settings.images_dir} at {settings.images_url_prefix}"
    )

    yield  # Application runs here.

    logger.info("Gallery API shutting down; in-memory items are discarded.")


def create_app(settings: GalleryConfig | None = None, store: GalleryStore | None = None) -> FastAPI:
    """Build a configured FastAPI application.

    Args:
        settings: Configuration to use.  Defaults to the global ``config``.
        store: Gallery store to serve.  Defaults to a fresh seeded store.

    Returns:
        The application with routes, CORS middleware and the image mount.
    """
    settings = settings or config

    application = FastAPI(
        title="Gallery API",
        description="In-memory gallery item CRUD service with static image serving.",
        version=__version__,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.gallery_store = store if store is not None else GalleryStore.with_seed_items()

    application.add_middleware(PermissiveCORSMiddleware)
    application.add_exception_handler(RequestValidationError, _invalid_json_handler)
    application.include_router(router)

    # StaticFiles refuses to serve from a missing directory, so make sure it
    # exists; an empty directory simply answers 404.
    settings.images_dir.mkdir(parents=True, exist_ok=True)
    application.mount(
        settings.images_url_prefix,
        StaticFiles(directory=str(settings.images_dir)),
        name="images",
    )

    return application


app = create_app(config)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from :data:`~gallery_api.core.config.config`
    (``GALLERY_SERVER_HOST``, ``GALLERY_SERVER_PORT``, ``GALLERY_LOG_LEVEL``).
    Defaults to ``0.0.0.0:8080``.

    This function is registered as the ``gallery-api`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    configure_logging(config.log_level)
    logger.info(f"Starting Gallery API on http://{config.server_host}:{config.server_port}")

    uvicorn.run(
        "gallery_api.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
