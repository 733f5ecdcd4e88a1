"""In-memory gallery item storage for the Gallery API.

This module isolates the record store from ``gallery_api.api.main`` so route
handlers can focus on HTTP concerns while the store remains testable as a
small unit.

The store is intentionally simple:

- records live in a single ordered list held in process memory
- list order is insertion order; deleting an item shifts later items left
- every lookup is a linear scan, which is fine for a hand-curated gallery
- the store starts from three seed rows and resets to them on restart

Route handlers run in the server's thread pool, so every operation takes a
single lock.  Records are copied on the way in and out; callers never hold a
reference into the list.

Identifiers come from a counter kept next to the records rather than from
``len(items) + 1``.  On a store that has not seen a deletion the two agree;
after a deletion the counter keeps ids unique and never hands out a deleted
id again.
"""

from __future__ import annotations

import logging
import threading

from gallery_api.api.models import GalleryItem, GalleryItemPayload

logger = logging.getLogger(__name__)

SEED_ITEMS: tuple[GalleryItem, ...] = (
    GalleryItem(
        id=1,
        name="Mochizuki Honami",
        image="/images/Honami_wedding.png",
        detail="Mochizuki Honami Wedding Dress Ver.",
    ),
    GalleryItem(
        id=2,
        name="RX-78-2 Gundam",
        image="/images/gundam.png",
        detail="HG 1/144",
    ),
    GalleryItem(
        id=3,
        name="Usio Noa",
        image="/images/Usio_Noa_Nendoroid.jpg",
        detail="Nendoroid Usio Noa",
    ),
)


class GalleryItemNotFoundError(LookupError):
    """Raised when no stored item has the requested id."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Gallery item {item_id} not found")
        self.item_id = item_id


class GalleryStore:
    """Lock-guarded, insertion-ordered collection of :class:`GalleryItem`.

    Args:
        items: Initial records.  Their ids must be distinct; the id counter
            starts from the highest one.
    """

    def __init__(self, items: list[GalleryItem] | tuple[GalleryItem, ...] = ()) -> None:
        self._lock = threading.Lock()
        self._initial = tuple(item.model_copy() for item in items)
        self._items: list[GalleryItem] = []
        self._last_id = 0
        self._load(self._initial)

    @classmethod
    def with_seed_items(cls) -> GalleryStore:
        """Create a store holding the three default gallery items."""
        return cls(SEED_ITEMS)

    def _load(self, items: tuple[GalleryItem, ...]) -> None:
        self._items = [item.model_copy() for item in items]
        self._last_id = max((item.id for item in self._items), default=0)

    def _index_of(self, item_id: int) -> int:
        # Caller must hold the lock.
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise GalleryItemNotFoundError(item_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list_all(self) -> list[GalleryItem]:
        """Return copies of every record in insertion order."""
        with self._lock:
            return [item.model_copy() for item in self._items]

    def get_by_id(self, item_id: int) -> GalleryItem:
        """Return a copy of the record with *item_id*.

        Raises:
            GalleryItemNotFoundError: If no record has that id.
        """
        with self._lock:
            return self._items[self._index_of(item_id)].model_copy()

    def insert(self, payload: GalleryItemPayload) -> GalleryItem:
        """Store a new record built from *payload* and return it.

        The id is always assigned by the store; any id on the payload object
        is ignored.
        """
        with self._lock:
            self._last_id += 1
            item = GalleryItem(
                id=self._last_id,
                name=payload.name,
                image=payload.image,
                detail=payload.detail,
            )
            self._items.append(item)
            logger.info(f"Created gallery item {item.id} ({item.name!r})")
            return item.model_copy()

    def update_by_id(self, item_id: int, payload: GalleryItemPayload) -> GalleryItem:
        """Replace name, image and detail of the record with *item_id*.

        The id itself never changes.  A missing id leaves the store untouched.

        Raises:
            GalleryItemNotFoundError: If no record has that id.
        """
        with self._lock:
            item = self._items[self._index_of(item_id)]
            item.name = payload.name
            item.image = payload.image
            item.detail = payload.detail
            logger.info(f"Updated gallery item {item_id}")
            return item.model_copy()

    def delete_by_id(self, item_id: int) -> GalleryItem:
        """Remove the record with *item_id* and return it.

        Later records shift left, so list order is otherwise preserved.

        Raises:
            GalleryItemNotFoundError: If no record has that id.
        """
        with self._lock:
            removed = self._items.pop(self._index_of(item_id))
            logger.info(f"Deleted gallery item {item_id}")
            return removed

    def reset(self) -> None:
        """Restore the records and id counter the store was created with."""
        with self._lock:
            self._load(self._initial)
            logger.info(f"Gallery store reset to {len(self._items)} items")
