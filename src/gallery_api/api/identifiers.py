"""Gallery item identifier parsing.

Item identifiers reach the API either as the trailing path segment
(``/api/gallery/5``) or as the ``id`` query parameter (``/api/gallery?id=5``).
Both routes hand the raw text to :func:`parse_item_id`, so the two spellings
accept and reject exactly the same input.
"""

from __future__ import annotations

import re

# Optional sign followed by ASCII digits only.  ``int()`` alone would also
# accept whitespace, underscores and non-ASCII digits.
_ITEM_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class InvalidItemIdError(ValueError):
    """Raised when a non-empty identifier is not an integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid ID: {raw!r}")
        self.raw = raw


def parse_item_id(raw: str | None) -> int | None:
    """Convert raw identifier text into an item id.

    No bounds are checked: zero and negative ids are accepted and simply
    never match a stored item.

    Args:
        raw: Identifier text taken from the URL, or ``None`` when absent.

    Returns:
        The parsed integer, or ``None`` when *raw* is ``None`` or empty
        (meaning "no identifier", i.e. list-all).

    Raises:
        InvalidItemIdError: If *raw* is non-empty and not an integer, or has
            more digits than the interpreter will convert.
    """
    if not raw:
        return None
    if not _ITEM_ID_PATTERN.fullmatch(raw):
        raise InvalidItemIdError(raw)
    try:
        return int(raw)
    except ValueError:
        # Digit strings beyond sys.get_int_max_str_digits() are refused.
        raise InvalidItemIdError(raw) from None
