"""MultiValueMapping protocol: the read interface every extractor accepts.

Extractors only ever ask for the first value of a key or for all of its
values, so any query-params object with ``get`` and ``get_list`` works,
``SearchParams`` or a framework's own request type alike.
"""

from typing import Protocol


class MultiValueMapping(Protocol):
    """Read access to a string mapping where keys can repeat."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for *key*, or *default* if missing."""
        ...

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*, in order; empty if missing."""
        ...
